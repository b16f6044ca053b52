"""
Utility Functions Module for Version Tag Parser

Functions:
    setup_logging: Configures application logging
    parse_bool: Interprets an action input as a boolean
"""

import logging


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the application. Verbose mode enables debug output."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def parse_bool(value: str, default: bool = False) -> bool:
    """Interpret an action input string ("true"/"false") as a boolean."""
    if not value or not value.strip():
        return default
    return value.strip().lower() == "true"
