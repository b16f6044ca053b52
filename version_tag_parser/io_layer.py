"""
I/O Layer for Version Tag Parser

This module contains all I/O operations (Git tag lookup, output emission)
separated from the parsing logic. This is the "imperative shell" that
handles all side effects.
"""

import uuid
from pathlib import Path
from typing import Dict, Optional

import yaml
from git import Repo

from .exceptions import OutputError
from .git_operations import get_tag, get_most_recent_tag


class IOLayer:
    """Handles all I/O operations for the application."""

    def __init__(self, repo: Repo, output_path: str = ""):
        """Initialize the I/O layer.

        Args:
            repo: Git repository object
            output_path: Path of the GitHub Actions output file. When empty,
                outputs are printed to stdout as YAML instead.
        """
        self.repo = repo
        self.output_path = output_path

    # -----------------------------------------------------------------------------
    # Git Operations
    # -----------------------------------------------------------------------------

    def find_tag(self, name: str) -> Optional[str]:
        """Look up a tag by name. Returns None if it does not exist."""
        return get_tag(self.repo, name)

    def most_recent_tag(self) -> Optional[str]:
        """Get the most recent tag, or None if the repository has none."""
        return get_most_recent_tag(self.repo)

    # -----------------------------------------------------------------------------
    # Output Operations
    # -----------------------------------------------------------------------------

    def write_outputs(self, outputs: Dict[str, str]) -> bool:
        """Write action outputs.

        Each output is appended to the output file as a delimited block
        (name<<DELIMITER, value, DELIMITER), which is safe for any value.

        Args:
            outputs: Output names mapped to string values

        Returns:
            True if written to the output file, False if printed instead

        Raises:
            OutputError: If the output file cannot be written
        """
        if not self.output_path:
            print(yaml.safe_dump(outputs, sort_keys=False, default_flow_style=False), end="")
            return False

        lines = []
        for name, value in outputs.items():
            delimiter = f"ghadelimiter_{uuid.uuid4()}"
            lines.extend([f"{name}<<{delimiter}", value, delimiter])

        try:
            with Path(self.output_path).open("a", encoding="utf-8") as f:
                f.write("\n".join(lines) + "\n")
        except OSError as e:
            raise OutputError(
                f"Failed to write outputs to {self.output_path}: {e}",
                output_path=self.output_path,
            ) from e

        return True
