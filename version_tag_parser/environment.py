"""
Environment Configuration Module

Handles parsing and validation of the action's environment variables.
This is a pure module - no side effects, just data transformation.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional
import logging
import os

from .models import VersionType
from .utils import parse_bool

logger = logging.getLogger(__name__)


def resolve_version_type(value: Optional[str]) -> VersionType:
    """
    Resolve a scheme selector to a VersionType.

    Matching is case-insensitive; empty or unrecognized values fall back to AUTO.

    Args:
        value: Selector such as "semver", "Date-Based" or "auto"

    Returns:
        VersionType enum value
    """
    normalized = (value or "").strip().lower()
    if not normalized:
        return VersionType.AUTO

    try:
        return VersionType(normalized)
    except ValueError:
        logger.debug(f"Invalid versionType '{value}', falling back to auto")
        return VersionType.AUTO


@dataclass
class EnvironmentConfig:
    """Configuration parsed from the action's environment variables."""

    tag: str = ""
    version_type_input: str = "auto"
    verbose: bool = False
    repo_path: str = "."
    output_path: str = ""

    @classmethod
    def from_env(cls, env: Dict[str, str]) -> "EnvironmentConfig":
        """Create configuration from environment variables.

        Args:
            env: Dictionary of environment variables (typically os.environ)

        Returns:
            EnvironmentConfig instance
        """
        return cls(
            tag=env.get("INPUT_TAG", "").strip(),
            version_type_input=env.get("INPUT_VERSIONTYPE", "").strip() or "auto",
            verbose=parse_bool(env.get("INPUT_VERBOSE", "false")),
            repo_path=env.get("GITHUB_WORKSPACE", "") or ".",
            output_path=env.get("GITHUB_OUTPUT", ""),
        )

    @property
    def version_type(self) -> VersionType:
        """Requested scheme, with unrecognized input resolved to AUTO."""
        return resolve_version_type(self.version_type_input)

    def validate(self) -> List[str]:
        """Validate the configuration.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        if not os.path.isdir(self.repo_path):
            errors.append(f"Repository path '{self.repo_path}' is not a directory")

        if self.output_path and os.path.isdir(self.output_path):
            errors.append(f"GITHUB_OUTPUT '{self.output_path}' must be a file, not a directory")

        return errors
