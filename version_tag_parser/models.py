"""Data models for parse requests and results."""

from dataclasses import dataclass, field
from typing import Optional
from enum import Enum


class VersionType(Enum):
    """Versioning schemes a tag can be parsed as."""
    SEMVER = "semver"
    CALVER = "calver"
    DATE_BASED = "date-based"
    DOCKER = "docker"
    AUTO = "auto"  # Request only, never a result format


@dataclass(frozen=True)
class VersionInfo:
    """Decomposed version components. Absent components are empty strings."""
    major: str = ""
    minor: str = ""
    patch: str = ""
    prerelease: str = ""
    build: str = ""


@dataclass(frozen=True)
class ParseResult:
    """Result of parsing a single tag."""
    is_valid: bool
    version: str  # Reconstructed version if valid, original tag otherwise
    info: VersionInfo = field(default_factory=VersionInfo)
    format: Optional[VersionType] = None

    @property
    def format_name(self) -> str:
        """Get the matched scheme name, or an empty string if none matched."""
        return self.format.value if self.format else ""
