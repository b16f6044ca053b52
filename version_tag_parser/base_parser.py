"""
Base Parser Module

Shared contract for the tag recognizers. Each recognizer is stateless:
its patterns are compiled once at class level and never change.
"""

from abc import ABC, abstractmethod

from .models import ParseResult, VersionInfo, VersionType

# Prerelease and build identifiers: non-empty, dot separated, [0-9A-Za-z-]
SUFFIX_IDENTIFIERS = r"[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*"


class BaseParser(ABC):
    """Base class for version tag recognizers."""

    version_type: VersionType

    @abstractmethod
    def can_parse(self, tag: str) -> bool:
        """Check whether the tag has this scheme's shape. No side effects."""

    @abstractmethod
    def parse(self, tag: str) -> ParseResult:
        """Parse the tag, returning a failed result if it does not fit."""

    @abstractmethod
    def reconstruct_version(self, info: VersionInfo, original_tag: str) -> str:
        """Build the canonical version string for a successful parse."""

    def claims_in_auto(self, tag: str) -> bool:
        """Check whether this recognizer may claim the tag during auto-detection."""
        return self.can_parse(tag)

    def _create_success_result(self, tag: str, info: VersionInfo) -> ParseResult:
        return ParseResult(
            is_valid=True,
            version=self.reconstruct_version(info, tag),
            info=info,
            format=self.version_type,
        )

    def _create_failed_result(self, tag: str) -> ParseResult:
        return ParseResult(is_valid=False, version=tag, info=VersionInfo(), format=None)
