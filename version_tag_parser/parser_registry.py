"""
Parser Registry Module

Holds the recognizers in their fixed priority order and dispatches a tag
either to the requested recognizer or, in auto mode, to the first one that
claims it.
"""

import logging
from typing import Dict, Optional, Tuple

from .base_parser import BaseParser
from .models import ParseResult, VersionInfo, VersionType
from .semver_parser import SemverParser
from .calver_parser import CalverParser
from .date_parser import DateBasedParser
from .docker_parser import DockerParser

logger = logging.getLogger(__name__)

# Auto-detection order. Docker accepts almost any string and must stay last.
PARSER_PRIORITY: Tuple[VersionType, ...] = (
    VersionType.SEMVER,
    VersionType.CALVER,
    VersionType.DATE_BASED,
    VersionType.DOCKER,
)


class ParserRegistry:
    """Dispatches tags to the scheme recognizers."""

    def __init__(self):
        self._parsers: Dict[VersionType, BaseParser] = {
            VersionType.SEMVER: SemverParser(),
            VersionType.CALVER: CalverParser(),
            VersionType.DATE_BASED: DateBasedParser(),
            VersionType.DOCKER: DockerParser(),
        }

    @property
    def parsers(self) -> Tuple[BaseParser, ...]:
        """Recognizers in auto-detection order."""
        return tuple(self._parsers[version_type] for version_type in PARSER_PRIORITY)

    def get_parser(self, version_type: VersionType) -> BaseParser:
        """
        Get the recognizer for a concrete scheme.

        Args:
            version_type: Any VersionType except AUTO

        Returns:
            The recognizer instance

        Raises:
            ValueError: If version_type is AUTO
        """
        if version_type == VersionType.AUTO:
            raise ValueError("AUTO has no dedicated parser; use detect() or parse()")
        return self._parsers[version_type]

    def detect(self, tag: str) -> Optional[VersionType]:
        """Get the scheme auto-detection would pick for a tag, or None."""
        for parser in self.parsers:
            if parser.claims_in_auto(tag):
                return parser.version_type
        return None

    def parse(self, tag: str, version_type: VersionType = VersionType.AUTO) -> ParseResult:
        """
        Parse a tag as the requested scheme.

        A concrete scheme is parsed by its recognizer alone; a failure is
        returned as-is without trying other schemes. AUTO picks the first
        recognizer in PARSER_PRIORITY that claims the tag.

        Args:
            tag: The tag string
            version_type: Requested scheme, AUTO by default

        Returns:
            ParseResult; on failure version is the original tag
        """
        if version_type != VersionType.AUTO:
            logger.debug(f"Parsing '{tag}' as {version_type.value}")
            return self.get_parser(version_type).parse(tag)

        detected = self.detect(tag)
        if detected is None:
            logger.debug(f"No parser claims '{tag}'")
            return ParseResult(is_valid=False, version=tag, info=VersionInfo(), format=None)

        logger.debug(f"Auto-detected '{tag}' as {detected.value}")
        return self._parsers[detected].parse(tag)
