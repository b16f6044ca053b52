"""
Calver Parser Module

Recognizes calendar version tags: YYYY.MM[.DD] or YY.MM[.DD], optionally
prefixed with v and followed by semver-style prerelease and build suffixes.
"""

import re

from .base_parser import BaseParser, SUFFIX_IDENTIFIERS
from .models import ParseResult, VersionInfo, VersionType
from .tag_classification import is_calendar_date


class CalverParser(BaseParser):
    """Parser for calendar versions. Maps year/month/day to major/minor/patch."""

    version_type = VersionType.CALVER

    pattern = re.compile(
        rf"""
        (?P<prefix>[vV])?
        (?P<year>[0-9]{{4}}|[0-9]{{2}})
        \.
        (?P<month>[0-9]{{1,2}})
        (?:\.(?P<day>[0-9]{{1,2}}))?
        (?:-(?P<prerelease>{SUFFIX_IDENTIFIERS}))?
        (?:\+(?P<build>{SUFFIX_IDENTIFIERS}))?
        """,
        re.VERBOSE,
    )

    def can_parse(self, tag: str) -> bool:
        match = self.pattern.fullmatch(tag)
        if not match:
            return False

        return is_calendar_date(
            match.group("year"), match.group("month"), match.group("day") or ""
        )

    def parse(self, tag: str) -> ParseResult:
        if not self.can_parse(tag):
            return self._create_failed_result(tag)

        match = self.pattern.fullmatch(tag)
        return self._create_success_result(
            tag,
            VersionInfo(
                major=match.group("year"),
                minor=match.group("month"),
                patch=match.group("day") or "",
                prerelease=match.group("prerelease") or "",
                build=match.group("build") or "",
            ),
        )

    def reconstruct_version(self, info: VersionInfo, original_tag: str) -> str:
        prefix = original_tag[0] if original_tag[:1] in ("v", "V") else ""
        version = f"{prefix}{info.major}.{info.minor}"
        if info.patch:
            version += f".{info.patch}"
        if info.prerelease:
            version += f"-{info.prerelease}"
        if info.build:
            version += f"+{info.build}"
        return version
