"""
Date-Based Parser Module

Recognizes date tags that do not use calver's dot separators: compact digit
runs (20240115) or dash/underscore separated dates (2024-01-15, 2024_01_15),
optionally followed by a suffix such as a time or build counter.
"""

import re

from .base_parser import BaseParser
from .models import ParseResult, VersionInfo, VersionType
from .tag_classification import is_calendar_date


class DateBasedParser(BaseParser):
    """Parser for date-based tags. Maps year/month/day to major/minor/patch."""

    version_type = VersionType.DATE_BASED

    pattern = re.compile(
        r"""
        (?P<prefix>[vV])?
        (?P<year>[0-9]{4})
        (?P<sep>[-_]?)
        (?P<month>[0-9]{2})
        (?P=sep)
        (?P<day>[0-9]{2})
        (?:
            (?P<suffix_sep>[-_.])
            (?P<suffix>[0-9A-Za-z]+(?:[.-][0-9A-Za-z]+)*)
        )?
        """,
        re.VERBOSE,
    )

    def can_parse(self, tag: str) -> bool:
        match = self.pattern.fullmatch(tag)
        if not match:
            return False

        # Two-digit month and day are fixed by the pattern
        return is_calendar_date(match.group("year"), match.group("month"), match.group("day"))

    def parse(self, tag: str) -> ParseResult:
        if not self.can_parse(tag):
            return self._create_failed_result(tag)

        match = self.pattern.fullmatch(tag)
        return self._create_success_result(
            tag,
            VersionInfo(
                major=match.group("year"),
                minor=match.group("month"),
                patch=match.group("day"),
                prerelease=match.group("suffix") or "",
            ),
        )

    def reconstruct_version(self, info: VersionInfo, original_tag: str) -> str:
        match = self.pattern.fullmatch(original_tag)
        if not match:
            return f"{info.major}{info.minor}{info.patch}"

        sep = match.group("sep")
        version = f"{match.group('prefix') or ''}{info.major}{sep}{info.minor}{sep}{info.patch}"
        if info.prerelease:
            version += f"{match.group('suffix_sep')}{info.prerelease}"
        return version
