"""
Semver Parser Module

Recognizes semantic version tags such as v1.2.3, 1.2, 1.2.3-alpha.1+build.1.
Two-part and date-shaped versions that read as calendar versions are left
to the calver recognizer.
"""

import re

from .base_parser import BaseParser, SUFFIX_IDENTIFIERS
from .models import ParseResult, VersionInfo, VersionType
from .tag_classification import is_calendar_ambiguous


class SemverParser(BaseParser):
    """Parser for MAJOR.MINOR[.PATCH][-PRERELEASE][+BUILD] tags."""

    version_type = VersionType.SEMVER

    pattern = re.compile(
        rf"""
        (?P<prefix>[vV])?
        (?P<major>[0-9]+)
        \.
        (?P<minor>[0-9]+)
        (?:\.(?P<patch>[0-9]+))?
        (?:-(?P<prerelease>{SUFFIX_IDENTIFIERS}))?
        (?:\+(?P<build>{SUFFIX_IDENTIFIERS}))?
        """,
        re.VERBOSE,
    )

    def can_parse(self, tag: str) -> bool:
        match = self.pattern.fullmatch(tag)
        if not match:
            return False

        return not is_calendar_ambiguous(
            match.group("major"), match.group("minor"), match.group("patch") or ""
        )

    def parse(self, tag: str) -> ParseResult:
        if not self.can_parse(tag):
            return self._create_failed_result(tag)

        match = self.pattern.fullmatch(tag)
        return self._create_success_result(
            tag,
            VersionInfo(
                major=match.group("major"),
                minor=match.group("minor"),
                patch=match.group("patch") or "",
                prerelease=match.group("prerelease") or "",
                build=match.group("build") or "",
            ),
        )

    def reconstruct_version(self, info: VersionInfo, original_tag: str) -> str:
        # Keep the tag's shape: prefix as written, no invented patch
        prefix = original_tag[0] if original_tag[:1] in ("v", "V") else ""
        version = f"{prefix}{info.major}.{info.minor}"
        if info.patch:
            version += f".{info.patch}"
        if info.prerelease:
            version += f"-{info.prerelease}"
        if info.build:
            version += f"+{info.build}"
        return version
