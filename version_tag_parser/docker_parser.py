"""
Docker Parser Module

Recognizes container image tags: special tags (latest, stable, ...),
version-like tags (1.2.3, v1.2-alpine, 1.2.3-alpine-3.18) and opaque tags
that only satisfy Docker's tag grammar (my-custom-tag-v2).
"""

import re

from .base_parser import BaseParser
from .config import SPECIAL_DOCKER_TAGS, DOCKER_TAG_MAX_LENGTH
from .models import ParseResult, VersionInfo, VersionType


class DockerParser(BaseParser):
    """Parser for Docker tags. Accepts nearly anything, so it is probed last."""

    version_type = VersionType.DOCKER

    version_pattern = re.compile(
        r"v?([0-9]+)(?:\.([0-9]+))?(?:\.([0-9]+))?(?:-([A-Za-z0-9_.-]+))?",
        re.IGNORECASE,
    )

    # Docker's documented tag grammar: [\w][\w.-]{0,127}
    tag_pattern = re.compile(
        rf"[A-Za-z0-9_][A-Za-z0-9_.-]{{0,{DOCKER_TAG_MAX_LENGTH - 1}}}"
    )

    def is_special_tag(self, tag: str) -> bool:
        return tag.lower() in SPECIAL_DOCKER_TAGS

    def can_parse(self, tag: str) -> bool:
        return (
            self.is_special_tag(tag)
            or self.version_pattern.fullmatch(tag) is not None
            or self.tag_pattern.fullmatch(tag) is not None
        )

    def claims_in_auto(self, tag: str) -> bool:
        # Version-like and opaque tags are only parsed on explicit request
        return self.is_special_tag(tag)

    def parse(self, tag: str) -> ParseResult:
        if self.is_special_tag(tag):
            return self._create_success_result(tag, VersionInfo())

        match = self.version_pattern.fullmatch(tag)
        if match:
            major, minor, patch, suffix = match.groups(default="")
            return self._create_success_result(
                tag,
                VersionInfo(major=major, minor=minor, patch=patch, prerelease=suffix),
            )

        if not self.tag_pattern.fullmatch(tag):
            return self._create_failed_result(tag)

        # Opaque tag: everything after the first dash is kept as prerelease
        _, _, remainder = tag.partition("-")
        return self._create_success_result(tag, VersionInfo(prerelease=remainder))

    def reconstruct_version(self, info: VersionInfo, original_tag: str) -> str:
        if self.is_special_tag(original_tag):
            return original_tag

        # Opaque tags reconstruct to their root segment
        if not info.major:
            root, _, _ = original_tag.partition("-")
            return root

        version = f"{info.major}.{info.minor or '0'}.{info.patch or '0'}"
        if info.prerelease:
            version += f"-{info.prerelease}"
        return version
