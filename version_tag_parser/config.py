"""
Configuration Module for Version Tag Parser

This module contains the constants that control how tags are classified.
The ambiguity policy between calendar and semantic versions is expressed
here as data so it can be tuned and tested in one place.

Constants:
    TWO_DIGIT_YEAR_MIN: Lowest two-digit leading group treated as a year
    FOUR_DIGIT_YEAR_MIN: Lowest four-digit leading group treated as a year
    FOUR_DIGIT_YEAR_MAX: Highest four-digit leading group treated as a year
    SPECIAL_DOCKER_TAGS: Docker tags that carry no version numbers
    DOCKER_TAG_MAX_LENGTH: Maximum length of a Docker tag
    OUTPUT_NAMES: Names of the action outputs, in emission order
"""

# Calendar ambiguity policy. Semver leaves a tag to calver when it has two
# parts led by a plausible year, or three parts forming a date with a
# four-digit year or a two-digit year and zero-padded month (24.01.15).
TWO_DIGIT_YEAR_MIN = 20
FOUR_DIGIT_YEAR_MIN = 2000
FOUR_DIGIT_YEAR_MAX = 2099

# Docker tag conventions
SPECIAL_DOCKER_TAGS = frozenset(
    {"latest", "stable", "dev", "test", "prod", "production", "staging"}
)
DOCKER_TAG_MAX_LENGTH = 128

OUTPUT_NAMES = (
    "isValid",
    "version",
    "format",
    "major",
    "minor",
    "patch",
    "prerelease",
    "build",
    "commit",
    "year",
    "month",
    "day",
    "hasPrerelease",
    "hasBuild",
)
