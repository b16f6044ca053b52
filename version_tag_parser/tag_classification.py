"""
Tag Classification Module

Pure functions for judging whether digit groups of a tag look like a date.
This module contains no side effects - only tag analysis logic.
"""

from .config import TWO_DIGIT_YEAR_MIN, FOUR_DIGIT_YEAR_MIN, FOUR_DIGIT_YEAR_MAX


def is_plausible_year(value: str) -> bool:
    """
    Check whether a digit group can be read as a calendar year.

    Args:
        value: Digit group, e.g. "2024" or "24"

    Returns:
        True for two-digit groups >= TWO_DIGIT_YEAR_MIN and four-digit
        groups within FOUR_DIGIT_YEAR_MIN..FOUR_DIGIT_YEAR_MAX
    """
    if not value.isdigit():
        return False

    if len(value) == 2:
        return int(value) >= TWO_DIGIT_YEAR_MIN

    if len(value) == 4:
        return FOUR_DIGIT_YEAR_MIN <= int(value) <= FOUR_DIGIT_YEAR_MAX

    return False


def is_plausible_month(value: str) -> bool:
    """Check whether a one or two digit group is a month (1-12)."""
    return value.isdigit() and len(value) <= 2 and 1 <= int(value) <= 12


def is_plausible_day(value: str) -> bool:
    """Check whether a one or two digit group is a day of month (1-31)."""
    return value.isdigit() and len(value) <= 2 and 1 <= int(value) <= 31


def is_zero_padded_month(value: str) -> bool:
    """Check whether a month is written with a leading zero (01-09)."""
    return len(value) == 2 and value.startswith("0") and is_plausible_month(value)


def is_calendar_date(year: str, month: str, day: str = "") -> bool:
    """
    Check whether digit groups form a plausible calendar version.

    The check is purely lexical, so "2024.02.31" passes.

    Args:
        year: Leading digit group
        month: Second digit group
        day: Optional third digit group

    Returns:
        True if every present group is plausible for its position
    """
    if not is_plausible_year(year) or not is_plausible_month(month):
        return False

    if day and not is_plausible_day(day):
        return False

    return True


def is_calendar_ambiguous(major: str, minor: str, patch: str = "") -> bool:
    """
    Decide whether a semver-shaped numeric core should be left to calver.

    Two-part versions defer as soon as the leading group is a plausible year
    ("24.01", "2024.13"). Three-part versions defer only when all three
    groups form a plausible date written in calendar style: a four-digit
    year ("2024.01.15", "2024.1.5") or a two-digit year with a zero-padded
    month ("24.01.15"). Ordinary releases such as "20.10.7", "v20.11.1" or
    "22.3.1" stay semver.

    Args:
        major: First numeric group
        minor: Second numeric group
        patch: Third numeric group, empty when absent

    Returns:
        True if the semver recognizer must not claim the version
    """
    if not patch:
        return is_plausible_year(major)

    if not is_calendar_date(major, minor, patch):
        return False

    return len(major) == 4 or is_zero_padded_month(minor)
