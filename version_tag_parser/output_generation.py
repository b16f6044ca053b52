"""
Output Generation Module

Pure functions for turning a parse result into the action's flat string
outputs and a human-readable summary.
This module contains no side effects - only formatting logic.
"""

from typing import Dict, List

from .config import OUTPUT_NAMES
from .models import ParseResult, VersionType


def _bool_output(value: bool) -> str:
    return "true" if value else "false"


def build_outputs(result: ParseResult, commit: str = "") -> Dict[str, str]:
    """
    Build the action outputs for a parse result.

    Pure function that flattens a ParseResult into string values.

    Args:
        result: The parse result
        commit: Commit SHA extracted from the tag, if any

    Returns:
        Dictionary keyed by OUTPUT_NAMES, in emission order
    """
    info = result.info

    # Calendar schemes store year/month/day in major/minor/patch
    is_dated = result.format in (VersionType.CALVER, VersionType.DATE_BASED)
    is_semver = result.format == VersionType.SEMVER

    outputs = {
        "isValid": _bool_output(result.is_valid),
        "version": result.version,
        "format": result.format_name,
        "major": info.major,
        "minor": info.minor,
        "patch": info.patch,
        "prerelease": info.prerelease,
        "build": info.build,
        "commit": commit,
        "year": info.major if is_dated else "",
        "month": info.minor if is_dated else "",
        "day": info.patch if is_dated else "",
        "hasPrerelease": _bool_output(is_semver and bool(info.prerelease)),
        "hasBuild": _bool_output(is_semver and bool(info.build)),
    }
    return {name: outputs[name] for name in OUTPUT_NAMES}


def build_empty_outputs() -> Dict[str, str]:
    """Build outputs for the case where no tag is available."""
    outputs = {name: "" for name in OUTPUT_NAMES}
    outputs["isValid"] = "false"
    outputs["hasPrerelease"] = "false"
    outputs["hasBuild"] = "false"
    return outputs


def format_summary(result: ParseResult) -> List[str]:
    """
    Generate summary lines describing the parsed version.

    Args:
        result: The parse result

    Returns:
        List of lines, without trailing newlines
    """
    if not result.is_valid:
        return [f"Version output (original tag): {result.version}"]

    lines = [
        f"Version output: {result.version}",
        f"   Format: {result.format_name}",
    ]
    info = result.info
    if info.major:
        lines.append(f"   Components: {info.major}.{info.minor or '0'}.{info.patch or '0'}")
    return lines
