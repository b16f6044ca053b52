"""
Commit Extraction Module

Pure function for pulling an abbreviated commit SHA out of a tag,
e.g. "3.23-d34fa4d2-ls4" -> "d34fa4d2". Independent of version parsing.
"""

import re

SEGMENT_SEPARATORS = re.compile(r"[-_.+]")
COMMIT_PATTERN = re.compile(r"[0-9a-f]{7,40}", re.IGNORECASE)


def extract_commit(tag: str) -> str:
    """
    Extract a commit SHA from a tag.

    Segments made only of digits are skipped so dates and build numbers
    are never mistaken for a SHA.

    Args:
        tag: The tag string

    Returns:
        The lower-cased SHA, or an empty string if the tag contains none
    """
    for segment in SEGMENT_SEPARATORS.split(tag):
        if COMMIT_PATTERN.fullmatch(segment) and not segment.isdigit():
            return segment.lower()
    return ""
