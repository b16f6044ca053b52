"""
Git Operations Module for Version Tag Parser

This module looks up tags in the local Git repository. It only reads;
tags are never created or modified.

Functions:
    open_repository: Opens the Git repository at a path
    get_tag: Checks that a named tag exists
    get_most_recent_tag: Finds the most recent tag reachable from HEAD

Raises:
    GitOperationError: When the repository cannot be opened
"""

import logging
from typing import Optional

from git import Repo
from git.exc import GitCommandError

from .exceptions import GitOperationError

logger = logging.getLogger(__name__)


def open_repository(path: str = ".") -> Repo:
    """Open the Git repository containing path (path may be a subdirectory)."""
    try:
        return Repo(path, search_parent_directories=True)
    except Exception as e:
        raise GitOperationError(f"Failed to open git repository at '{path}': {e}") from e


def get_tag(repo: Repo, name: str) -> Optional[str]:
    """Get the tag called name.

    Args:
        repo: Git repository object
        name: Tag name to look up

    Returns:
        The tag name if it exists, None otherwise
    """
    for tag_ref in repo.tags:
        if tag_ref.name == name:
            return tag_ref.name
    return None


def get_most_recent_tag(repo: Repo) -> Optional[str]:
    """Get the most recent tag reachable from HEAD.

    Returns:
        Tag name, or None if the repository has no reachable tags
    """
    try:
        tag = repo.git.describe("--tags", "--abbrev=0").strip()
    except GitCommandError as e:
        logger.debug(f"git describe found no tags: {e}")
        return None
    return tag or None
