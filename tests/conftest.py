"""Test fixtures for Version Tag Parser.

Fixtures:
    registry: A fresh ParserRegistry
    mock_repo: A mock Git repository with a few tags
"""

from unittest.mock import Mock

import pytest

from version_tag_parser.parser_registry import ParserRegistry


@pytest.fixture
def registry():
    """Provides a ParserRegistry instance."""
    return ParserRegistry()


def make_tag_ref(name):
    """Create a mock tag reference with the given name."""
    tag_ref = Mock()
    tag_ref.name = name
    return tag_ref


@pytest.fixture
def mock_repo():
    """Creates a mock Git repository object.

    The repository has the tags v1.2.3, 2024.01.15 and latest, and
    `git describe` reports v1.2.3 as the most recent tag.

    Returns:
        Mock: A mock object representing a Git repository
    """
    repo = Mock()
    repo.tags = [make_tag_ref("v1.2.3"), make_tag_ref("2024.01.15"), make_tag_ref("latest")]
    repo.git = Mock()
    repo.git.describe.return_value = "v1.2.3\n"
    return repo
