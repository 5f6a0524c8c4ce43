"""Test configuration and fixtures."""

import logfire
import pytest

from banter.config import CommentSettings
from banter.domain.model import Comment
from banter.domain.value import CommentId

# Keep spans in-process; nothing is printed or sent during tests
logfire.configure(send_to_logfire=False, console=False)


def make_comment(
    comment_id: str,
    timestamp: int = 0,
    parent_id: str | None = None,
    upvotes: int = 0,
    downvotes: int = 0,
    content: str = "Great Pokémon",
    author: str = "Ash",
) -> Comment:
    """Helper function to build test comments with readable ids."""
    return Comment(
        id=CommentId(comment_id),
        content=content,
        author=author,
        timestamp=timestamp,
        parent_id=CommentId(parent_id) if parent_id else None,
        upvotes=upvotes,
        downvotes=downvotes,
    )


@pytest.fixture
def comment_settings() -> CommentSettings:
    """Default comment settings."""
    return CommentSettings()
