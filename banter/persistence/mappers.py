"""Mappers between stored JSON values and domain models.

Stored records use the frontend's camelCase layout, so mapping goes
through the model's aliases rather than a table schema.
"""

import json
from typing import Any, Optional

import logfire
from pydantic import ValidationError

from banter.domain.model import Comment
from banter.domain.value import CommentId, SortKind, UserVote


def records_to_comments(data: Any) -> list[Comment]:
    """Convert a decoded JSON value to comments.

    Anything other than a list reads as empty. Records that fail
    validation are skipped; the rest of the list is kept.

    Args:
        data: Decoded JSON value

    Returns:
        Valid comments in stored order
    """
    if not isinstance(data, list):
        if data is not None:
            logfire.warn("Stored comments are not a list", type=type(data).__name__)
        return []

    comments = []
    for index, record in enumerate(data):
        try:
            comments.append(Comment.model_validate(record))
        except ValidationError as e:
            logfire.warn(
                "Skipping malformed stored comment",
                index=index,
                errors=e.error_count(),
            )
    return comments


def comments_to_json(comments: list[Comment]) -> str:
    """Serialize comments with their stored (camelCase) field names."""
    return json.dumps(
        [comment.model_dump(mode="json", by_alias=True) for comment in comments],
        ensure_ascii=False,
    )


def data_to_votes(data: Any) -> dict[CommentId, UserVote]:
    """Convert a decoded JSON value to a vote map.

    Anything other than an object reads as empty; entries whose value is
    not a known vote are dropped.
    """
    if not isinstance(data, dict):
        if data is not None:
            logfire.warn("Stored votes are not an object", type=type(data).__name__)
        return {}

    votes: dict[CommentId, UserVote] = {}
    for comment_id, value in data.items():
        try:
            votes[CommentId(str(comment_id))] = UserVote(value)
        except ValueError:
            logfire.warn("Skipping malformed stored vote", comment_id=comment_id)
    return votes


def votes_to_json(votes: dict[CommentId, UserVote]) -> str:
    """Serialize a vote map as ``{"<id>": "up"|"down"}``."""
    return json.dumps(
        {comment_id: vote.value for comment_id, vote in votes.items()},
        ensure_ascii=False,
    )


def value_to_sort(value: Optional[str]) -> Optional[SortKind]:
    """Convert a stored plain string to a sort kind (None if unknown)."""
    if value is None:
        return None
    try:
        return SortKind(value)
    except ValueError:
        logfire.warn("Ignoring unknown stored sort preference", value=value)
        return None
