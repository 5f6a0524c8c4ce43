"""Comment orderings."""

from typing import Callable

from banter.domain.model.comment import Comment
from banter.domain.value import SortKind


def score(comment: Comment) -> int:
    """Net votes of a comment."""
    return comment.upvotes - comment.downvotes


def _newest_first(comment: Comment) -> tuple[int]:
    return (-comment.timestamp,)


def _oldest_first(comment: Comment) -> tuple[int]:
    return (comment.timestamp,)


def _top_first(comment: Comment) -> tuple[int, int]:
    # Ties on score go to the newer comment
    return (-score(comment), -comment.timestamp)


SORT_KEYS: dict[SortKind, Callable[[Comment], tuple[int, ...]]] = {
    SortKind.NEW: _newest_first,
    SortKind.OLD: _oldest_first,
    SortKind.TOP: _top_first,
}


def sort_comments(comments: list[Comment], kind: SortKind | str) -> list[Comment]:
    """Order comments without touching the input list.

    Args:
        comments: Comments to order
        kind: Sort kind; unknown strings fall back to newest first

    Returns:
        New ordered list
    """
    return sorted(comments, key=SORT_KEYS[SortKind.parse(kind)])
