"""Domain model entities for Banter."""

from banter.domain.model.comment import Comment

__all__ = [
    "Comment",
]
