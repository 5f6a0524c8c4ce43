"""Domain value objects for Banter."""

from banter.domain.value.identifiers import CommentId
from banter.domain.value.types import SortKind, TopicKey, UserVote

__all__ = [
    # Identifiers
    "CommentId",
    # Types
    "SortKind",
    "TopicKey",
    "UserVote",
]
