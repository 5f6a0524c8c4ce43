"""Key-value repository implementations."""

from .comment import KeyValueCommentRepository
from .preference import KeyValuePreferenceRepository
from .vote import KeyValueVoteRepository

__all__ = [
    "KeyValueCommentRepository",
    "KeyValuePreferenceRepository",
    "KeyValueVoteRepository",
]
