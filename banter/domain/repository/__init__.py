"""Repository interfaces for Banter domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from banter.domain.repository.comment import CommentRepository
from banter.domain.repository.preference import PreferenceRepository
from banter.domain.repository.vote import VoteRepository

__all__ = [
    "CommentRepository",
    "PreferenceRepository",
    "VoteRepository",
]
