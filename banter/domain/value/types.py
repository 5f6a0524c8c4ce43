"""Domain value objects for Banter.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import field_validator

from banter.domain.value.common import RootValueObject


class UserVote(str, Enum):
    """The current user's vote on a comment.

    Absence of a vote is represented by ``None``, never by a third member.
    """

    UP = "up"
    DOWN = "down"


class SortKind(str, Enum):
    """Ordering applied to each level of a comment thread."""

    NEW = "new"  # Newest first
    OLD = "old"  # Oldest first
    TOP = "top"  # Highest score first, newest first on ties

    @classmethod
    def parse(cls, value: "str | SortKind | None") -> "SortKind":
        """Resolve a raw value to a sort kind.

        Unknown or missing values fall back to ``NEW``.
        """
        if isinstance(value, SortKind):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.NEW


class TopicKey(RootValueObject[str]):
    """Stable partition key for one question's comments, votes and preferences.

    Examples: 'Pikachu', 'tell-me-about-fire-types'
    """

    @field_validator("root")
    @classmethod
    def validate_topic_key(cls, v: str) -> str:
        """Validate topic key is not blank and within length limits."""
        if not v.strip():
            raise ValueError("Topic key must not be blank")
        if len(v) > 255:
            raise ValueError("Topic key must be at most 255 characters")
        return v
