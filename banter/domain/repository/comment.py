"""Comment repository interface."""

from abc import ABC, abstractmethod

from banter.domain.model.comment import Comment
from banter.domain.value import TopicKey


class CommentRepository(ABC):
    """Repository for a topic's flat comment list.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def get_comments(self, topic_key: TopicKey) -> list[Comment]:
        """Read all comments stored for a topic.

        Missing or unparsable data is treated as an empty list, not an error.

        Args:
            topic_key: Topic partition key

        Returns:
            Comments in stored order (order carries no meaning)
        """
        pass

    @abstractmethod
    async def save_comments(self, topic_key: TopicKey, comments: list[Comment]) -> bool:
        """Replace the stored comment list for a topic.

        Args:
            topic_key: Topic partition key
            comments: Full list to persist

        Returns:
            True if written, False if the write failed (e.g. quota exceeded)
        """
        pass
