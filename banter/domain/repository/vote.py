"""Vote repository interface."""

from abc import ABC, abstractmethod

from banter.domain.value import CommentId, TopicKey, UserVote


class VoteRepository(ABC):
    """Repository for the current user's votes on a topic.

    Votes are stored as one map per topic: comment id to vote direction.
    A comment without an entry has no vote.
    """

    @abstractmethod
    async def get_user_votes(self, topic_key: TopicKey) -> dict[CommentId, UserVote]:
        """Read the vote map for a topic.

        Missing or unparsable data is treated as an empty map, not an error.

        Args:
            topic_key: Topic partition key

        Returns:
            Mapping of comment id to vote
        """
        pass

    @abstractmethod
    async def save_user_votes(
        self, topic_key: TopicKey, votes: dict[CommentId, UserVote]
    ) -> bool:
        """Replace the stored vote map for a topic.

        Args:
            topic_key: Topic partition key
            votes: Full map to persist

        Returns:
            True if written, False if the write failed
        """
        pass
