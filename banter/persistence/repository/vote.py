"""Key-value implementation of Vote repository."""

import logfire

from banter.domain.repository import VoteRepository
from banter.domain.value import CommentId, TopicKey, UserVote
from banter.persistence.mappers import data_to_votes, votes_to_json

from .base import KeyValueRepository, votes_key


class KeyValueVoteRepository(KeyValueRepository, VoteRepository):
    """Stores each topic's vote map as one JSON object under ``userVotes:<topic>``."""

    async def get_user_votes(self, topic_key: TopicKey) -> dict[CommentId, UserVote]:
        """Read the vote map for a topic."""
        data = await self._read_json(votes_key(topic_key))
        return data_to_votes(data)

    async def save_user_votes(
        self, topic_key: TopicKey, votes: dict[CommentId, UserVote]
    ) -> bool:
        """Replace the stored vote map for a topic."""
        saved = await self._write(votes_key(topic_key), votes_to_json(votes))
        if saved:
            logfire.info("Votes saved", topic_key=topic_key.root, count=len(votes))
        return saved
