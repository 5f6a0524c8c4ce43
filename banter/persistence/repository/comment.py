"""Key-value implementation of Comment repository."""

import logfire

from banter.domain.model import Comment
from banter.domain.repository import CommentRepository
from banter.domain.value import TopicKey
from banter.persistence.mappers import comments_to_json, records_to_comments

from .base import KeyValueRepository, comments_key


class KeyValueCommentRepository(KeyValueRepository, CommentRepository):
    """Stores each topic's comments as one JSON array under ``comments:<topic>``."""

    async def get_comments(self, topic_key: TopicKey) -> list[Comment]:
        """Read all comments stored for a topic."""
        data = await self._read_json(comments_key(topic_key))
        return records_to_comments(data)

    async def save_comments(self, topic_key: TopicKey, comments: list[Comment]) -> bool:
        """Replace the stored comment list for a topic."""
        saved = await self._write(comments_key(topic_key), comments_to_json(comments))
        if saved:
            logfire.info("Comments saved", topic_key=topic_key.root, count=len(comments))
        return saved
