"""Preference repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from banter.domain.value import SortKind, TopicKey


class PreferenceRepository(ABC):
    """Repository for per-topic display preferences.

    Stored independently of the comment and vote collections.
    """

    @abstractmethod
    async def get_sort(self, topic_key: TopicKey) -> Optional[SortKind]:
        """Read the persisted sort preference for a topic.

        Args:
            topic_key: Topic partition key

        Returns:
            The sort kind, or None if nothing valid is stored
        """
        pass

    @abstractmethod
    async def save_sort(self, topic_key: TopicKey, sort: SortKind) -> bool:
        """Persist the sort preference for a topic.

        Args:
            topic_key: Topic partition key
            sort: Sort kind to remember

        Returns:
            True if written, False if the write failed
        """
        pass
