"""Key-value implementation of Preference repository."""

from typing import Optional

from banter.domain.repository import PreferenceRepository
from banter.domain.value import SortKind, TopicKey
from banter.persistence.mappers import value_to_sort

from .base import KeyValueRepository, sort_key


class KeyValuePreferenceRepository(KeyValueRepository, PreferenceRepository):
    """Stores each topic's sort preference as a plain string under ``sort:<topic>``."""

    async def get_sort(self, topic_key: TopicKey) -> Optional[SortKind]:
        """Read the persisted sort preference for a topic."""
        return value_to_sort(await self._read(sort_key(topic_key)))

    async def save_sort(self, topic_key: TopicKey, sort: SortKind) -> bool:
        """Persist the sort preference for a topic."""
        return await self._write(sort_key(topic_key), sort.value)
