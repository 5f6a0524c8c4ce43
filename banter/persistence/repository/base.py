"""Shared plumbing for key-value backed repositories."""

import json
from typing import Any, Optional

import logfire

from banter.domain.value import TopicKey
from banter.persistence.error import PersistenceError, StorageQuotaExceededError
from banter.persistence.store import KeyValueStore


def comments_key(topic_key: TopicKey) -> str:
    """Storage key of a topic's comment list."""
    return f"comments:{topic_key.root}"


def votes_key(topic_key: TopicKey) -> str:
    """Storage key of a topic's vote map."""
    return f"userVotes:{topic_key.root}"


def sort_key(topic_key: TopicKey) -> str:
    """Storage key of a topic's sort preference."""
    return f"sort:{topic_key.root}"


class KeyValueRepository:
    """Base for repositories that keep one value per key.

    Reads never raise: unreadable or unparsable values come back as None.
    Writes never raise: failures come back as False.
    """

    def __init__(self, store: KeyValueStore) -> None:
        """Initialize repository with a key-value store.

        Args:
            store: Backing key-value store
        """
        self.store = store

    async def _read(self, key: str) -> Optional[str]:
        try:
            return await self.store.get_item(key)
        except PersistenceError as e:
            logfire.error("Storage unavailable, reading as empty", key=key, error=str(e))
            return None

    async def _read_json(self, key: str) -> Any:
        raw = await self._read(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except (json.JSONDecodeError, RecursionError):
            logfire.warn("Unparsable stored value, reading as empty", key=key)
            return None

    async def _write(self, key: str, value: str) -> bool:
        try:
            await self.store.set_item(key, value)
        except StorageQuotaExceededError as e:
            logfire.warn(
                "Storage quota exceeded",
                key=key,
                required_bytes=e.required_bytes,
                quota_bytes=e.quota_bytes,
            )
            return False
        except PersistenceError as e:
            logfire.error("Storage write failed", key=key, error=str(e))
            return False
        return True
