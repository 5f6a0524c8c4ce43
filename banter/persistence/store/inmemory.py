"""In-memory key-value store for testing."""

from typing import Optional

from banter.persistence.error import StorageQuotaExceededError

from .base import DEFAULT_QUOTA_BYTES, KeyValueStore, item_size


class InMemoryKeyValueStore(KeyValueStore):
    """In-memory implementation of KeyValueStore for testing."""

    def __init__(self, quota_bytes: int = DEFAULT_QUOTA_BYTES) -> None:
        super().__init__(quota_bytes)
        self._items: dict[str, str] = {}

    async def get_item(self, key: str) -> Optional[str]:
        """Read a value."""
        return self._items.get(key)

    async def set_item(self, key: str, value: str) -> None:
        """Write a value, enforcing the quota."""
        others = sum(item_size(k, v) for k, v in self._items.items() if k != key)
        required = others + item_size(key, value)
        if required > self.quota_bytes:
            raise StorageQuotaExceededError(key, required, self.quota_bytes)
        self._items[key] = value

    async def usage_bytes(self) -> int:
        """Bytes currently stored."""
        return sum(item_size(k, v) for k, v in self._items.items())
