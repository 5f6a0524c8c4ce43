"""Key-value store interface."""

from abc import ABC, abstractmethod
from typing import Optional

DEFAULT_QUOTA_BYTES = 5 * 1024 * 1024


def item_size(key: str, value: str) -> int:
    """Bytes an item counts against the quota (key plus value, UTF-8)."""
    return len(key.encode("utf-8")) + len(value.encode("utf-8"))


class KeyValueStore(ABC):
    """String-to-string store with a byte quota.

    The Python counterpart of browser local storage: synchronous in spirit,
    awaited so implementations can sit on a database.
    """

    def __init__(self, quota_bytes: int = DEFAULT_QUOTA_BYTES) -> None:
        self.quota_bytes = quota_bytes

    @abstractmethod
    async def get_item(self, key: str) -> Optional[str]:
        """Read a value.

        Returns:
            The stored string, or None if the key is absent

        Raises:
            PersistenceError: If the backing store cannot be read
        """
        pass

    @abstractmethod
    async def set_item(self, key: str, value: str) -> None:
        """Write a value, replacing any previous one.

        Raises:
            StorageQuotaExceededError: If the write would exceed the quota
            PersistenceError: If the backing store cannot be written
        """
        pass

    @abstractmethod
    async def usage_bytes(self) -> int:
        """Bytes currently counted against the quota."""
        pass
