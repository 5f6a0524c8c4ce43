"""Key-value stores backing the repositories."""

from .base import DEFAULT_QUOTA_BYTES, KeyValueStore, item_size
from .inmemory import InMemoryKeyValueStore
from .sql import SqlKeyValueStore

__all__ = [
    "DEFAULT_QUOTA_BYTES",
    "InMemoryKeyValueStore",
    "KeyValueStore",
    "SqlKeyValueStore",
    "item_size",
]
