"""Mock persistence providers for testing."""

from dishka import Scope, provide

from banter.persistence.store import InMemoryKeyValueStore, KeyValueStore
from banter.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using an in-memory key-value store.

    Each test builds its own container, so each test gets a fresh store.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_key_value_store(self) -> KeyValueStore:
        """Provide in-memory key-value store."""
        return InMemoryKeyValueStore()
