"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from banter.config import Settings
from banter.domain.repository import (
    CommentRepository,
    PreferenceRepository,
    VoteRepository,
)
from banter.persistence.database import (
    create_engine,
    create_schema,
    create_session_factory,
)
from banter.persistence.repository import (
    KeyValueCommentRepository,
    KeyValuePreferenceRepository,
    KeyValueVoteRepository,
)
from banter.persistence.store import KeyValueStore, SqlKeyValueStore
from banter.util.di.base import ProviderBase
from banter.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base.

    Implementations provide the ``KeyValueStore`` everything is saved in.
    """

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using SQLite."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine with its schema in place."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        await create_schema(engine)
        logfire.info("Database ready", url=engine.url.render_as_string())
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.APP)
    def get_key_value_store(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        settings: Settings,
    ) -> KeyValueStore:
        """Provide the SQL-backed key-value store."""
        return SqlKeyValueStore(
            session_factory, quota_bytes=settings.storage.quota_bytes
        )


class RepositoryProvider(ProviderBase):
    """Repositories over whichever key-value store is configured."""

    scope = Scope.APP

    @provide
    def get_comment_repository(self, store: KeyValueStore) -> CommentRepository:
        """Provide Comment repository."""
        return KeyValueCommentRepository(store)

    @provide
    def get_vote_repository(self, store: KeyValueStore) -> VoteRepository:
        """Provide Vote repository."""
        return KeyValueVoteRepository(store)

    @provide
    def get_preference_repository(self, store: KeyValueStore) -> PreferenceRepository:
        """Provide Preference repository."""
        return KeyValuePreferenceRepository(store)
