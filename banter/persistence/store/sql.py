"""SQL implementation of the key-value store."""

from datetime import datetime, timezone
from typing import Optional

import logfire
from sqlalchemy import func, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from banter.persistence.error import PersistenceError, StorageQuotaExceededError
from banter.persistence.tables import storage_items_table

from .base import DEFAULT_QUOTA_BYTES, KeyValueStore, item_size


class SqlKeyValueStore(KeyValueStore):
    """SQLAlchemy implementation of KeyValueStore.

    Each call runs in its own short transaction, so the store can be
    shared for the lifetime of the application.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        quota_bytes: int = DEFAULT_QUOTA_BYTES,
    ) -> None:
        """Initialize store with a session factory.

        Args:
            session_factory: SQLAlchemy async session factory
            quota_bytes: Maximum bytes across all items
        """
        super().__init__(quota_bytes)
        self.session_factory = session_factory

    async def get_item(self, key: str) -> Optional[str]:
        """Read a value."""
        stmt = select(storage_items_table.c.value).where(
            storage_items_table.c.key == key
        )
        try:
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logfire.error("Storage read failed", key=key, error=str(e))
            raise PersistenceError(f"Failed to read {key}") from e

    async def set_item(self, key: str, value: str) -> None:
        """Write a value, enforcing the quota inside the transaction."""
        size = item_size(key, value)
        try:
            async with self.session_factory() as session, session.begin():
                used_by_others = await session.scalar(
                    select(
                        func.coalesce(func.sum(storage_items_table.c.size_bytes), 0)
                    ).where(storage_items_table.c.key != key)
                )
                required = int(used_by_others or 0) + size
                if required > self.quota_bytes:
                    raise StorageQuotaExceededError(key, required, self.quota_bytes)

                values = {
                    "value": value,
                    "size_bytes": size,
                    "updated_at": datetime.now(timezone.utc),
                }
                result = await session.execute(
                    update(storage_items_table)
                    .where(storage_items_table.c.key == key)
                    .values(**values)
                )
                if result.rowcount == 0:
                    await session.execute(
                        insert(storage_items_table).values(key=key, **values)
                    )
        except SQLAlchemyError as e:
            logfire.error("Storage write failed", key=key, error=str(e))
            raise PersistenceError(f"Failed to write {key}") from e

    async def usage_bytes(self) -> int:
        """Bytes currently stored."""
        try:
            async with self.session_factory() as session:
                total = await session.scalar(
                    select(
                        func.coalesce(func.sum(storage_items_table.c.size_bytes), 0)
                    )
                )
                return int(total or 0)
        except SQLAlchemyError as e:
            raise PersistenceError("Failed to measure storage usage") from e
