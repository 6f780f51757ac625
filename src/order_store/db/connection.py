"""
order_store.db.connection

Connection provider over a SQLAlchemy async engine.

Responsibilities:
- Own the connection string and the engine (and therefore the driver's pool).
- Hand out unstarted connections; callers scope them with `async with`.
- Offer a best-effort connectivity probe for health checks.
"""

from __future__ import annotations

import asyncio

from sqlalchemy import event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine

from order_store.errors import ConfigurationError
from order_store.observability.logging import get_logger
from order_store.settings import Settings

log = get_logger(__name__)


class ConnectionProvider:
    def __init__(self, connection_string: str, *, echo: bool = False) -> None:
        if not connection_string or not connection_string.strip():
            raise ConfigurationError("connection string cannot be blank")
        try:
            # pool_pre_ping helps detect stale connections in long-lived processes.
            engine = create_async_engine(connection_string, pool_pre_ping=True, echo=echo)
        except SQLAlchemyError as exc:
            raise ConfigurationError(f"invalid connection string: {exc}") from exc
        if engine.dialect.name == "sqlite":
            event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        self._connection_string = connection_string
        self._engine = engine

    @classmethod
    def from_settings(cls, settings: Settings, name: str | None = None) -> ConnectionProvider:
        return cls(settings.connection_string(name), echo=settings.echo_sql)

    @property
    def connection_string(self) -> str:
        return self._connection_string

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    def create_connection(self) -> AsyncConnection:
        """
        Return a connection that is not yet open. It opens on `async with`
        (or `await`) and is returned to the pool when the block exits.
        """

        return self._engine.connect()

    async def test_connection(self, *, timeout: float | None = None) -> bool:
        """
        Health probe: True when a connection could be opened and used.
        Never raises; every failure is reported as False.
        """

        try:
            async with asyncio.timeout(timeout):
                async with self.create_connection() as conn:
                    await conn.execute(text("SELECT 1"))
                    return not conn.closed
        except Exception as exc:
            log.warning("connection_probe_failed", error=str(exc))
            return False

    async def dispose(self) -> None:
        await self._engine.dispose()


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    # SQLite ships with foreign key enforcement off per connection.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


# --- Module Notes -----------------------------------------------------------
# Pooling is the engine's concern; this class never caches or shares connections.
