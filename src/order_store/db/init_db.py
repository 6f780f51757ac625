"""
order_store.db.init_db

DB initialization helpers (dev/test convenience).

Responsibilities:
- Create tables and indexes on an empty database for local development and tests.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine

from order_store.db.schema import metadata


async def init_db(engine: AsyncEngine) -> None:
    """
    Dev/test bootstrap: create tables if they don't exist.
    Production databases are provisioned out of band.
    """

    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
