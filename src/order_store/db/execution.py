"""
order_store.db.execution

Deadline and error translation around a single store call.

Responsibilities:
- Apply the per-call timeout (`asyncio.timeout`).
- Wrap driver failures as `StorageError`, keeping the original as `__cause__`.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy.exc import SQLAlchemyError

from order_store.errors import OperationTimeoutError, StorageError
from order_store.observability.logging import get_logger

log = get_logger(__name__)


@asynccontextmanager
async def guarded(
    operation: str, *, timeout: float | None, wrap_errors: bool = True, **context: Any
) -> AsyncIterator[None]:
    """
    Wrap one store operation. Connections opened inside the block are released
    before the error leaves it.

    With `wrap_errors=False` driver failures are logged and re-raised unchanged;
    the deadline still applies.
    """

    try:
        async with asyncio.timeout(timeout):
            yield
    except TimeoutError as exc:
        log.warning("storage_timeout", operation=operation, timeout=timeout, **context)
        raise OperationTimeoutError(f"{operation} timed out after {timeout}s") from exc
    except SQLAlchemyError as exc:
        log.error("storage_failure", operation=operation, error=str(exc), **context)
        if not wrap_errors:
            raise
        raise StorageError(f"database error during {operation}: {exc}") from exc


# --- Module Notes -----------------------------------------------------------
# Validation runs before entering `guarded`, so ValidationError never reaches here.
# Bulk delete is the one caller that opts out of wrapping.
