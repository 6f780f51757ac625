"""
order_store.errors

Error taxonomy for the data-access layer.

Responsibilities:
- Separate caller mistakes (validation, not-found) from storage failures.
- Keep the original driver exception reachable via `__cause__`.
"""

from __future__ import annotations


class OrderStoreError(Exception):
    """Base class for every error raised by this package."""


class ValidationError(OrderStoreError):
    """
    Caller-supplied input failed a precondition.
    Always raised before a connection is requested.
    """

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class NotFoundError(OrderStoreError):
    """A targeted update matched zero rows."""


class StorageError(OrderStoreError):
    """The database or driver failed; the original exception is `__cause__`."""


class OperationTimeoutError(StorageError):
    """A store call did not finish within its deadline."""


class ConfigurationError(OrderStoreError):
    """Invalid or missing connection descriptor."""


# --- Module Notes -----------------------------------------------------------
# Not-found on reads/deletes is a return value (None/False), not an exception.
