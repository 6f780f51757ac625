"""
order_store.observability.logging

Log setup for the repositories, the connection probe and the health app.

Responsibilities:
- Route structlog events through stdlib logging at the configured level.
- Render JSON lines for deployed services and a readable console format for local runs.
- Hand out per-module loggers to the data-access code.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def configure_logging(*, service_name: str, level: str, json: bool = True) -> None:
    """
    Process-level setup, called by the health app factory. Repositories never
    call this; used as a library, they log through whatever the host configured.
    """

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    renderer: Any = (
        structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            _stamp_service(service_name),
            structlog.processors.dict_tracebacks,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _stamp_service(service_name: str):
    # Several processes can share one database; the service field tells their logs apart.
    def processor(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict.setdefault("service", service_name)
        return event_dict

    return processor


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


# --- Module Notes -----------------------------------------------------------
# Event names are snake_case verbs on the entity (`product_created`,
# `orders_bulk_deleted`, `storage_failure`). Ids, filter fields and the operation
# name travel as keyword fields so log queries can filter on them.
