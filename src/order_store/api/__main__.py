"""
order_store.api.__main__

Entrypoint for `python -m order_store.api`: serves the health/readiness app for
the configured connection descriptor.
"""

from __future__ import annotations

import uvicorn

from order_store.api.app import create_app
from order_store.observability.logging import get_logger
from order_store.settings import get_settings

log = get_logger(__name__)


def main() -> None:
    settings = get_settings()
    app = create_app(settings=settings)
    log.info(
        "serving_health_api",
        connection=settings.default_connection,
        host=settings.api_host,
        port=settings.api_port,
    )

    # log_config=None leaves stdlib logging as configure_logging set it up.
    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_config=None)


if __name__ == "__main__":
    main()


# --- Module Notes -----------------------------------------------------------
# Point ORDER_STORE_DEFAULT_CONNECTION at another descriptor to probe a different
# database; the connection string itself is never logged.
