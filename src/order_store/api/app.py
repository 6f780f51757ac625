"""
order_store.api.app

FastAPI app factory.

Responsibilities:
- Build the application and register routers.
- Create and dispose the connection provider and service for the app's lifetime.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from order_store import __version__
from order_store.api.routers.health import router as health_router
from order_store.db.connection import ConnectionProvider
from order_store.db.init_db import init_db
from order_store.observability.logging import configure_logging, get_logger
from order_store.services.order_management import OrderManagementService
from order_store.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(
        service_name=settings.service_name, level=settings.log_level, json=settings.log_json
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        provider = ConnectionProvider.from_settings(settings)
        app.state.settings = settings
        app.state.provider = provider
        app.state.service = OrderManagementService.from_provider(provider, settings=settings)
        if settings.env in ("dev", "test"):
            # Dev/test convenience; production schemas are provisioned separately.
            await init_db(provider.engine)
        try:
            yield
        finally:
            await provider.dispose()
            log.info("shutdown")

    app = FastAPI(title="Order Store", version=__version__, lifespan=lifespan)
    app.include_router(health_router, tags=["health"])
    return app
