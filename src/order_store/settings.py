"""
order_store.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Resolve named connection descriptors (e.g. "DefaultConnection").
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
from types import MappingProxyType
from typing import Annotated, Literal

from pydantic import AfterValidator, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from order_store.errors import ConfigurationError

DEFAULT_CONNECTION_NAME = "DefaultConnection"


def _freeze(value: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(value))


def _default_connections() -> Mapping[str, str]:
    return _freeze({DEFAULT_CONNECTION_NAME: "sqlite+aiosqlite:///./orders.db"})


# Read-only view: `frozen=True` only blocks attribute assignment, not item assignment.
ConnectionMap = Annotated[Mapping[str, str], AfterValidator(_freeze)]


class Settings(BaseSettings):
    """
    Immutable configuration value:
    - Env-driven (`ORDER_STORE_*`), defaults safe for local dev
    - Passed explicitly into the connection provider and stores
    """

    model_config = SettingsConfigDict(env_prefix="ORDER_STORE_", case_sensitive=False, frozen=True)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "order-store"
    log_level: str = "INFO"
    log_json: bool = True

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Persistence. Connection strings may carry credentials; keep them out of repr.
    connections: ConnectionMap = Field(default_factory=_default_connections, repr=False)
    default_connection: str = DEFAULT_CONNECTION_NAME
    echo_sql: bool = False

    # Per-call deadline applied by the stores; None disables it.
    command_timeout: float | None = 30.0

    def connection_string(self, name: str | None = None) -> str:
        name = self.default_connection if name is None else name
        if not name or not name.strip():
            raise ConfigurationError("connection name cannot be blank")
        try:
            value = self.connections[name]
        except KeyError:
            raise ConfigurationError(f"connection string {name!r} not found") from None
        if not value or not value.strip():
            raise ConfigurationError(f"connection string {name!r} is blank")
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Connection strings are passed through to SQLAlchemy untouched; this module never
# parses their contents.
