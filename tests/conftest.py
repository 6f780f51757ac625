"""
tests.conftest

Shared fixtures: a fresh file-backed SQLite database per test, repositories bound
to it, and the sample catalog/order data set.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from datetime import datetime
from decimal import Decimal

import pytest
import pytest_asyncio

from order_store.db.connection import ConnectionProvider
from order_store.db.init_db import init_db
from order_store.db.repositories.orders import OrderRepo
from order_store.db.repositories.products import ProductRepo
from order_store.models import Order, OrderStatus, Product
from order_store.settings import DEFAULT_CONNECTION_NAME, Settings


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'orders.db'}"


@pytest.fixture
def settings(database_url: str) -> Settings:
    return Settings(
        env="test",
        connections={DEFAULT_CONNECTION_NAME: database_url},
        command_timeout=10.0,
        log_json=False,
    )


@pytest_asyncio.fixture
async def provider(settings: Settings) -> AsyncIterator[ConnectionProvider]:
    provider = ConnectionProvider.from_settings(settings)
    await init_db(provider.engine)
    try:
        yield provider
    finally:
        await provider.dispose()


@pytest.fixture
def products(provider: ConnectionProvider, settings: Settings) -> ProductRepo:
    return ProductRepo(provider, command_timeout=settings.command_timeout)


@pytest.fixture
def orders(provider: ConnectionProvider, settings: Settings) -> OrderRepo:
    return OrderRepo(provider, command_timeout=settings.command_timeout)


@pytest.fixture
def make_product() -> Callable[..., Product]:
    def factory(**overrides) -> Product:
        values = {
            "name": "Laptop",
            "description": "Dell Inspiron 15",
            "weight": Decimal("2.50"),
            "height": Decimal("1.50"),
            "width": Decimal("35.00"),
            "length": Decimal("25.00"),
        }
        values.update(overrides)
        return Product(**values)

    return factory


@pytest.fixture
def make_order() -> Callable[..., Order]:
    def factory(**overrides) -> Order:
        values = {
            "product_id": 1,
            "status": OrderStatus.NOT_STARTED,
            "created_date": datetime(2025, 8, 1, 10, 0),
            "updated_date": datetime(2025, 8, 1, 10, 0),
        }
        values.update(overrides)
        return Order(**values)

    return factory


@pytest_asyncio.fixture
async def catalog(products: ProductRepo, make_product) -> dict[str, Product]:
    rows = [
        make_product(),
        make_product(
            name="Monitor",
            description="24 inch LED Monitor",
            weight=Decimal("5.20"),
            height=Decimal("40.00"),
            width=Decimal("55.00"),
            length=Decimal("20.00"),
        ),
        make_product(
            name="Keyboard",
            description="Mechanical Gaming Keyboard",
            weight=Decimal("1.20"),
            height=Decimal("3.50"),
            width=Decimal("45.00"),
            length=Decimal("15.00"),
        ),
        make_product(
            name="Mouse",
            description="Wireless Optical Mouse",
            weight=Decimal("0.10"),
            height=Decimal("2.00"),
            width=Decimal("12.00"),
            length=Decimal("6.00"),
        ),
    ]
    created = {}
    for product in rows:
        created[product.name] = await products.create(product)
    return created


@pytest_asyncio.fixture
async def sample_orders(orders: OrderRepo, catalog: dict[str, Product], make_order) -> list[Order]:
    # Three August 2025 orders followed by a done and a cancelled July 2025 order.
    spec = [
        ("Laptop", OrderStatus.NOT_STARTED, datetime(2025, 8, 1, 10, 0), datetime(2025, 8, 1, 10, 0)),
        ("Monitor", OrderStatus.LOADING, datetime(2025, 8, 2, 11, 30), datetime(2025, 8, 2, 12, 0)),
        ("Laptop", OrderStatus.IN_PROGRESS, datetime(2025, 8, 3, 14, 15), datetime(2025, 8, 3, 15, 30)),
        ("Keyboard", OrderStatus.DONE, datetime(2025, 7, 25, 9, 0), datetime(2025, 7, 25, 17, 0)),
        ("Mouse", OrderStatus.CANCELLED, datetime(2025, 7, 30, 16, 45), datetime(2025, 7, 30, 16, 45)),
    ]
    created = []
    for name, status, created_date, updated_date in spec:
        order = make_order(
            product_id=catalog[name].id,
            status=status,
            created_date=created_date,
            updated_date=updated_date,
        )
        created.append(await orders.create(order))
    return created
