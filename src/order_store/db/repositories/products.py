"""
order_store.db.repositories.products

Repository for `Product` entities.

Responsibilities:
- Connected CRUD with typed parameterized statements, one connection per call.
- Disconnected bulk read: buffer every row, release the connection, then map.
"""

from __future__ import annotations

from sqlalchemy import bindparam, text

from order_store.db.connection import ConnectionProvider
from order_store.db.execution import guarded
from order_store.db.mapping import map_product
from order_store.db.schema import DESCRIPTION, ID, MEASURE, NAME, PRODUCT_COLUMNS
from order_store.errors import NotFoundError
from order_store.models import Product
from order_store.observability.logging import get_logger
from order_store.validation import require_positive_id, validate_product

log = get_logger(__name__)


def _value_binds():
    return (
        bindparam("name", type_=NAME),
        bindparam("description", type_=DESCRIPTION),
        bindparam("weight", type_=MEASURE),
        bindparam("height", type_=MEASURE),
        bindparam("width", type_=MEASURE),
        bindparam("length", type_=MEASURE),
    )


_INSERT = text(
    "INSERT INTO products (name, description, weight, height, width, length) "
    "VALUES (:name, :description, :weight, :height, :width, :length) "
    "RETURNING id"
).bindparams(*_value_binds())

_SELECT_BY_ID = (
    text(
        "SELECT id, name, description, weight, height, width, length "
        "FROM products WHERE id = :id"
    )
    .bindparams(bindparam("id", type_=ID))
    .columns(**PRODUCT_COLUMNS)
)

_UPDATE = text(
    "UPDATE products SET name = :name, description = :description, weight = :weight, "
    "height = :height, width = :width, length = :length WHERE id = :id"
).bindparams(bindparam("id", type_=ID), *_value_binds())

_DELETE = text("DELETE FROM products WHERE id = :id").bindparams(bindparam("id", type_=ID))

_SELECT_ALL = text(
    "SELECT id, name, description, weight, height, width, length "
    "FROM products ORDER BY name"
).columns(**PRODUCT_COLUMNS)


def _values(product: Product) -> dict[str, object]:
    return {
        "name": product.name,
        "description": product.description,
        "weight": product.weight,
        "height": product.height,
        "width": product.width,
        "length": product.length,
    }


class ProductRepo:
    def __init__(
        self, provider: ConnectionProvider, *, command_timeout: float | None = None
    ) -> None:
        self._provider = provider
        self._command_timeout = command_timeout

    def _deadline(self, timeout: float | None) -> float | None:
        return self._command_timeout if timeout is None else timeout

    async def create(self, product: Product, *, timeout: float | None = None) -> Product:
        validate_product(product)

        async with guarded("create_product", timeout=self._deadline(timeout)):
            async with self._provider.create_connection() as conn:
                result = await conn.execute(_INSERT, _values(product))
                product.id = int(result.scalar_one())
                await conn.commit()

        log.info("product_created", product_id=product.id)
        return product

    async def get_by_id(self, product_id: int, *, timeout: float | None = None) -> Product | None:
        require_positive_id(product_id, entity="product")

        async with guarded("get_product", timeout=self._deadline(timeout), product_id=product_id):
            async with self._provider.create_connection() as conn:
                row = (await conn.execute(_SELECT_BY_ID, {"id": product_id})).mappings().first()

        return map_product(row) if row is not None else None

    async def update(self, product: Product, *, timeout: float | None = None) -> Product:
        validate_product(product)
        require_positive_id(product.id, entity="product")

        async with guarded("update_product", timeout=self._deadline(timeout), product_id=product.id):
            async with self._provider.create_connection() as conn:
                result = await conn.execute(_UPDATE, {"id": product.id, **_values(product)})
                affected = result.rowcount
                await conn.commit()

        if affected == 0:
            raise NotFoundError(f"product {product.id} was not found")
        log.info("product_updated", product_id=product.id)
        return product

    async def delete(self, product_id: int, *, timeout: float | None = None) -> bool:
        require_positive_id(product_id, entity="product")

        async with guarded("delete_product", timeout=self._deadline(timeout), product_id=product_id):
            async with self._provider.create_connection() as conn:
                result = await conn.execute(_DELETE, {"id": product_id})
                deleted = result.rowcount > 0
                await conn.commit()

        if deleted:
            log.info("product_deleted", product_id=product_id)
        return deleted

    async def get_all(self, *, timeout: float | None = None) -> list[Product]:
        """
        Disconnected read: the full result is frozen into an in-memory buffer and
        the connection is released before any row is converted.
        """

        async with guarded("get_all_products", timeout=self._deadline(timeout)):
            async with self._provider.create_connection() as conn:
                buffered = (await conn.execute(_SELECT_ALL)).freeze()

        return [map_product(row) for row in buffered().mappings()]


# --- Module Notes -----------------------------------------------------------
# Deleting a product that orders still reference fails on the foreign key and
# surfaces as StorageError.
