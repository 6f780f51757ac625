"""
order_store.db.repositories.orders

Repository for `Order` entities.

Responsibilities:
- Connected CRUD; reads join the product table and embed it on the order.
- Filtered reads through the `get_filtered_orders` routine.
- Bulk deletes through the `bulk_delete_orders` routine inside an explicit transaction.
"""

from __future__ import annotations

from dataclasses import asdict

from sqlalchemy import bindparam, text

from order_store.db.connection import ConnectionProvider
from order_store.db.execution import guarded
from order_store.db.mapping import map_order
from order_store.db.routines import bulk_delete_orders, get_filtered_orders
from order_store.db.schema import ID, JOINED_PRODUCT_COLUMNS, ORDER_COLUMNS, STATUS, TIMESTAMP
from order_store.errors import NotFoundError
from order_store.models import Order, OrderFilter
from order_store.observability.logging import get_logger
from order_store.validation import require_positive_id, validate_order

log = get_logger(__name__)

_INSERT = text(
    "INSERT INTO orders (status, created_date, updated_date, product_id) "
    "VALUES (:status, :created_date, :updated_date, :product_id) "
    "RETURNING id"
).bindparams(
    bindparam("status", type_=STATUS),
    bindparam("created_date", type_=TIMESTAMP),
    bindparam("updated_date", type_=TIMESTAMP),
    bindparam("product_id", type_=ID),
)

_SELECT_BY_ID = (
    text(
        "SELECT o.id, o.status, o.created_date, o.updated_date, o.product_id, "
        "p.name, p.description, p.weight, p.height, p.width, p.length "
        "FROM orders o INNER JOIN products p ON o.product_id = p.id "
        "WHERE o.id = :id"
    )
    .bindparams(bindparam("id", type_=ID))
    .columns(**ORDER_COLUMNS, **JOINED_PRODUCT_COLUMNS)
)

# created_date is immutable after insert.
_UPDATE = text(
    "UPDATE orders SET status = :status, updated_date = :updated_date, "
    "product_id = :product_id WHERE id = :id"
).bindparams(
    bindparam("id", type_=ID),
    bindparam("status", type_=STATUS),
    bindparam("updated_date", type_=TIMESTAMP),
    bindparam("product_id", type_=ID),
)

_DELETE = text("DELETE FROM orders WHERE id = :id").bindparams(bindparam("id", type_=ID))


class OrderRepo:
    def __init__(
        self, provider: ConnectionProvider, *, command_timeout: float | None = None
    ) -> None:
        self._provider = provider
        self._command_timeout = command_timeout

    def _deadline(self, timeout: float | None) -> float | None:
        return self._command_timeout if timeout is None else timeout

    async def create(self, order: Order, *, timeout: float | None = None) -> Order:
        validate_order(order)

        params = {
            "status": int(order.status),
            "created_date": order.created_date,
            "updated_date": order.updated_date,
            "product_id": order.product_id,
        }
        async with guarded("create_order", timeout=self._deadline(timeout)):
            async with self._provider.create_connection() as conn:
                result = await conn.execute(_INSERT, params)
                order.id = int(result.scalar_one())
                await conn.commit()

        log.info("order_created", order_id=order.id, product_id=order.product_id)
        return order

    async def get_by_id(self, order_id: int, *, timeout: float | None = None) -> Order | None:
        require_positive_id(order_id, entity="order")

        async with guarded("get_order", timeout=self._deadline(timeout), order_id=order_id):
            async with self._provider.create_connection() as conn:
                row = (await conn.execute(_SELECT_BY_ID, {"id": order_id})).mappings().first()

        return map_order(row, with_product=True) if row is not None else None

    async def update(self, order: Order, *, timeout: float | None = None) -> Order:
        validate_order(order)
        require_positive_id(order.id, entity="order")

        params = {
            "id": order.id,
            "status": int(order.status),
            "updated_date": order.updated_date,
            "product_id": order.product_id,
        }
        async with guarded("update_order", timeout=self._deadline(timeout), order_id=order.id):
            async with self._provider.create_connection() as conn:
                result = await conn.execute(_UPDATE, params)
                affected = result.rowcount
                await conn.commit()

        if affected == 0:
            raise NotFoundError(f"order {order.id} was not found")
        log.info("order_updated", order_id=order.id, status=order.status.name)
        return order

    async def delete(self, order_id: int, *, timeout: float | None = None) -> bool:
        require_positive_id(order_id, entity="order")

        async with guarded("delete_order", timeout=self._deadline(timeout), order_id=order_id):
            async with self._provider.create_connection() as conn:
                result = await conn.execute(_DELETE, {"id": order_id})
                deleted = result.rowcount > 0
                await conn.commit()

        if deleted:
            log.info("order_deleted", order_id=order_id)
        return deleted

    async def get_filtered(
        self, criteria: OrderFilter | None = None, *, timeout: float | None = None
    ) -> list[Order]:
        """
        Orders matching every present criterion, newest `created_date` first,
        each with its product embedded. An empty filter returns all orders.
        """

        call = get_filtered_orders(criteria or OrderFilter())
        async with guarded(call.name, timeout=self._deadline(timeout), **call.params):
            async with self._provider.create_connection() as conn:
                rows = (await conn.execute(call.statement, call.params)).mappings().all()

        return [map_order(row, with_product=True) for row in rows]

    async def bulk_delete(
        self, criteria: OrderFilter | None = None, *, timeout: float | None = None
    ) -> int:
        """
        Delete every order matching the criteria and return how many were removed.

        Runs in one explicit transaction on one connection: on any failure,
        cancellation included, the transaction is rolled back and the driver
        error is re-raised unchanged (timeouts still become OperationTimeoutError),
        so either all matching rows go or none do.
        """

        criteria = criteria or OrderFilter()
        call = bulk_delete_orders(criteria)
        async with guarded(
            call.name, timeout=self._deadline(timeout), wrap_errors=False, **call.params
        ):
            async with self._provider.create_connection() as conn:
                trans = await conn.begin()
                try:
                    result = await conn.execute(call.statement, call.params)
                    deleted = result.rowcount
                    await trans.commit()
                except BaseException:
                    log.warning("orders_bulk_delete_rolled_back", **asdict(criteria))
                    await trans.rollback()
                    raise

        log.info("orders_bulk_deleted", deleted=deleted, **asdict(criteria))
        return deleted


# --- Module Notes -----------------------------------------------------------
# Status changes are not checked against a transition graph; any defined status
# may replace any other.
