"""
order_store.db.mapping

Row -> entity conversion.

Responsibilities:
- Map one column-name-addressed row to a `Product` or an `Order`.
- Embed the joined product only when the query shape says the row carries it.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from order_store.errors import StorageError
from order_store.models import Order, OrderStatus, Product


def map_product(row: Mapping[str, Any]) -> Product:
    return Product(
        id=int(row["id"]),
        name=row["name"],
        description=row["description"] or "",
        weight=_decimal(row["weight"]),
        height=_decimal(row["height"]),
        width=_decimal(row["width"]),
        length=_decimal(row["length"]),
    )


def map_order(row: Mapping[str, Any], *, with_product: bool = False) -> Order:
    """
    `with_product` must be True only for statements that select the joined
    product columns; the mapper does not inspect the row to find out.
    """

    order = Order(
        id=int(row["id"]),
        status=_status(row),
        created_date=row["created_date"],
        updated_date=row["updated_date"],
        product_id=int(row["product_id"]),
    )
    if with_product:
        order.product = Product(
            id=order.product_id,
            name=row["name"],
            description=row["description"] or "",
            weight=_decimal(row["weight"]),
            height=_decimal(row["height"]),
            width=_decimal(row["width"]),
            length=_decimal(row["length"]),
        )
    return order


def _status(row: Mapping[str, Any]) -> OrderStatus:
    try:
        return OrderStatus(row["status"])
    except ValueError:
        raise StorageError(
            f"order {row['id']} holds undefined status {row['status']!r}"
        ) from None


def _decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # Drivers without native decimals hand back floats; go through str to avoid binary noise.
    return Decimal(str(value))
