"""
order_store.validation

Input preconditions shared by the stores.

Responsibilities:
- Reject bad input before any connection is requested.
- Report the offending field on `ValidationError`.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from order_store.errors import ValidationError
from order_store.models import Order, OrderStatus, Product

_DIMENSIONS = ("weight", "height", "width", "length")


def require_positive_id(value: int, *, entity: str = "entity") -> None:
    if value is None or value <= 0:
        raise ValidationError(f"{entity} id must be greater than zero", field="id")


def validate_product(product: Product) -> None:
    if product is None:
        raise ValidationError("product is required", field="product")
    if not product.name or not product.name.strip():
        raise ValidationError("product name cannot be blank", field="name")
    for name in _DIMENSIONS:
        if not _non_negative(getattr(product, name)):
            raise ValidationError(
                f"product {name} must be a finite, non-negative number", field=name
            )


def validate_order(order: Order) -> None:
    if order is None:
        raise ValidationError("order is required", field="order")
    if order.product_id is None or order.product_id <= 0:
        raise ValidationError("order must reference a product", field="product_id")
    if _unset(order.created_date):
        raise ValidationError("order must have a created date", field="created_date")
    if _unset(order.updated_date):
        raise ValidationError("order must have an updated date", field="updated_date")
    try:
        order.status = OrderStatus(order.status)
    except ValueError:
        raise ValidationError(f"undefined order status {order.status!r}", field="status") from None


def _non_negative(value: Any) -> bool:
    if value is None or isinstance(value, bool):
        return False
    try:
        number = value if isinstance(value, Decimal) else Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        return False
    # NaN does not order against zero; check finiteness first.
    return number.is_finite() and number >= 0


def _unset(value: datetime | None) -> bool:
    # datetime.min is the "zero" timestamp some callers use as a placeholder.
    return value is None or value == datetime.min
