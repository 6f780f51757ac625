"""
order_store.models

Domain entities and the order filter criteria.

Responsibilities:
- Define `Product` and `Order` (plain mutable dataclasses, no ORM).
- Define the numeric `OrderStatus` contract stored in the database.
- Define `OrderFilter`, the optional-AND criteria for filtered reads/bulk deletes.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from order_store.errors import ValidationError


class OrderStatus(enum.IntEnum):
    # Integer values are persisted; treat as stable storage contract.
    NOT_STARTED = 0
    LOADING = 1
    IN_PROGRESS = 2
    ARRIVED = 3
    UNLOADING = 4
    CANCELLED = 5
    DONE = 6


@dataclass
class Product:
    """
    A catalog product. `id` stays 0 until the store assigns one on insert.
    """

    name: str = ""
    description: str = ""
    weight: Decimal = Decimal("0")
    height: Decimal = Decimal("0")
    width: Decimal = Decimal("0")
    length: Decimal = Decimal("0")
    id: int = 0


@dataclass
class Order:
    """
    An order placed against a product.

    `product` is only populated by reads that join the product table.
    """

    product_id: int = 0
    status: OrderStatus = OrderStatus.NOT_STARTED
    created_date: datetime | None = None
    updated_date: datetime | None = None
    id: int = 0
    product: Product | None = field(default=None, compare=False)


@dataclass(frozen=True, slots=True)
class OrderFilter:
    """
    Criteria for filtered reads and bulk deletes.

    Each field is independently optional; present fields combine with AND and
    an empty filter matches every order. Month/year apply to `created_date`.
    """

    month: int | None = None
    year: int | None = None
    status: OrderStatus | None = None
    product_id: int | None = None

    def __post_init__(self) -> None:
        if self.month is not None and not 1 <= self.month <= 12:
            raise ValidationError("month must be between 1 and 12", field="month")
        if self.year is not None and self.year < 1:
            raise ValidationError("year must be positive", field="year")
        if self.product_id is not None and self.product_id <= 0:
            raise ValidationError("product id must be greater than zero", field="product_id")
        if self.status is not None:
            try:
                # Normalise plain ints to the enum; frozen dataclass needs object.__setattr__.
                object.__setattr__(self, "status", OrderStatus(self.status))
            except ValueError:
                raise ValidationError(
                    f"undefined order status {self.status!r}", field="status"
                ) from None

    @property
    def is_empty(self) -> bool:
        return (
            self.month is None
            and self.year is None
            and self.status is None
            and self.product_id is None
        )


# --- Module Notes -----------------------------------------------------------
# No transition rules exist between statuses: any defined status may follow any other.
