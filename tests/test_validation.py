"""
tests.test_validation

Preconditions on products, orders, ids and filter criteria.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import pytest

from order_store.errors import ValidationError
from order_store.models import OrderFilter, OrderStatus
from order_store.validation import require_positive_id, validate_order, validate_product


@pytest.mark.parametrize("name", ["", "   ", None])
def test_blank_product_name_is_rejected(make_product, name) -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_product(make_product(name=name))
    assert excinfo.value.field == "name"


@pytest.mark.parametrize("dimension", ["weight", "height", "width", "length"])
def test_negative_dimension_is_rejected(make_product, dimension) -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_product(make_product(**{dimension: Decimal("-0.01")}))
    assert excinfo.value.field == dimension


@pytest.mark.parametrize(
    "value", [Decimal("NaN"), Decimal("sNaN"), Decimal("Infinity"), float("inf"), "heavy", None]
)
def test_non_finite_or_non_numeric_dimension_is_rejected(make_product, value) -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_product(make_product(height=value))
    assert excinfo.value.field == "height"


def test_zero_dimensions_and_empty_description_are_allowed(make_product) -> None:
    validate_product(
        make_product(
            description="",
            weight=Decimal("0"),
            height=Decimal("0"),
            width=Decimal("0"),
            length=Decimal("0"),
        )
    )


@pytest.mark.parametrize("value", [0, -1, None])
def test_non_positive_id_is_rejected(value) -> None:
    with pytest.raises(ValidationError):
        require_positive_id(value, entity="product")


def test_order_requires_product_reference(make_order) -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_order(make_order(product_id=0))
    assert excinfo.value.field == "product_id"


@pytest.mark.parametrize("field", ["created_date", "updated_date"])
@pytest.mark.parametrize("value", [None, datetime.min])
def test_order_requires_timestamps(make_order, field, value) -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_order(make_order(**{field: value}))
    assert excinfo.value.field == field


def test_order_rejects_undefined_status(make_order) -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_order(make_order(status=42))
    assert excinfo.value.field == "status"


def test_order_status_int_is_normalised(make_order) -> None:
    order = make_order(status=3)
    validate_order(order)
    assert order.status is OrderStatus.ARRIVED


@pytest.mark.parametrize(
    ("kwargs", "field"),
    [
        ({"month": 0}, "month"),
        ({"month": 13}, "month"),
        ({"year": 0}, "year"),
        ({"product_id": 0}, "product_id"),
        ({"status": 7}, "status"),
    ],
)
def test_filter_rejects_out_of_range_values(kwargs, field) -> None:
    with pytest.raises(ValidationError) as excinfo:
        OrderFilter(**kwargs)
    assert excinfo.value.field == field


def test_filter_normalises_status_and_reports_emptiness() -> None:
    assert OrderFilter().is_empty
    criteria = OrderFilter(month=7, status=5)
    assert criteria.status is OrderStatus.CANCELLED
    assert not criteria.is_empty
