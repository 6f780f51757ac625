"""
order_store.db.routines

Database-side routines for filtered reads and bulk deletes.

Responsibilities:
- Define the stable call contracts `get_filtered_orders` and `bulk_delete_orders`.
- Compose the WHERE clause from an `OrderFilter` (one predicate per present field,
  joined with AND) with typed bound parameters.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from sqlalchemy import bindparam, text
from sqlalchemy.sql.elements import TextClause
from sqlalchemy.sql.selectable import TextualSelect

from order_store.db.schema import ID, JOINED_PRODUCT_COLUMNS, ORDER_COLUMNS, STATUS
from order_store.models import OrderFilter


@dataclass(frozen=True, slots=True)
class RoutineCall:
    """
    A routine invocation: the statement executes as one unit in the database.
    """

    name: str
    statement: TextClause | TextualSelect
    params: dict[str, Any] = field(default_factory=dict)


def get_filtered_orders(criteria: OrderFilter) -> RoutineCall:
    # Inputs: month, year, status, product_id. Output: joined rows, newest first.
    where, binds, params = _where(criteria, qualifier="o.")
    stmt = (
        text(
            "SELECT o.id, o.status, o.created_date, o.updated_date, o.product_id, "
            "p.name, p.description, p.weight, p.height, p.width, p.length "
            "FROM orders o INNER JOIN products p ON o.product_id = p.id"
            f"{where} ORDER BY o.created_date DESC, o.id DESC"
        )
        .bindparams(*binds)
        .columns(**ORDER_COLUMNS, **JOINED_PRODUCT_COLUMNS)
    )
    return RoutineCall("get_filtered_orders", stmt, params)


def bulk_delete_orders(criteria: OrderFilter) -> RoutineCall:
    # Inputs: same as get_filtered_orders. Output: rows deleted (statement rowcount).
    where, binds, params = _where(criteria, qualifier="")
    stmt = text(f"DELETE FROM orders{where}").bindparams(*binds)
    return RoutineCall("bulk_delete_orders", stmt, params)


def _where(criteria: OrderFilter, *, qualifier: str) -> tuple[str, list, dict[str, Any]]:
    predicates: list[str] = []
    binds = []
    params: dict[str, Any] = {}
    created = f"{qualifier}created_date"

    if criteria.month is not None:
        predicates.append(f"CAST(strftime('%m', {created}) AS INTEGER) = :month")
        binds.append(bindparam("month", type_=ID))
        params["month"] = criteria.month
    if criteria.year is not None:
        predicates.append(f"CAST(strftime('%Y', {created}) AS INTEGER) = :year")
        binds.append(bindparam("year", type_=ID))
        params["year"] = criteria.year
    if criteria.status is not None:
        predicates.append(f"{qualifier}status = :status")
        binds.append(bindparam("status", type_=STATUS))
        params["status"] = int(criteria.status)
    if criteria.product_id is not None:
        predicates.append(f"{qualifier}product_id = :product_id")
        binds.append(bindparam("product_id", type_=ID))
        params["product_id"] = criteria.product_id

    if not predicates:
        return "", binds, params
    return " WHERE " + " AND ".join(predicates), binds, params


# --- Module Notes -----------------------------------------------------------
# The bodies use SQLite date functions (the default backend). Another backend needs
# its own month/year extraction here; callers only depend on the call contract.
