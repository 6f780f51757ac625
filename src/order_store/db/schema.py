"""
order_store.db.schema

Table metadata for the two persisted entities (SQLAlchemy Core).

Responsibilities:
- Describe `products` and `orders` (columns, FK, indexes) for schema bootstrap.
- Provide the SQL types used to bind parameters and type result columns.
"""

from __future__ import annotations

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
)

metadata = MetaData()

# Shared column types; statements in the repositories bind and read with these.
ID = Integer()
NAME = String(255)
DESCRIPTION = Text()
MEASURE = Numeric(18, 2)
STATUS = Integer()
TIMESTAMP = DateTime()

products = Table(
    "products",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", NAME, nullable=False),
    Column("description", DESCRIPTION, nullable=True),
    Column("weight", MEASURE, nullable=False),
    Column("height", MEASURE, nullable=False),
    Column("width", MEASURE, nullable=False),
    Column("length", MEASURE, nullable=False),
)

orders = Table(
    "orders",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("status", STATUS, nullable=False),
    Column("created_date", TIMESTAMP, nullable=False),
    Column("updated_date", TIMESTAMP, nullable=False),
    Column("product_id", Integer, ForeignKey("products.id"), nullable=False),
    Index("ix_orders_status", "status"),
    Index("ix_orders_created_date", "created_date"),
    Index("ix_orders_product_id", "product_id"),
)

PRODUCT_COLUMNS = {
    "id": ID,
    "name": NAME,
    "description": DESCRIPTION,
    "weight": MEASURE,
    "height": MEASURE,
    "width": MEASURE,
    "length": MEASURE,
}

ORDER_COLUMNS = {
    "id": ID,
    "status": STATUS,
    "created_date": TIMESTAMP,
    "updated_date": TIMESTAMP,
    "product_id": ID,
}

# Product columns as they appear in order/product join results.
JOINED_PRODUCT_COLUMNS = {k: v for k, v in PRODUCT_COLUMNS.items() if k != "id"}


# --- Module Notes -----------------------------------------------------------
# Dimension constraints (>= 0) are application-level; the schema does not repeat them.
