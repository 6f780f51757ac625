"""
order_store.db

Persistence package (SQLAlchemy Core over an async engine, no ORM).

Responsibilities:
- Provide the connection provider, schema bootstrap, routines and repositories.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Statements are hand-written parameterized SQL; table metadata exists only so the
# dev/test bootstrap can create the schema.
