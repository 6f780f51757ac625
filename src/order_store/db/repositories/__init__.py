"""
order_store.db.repositories

Repository package.

Responsibilities:
- Group the product and order data-access repositories.
"""

# Package marker; repositories are imported directly from submodules.


# --- Module Notes -----------------------------------------------------------
# Every repository method owns its connection for exactly one call.
