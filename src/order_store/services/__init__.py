"""
order_store.services

Service layer.

Responsibilities:
- Public entry points that forward to the repositories.
"""

# Package marker.
