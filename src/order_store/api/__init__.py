"""
order_store.api

HTTP surface (health and readiness only).
"""
