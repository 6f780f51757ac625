"""
order_store.api.routers

HTTP routers.
"""
