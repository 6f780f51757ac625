"""
order_store.services.order_management

Public facade over the product and order repositories.

Responsibilities:
- Forward every operation to the owning repository (no logic of its own).
- Build the repositories from settings in one place.
"""

from __future__ import annotations

from order_store.db.connection import ConnectionProvider
from order_store.db.repositories.orders import OrderRepo
from order_store.db.repositories.products import ProductRepo
from order_store.models import Order, OrderFilter, OrderStatus, Product
from order_store.settings import Settings


class OrderManagementService:
    def __init__(self, *, products: ProductRepo, orders: OrderRepo) -> None:
        self._products = products
        self._orders = orders

    @classmethod
    def from_provider(
        cls, provider: ConnectionProvider, *, settings: Settings
    ) -> OrderManagementService:
        timeout = settings.command_timeout
        return cls(
            products=ProductRepo(provider, command_timeout=timeout),
            orders=OrderRepo(provider, command_timeout=timeout),
        )

    # Products

    async def create_product(self, product: Product) -> Product:
        return await self._products.create(product)

    async def get_product(self, product_id: int) -> Product | None:
        return await self._products.get_by_id(product_id)

    async def update_product(self, product: Product) -> Product:
        return await self._products.update(product)

    async def delete_product(self, product_id: int) -> bool:
        return await self._products.delete(product_id)

    async def list_products(self) -> list[Product]:
        return await self._products.get_all()

    # Orders

    async def create_order(self, order: Order) -> Order:
        return await self._orders.create(order)

    async def get_order(self, order_id: int) -> Order | None:
        return await self._orders.get_by_id(order_id)

    async def update_order(self, order: Order) -> Order:
        return await self._orders.update(order)

    async def delete_order(self, order_id: int) -> bool:
        return await self._orders.delete(order_id)

    async def filter_orders(
        self,
        *,
        month: int | None = None,
        year: int | None = None,
        status: OrderStatus | None = None,
        product_id: int | None = None,
    ) -> list[Order]:
        criteria = OrderFilter(month=month, year=year, status=status, product_id=product_id)
        return await self._orders.get_filtered(criteria)

    async def bulk_delete_orders(
        self,
        *,
        month: int | None = None,
        year: int | None = None,
        status: OrderStatus | None = None,
        product_id: int | None = None,
    ) -> int:
        criteria = OrderFilter(month=month, year=year, status=status, product_id=product_id)
        return await self._orders.bulk_delete(criteria)


# --- Module Notes -----------------------------------------------------------
# Callers must check both failure styles: NotFoundError on updates, None/False on
# reads and deletes.
