"""Configurable fake inventory service for development and testing.

Holds an in-memory catalog and simulates the remote service without any
network calls. It can be told to fail fetches or orders, and it records
every call so tests can assert on call counts and payloads. Accepted
orders decrement stock, so a reload after ordering reflects the change.
"""

from uuid import uuid4

from offers.catalogue.product import Product
from offers.ordering.request import OrderRequest
from offers.service.port import InventoryService, OrderReceipt, ServiceError


class FakeInventoryService(InventoryService):
    """In-memory inventory service."""

    def __init__(self, products: list[Product] | None = None) -> None:
        self.products: list[Product] = list(products or [])
        self.fetch_should_succeed: bool = True
        self.fetch_failure_reason: str = "Service unavailable"
        self.order_should_succeed: bool = True
        self.order_failure_reason: str = "Order rejected"
        self.next_order_id: str | None = None
        self.calls: list[dict] = []

    def configure(
        self,
        fetch_should_succeed: bool = True,
        fetch_failure_reason: str = "Service unavailable",
        order_should_succeed: bool = True,
        order_failure_reason: str = "Order rejected",
        next_order_id: str | None = None,
    ) -> None:
        """Configure service behavior at runtime."""
        self.fetch_should_succeed = fetch_should_succeed
        self.fetch_failure_reason = fetch_failure_reason
        self.order_should_succeed = order_should_succeed
        self.order_failure_reason = order_failure_reason
        self.next_order_id = next_order_id

    def calls_to(self, method: str) -> list[dict]:
        return [call for call in self.calls if call["method"] == method]

    async def fetch_products(
        self,
        distributor_id: str | None = None,
        only_available: bool = False,
    ) -> list[Product]:
        self.calls.append(
            {
                "method": "fetch_products",
                "distributor_id": distributor_id,
                "only_available": only_available,
            }
        )

        if not self.fetch_should_succeed:
            raise ServiceError(self.fetch_failure_reason)

        products = self.products
        if distributor_id is not None:
            products = [p for p in products if p.distributor_id == distributor_id]
        if only_available:
            products = [p for p in products if p.is_orderable]
        return list(products)

    async def create_order(self, request: OrderRequest) -> OrderReceipt:
        self.calls.append({"method": "create_order", "request": request.to_dict()})

        if not self.order_should_succeed:
            raise ServiceError(self.order_failure_reason, status_code=400)

        for index, product in enumerate(self.products):
            if product.product_id != request.product_id:
                continue
            if product.stock_quantity < request.quantity:
                raise ServiceError("Insufficient stock", status_code=400)
            remaining = product.to_dict()
            remaining["stock_quantity"] = product.stock_quantity - request.quantity
            self.products[index] = Product(**remaining)
            break

        order_id = self.next_order_id or f"ORD-{uuid4().hex[:8].upper()}"
        self.next_order_id = None
        return OrderReceipt(order_id=order_id)

    def reset(self) -> None:
        """Clear recorded calls and restore default behavior."""
        self.calls.clear()
        self.configure()
