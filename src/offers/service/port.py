"""Inventory service port (abstract interface).

Defines the two operations the offers workflow consumes from the remote
inventory/order service. Adapters: FakeInventoryService (dev/test) and
HttpInventoryService (production), swapped without touching the workflow.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from offers.catalogue.product import Product
from offers.ordering.request import OrderRequest


class ServiceError(Exception):
    """The inventory service failed or rejected a request.

    ``message`` is human-readable and safe to show to the buyer. It may be
    empty when the service gave no reason.
    """

    def __init__(self, message: str = "", status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


@dataclass(frozen=True)
class OrderReceipt:
    """Result of an accepted order."""

    order_id: str


class InventoryService(ABC):
    """Abstract inventory/order service interface."""

    @abstractmethod
    async def fetch_products(
        self,
        distributor_id: str | None = None,
        only_available: bool = False,
    ) -> list[Product]:
        """List products, in service order.

        ``only_available`` restricts results to enabled products with positive
        stock. No ``distributor_id`` means all distributors.
        """
        ...

    @abstractmethod
    async def create_order(self, request: OrderRequest) -> OrderReceipt:
        """Place an order. Raises ServiceError on rejection or transport failure."""
        ...
