"""HTTP adapter for the remote inventory/order service.

Talks to the service with an async httpx client:

- ``GET {base_url}/inventory`` with ``only_available`` / ``distributor_id``
  query params, returning a JSON list of products (or ``{"products": [...]}``)
- ``POST {base_url}/orders`` with the order request as JSON, returning
  ``{"order_id": "..."}``

Transport errors and non-2xx responses are raised as ServiceError.
"""

import os

import httpx
import structlog
from protean.exceptions import ValidationError

from offers.catalogue.product import Product
from offers.ordering.request import OrderRequest
from offers.service.port import InventoryService, OrderReceipt, ServiceError
from offers.service.response import extract_error_detail

logger = structlog.get_logger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


class HttpInventoryService(InventoryService):
    """Inventory service reached over HTTP."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or os.getenv("OFFERS_SERVICE_URL", "")).rstrip("/")
        if timeout_seconds is None:
            timeout_seconds = float(os.getenv("OFFERS_SERVICE_TIMEOUT", DEFAULT_TIMEOUT_SECONDS))
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        if not self.base_url:
            raise ServiceError("Inventory service URL is not configured")
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout_seconds,
            transport=self._transport,
        )

    async def _send(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            async with self._client() as client:
                response = await client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("Inventory service unreachable", method=method, path=path, error=str(exc))
            raise ServiceError(f"Could not reach inventory service: {exc}") from exc

        if response.is_error:
            message = extract_error_detail(response)
            logger.warning(
                "Inventory service returned an error",
                method=method,
                path=path,
                status_code=response.status_code,
                error=message,
            )
            raise ServiceError(message, status_code=response.status_code)
        return response

    async def fetch_products(
        self,
        distributor_id: str | None = None,
        only_available: bool = False,
    ) -> list[Product]:
        params = {"only_available": "true" if only_available else "false"}
        if distributor_id is not None:
            params["distributor_id"] = distributor_id

        response = await self._send("GET", "/inventory", params=params)
        try:
            body = response.json()
        except ValueError as exc:
            raise ServiceError("Inventory service returned an unreadable catalog") from exc

        records = body.get("products", []) if isinstance(body, dict) else body
        if not isinstance(records, list):
            raise ServiceError("Inventory service returned an unreadable catalog")

        products = []
        for record in records:
            try:
                products.append(Product.from_payload(record))
            except (ValidationError, TypeError, AttributeError) as exc:
                logger.warning(
                    "Skipping malformed product record",
                    product_id=record.get("id") if isinstance(record, dict) else None,
                    error=str(exc),
                )
        return products

    async def create_order(self, request: OrderRequest) -> OrderReceipt:
        response = await self._send("POST", "/orders", json=request.to_dict())
        try:
            body = response.json()
        except ValueError:
            body = None

        order_id = body.get("order_id") if isinstance(body, dict) else None
        if not order_id:
            raise ServiceError("Inventory service did not return an order id", status_code=response.status_code)
        return OrderReceipt(order_id=str(order_id))
