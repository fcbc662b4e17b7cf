"""Catalog loading — keeps the buyer's view of orderable products current.

The loader always asks the service for enabled, in-stock products only and
replaces the whole product sequence on success. On failure the previous
products stay as they were and a single FETCH_ERROR notice is posted; no
retry is scheduled.

Two entry points share the same fetch:

- initial load (screen mount, or after an acknowledged order): sets ``loading``
- explicit refresh (pull-to-refresh): sets ``refreshing``

Both flags are cleared when the fetch completes, whatever the outcome.
Loads are single-flight: a call made while another is outstanding is
ignored instead of issuing a second fetch.
"""

from dataclasses import dataclass

import structlog

from offers.catalogue.product import Product
from offers.notice.notice import Notice, NoticeBoard, NoticeKind
from offers.service.port import InventoryService, ServiceError

logger = structlog.get_logger(__name__)

FETCH_FAILURE_FALLBACK = "Failed to load products"

EMPTY_CATALOG_TITLE = "No products available"
EMPTY_CATALOG_MESSAGE = "Products will appear here when distributors add them"


@dataclass
class ViewState:
    """What the offers screen currently shows."""

    products: tuple[Product, ...] = ()
    loading: bool = False
    refreshing: bool = False

    @property
    def has_data(self) -> bool:
        return len(self.products) > 0

    @property
    def is_empty(self) -> bool:
        return not self.products

    @property
    def empty_title(self) -> str | None:
        return EMPTY_CATALOG_TITLE if self.is_empty else None

    @property
    def empty_message(self) -> str | None:
        return EMPTY_CATALOG_MESSAGE if self.is_empty else None

    def find(self, product_id: str) -> Product | None:
        for product in self.products:
            if product.product_id == product_id:
                return product
        return None


class CatalogLoader:
    """Fetches the orderable catalog into a ViewState."""

    def __init__(
        self,
        service: InventoryService,
        notices: NoticeBoard,
        state: ViewState | None = None,
        distributor_id: str | None = None,
    ) -> None:
        self.service = service
        self.notices = notices
        self.state = state or ViewState()
        self.distributor_id = distributor_id
        self.active = True
        self._in_flight = False

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    async def load(self, refresh: bool = False) -> bool:
        """Fetch the catalog and replace the view's products.

        Returns False when the call was ignored, either because a load is
        already in flight or because the screen was dismissed. Returns True
        otherwise, including when the fetch failed.
        """
        if not self.active:
            logger.debug("Catalog load skipped for dismissed screen", refresh=refresh)
            return False
        if self._in_flight:
            logger.info("Catalog load already in flight, ignoring", refresh=refresh)
            return False

        self._in_flight = True
        if refresh:
            self.state.refreshing = True
        else:
            self.state.loading = True

        try:
            products = await self.service.fetch_products(
                distributor_id=self.distributor_id,
                only_available=True,
            )
        except ServiceError as exc:
            if self.active:
                logger.warning("Catalog load failed", refresh=refresh, error=exc.message)
                self.notices.post(
                    Notice(
                        kind=NoticeKind.FETCH_ERROR,
                        title="Error",
                        message=exc.message or FETCH_FAILURE_FALLBACK,
                    )
                )
        else:
            if self.active:
                self.state.products = tuple(products)
                logger.info("Catalog loaded", count=len(products), refresh=refresh)
        finally:
            self._in_flight = False
            self.state.loading = False
            self.state.refreshing = False

        return True
