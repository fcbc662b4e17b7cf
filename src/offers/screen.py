"""Offers screen — wires the catalog loader and order submitter together.

One screen per buyer. It owns the view state, the notice board and the
submission state machine, and exposes the buyer's interaction events:
mount, refresh, select a product, confirm, cancel, acknowledge, dismiss.
"""

import structlog
from protean.exceptions import ObjectNotFoundError

from offers.catalogue.loader import CatalogLoader, ViewState
from offers.notice.notice import Notice, NoticeBoard
from offers.ordering.request import OrderSummary
from offers.ordering.submission import OrderSubmitter, SubmissionState
from offers.service.port import InventoryService

logger = structlog.get_logger(__name__)


class OffersScreen:
    def __init__(self, user_id: str, service: InventoryService, distributor_id: str | None = None) -> None:
        self.notices = NoticeBoard()
        self.loader = CatalogLoader(service, self.notices, distributor_id=distributor_id)
        self.submitter = OrderSubmitter(
            user_id=user_id,
            service=service,
            notices=self.notices,
            on_order_placed=self.loader.load,
        )
        self.mounted = False

    @property
    def user_id(self) -> str:
        return self.submitter.user_id

    @property
    def view(self) -> ViewState:
        return self.loader.state

    @property
    def submission_state(self) -> SubmissionState:
        return self.submitter.state

    @property
    def active(self) -> bool:
        return self.loader.active

    async def mount(self) -> bool:
        """Run the initial catalog load. Only the first call has any effect."""
        if self.mounted:
            return False
        self.mounted = True
        logger.info("Offers screen mounted", user_id=self.user_id)
        return await self.loader.load()

    async def refresh(self) -> bool:
        return await self.loader.load(refresh=True)

    def select(self, product_id: str) -> OrderSummary:
        """Begin an order for a product currently on screen."""
        product = self.view.find(product_id)
        if product is None:
            raise ObjectNotFoundError(f"Product `{product_id}` is not in the current catalog")
        return self.submitter.select(product)

    async def confirm(self) -> SubmissionState:
        return await self.submitter.confirm()

    def cancel(self) -> None:
        self.submitter.cancel()

    async def acknowledge(self) -> None:
        await self.submitter.acknowledge()

    def drain_notices(self) -> list[Notice]:
        return self.notices.drain()

    def dismiss(self) -> None:
        """Leave the screen. Requests still in flight finish without visible effect."""
        self.loader.active = False
        self.notices.close()
        logger.info("Offers screen dismissed", user_id=self.user_id)
