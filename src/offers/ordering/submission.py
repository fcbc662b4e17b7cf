"""Order submission — the confirm-then-commit workflow for a single product.

State Machine (cyclic, one pass per submission):
    IDLE → CONFIRMING → SUBMITTING → SUCCEEDED → IDLE
                                   → FAILED    → IDLE
    CONFIRMING → IDLE (cancel)

Selecting a product captures it; the order request is built from that
captured product on confirm, so a catalog refresh in between cannot change
what gets submitted. Exactly one create-order call is made per confirm and
failures are never retried. Acknowledging a success hands control to the
``on_order_placed`` callback (the catalog reload); acknowledging a failure
does not.
"""

from collections.abc import Awaitable, Callable
from enum import Enum

import structlog
from protean.exceptions import ValidationError

from offers.catalogue.product import Product
from offers.notice.notice import Notice, NoticeBoard, NoticeKind
from offers.ordering.request import OrderSummary, build_order_request
from offers.service.port import InventoryService, OrderReceipt, ServiceError

logger = structlog.get_logger(__name__)

SUBMISSION_FAILURE_FALLBACK = "Failed to place order"


class SubmissionState(Enum):
    IDLE = "Idle"
    CONFIRMING = "Confirming"
    SUBMITTING = "Submitting"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"


_VALID_TRANSITIONS = {
    SubmissionState.IDLE: {SubmissionState.CONFIRMING},
    SubmissionState.CONFIRMING: {SubmissionState.SUBMITTING, SubmissionState.IDLE},
    SubmissionState.SUBMITTING: {SubmissionState.SUCCEEDED, SubmissionState.FAILED},
    SubmissionState.SUCCEEDED: {SubmissionState.IDLE},
    SubmissionState.FAILED: {SubmissionState.IDLE},
}


def order_placed_message(order_id: str) -> str:
    return f"Order placed successfully!\nOrder ID: {order_id}\n\nThe distributor will see it in their Orders tab."


class OrderSubmitter:
    """Drives one buyer's order submissions against the inventory service."""

    def __init__(
        self,
        user_id: str,
        service: InventoryService,
        notices: NoticeBoard,
        on_order_placed: Callable[[], Awaitable[object]] | None = None,
    ) -> None:
        if not user_id or not str(user_id).strip():
            raise ValidationError({"user_id": ["An order submitter needs the requesting user's id"]})

        self.user_id = str(user_id)
        self.service = service
        self.notices = notices
        self.on_order_placed = on_order_placed
        self.state = SubmissionState.IDLE
        self.product: Product | None = None
        self.receipt: OrderReceipt | None = None
        self.failure_reason: str | None = None

    def _transition(self, target: SubmissionState) -> None:
        if target not in _VALID_TRANSITIONS[self.state]:
            raise ValidationError({"state": [f"Cannot transition from {self.state.value} to {target.value}"]})
        self.state = target

    def select(self, product: Product) -> OrderSummary:
        """Start confirming an order for ``product``."""
        self._transition(SubmissionState.CONFIRMING)
        self.product = product
        logger.info("Order confirmation requested", product_id=product.product_id, user_id=self.user_id)
        return OrderSummary.for_product(product)

    def cancel(self) -> None:
        if self.state != SubmissionState.CONFIRMING:
            raise ValidationError({"state": [f"Cannot cancel in {self.state.value} state"]})
        self._transition(SubmissionState.IDLE)
        logger.info("Order confirmation cancelled", product_id=self.product.product_id, user_id=self.user_id)
        self.product = None

    async def confirm(self) -> SubmissionState:
        """Submit the order for the captured product.

        Returns the resulting state: SUCCEEDED or FAILED.
        """
        self._transition(SubmissionState.SUBMITTING)

        try:
            request = build_order_request(self.product, self.user_id)
            receipt = await self.service.create_order(request)
        except ServiceError as exc:
            self._fail(exc.message or SUBMISSION_FAILURE_FALLBACK)
        except Exception:
            # Whatever went wrong, the submission must leave SUBMITTING
            logger.exception("Order submission crashed", product_id=self.product.product_id, user_id=self.user_id)
            self._fail(SUBMISSION_FAILURE_FALLBACK)
        else:
            self.receipt = receipt
            self._transition(SubmissionState.SUCCEEDED)
            logger.info(
                "Order placed",
                order_id=receipt.order_id,
                product_id=request.product_id,
                quantity=request.quantity,
                payment_mode=request.payment_mode,
                user_id=self.user_id,
            )
            self.notices.post(
                Notice(kind=NoticeKind.ORDER_PLACED, title="Success", message=order_placed_message(receipt.order_id))
            )

        return self.state

    def _fail(self, reason: str) -> None:
        self.failure_reason = reason
        self._transition(SubmissionState.FAILED)
        logger.warning(
            "Order submission failed",
            product_id=self.product.product_id,
            user_id=self.user_id,
            error=reason,
        )
        self.notices.post(Notice(kind=NoticeKind.SUBMISSION_ERROR, title="Error", message=reason))

    async def acknowledge(self) -> None:
        """Dismiss the outcome of the last submission and return to IDLE.

        After a success the ``on_order_placed`` callback runs, strictly after
        the state has returned to IDLE.
        """
        if self.state not in (SubmissionState.SUCCEEDED, SubmissionState.FAILED):
            raise ValidationError({"state": [f"Nothing to acknowledge in {self.state.value} state"]})

        succeeded = self.state == SubmissionState.SUCCEEDED
        self._transition(SubmissionState.IDLE)
        self.product = None
        self.receipt = None
        self.failure_reason = None

        if succeeded and self.on_order_placed is not None:
            reloaded = await self.on_order_placed()
            if reloaded is False:
                logger.info("Catalog reload after order was skipped", user_id=self.user_id)
