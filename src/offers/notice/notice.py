"""One-shot notices shown to the buyer.

Failures and order confirmations are never kept in view state. They are
posted to a NoticeBoard and handed to the presenter exactly once when it
drains the board. A closed board (the screen was dismissed) drops posts.
"""

from dataclasses import dataclass
from enum import Enum

import structlog

logger = structlog.get_logger(__name__)


class NoticeKind(Enum):
    FETCH_ERROR = "Fetch_Error"
    SUBMISSION_ERROR = "Submission_Error"
    ORDER_PLACED = "Order_Placed"


@dataclass(frozen=True)
class Notice:
    kind: NoticeKind
    title: str
    message: str

    @property
    def is_error(self) -> bool:
        return self.kind in (NoticeKind.FETCH_ERROR, NoticeKind.SUBMISSION_ERROR)


class NoticeBoard:
    """Queue of pending notices for one screen."""

    def __init__(self) -> None:
        self._pending: list[Notice] = []
        self.closed = False

    def post(self, notice: Notice) -> None:
        if self.closed:
            logger.debug("Dropping notice for dismissed screen", kind=notice.kind.value)
            return
        self._pending.append(notice)

    def peek(self) -> tuple[Notice, ...]:
        return tuple(self._pending)

    def drain(self) -> list[Notice]:
        """Return pending notices in posting order and forget them."""
        notices, self._pending = self._pending, []
        return notices

    def close(self) -> None:
        self.closed = True
        self._pending.clear()
