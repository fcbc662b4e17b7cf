"""Inventory service factory.

Provides get_service() / set_service() to swap implementations:
- FakeInventoryService for development and testing (default)
- HttpInventoryService for a real deployment

The default adapter is chosen by the OFFERS_SERVICE_ADAPTER environment
variable ("fake" or "http").
"""

import os

from offers.service.port import InventoryService

_current_service: InventoryService | None = None


def get_service() -> InventoryService:
    """Return the current inventory service (singleton)."""
    global _current_service
    if _current_service is None:
        adapter = os.environ.get("OFFERS_SERVICE_ADAPTER", "fake")
        if adapter == "fake":
            from offers.service.fake_adapter import FakeInventoryService

            _current_service = FakeInventoryService()
        elif adapter == "http":
            from offers.service.http_adapter import HttpInventoryService

            _current_service = HttpInventoryService()
        else:
            raise ValueError(f"Unknown inventory service adapter: {adapter}")
    return _current_service


def set_service(service: InventoryService) -> None:
    """Override the active inventory service (useful for tests)."""
    global _current_service
    _current_service = service


def reset_service() -> None:
    """Reset to the default service."""
    global _current_service
    _current_service = None
