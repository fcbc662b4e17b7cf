"""Offers domain API package."""

from offers.api.routes import router

__all__ = ["router"]
