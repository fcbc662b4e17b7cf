"""FastAPI routes for the Offers domain — catalog view and order placement.

Thin adapters that translate HTTP requests into buyer interaction events
on the user's OffersScreen.
"""

from fastapi import APIRouter, HTTPException
from protean.exceptions import ObjectNotFoundError

from offers.api.schemas import OffersViewResponse, OrderSummaryResponse
from offers.api.sessions import close_screen, get_screen

router = APIRouter(prefix="/users/{user_id}/offers", tags=["offers"])


@router.get("", response_model=OffersViewResponse)
async def view_offers(user_id: str) -> OffersViewResponse:
    screen = get_screen(user_id)
    await screen.mount()
    return OffersViewResponse.from_screen(screen)


@router.post("/refresh", response_model=OffersViewResponse)
async def refresh_offers(user_id: str) -> OffersViewResponse:
    screen = get_screen(user_id)
    await screen.refresh()
    return OffersViewResponse.from_screen(screen)


@router.post("/order/confirm", response_model=OffersViewResponse)
async def confirm_order(user_id: str) -> OffersViewResponse:
    screen = get_screen(user_id)
    await screen.confirm()
    return OffersViewResponse.from_screen(screen)


@router.post("/order/cancel", response_model=OffersViewResponse)
async def cancel_order(user_id: str) -> OffersViewResponse:
    screen = get_screen(user_id)
    screen.cancel()
    return OffersViewResponse.from_screen(screen)


@router.post("/order/acknowledge", response_model=OffersViewResponse)
async def acknowledge_order(user_id: str) -> OffersViewResponse:
    screen = get_screen(user_id)
    await screen.acknowledge()
    return OffersViewResponse.from_screen(screen)


@router.post("/{product_id}/order", response_model=OrderSummaryResponse)
async def place_order(user_id: str, product_id: str) -> OrderSummaryResponse:
    screen = get_screen(user_id)
    try:
        summary = screen.select(product_id)
    except ObjectNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return OrderSummaryResponse.from_summary(summary)


@router.delete("", status_code=204)
async def dismiss_offers(user_id: str) -> None:
    if not close_screen(user_id):
        raise HTTPException(status_code=404, detail=f"No open offers screen for user `{user_id}`")
