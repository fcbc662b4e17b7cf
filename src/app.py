"""OfferStream FastAPI application.

Headless backend-for-frontend for the buyer's Offers screen. Each buyer's
catalog view and order submission state lives in an OffersScreen held by
the API process; the remote inventory service is selected by
OFFERS_SERVICE_ADAPTER ("fake" or "http").

Usage:
    uvicorn app:app --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# PROTEAN_ENV selects the config overlay; the offers domain only needs the
# in-memory defaults.
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from offers.domain import offers
from offers.utils.logging import bind_screen_context, clear_screen_context
from protean.integrations.fastapi import register_exception_handlers

offers.init()

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="OfferStream API",
    description="Buyer offers — catalog view and order placement",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the Protean domain context for offers requests."""
    if request.url.path.startswith("/users/"):
        bind_screen_context(user_id=request.url.path.split("/")[2])
        try:
            with offers.domain_context():
                response = await call_next(request)
        finally:
            clear_screen_context()
        return response
    # Health check, docs, etc.
    return await call_next(request)


register_exception_handlers(app)

# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from offers.api import router as offers_router  # noqa: E402

app.include_router(offers_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": {
                "offers": {"name": offers.name},
            },
        }
    )
