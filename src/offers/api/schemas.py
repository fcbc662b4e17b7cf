"""Pydantic response schemas for the Offers API.

These are external contracts (anti-corruption layer) — separate from the
internal Protean value objects and screen state.
"""

from pydantic import BaseModel, Field

from offers.catalogue.product import Product
from offers.notice.notice import Notice
from offers.ordering.request import OrderSummary
from offers.screen import OffersScreen


class ProductSchema(BaseModel):
    id: str
    distributor_id: str
    product_name: str
    category: str | None = None
    price: float = Field(ge=0)
    moq: int = Field(ge=1)
    payment_modes: list[str] = Field(default_factory=list)
    lead_time: str | None = None
    stock_quantity: int = Field(ge=0)
    service_areas: list[str] = Field(default_factory=list)

    @classmethod
    def from_product(cls, product: Product) -> "ProductSchema":
        return cls(
            id=product.product_id,
            distributor_id=product.distributor_id,
            product_name=product.product_name,
            category=product.category,
            price=product.price,
            moq=product.moq,
            payment_modes=list(product.payment_modes or []),
            lead_time=product.lead_time,
            stock_quantity=product.stock_quantity or 0,
            service_areas=list(product.service_areas or []),
        )


class NoticeSchema(BaseModel):
    kind: str
    title: str
    message: str

    @classmethod
    def from_notice(cls, notice: Notice) -> "NoticeSchema":
        return cls(kind=notice.kind.value, title=notice.title, message=notice.message)


class OffersViewResponse(BaseModel):
    user_id: str
    products: list[ProductSchema]
    loading: bool
    refreshing: bool
    is_empty: bool
    empty_title: str | None = None
    empty_message: str | None = None
    submission_state: str
    notices: list[NoticeSchema] = Field(default_factory=list)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "user_id": "USER001",
                    "products": [
                        {
                            "id": "prod-001",
                            "distributor_id": "dist-001",
                            "product_name": "Basmati Rice 25kg",
                            "category": "Grains",
                            "price": 1450.0,
                            "moq": 10,
                            "payment_modes": ["UPI", "COD"],
                            "lead_time": "2 days",
                            "stock_quantity": 120,
                            "service_areas": ["Pune"],
                        }
                    ],
                    "loading": False,
                    "refreshing": False,
                    "is_empty": False,
                    "empty_title": None,
                    "empty_message": None,
                    "submission_state": "Idle",
                    "notices": [],
                }
            ]
        }
    }

    @classmethod
    def from_screen(cls, screen: OffersScreen) -> "OffersViewResponse":
        view = screen.view
        return cls(
            user_id=screen.user_id,
            products=[ProductSchema.from_product(p) for p in view.products],
            loading=view.loading,
            refreshing=view.refreshing,
            is_empty=view.is_empty,
            empty_title=view.empty_title,
            empty_message=view.empty_message,
            submission_state=screen.submission_state.value,
            notices=[NoticeSchema.from_notice(n) for n in screen.drain_notices()],
        )


class OrderSummaryResponse(BaseModel):
    product_id: str
    product_name: str
    price: float
    moq: int
    title: str
    message: str

    @classmethod
    def from_summary(cls, summary: OrderSummary) -> "OrderSummaryResponse":
        return cls(
            product_id=summary.product_id,
            product_name=summary.product_name,
            price=summary.price,
            moq=summary.moq,
            title=summary.title,
            message=summary.message,
        )
