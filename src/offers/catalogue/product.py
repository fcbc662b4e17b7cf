"""Product value object — an orderable catalog entry sourced from the inventory service.

Products are read-only on the buyer side. The catalog only ever holds
enabled, in-stock products because the fetch itself is filtered; the
``is_orderable`` helper exists for adapters and tests, not for re-filtering.
"""

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, Float, Integer, List, String

from offers.domain import offers

PAYMENT_MODE_MAX_LENGTH = 50


@offers.value_object
class Product:
    """A distributor's product offer as seen by a buyer."""

    product_id: String(required=True, max_length=100)
    distributor_id: String(required=True, max_length=100)
    product_name: String(required=True, max_length=255)
    category: String(max_length=100)
    price: Float(required=True, min_value=0.0)
    moq: Integer(required=True, min_value=1)
    payment_modes: List(content_type=String, default=list)
    lead_time: String(max_length=100)
    stock_quantity: Integer(default=0, min_value=0)
    service_areas: List(content_type=String, default=list)
    enabled: Boolean(default=True)

    @invariant.post
    def payment_modes_must_be_usable(self):
        for mode in self.payment_modes or []:
            if not mode or not mode.strip():
                raise ValidationError({"payment_modes": ["Payment modes must not be blank"]})
            if len(mode) > PAYMENT_MODE_MAX_LENGTH:
                raise ValidationError(
                    {"payment_modes": [f"Payment modes must be at most {PAYMENT_MODE_MAX_LENGTH} characters"]}
                )

    @property
    def is_orderable(self) -> bool:
        return bool(self.enabled) and (self.stock_quantity or 0) > 0

    @classmethod
    def from_payload(cls, payload: dict) -> "Product":
        """Build a Product from an inventory service record, ignoring unknown keys.

        The service identifies products by ``id``; it is carried as ``product_id``.
        """
        known = {
            "product_id",
            "distributor_id",
            "product_name",
            "category",
            "price",
            "moq",
            "payment_modes",
            "lead_time",
            "stock_quantity",
            "service_areas",
            "enabled",
        }
        data = {key: value for key, value in payload.items() if key in known and value is not None}
        if "id" in payload and "product_id" not in data:
            data["product_id"] = str(payload["id"])
        if "distributor_id" in data:
            data["distributor_id"] = str(data["distributor_id"])
        return cls(**data)
