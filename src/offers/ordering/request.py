"""Order request derivation — what gets sent to the inventory service on confirm.

An OrderRequest is never edited by the buyer. Every field is derived from
the selected Product and the requesting user:

- quantity is always the product's MOQ
- price is the unit price copied from the product at request time
- payment mode is the product's first accepted mode, else ``FALLBACK_PAYMENT_MODE``
- delivery address is ``DEFAULT_DELIVERY_ADDRESS``
"""

from dataclasses import dataclass

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Float, Integer, String

from offers.catalogue.product import PAYMENT_MODE_MAX_LENGTH, Product
from offers.domain import offers

FALLBACK_PAYMENT_MODE = "COD"

# Placeholder: there is no address-selection step yet, so every order ships
# to this fixed string. Replace once buyers can pick a delivery address.
DEFAULT_DELIVERY_ADDRESS = "Default Address"

CURRENCY_SYMBOL = "₹"


@offers.value_object
class OrderRequest:
    """Immutable payload for the inventory service's create-order operation."""

    user_id: String(required=True, max_length=100)
    distributor_id: String(required=True, max_length=100)
    product_id: String(required=True, max_length=100)
    product_name: String(required=True, max_length=255)
    quantity: Integer(required=True, min_value=1)
    price: Float(required=True, min_value=0.0)
    payment_mode: String(required=True, max_length=PAYMENT_MODE_MAX_LENGTH)
    delivery_address: String(required=True, max_length=500)

    @invariant.post
    def text_fields_must_not_be_blank(self):
        for name in ("user_id", "distributor_id", "product_id", "product_name", "payment_mode", "delivery_address"):
            value = getattr(self, name)
            if value is not None and not str(value).strip():
                raise ValidationError({name: [f"{name} must not be blank"]})


def default_payment_mode(product: Product) -> str:
    modes = product.payment_modes or []
    return modes[0] if modes else FALLBACK_PAYMENT_MODE


def build_order_request(product: Product, user_id: str) -> OrderRequest:
    """Derive the order request for ``product`` on behalf of ``user_id``."""
    return OrderRequest(
        user_id=user_id,
        distributor_id=product.distributor_id,
        product_id=product.product_id,
        product_name=product.product_name,
        quantity=product.moq,
        price=product.price,
        payment_mode=default_payment_mode(product),
        delivery_address=DEFAULT_DELIVERY_ADDRESS,
    )


def format_amount(amount: float) -> str:
    # 250.0 -> "250", 12.5 -> "12.5"
    amount = float(amount)
    if amount.is_integer():
        return str(int(amount))
    return f"{amount:.2f}".rstrip("0")


@dataclass(frozen=True)
class OrderSummary:
    """What the buyer is asked to confirm before an order is submitted."""

    product_id: str
    product_name: str
    price: float
    moq: int

    @classmethod
    def for_product(cls, product: Product) -> "OrderSummary":
        return cls(
            product_id=product.product_id,
            product_name=product.product_name,
            price=product.price,
            moq=product.moq,
        )

    @property
    def title(self) -> str:
        return "Place Order"

    @property
    def message(self) -> str:
        return (
            f"Order {self.product_name}?\n\n"
            f"Price: {CURRENCY_SYMBOL}{format_amount(self.price)}\n"
            f"MOQ: {self.moq} units"
        )
