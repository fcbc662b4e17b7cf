import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def offers_bed():
    from offers.domain import offers

    bed = DomainFixture(offers)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(offers_bed):
    with offers_bed.domain_context():
        yield


@pytest.fixture()
def make_product():
    """Factory for Product value objects with sensible defaults."""
    from offers.catalogue.product import Product

    def _make(**overrides):
        data = {
            "product_id": "prod-001",
            "distributor_id": "dist-001",
            "product_name": "Basmati Rice 25kg",
            "category": "Grains",
            "price": 1450.0,
            "moq": 10,
            "payment_modes": ["UPI", "COD"],
            "lead_time": "2 days",
            "stock_quantity": 120,
            "service_areas": ["Pune", "Mumbai"],
            "enabled": True,
        }
        data.update(overrides)
        return Product(**data)

    return _make


@pytest.fixture()
def two_products(make_product):
    return [
        make_product(product_id="prod-001", product_name="Basmati Rice 25kg", moq=10, price=1450.0),
        make_product(
            product_id="prod-002",
            distributor_id="dist-002",
            product_name="Sunflower Oil 15L",
            category="Oils",
            moq=50,
            price=2100.0,
            payment_modes=["NEFT"],
        ),
    ]


@pytest.fixture()
def service(two_products):
    from offers.service.fake_adapter import FakeInventoryService

    return FakeInventoryService(products=two_products)
