"""Shared BDD fixtures and step definitions for the Offers domain."""

import asyncio

import pytest
from offers.notice.notice import NoticeKind
from offers.screen import OffersScreen
from offers.service.fake_adapter import FakeInventoryService
from pytest_bdd import given, parsers, then, when

BUYER_ID = "USER-BDD"


@pytest.fixture()
def inventory():
    return FakeInventoryService()


@pytest.fixture()
def ctx():
    """Mutable scenario context shared between steps."""
    return {}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('the inventory service offers product "{product_id}" with MOQ {moq:d}'))
def offer_product(inventory, make_product, product_id, moq):
    inventory.products.append(make_product(product_id=product_id, product_name=f"Product {product_id}", moq=moq))


@given(
    parsers.cfparse('the inventory service offers product "{product_id}" with MOQ {moq:d} and no payment modes')
)
def offer_product_without_payment_modes(inventory, make_product, product_id, moq):
    inventory.products.append(make_product(product_id=product_id, moq=moq, payment_modes=[]))


@given(parsers.cfparse('the inventory service has a disabled product "{product_id}"'))
def add_disabled_product(inventory, make_product, product_id):
    inventory.products.append(make_product(product_id=product_id, enabled=False))


@given(parsers.cfparse('the inventory service has an out-of-stock product "{product_id}"'))
def add_out_of_stock_product(inventory, make_product, product_id):
    inventory.products.append(make_product(product_id=product_id, stock_quantity=0))


@given(parsers.cfparse('the inventory service will assign order id "{order_id}"'))
def assign_next_order_id(inventory, order_id):
    inventory.next_order_id = order_id


@given(parsers.cfparse('the inventory service rejects orders with "{reason}"'))
def reject_orders(inventory, reason):
    inventory.order_should_succeed = False
    inventory.order_failure_reason = reason


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when("the buyer opens the offers screen", target_fixture="screen")
def open_offers_screen(inventory, ctx):
    screen = OffersScreen(user_id=BUYER_ID, service=inventory)
    asyncio.run(screen.mount())
    ctx["products_after_mount"] = screen.view.products
    return screen


@when("the inventory service becomes unavailable")
def make_service_unavailable(inventory):
    inventory.fetch_should_succeed = False
    inventory.fetch_failure_reason = "Service unavailable"


@when("the buyer refreshes the offers")
def refresh_offers(screen):
    asyncio.run(screen.refresh())


@when(parsers.cfparse('the buyer chooses to order "{product_id}"'))
def choose_product(screen, ctx, product_id):
    ctx["summary"] = screen.select(product_id)


@when("the buyer cancels the confirmation")
def cancel_confirmation(screen):
    screen.cancel()


@when(parsers.cfparse('the buyer places an order for "{product_id}"'))
def place_order(screen, product_id):
    screen.select(product_id)
    asyncio.run(screen.confirm())


@when("the buyer acknowledges the outcome")
def acknowledge_outcome(screen):
    asyncio.run(screen.acknowledge())


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the screen shows {count:d} products"))
def screen_shows_products(screen, count):
    assert len(screen.view.products) == count


@then("every listed product is enabled and in stock")
def listed_products_are_orderable(screen):
    assert all(p.enabled and p.stock_quantity > 0 for p in screen.view.products)


@then(parsers.cfparse('the empty state says "{title}"'))
def empty_state_shown(screen, title):
    assert screen.view.is_empty
    assert not screen.view.loading
    assert screen.view.empty_title == title
    assert screen.view.empty_message == "Products will appear here when distributors add them"


@then("no notice is shown")
def no_notice_shown(screen):
    assert screen.drain_notices() == []


@then(parsers.cfparse('an error notice says "{message}"'))
def error_notice_says(screen, message):
    notices = screen.drain_notices()
    assert len(notices) == 1
    assert notices[0].is_error
    assert notices[0].message == message


@then(parsers.cfparse('a success notice mentions "{text}"'))
def success_notice_mentions(screen, text):
    notices = screen.drain_notices()
    assert [n.kind for n in notices] == [NoticeKind.ORDER_PLACED]
    assert text in notices[0].message


@then(parsers.cfparse('the confirmation mentions "{text}"'))
def confirmation_mentions(ctx, text):
    assert text in ctx["summary"].message


@then("no order was submitted")
def no_order_submitted(inventory):
    assert inventory.calls_to("create_order") == []


@then(parsers.cfparse('the submitted order has payment mode "{mode}"'))
def submitted_payment_mode(inventory, mode):
    assert inventory.calls_to("create_order")[-1]["request"]["payment_mode"] == mode


@then(parsers.cfparse("the submitted order has quantity {quantity:d}"))
def submitted_quantity(inventory, quantity):
    assert inventory.calls_to("create_order")[-1]["request"]["quantity"] == quantity


@then("the catalog is unchanged")
def catalog_unchanged(screen, ctx):
    assert screen.view.products == ctx["products_after_mount"]


@then(parsers.cfparse("the catalog was fetched {count:d} times"))
def catalog_fetch_count(inventory, count):
    assert len(inventory.calls_to("fetch_products")) == count
