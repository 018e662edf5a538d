# e2e/tests/test_checkout_flow.py

import pytest

from storefront_e2e.fixtures.storefront_data import SHIPPING_ADDRESS

pytestmark = pytest.mark.e2e


def test_checkout_places_order(commands, products_page, cart_page, checkout_page):
    """Logged-in user adds a product, checks out and places the order."""
    # --- Arrange ---
    if not commands.login_as_test_user().met:
        pytest.skip("Test user could not log in on this storefront")
    products_page.open().wait_for_products_to_load()
    products_page.add_to_cart(0)

    # --- Act ---
    cart_page.open()
    if cart_page.is_empty():
        pytest.skip("Cart page shows no items")
    assert cart_page.proceed_to_checkout().met, "Checkout button did not lead to /checkout"

    checkout_page.fill_shipping_address(SHIPPING_ADDRESS)
    if commands.exists(checkout_page.PAYMENT_METHOD_SELECT):
        checkout_page.choose_payment_method()
    result = checkout_page.place_order()

    # --- Assert ---
    assert result.met, f"Order not confirmed, still on {commands.current_url}"


def test_checkout_requires_login(commands):
    commands.visit("/checkout")

    # Anonymous visitors are redirected to /login
    assert commands.wait_for_url("/login", timeout=10).met


def test_checkout_validates_empty_address(commands, products_page, cart_page, checkout_page):
    if not commands.login_as_test_user().met:
        pytest.skip("Test user could not log in on this storefront")
    products_page.open().wait_for_products_to_load()
    products_page.add_to_cart(0)
    checkout_page.open()

    commands.click(checkout_page.PLACE_ORDER_BUTTON)

    assert commands.count("input:invalid") > 0
    commands.should_have_url("/checkout")
