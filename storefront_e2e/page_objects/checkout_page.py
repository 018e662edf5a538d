# storefront_e2e/page_objects/checkout_page.py

from typing import Optional

from ..fixtures.storefront_data import PAYMENT_METHOD, SHIPPING_ADDRESS
from ..utils.wait_helpers import WaitResult
from .base_page import BasePage


class CheckoutPage(BasePage):
    """Page Object for /checkout."""

    PATH = "/checkout"

    # Shipping form inputs, keyed like SHIPPING_ADDRESS
    FIELDS = {
        "street": "#street",
        "city": "#city",
        "state": "#state",
        "zipCode": "#zipCode",
        "country": "#country",
    }
    PAYMENT_METHOD_SELECT = "#paymentMethod"
    PLACE_ORDER_BUTTON = 'button[type="submit"]'
    ORDER_CONFIRMATION = '[data-testid="order-confirmation"], .order-success'

    def fill_shipping_address(self, address: Optional[dict] = None):
        address = address or SHIPPING_ADDRESS
        for key, value in address.items():
            selector = self.FIELDS[key]
            # Country is a <select> on the storefront
            if key == "country":
                self.commands.select(selector, value)
            else:
                self.commands.type(selector, value)
        return self

    def choose_payment_method(self, method: str = PAYMENT_METHOD):
        self.commands.select(self.PAYMENT_METHOD_SELECT, method)
        return self

    def place_order(self, timeout: Optional[float] = None) -> WaitResult:
        """Submits the order; met once the browser left /checkout or a confirmation is shown."""
        self.commands.click(self.PLACE_ORDER_BUTTON)
        return self.commands.wait_until(
            lambda c: self.PATH not in c.current_url or c.exists(self.ORDER_CONFIRMATION), timeout
        )
