# storefront_e2e/page_objects/cart_page.py

import re
from typing import Optional

from ..utils.wait_helpers import WaitResult
from .base_page import BasePage

_AMOUNT = re.compile(r"\d+(?:\.\d+)?")


class CartPage(BasePage):
    """Page Object for /cart."""

    PATH = "/cart"

    CONTAINER = '[data-testid="cart-container"], .cart-container'
    ITEM = '.cart-item, [data-testid="cart-item"]'
    QUANTITY_INPUT = 'input[type="number"]'
    REMOVE_BUTTON = 'button:contains("Remove")'
    CHECKOUT_BUTTON = 'button:contains("Checkout")'
    TOTAL_AMOUNT = '.total-amount, [data-testid="cart-total"]'
    EMPTY_MESSAGE = 'p:contains("empty")'

    def items(self) -> list:
        return self.commands.get_all(self.ITEM)

    def item_count(self) -> int:
        return len(self.items())

    def is_empty(self) -> bool:
        return self.item_count() == 0

    def set_quantity(self, index: int, quantity: int, timeout: Optional[float] = None) -> WaitResult:
        inputs = self.commands.get_all(self.QUANTITY_INPUT)
        if len(inputs) <= index:
            raise IndexError(f"Only {len(inputs)} quantity inputs in the cart, wanted #{index}")
        before = self.total()
        inputs[index].type(str(quantity))
        return self.commands.wait_until(lambda c: self.total() != before, timeout)

    def remove_item(self, index: int = 0, timeout: Optional[float] = None) -> WaitResult:
        buttons = self.commands.get_all(self.REMOVE_BUTTON)
        if len(buttons) <= index:
            raise IndexError(f"Only {len(buttons)} remove buttons in the cart, wanted #{index}")
        before = self.item_count()
        buttons[index].click()
        return self.commands.wait_until(lambda c: self.item_count() < before, timeout)

    def total(self) -> Optional[float]:
        """First amount in the cart total, None when no total is shown."""
        totals = self.commands.get_all(self.TOTAL_AMOUNT)
        if not totals:
            return None
        match = _AMOUNT.search((totals[0].text or "").replace(",", ""))
        return float(match.group(0)) if match else None

    def proceed_to_checkout(self, timeout: Optional[float] = None) -> WaitResult:
        self.commands.click(self.CHECKOUT_BUTTON)
        return self.commands.wait_for_url("/checkout", timeout=timeout)
