# storefront_e2e/page_objects/base_page.py

from typing import Optional

from ..core.commands import CART_BADGE, USER_GREETING, Commands
from ..utils.wait_helpers import WaitResult


class BasePage:
    """Base class for all Page Objects. Talks to the browser only through Commands."""

    # Path of the page relative to BASE_URL
    PATH = "/"

    # --- Header (present on every page) ---
    HOME_LINK = '[data-testid="home-link"]'
    PRODUCTS_LINK = '[data-testid="products-link"]'
    CART_LINK = '[data-testid="cart-link"]'
    ORDERS_LINK = '[data-testid="orders-link"]'
    LOGIN_LINK = '[data-testid="login-link"]'
    SIGNUP_LINK = '[data-testid="signup-link"]'
    CART_BADGE = CART_BADGE
    USER_GREETING = USER_GREETING

    def __init__(self, commands: Commands):
        self.commands = commands

    def open(self, path: Optional[str] = None):
        """Navigates to the page (or another path) and returns self for chaining."""
        self.commands.visit(path or self.PATH)
        return self

    def is_current(self) -> bool:
        return self.PATH in self.commands.current_url

    def wait_until_loaded(self, timeout: Optional[float] = None) -> WaitResult:
        return self.commands.wait_for_url(self.PATH, timeout=timeout)

    # --- Header helpers ---

    def cart_item_count(self) -> int:
        return self.commands.get_cart_item_count()

    def greeting(self) -> str:
        greetings = self.commands.get_all(self.USER_GREETING)
        return greetings[0].text if greetings else ""

    def go_to_cart(self):
        self.commands.click(self.CART_LINK)

    def go_to_products(self):
        self.commands.click(self.PRODUCTS_LINK)

    def logout(self) -> bool:
        return self.commands.logout()
