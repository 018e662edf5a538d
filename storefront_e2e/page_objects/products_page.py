# storefront_e2e/page_objects/products_page.py

from typing import Optional

from selenium.webdriver.common.keys import Keys

from ..utils.wait_helpers import WaitResult
from .base_page import BasePage


class ProductsPage(BasePage):
    """Page Object for the product listing (/products)."""

    PATH = "/products"

    # --- Locators ---
    CONTAINER = '[data-testid="products-container"]'
    PRODUCT_CARD = '[data-testid="product-card"]'
    PRODUCT_NAME = '[data-testid="product-name"]'
    PRODUCT_PRICE = '[data-testid="product-price"]'
    ADD_TO_CART_BUTTON = '[data-testid="add-to-cart-button"]'
    VIEW_DETAILS_BUTTON = '[data-testid="view-details-button"]'
    SEARCH_INPUT = 'input[placeholder*="Search"]'
    SEARCH_BUTTON = '[data-testid="search-button"], .search-button'
    CATEGORY_SELECT = "select"
    LOADING_INDICATOR = ".loading, .spinner"

    def wait_for_products_to_load(self, timeout: Optional[float] = None):
        """Container visible and loading indicator gone."""
        self.commands.should_be_visible(self.CONTAINER, timeout)
        self.commands.wait_for_element_to_disappear(self.LOADING_INDICATOR, timeout)
        return self

    def product_cards(self) -> list:
        return self.commands.get_all(self.PRODUCT_CARD)

    def product_names(self) -> list:
        return [handle.text for handle in self.commands.get_all(self.PRODUCT_NAME)]

    def product_prices(self) -> list:
        """Prices parsed from the cards ("$999.99" -> 999.99); unparsable entries are skipped."""
        prices = []
        for handle in self.commands.get_all(self.PRODUCT_PRICE):
            cleaned = handle.text.replace("$", "").replace(",", "").strip()
            try:
                prices.append(float(cleaned))
            except ValueError:
                continue
        return prices

    def search(self, term: str, timeout: Optional[float] = None) -> WaitResult:
        """Types a search term, submits it, and waits until the card list changes or settles."""
        before = len(self.product_cards())
        search_input = self.commands.get(self.SEARCH_INPUT)
        search_input.type(term)
        buttons = self.commands.get_all(self.SEARCH_BUTTON)
        if buttons:
            buttons[0].click()
        else:
            search_input.type(Keys.ENTER, clear=False)
        return self.commands.wait_until(
            lambda c: len(self.product_cards()) != before or self._all_names_match(term), timeout
        )

    def _all_names_match(self, term: str) -> bool:
        names = self.product_names()
        return bool(names) and all(term.lower() in name.lower() for name in names)

    def filter_by_category(self, category: str):
        self.commands.select(self.CATEGORY_SELECT, category)

    def add_to_cart(self, index: int = 0, timeout: Optional[float] = None) -> WaitResult:
        """Clicks the index-th "Add to Cart" button and waits for the cart badge to change."""
        buttons = self.commands.get_all(self.ADD_TO_CART_BUTTON)
        if len(buttons) <= index:
            raise IndexError(f"Only {len(buttons)} add-to-cart buttons on the page, wanted #{index}")
        before = self.cart_item_count()
        buttons[index].click()
        return self.commands.wait_until(lambda c: c.get_cart_item_count() != before, timeout)

    def open_details(self, index: int = 0):
        buttons = self.commands.get_all(self.VIEW_DETAILS_BUTTON)
        if len(buttons) <= index:
            raise IndexError(f"Only {len(buttons)} product detail links on the page, wanted #{index}")
        buttons[index].click()
