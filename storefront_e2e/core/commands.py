# storefront_e2e/core/commands.py

import logging
import re
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Optional

from selenium.common.exceptions import NoSuchElementException
from selenium.webdriver.common.by import By
from selenium.webdriver.support.select import Select

from ..fixtures.storefront_data import UserCredentials, default_test_user
from ..utils.selectors import to_locator
from ..utils.wait_helpers import (
    IGNORED_EXCEPTIONS,
    WaitResult,
    poll_until,
    wait_for_element_clickable,
    wait_for_element_not_present,
    wait_for_element_visible,
    wait_for_elements_present,
)
from .element_handle import ElementHandle
from .exceptions import AmbiguousSelectorError, StaleElementHandleError

logger = logging.getLogger(__name__)

BODY = (By.TAG_NAME, "body")

# --- Header locators shared by every page ---
CART_BADGE = '[data-testid="cart-badge"]'
USER_GREETING = '[data-testid="user-greeting"]'
LOGOUT_BUTTON = '[data-testid="logout-button"]'
HEADER_LOGOUT_BUTTON = '//header//button[contains(normalize-space(.), "Logout")]'

# --- Auth form locators ---
EMAIL_INPUT = "#email"
PASSWORD_INPUT = "#password"
FIRST_NAME_INPUT = "#firstName"
LAST_NAME_INPUT = "#lastName"
SUBMIT_BUTTON = 'button[type="submit"]'

CLEAR_STORAGE_SCRIPT = """
try {
  if (typeof localStorage !== 'undefined') { localStorage.clear(); }
  if (typeof sessionStorage !== 'undefined') { sessionStorage.clear(); }
  return true;
} catch (e) {
  return false;
}
"""

_LEADING_INT = re.compile(r"\s*(\d+)")


@dataclass(frozen=True)
class Match:
    """First element for a selector, tagged with how many elements matched."""

    handle: ElementHandle
    count: int

    @property
    def ambiguous(self) -> bool:
        return self.count > 1


class Commands:
    """
    High-level browser actions over one READY session.

    Selectors are CSS by default, XPath when they start with "/", "./" or "(",
    and 'tag:contains("text")' matches by visible text. Timeouts are seconds
    and default to the session's explicit wait. Nothing here retries: a
    failure surfaces as an exception to the test.
    """

    def __init__(self, session):
        self._session = session
        self.config = session.config

    def _browser(self, operation: str):
        return self._session._live_driver(operation)

    def _timeout(self, timeout: Optional[float]) -> float:
        return self.config.explicit_wait if timeout is None else timeout

    # --- Navigation ---

    def visit(self, path: str = "/"):
        """Navigates to base_url + path (absolute URLs are used as given)."""
        driver = self._browser("visit")
        url = self.config.url_for(path)
        logger.debug("visit %s", url)
        driver.get(url)
        self._session._navigated()
        wait_for_elements_present(driver, BODY, self.config.page_load_timeout, self.config.poll_interval)

    def reload(self):
        driver = self._browser("reload")
        driver.refresh()
        self._session._navigated()
        wait_for_elements_present(driver, BODY, self.config.page_load_timeout, self.config.poll_interval)

    def go_back(self):
        self._browser("go_back").back()
        self._session._navigated()

    def go_forward(self):
        self._browser("go_forward").forward()
        self._session._navigated()

    @property
    def current_url(self) -> str:
        return self._browser("current_url").current_url

    @property
    def title(self) -> str:
        return self._browser("title").title

    # --- Lookup ---

    def get_first(self, selector, timeout: Optional[float] = None) -> Match:
        """Polls until something matches; returns the first match and the match count."""
        driver = self._browser("get")
        timeout = self._timeout(timeout)
        elements = wait_for_elements_present(
            driver, to_locator(selector), timeout, self.config.poll_interval, selector=selector
        )
        return Match(handle=ElementHandle(self._session, elements[0], selector), count=len(elements))

    def get(self, selector, timeout: Optional[float] = None) -> ElementHandle:
        """First match, waiting up to timeout. Several matches are not an error here."""
        match = self.get_first(selector, timeout)
        if match.ambiguous:
            logger.debug("%r matched %d elements, using the first", selector, match.count)
        return match.handle

    def get_one(self, selector, timeout: Optional[float] = None) -> ElementHandle:
        """Like get, but several matches raise AmbiguousSelectorError."""
        match = self.get_first(selector, timeout)
        if match.ambiguous:
            raise AmbiguousSelectorError(selector, match.count)
        return match.handle

    def get_all(self, selector, within: Optional[ElementHandle] = None) -> list:
        """Every current match, without waiting. Empty list when nothing matches."""
        if within is not None:
            return within.find_all(selector)
        driver = self._browser("get_all")
        elements = driver.find_elements(*to_locator(selector))
        return [ElementHandle(self._session, element, selector) for element in elements]

    def exists(self, selector) -> bool:
        return len(self.get_all(selector)) > 0

    def count(self, selector) -> int:
        return len(self.get_all(selector))

    def _lookup(self, selector, timeout: Optional[float], exact: bool) -> ElementHandle:
        if exact:
            return self.get_one(selector, timeout)
        return self.get(selector, timeout)

    # --- Interaction ---

    def click(self, selector, timeout: Optional[float] = None, exact: bool = False):
        """Clicks the element once it is visible and enabled. First match unless exact=True."""
        driver = self._browser("click")
        timeout = self._timeout(timeout)
        deadline = time.monotonic() + timeout
        handle = self._lookup(selector, timeout, exact)
        remaining = max(deadline - time.monotonic(), self.config.poll_interval)
        wait_for_element_clickable(driver, handle._native(), remaining, self.config.poll_interval, selector=selector)
        logger.debug("click %r", selector)
        handle.click()

    def type(self, selector, text: str, clear: bool = True, submit: bool = False,
             exact: bool = False, timeout: Optional[float] = None):
        handle = self._lookup(selector, timeout, exact)
        logger.debug("type into %r", selector)
        handle.type(text, clear=clear, submit=submit)

    def clear(self, selector, timeout: Optional[float] = None):
        self.get(selector, timeout).clear()

    def select(self, selector, value: str, timeout: Optional[float] = None):
        """Chooses a <select> option by value, falling back to its visible text."""
        dropdown = Select(self.get(selector, timeout)._native())
        try:
            dropdown.select_by_value(value)
        except NoSuchElementException:
            dropdown.select_by_visible_text(value)

    # --- Reading ---

    def text(self, selector, timeout: Optional[float] = None) -> str:
        return self.get(selector, timeout).text

    def attribute(self, selector, name: str, timeout: Optional[float] = None):
        return self.get(selector, timeout).get_attribute(name)

    def css_value(self, selector, prop: str, timeout: Optional[float] = None) -> str:
        return self.get(selector, timeout).css_value(prop)

    def rect(self, selector, timeout: Optional[float] = None) -> dict:
        return self.get(selector, timeout).rect

    def body_text(self) -> str:
        return self.get(BODY).text

    def execute_script(self, script: str, *args):
        driver = self._browser("execute_script")
        native_args = [arg._native() if isinstance(arg, ElementHandle) else arg for arg in args]
        return driver.execute_script(script, *native_args)

    # --- Waiting ---

    def should_be_visible(self, selector, timeout: Optional[float] = None) -> ElementHandle:
        """Waits for a match that is displayed with a non-zero size."""
        driver = self._browser("should_be_visible")
        element = wait_for_element_visible(
            driver, to_locator(selector), self._timeout(timeout), self.config.poll_interval, selector=selector
        )
        return ElementHandle(self._session, element, selector)

    def wait_for_element_to_disappear(self, selector, timeout: Optional[float] = None):
        """Waits until nothing matches; StillPresentError otherwise."""
        driver = self._browser("wait_for_element_to_disappear")
        wait_for_element_not_present(
            driver, to_locator(selector), self._timeout(timeout), self.config.poll_interval, selector=selector
        )

    def wait_until(self, predicate: Callable[["Commands"], object], timeout: Optional[float] = None,
                   poll_interval: Optional[float] = None) -> WaitResult:
        """
        Polls predicate(commands) until it returns something truthy.

        Returns a WaitResult instead of raising, so callers can tell
        "condition met" from "timed out".
        """
        self._browser("wait_until")
        return poll_until(
            self,
            predicate,
            self._timeout(timeout),
            poll_interval or self.config.poll_interval,
            ignored_exceptions=IGNORED_EXCEPTIONS + (StaleElementHandleError,),
        )

    def wait_for_url(self, fragment: str, present: bool = True, timeout: Optional[float] = None) -> WaitResult:
        """Waits until the current URL contains (or, with present=False, no longer contains) fragment."""
        return self.wait_until(lambda c: (fragment in c.current_url) == present, timeout)

    def wait(self, seconds: float):
        """
        Sleeps unconditionally for at least ``seconds``.

        Fixed sleeps are what makes tests flaky; prefer wait_until or one of
        the element waits.
        """
        self._browser("wait")
        logger.warning("Unconditional wait of %.2fs", seconds)
        deadline = time.monotonic() + seconds
        remaining = seconds
        while remaining > 0:
            time.sleep(remaining)
            remaining = deadline - time.monotonic()

    # --- Assertions ---

    def should_contain(self, selector, text: str):
        actual = self.text(selector)
        assert text in actual, f"Expected {selector!r} to contain {text!r}, got {actual!r}"

    def should_have_value(self, selector, expected: str):
        actual = self.attribute(selector, "value")
        assert actual == expected, f"Expected {selector!r} to have value {expected!r}, got {actual!r}"

    def should_have_url(self, expected: str):
        """Paths ("/cart") must be contained in the URL; full URLs must match exactly."""
        actual = self.current_url
        if expected.startswith("/"):
            assert expected in actual, f"Expected URL to include {expected!r}, got {actual!r}"
        else:
            assert actual == expected, f"Expected URL {expected!r}, got {actual!r}"

    def should_not_have_url(self, fragment: str):
        actual = self.current_url
        assert fragment not in actual, f"Expected URL not to include {fragment!r}, got {actual!r}"

    # --- Storefront compositions ---

    def get_cart_item_count(self) -> int:
        """Number shown on the header cart badge; 0 when there is no badge or it is not a number."""
        badges = self.get_all(CART_BADGE)
        if not badges:
            return 0
        match = _LEADING_INT.match(badges[0].text or "")
        return int(match.group(1)) if match else 0

    def is_authenticated(self) -> bool:
        return self.exists(USER_GREETING) or self.exists(LOGOUT_BUTTON)

    def login_as_test_user(self, email: Optional[str] = None, password: Optional[str] = None,
                           timeout: Optional[float] = None) -> WaitResult:
        """
        Logs in through the /login form.

        Credentials left as None default to the shared test user; empty
        strings are typed as given. The result is met once the browser left
        /login or the user greeting appeared.
        """
        user = default_test_user()
        self.visit("/login")
        self.type(EMAIL_INPUT, user.email if email is None else email)
        self.type(PASSWORD_INPUT, user.password if password is None else password)
        self.click(SUBMIT_BUTTON)

        result = self.wait_until(
            lambda c: "/login" not in c.current_url or c.exists(USER_GREETING), timeout
        )
        if not result.met:
            logger.info("Login did not leave /login within %.1fs", result.elapsed)
        return result

    def logout(self) -> bool:
        """Clicks the logout button; returns False when the page has none."""
        for selector in (LOGOUT_BUTTON, HEADER_LOGOUT_BUTTON):
            if self.exists(selector):
                self.click(selector)
                self.wait_for_element_to_disappear(selector)
                return True
        logger.info("No logout button found")
        return False

    def register_new_user(self, user: UserCredentials, timeout: Optional[float] = None) -> WaitResult:
        """Fills the /signup form; met once the browser left /signup."""
        self.visit("/signup")
        if user.first_name and self.exists(FIRST_NAME_INPUT):
            self.type(FIRST_NAME_INPUT, user.first_name)
        if user.last_name and self.exists(LAST_NAME_INPUT):
            self.type(LAST_NAME_INPUT, user.last_name)
        self.type(EMAIL_INPUT, user.email)
        self.type(PASSWORD_INPUT, user.password)
        self.click(SUBMIT_BUTTON)
        return self.wait_for_url("/signup", present=False, timeout=timeout)

    def clear_all_storage(self) -> bool:
        """Clears localStorage and sessionStorage; skipped on about:blank and data: pages."""
        url = self.current_url
        if url.startswith("data:") or url == "about:blank":
            logger.debug("Skipping storage clear on %s", url)
            return False
        cleared = bool(self.execute_script(CLEAR_STORAGE_SCRIPT))
        if not cleared:
            logger.warning("Storage access blocked on %s", url)
        return cleared

    # --- Window ---

    def set_window_size(self, width: int, height: int):
        self._browser("set_window_size").set_window_size(width, height)

    @contextmanager
    def viewport(self, name: str):
        """Temporarily resizes the window to a named viewport (mobile, tablet, desktop)."""
        width, height = self.config.viewport(name)
        self.set_window_size(width, height)
        try:
            yield self
        finally:
            if self._session.is_ready:
                self.set_window_size(self.config.window_width, self.config.window_height)

    def take_screenshot(self, name: Optional[str] = None) -> str:
        return self._session.save_screenshot(name)
