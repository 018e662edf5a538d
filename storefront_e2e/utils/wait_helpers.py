# storefront_e2e/utils/wait_helpers.py

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable

from selenium.common.exceptions import (
    NoSuchElementException,
    StaleElementReferenceException,
    TimeoutException,
)
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from ..config.config import EXPLICIT_WAIT, POLL_INTERVAL
from ..core.exceptions import (
    ElementNotFoundError,
    StillPresentError,
    VisibilityTimeoutError,
)
from .selectors import describe

logger = logging.getLogger(__name__)

# DOM nodes can be replaced between find and inspect while the page re-renders
IGNORED_EXCEPTIONS = (NoSuchElementException, StaleElementReferenceException)


@dataclass(frozen=True)
class WaitResult:
    """Outcome of a condition poll: met or timed out, with the last value and elapsed seconds."""

    met: bool
    value: Any = None
    elapsed: float = 0.0

    def __bool__(self):
        return self.met


def poll_until(
    target,
    predicate: Callable[[Any], Any],
    timeout: float = EXPLICIT_WAIT,
    poll_interval: float = POLL_INTERVAL,
    ignored_exceptions=IGNORED_EXCEPTIONS,
) -> WaitResult:
    """
    Polls predicate(target) until it returns a truthy value or timeout elapses.

    Never raises on timeout: the caller decides what "not met" means.
    """
    started = time.monotonic()
    try:
        value = WebDriverWait(
            target, timeout, poll_frequency=poll_interval, ignored_exceptions=ignored_exceptions
        ).until(predicate)
    except TimeoutException:
        return WaitResult(met=False, value=None, elapsed=time.monotonic() - started)
    return WaitResult(met=True, value=value, elapsed=time.monotonic() - started)


def _visible_with_size(locator: tuple):
    """First matching element that is displayed and has a non-zero rendered size."""

    def _predicate(driver):
        for element in driver.find_elements(*locator):
            if not element.is_displayed():
                continue
            size = element.size or {}
            if size.get("width", 0) > 0 and size.get("height", 0) > 0:
                return element
        return False

    return _predicate


def _none_present(locator: tuple):
    def _predicate(driver):
        return len(driver.find_elements(*locator)) == 0

    return _predicate


def wait_for_elements_present(driver: WebDriver, locator: tuple, timeout: float = EXPLICIT_WAIT,
                              poll_interval: float = POLL_INTERVAL, selector=None):
    """Waits until at least one element matches; returns every match at that moment."""
    try:
        return WebDriverWait(
            driver, timeout, poll_frequency=poll_interval, ignored_exceptions=IGNORED_EXCEPTIONS
        ).until(EC.presence_of_all_elements_located(locator))
    except TimeoutException as exc:
        logger.warning("Timeout waiting for element located by %s to be present.", describe(locator))
        raise ElementNotFoundError(selector or locator, timeout) from exc


def wait_for_element_visible(driver: WebDriver, locator: tuple, timeout: float = EXPLICIT_WAIT,
                             poll_interval: float = POLL_INTERVAL, selector=None):
    """Waits for an element to be displayed with a non-zero size."""
    try:
        return WebDriverWait(
            driver, timeout, poll_frequency=poll_interval, ignored_exceptions=IGNORED_EXCEPTIONS
        ).until(_visible_with_size(locator))
    except TimeoutException as exc:
        logger.warning("Timeout waiting for element located by %s to be visible.", describe(locator))
        raise VisibilityTimeoutError(selector or locator, timeout) from exc


def wait_for_element_clickable(driver: WebDriver, mark, timeout: float = EXPLICIT_WAIT,
                               poll_interval: float = POLL_INTERVAL, selector=None):
    """Waits for an element (locator or already located WebElement) to be visible and enabled."""
    try:
        return WebDriverWait(
            driver, timeout, poll_frequency=poll_interval, ignored_exceptions=IGNORED_EXCEPTIONS
        ).until(EC.element_to_be_clickable(mark))
    except TimeoutException as exc:
        shown = selector if selector is not None else mark
        logger.warning("Timeout waiting for element %s to be clickable.", describe(shown))
        raise VisibilityTimeoutError(shown, timeout) from exc


def wait_for_text_in_element(driver: WebDriver, locator: tuple, text: str, timeout: float = EXPLICIT_WAIT,
                             poll_interval: float = POLL_INTERVAL) -> WaitResult:
    """Waits for specific text to be present in an element."""
    result = poll_until(driver, EC.text_to_be_present_in_element(locator, text), timeout, poll_interval)
    if not result.met:
        logger.info("Text %r did not appear in element located by %s.", text, describe(locator))
    return result


def wait_for_element_not_present(driver: WebDriver, locator: tuple, timeout: float = EXPLICIT_WAIT,
                                 poll_interval: float = POLL_INTERVAL, selector=None):
    """Waits until no element matches the locator."""
    try:
        WebDriverWait(
            driver, timeout, poll_frequency=poll_interval, ignored_exceptions=IGNORED_EXCEPTIONS
        ).until(_none_present(locator))
    except TimeoutException as exc:
        remaining = len(driver.find_elements(*locator))
        logger.warning("Timeout waiting for element located by %s to disappear.", describe(locator))
        raise StillPresentError(selector or locator, timeout, remaining) from exc
