# storefront_e2e/core/element_handle.py

import functools
import logging

from selenium.common.exceptions import StaleElementReferenceException
from selenium.webdriver.common.keys import Keys

from ..utils.selectors import to_locator
from .exceptions import StaleElementHandleError

logger = logging.getLogger(__name__)


def _translate_stale(method):
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        self._check_fresh()
        try:
            return method(self, *args, **kwargs)
        except StaleElementReferenceException as exc:
            raise StaleElementHandleError(self.selector) from exc

    return wrapper


class ElementHandle:
    """
    Opaque reference to a located DOM node.

    Valid only until the session navigates (visit, reload, back, forward).
    Using it afterwards raises StaleElementHandleError.
    """

    def __init__(self, session, element, selector):
        self._session = session
        self._element = element
        self._generation = session.navigation_generation
        self.selector = selector

    def __repr__(self):
        return f"<ElementHandle {self.selector!r}>"

    @property
    def is_stale(self) -> bool:
        return self._generation != self._session.navigation_generation

    def _check_fresh(self):
        self._session._live_driver("element access")
        if self.is_stale:
            raise StaleElementHandleError(self.selector)

    @_translate_stale
    def click(self):
        self._element.click()

    @_translate_stale
    def type(self, text: str, clear: bool = True, submit: bool = False):
        if clear:
            self._element.clear()
        self._element.send_keys(text)
        if submit:
            self._element.send_keys(Keys.ENTER)

    @_translate_stale
    def clear(self):
        self._element.clear()

    @property
    @_translate_stale
    def text(self) -> str:
        return self._element.text

    @property
    @_translate_stale
    def tag_name(self) -> str:
        return self._element.tag_name

    @property
    @_translate_stale
    def rect(self) -> dict:
        """Bounding rectangle: {'x', 'y', 'width', 'height'}."""
        return self._element.rect

    @_translate_stale
    def get_attribute(self, name: str):
        return self._element.get_attribute(name)

    @_translate_stale
    def css_value(self, prop: str) -> str:
        return self._element.value_of_css_property(prop)

    @_translate_stale
    def is_displayed(self) -> bool:
        return self._element.is_displayed()

    @_translate_stale
    def is_enabled(self) -> bool:
        return self._element.is_enabled()

    @_translate_stale
    def find_all(self, selector) -> list:
        """Matches below this element (no waiting)."""
        locator = to_locator(selector)
        return [ElementHandle(self._session, element, selector) for element in self._element.find_elements(*locator)]

    def _native(self):
        # Unwrapped for execute_script arguments
        self._check_fresh()
        return self._element
