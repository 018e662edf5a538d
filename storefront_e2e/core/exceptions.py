# storefront_e2e/core/exceptions.py

"""Errors raised by the browser session manager and the command facade."""


class BrowserSessionError(Exception):
    """Base class for every error raised by storefront_e2e."""


class SessionStartError(BrowserSessionError):
    """The browser or its driver could not be launched."""

    def __init__(self, browser: str, reason: str):
        self.browser = browser
        self.reason = reason
        super().__init__(f"Could not start {browser} session: {reason}")


class InvalidSessionStateError(BrowserSessionError):
    """A facade call was made while the session was not Ready."""

    def __init__(self, state, operation: str = "command"):
        self.state = state
        self.operation = operation
        super().__init__(f"Cannot run {operation}: session is {state.value}, expected ready")


class ElementNotFoundError(BrowserSessionError):
    def __init__(self, selector, timeout: float):
        self.selector = selector
        self.timeout = timeout
        super().__init__(f"No element matched {selector!r} within {timeout}s")


class AmbiguousSelectorError(BrowserSessionError):
    """An exact-one lookup matched several elements."""

    def __init__(self, selector, count: int):
        self.selector = selector
        self.count = count
        super().__init__(f"Expected exactly one element for {selector!r}, found {count}")


class VisibilityTimeoutError(BrowserSessionError):
    def __init__(self, selector, timeout: float):
        self.selector = selector
        self.timeout = timeout
        super().__init__(f"Element {selector!r} was not visible within {timeout}s")


class StillPresentError(BrowserSessionError):
    def __init__(self, selector, timeout: float, count: int = None):
        self.selector = selector
        self.timeout = timeout
        self.count = count
        suffix = f" ({count} still matching)" if count else ""
        super().__init__(f"Element {selector!r} still present after {timeout}s{suffix}")


class StaleElementHandleError(BrowserSessionError):
    """An element handle was used after its page navigated away."""

    def __init__(self, selector):
        self.selector = selector
        super().__init__(f"Element handle for {selector!r} is stale (page navigated since lookup)")
