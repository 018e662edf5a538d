# storefront_e2e/__init__.py

"""Browser session manager and command facade for storefront end-to-end tests."""

from .config.config import SessionConfig
from .core.commands import Commands, Match
from .core.exceptions import (
    AmbiguousSelectorError,
    BrowserSessionError,
    ElementNotFoundError,
    InvalidSessionStateError,
    SessionStartError,
    StaleElementHandleError,
    StillPresentError,
    VisibilityTimeoutError,
)
from .core.session_manager import BrowserSession, SessionState, browser_session, setup_browser, teardown
from .utils.wait_helpers import WaitResult

__version__ = "0.1.0"

__all__ = [
    "AmbiguousSelectorError",
    "BrowserSession",
    "BrowserSessionError",
    "Commands",
    "ElementNotFoundError",
    "InvalidSessionStateError",
    "Match",
    "SessionConfig",
    "SessionStartError",
    "SessionState",
    "StaleElementHandleError",
    "StillPresentError",
    "VisibilityTimeoutError",
    "WaitResult",
    "browser_session",
    "setup_browser",
    "teardown",
]
