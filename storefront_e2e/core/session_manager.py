# storefront_e2e/core/session_manager.py

"""
Browser session lifecycle.

A BrowserSession moves through

    UNINITIALIZED -> STARTING -> READY -> TEARING_DOWN -> CLOSED

and only a READY session accepts commands. The WebDriver instance never
leaves this module's objects: tests talk to the browser through
``session.commands``.
"""

import logging
import os
import time
from contextlib import contextmanager
from enum import Enum
from typing import Optional

from ..config.config import SUPPORTED_BROWSERS, SessionConfig
from .commands import Commands
from .driver_factory import configure_driver, create_driver
from .exceptions import InvalidSessionStateError, SessionStartError

logger = logging.getLogger(__name__)


class SessionState(Enum):
    UNINITIALIZED = "uninitialized"
    STARTING = "starting"
    READY = "ready"
    TEARING_DOWN = "tearing_down"
    CLOSED = "closed"


class BrowserSession:
    """One browser process used by exactly one test."""

    def __init__(self, config: SessionConfig, browser: Optional[str] = None):
        self.config = config
        self.browser = (browser or config.browser).lower()
        self._state = SessionState.UNINITIALIZED
        self._driver = None
        self._commands = None
        self._navigation_generation = 0

    def __repr__(self):
        return f"<BrowserSession browser={self.browser} state={self._state.value}>"

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_ready(self) -> bool:
        return self._state is SessionState.READY

    @property
    def navigation_generation(self) -> int:
        """Incremented on every navigation; element handles from older generations are stale."""
        return self._navigation_generation

    @property
    def commands(self) -> Commands:
        self._live_driver("commands")
        if self._commands is None:
            self._commands = Commands(self)
        return self._commands

    def start(self):
        if self._state is not SessionState.UNINITIALIZED:
            raise InvalidSessionStateError(self._state, "start")

        self._state = SessionState.STARTING
        if self.browser not in SUPPORTED_BROWSERS:
            self._state = SessionState.CLOSED
            raise SessionStartError(self.browser, "unsupported browser kind")

        try:
            self._driver = create_driver(self.browser, self.config)
        except Exception as exc:
            self._state = SessionState.CLOSED
            logger.error("Failed to launch %s: %s", self.browser, exc)
            raise SessionStartError(self.browser, str(exc)) from exc

        try:
            configure_driver(self._driver, self.config)
        except Exception as exc:
            logger.error("Failed to configure %s, shutting it down: %s", self.browser, exc)
            self.close()
            raise SessionStartError(self.browser, f"configuration failed: {exc}") from exc

        self._state = SessionState.READY
        logger.info(
            "Session ready",
            extra={"extra_context": {"browser": self.browser, "base_url": self.config.base_url}},
        )
        return self

    def close(self):
        """Quits the browser. Safe on partially started sessions and when called twice."""
        if self._state in (SessionState.CLOSED, SessionState.TEARING_DOWN):
            return

        self._state = SessionState.TEARING_DOWN
        driver, self._driver = self._driver, None
        self._commands = None
        if driver is not None:
            try:
                # quit() closes every window and stops the driver process
                driver.quit()
            except Exception:
                logger.warning("Error while quitting %s driver", self.browser, exc_info=True)
        self._state = SessionState.CLOSED
        logger.info("Session closed", extra={"extra_context": {"browser": self.browser}})

    def save_screenshot(self, name: Optional[str] = None) -> str:
        driver = self._live_driver("save_screenshot")
        filename = name or f"screenshot-{int(time.time() * 1000)}.png"
        if not filename.endswith(".png"):
            filename += ".png"
        os.makedirs(self.config.screenshot_dir, exist_ok=True)
        path = os.path.join(self.config.screenshot_dir, filename)
        driver.save_screenshot(path)
        logger.info("Screenshot saved: %s", path)
        return path

    # --- Used by Commands / ElementHandle only ---

    def _live_driver(self, operation: str = "command"):
        if self._state is not SessionState.READY:
            raise InvalidSessionStateError(self._state, operation)
        return self._driver

    def _navigated(self):
        self._navigation_generation += 1

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False


def setup_browser(kind: Optional[str] = None, config: Optional[SessionConfig] = None) -> BrowserSession:
    """Launches a browser of the requested kind and returns a READY session."""
    config = config or SessionConfig.from_env()
    session = BrowserSession(config, kind)
    session.start()
    return session


def teardown(session: Optional[BrowserSession]):
    """Releases a session. Never raises; a second call is a no-op."""
    if session is None:
        return
    session.close()


@contextmanager
def browser_session(kind: Optional[str] = None, config: Optional[SessionConfig] = None):
    """Scoped acquisition: the session is torn down on every exit path."""
    session = BrowserSession(config or SessionConfig.from_env(), kind)
    try:
        session.start()
        yield session
    finally:
        teardown(session)
