# storefront_e2e/config/config.py

import os
from dataclasses import dataclass, field, replace

from dotenv import load_dotenv

# Pick up a local .env (BASE_URL, BROWSER, HEADLESS ...) before reading the environment
load_dotenv()

TRUTHY_VALUES = ("1", "true", "yes", "on")


def env_flag(name: str, default: bool = False) -> bool:
    """Reads a boolean environment variable ("1", "true", "yes", "on" are true)."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in TRUTHY_VALUES


def env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be a number, got {value!r}")


def env_int(name: str, default: int) -> int:
    return int(env_float(name, default))


# --- General Configuration ---
SUPPORTED_BROWSERS = ("chrome", "firefox")

# Named viewports used by the responsive layout tests (width, height)
VIEWPORTS = {
    "mobile": (375, 667),
    "tablet": (768, 1024),
    "desktop": (1920, 1080),
}


def read_session_settings() -> dict:
    """Session settings from the environment, with their defaults."""
    return {
        # Origin of the storefront under test
        "base_url": os.getenv("BASE_URL", "http://localhost:5005"),
        # Browser kind to launch (chrome, firefox)
        "browser": os.getenv("BROWSER", "chrome").lower(),
        # CI or HEADLESS forces a headless browser
        "headless": env_flag("CI") or env_flag("HEADLESS"),
        "window_width": env_int("WINDOW_WIDTH", 1920),
        "window_height": env_int("WINDOW_HEIGHT", 1080),
        # Implicit wait stays at 0 so find_elements reflects the DOM at query time;
        # all waiting goes through explicit polling.
        "implicit_wait": env_float("IMPLICIT_WAIT", 0),
        # Default explicit wait timeout for lookups and visibility checks (seconds)
        "explicit_wait": env_float("EXPLICIT_WAIT", 15),
        "page_load_timeout": env_float("PAGE_LOAD_TIMEOUT", 30),
        # Interval between two polls of a wait condition
        "poll_interval": env_float("POLL_INTERVAL", 0.25),
        # Failure screenshots land here
        "screenshot_dir": os.getenv("SCREENSHOT_DIR", os.path.join("reports", "screenshots")),
    }


_SETTINGS = read_session_settings()

BASE_URL = _SETTINGS["base_url"]
BROWSER = _SETTINGS["browser"]
HEADLESS = _SETTINGS["headless"]
WINDOW_WIDTH = _SETTINGS["window_width"]
WINDOW_HEIGHT = _SETTINGS["window_height"]
IMPLICIT_WAIT = _SETTINGS["implicit_wait"]
EXPLICIT_WAIT = _SETTINGS["explicit_wait"]
PAGE_LOAD_TIMEOUT = _SETTINGS["page_load_timeout"]
POLL_INTERVAL = _SETTINGS["poll_interval"]
SCREENSHOT_DIR = _SETTINGS["screenshot_dir"]

# Substring or regular expression selecting which tests run
GREP = os.getenv("GREP", "")

# --- Test Runner ---
# Per-test timeout and how many times a failed e2e test is re-run
TEST_TIMEOUT = env_float("TEST_TIMEOUT", 60)
TEST_RETRIES = env_int("TEST_RETRIES", 1)


@dataclass(frozen=True)
class SessionConfig:
    """Everything a browser session needs to start; injected into each session."""

    base_url: str = BASE_URL
    browser: str = BROWSER
    headless: bool = HEADLESS
    window_width: int = WINDOW_WIDTH
    window_height: int = WINDOW_HEIGHT
    implicit_wait: float = IMPLICIT_WAIT
    explicit_wait: float = EXPLICIT_WAIT
    page_load_timeout: float = PAGE_LOAD_TIMEOUT
    poll_interval: float = POLL_INTERVAL
    screenshot_dir: str = SCREENSHOT_DIR
    # Excluded from hashing so the frozen config stays hashable
    viewports: dict = field(default_factory=lambda: dict(VIEWPORTS), hash=False)

    def __post_init__(self):
        object.__setattr__(self, "browser", self.browser.lower())
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
        if self.browser not in SUPPORTED_BROWSERS:
            raise ValueError(
                f"Unsupported browser: {self.browser} (expected one of {', '.join(SUPPORTED_BROWSERS)})"
            )
        if self.window_width <= 0 or self.window_height <= 0:
            raise ValueError(f"Window size must be positive, got {self.window_width}x{self.window_height}")
        if self.implicit_wait < 0:
            raise ValueError("implicit_wait must not be negative")
        for name in ("explicit_wait", "page_load_timeout", "poll_interval"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")

    @classmethod
    def from_env(cls) -> "SessionConfig":
        """Builds a config from the current environment (not the values frozen at import)."""
        return cls(**read_session_settings())

    def with_overrides(self, **overrides) -> "SessionConfig":
        return replace(self, **overrides)

    def url_for(self, path: str) -> str:
        """Absolute URL for a storefront path; absolute URLs pass through unchanged."""
        if path.startswith(("http://", "https://")):
            return path
        if not path.startswith("/"):
            path = "/" + path
        return f"{self.base_url}{path}"

    def viewport(self, name: str) -> tuple:
        try:
            return self.viewports[name]
        except KeyError:
            raise ValueError(f"Unknown viewport: {name} (expected one of {', '.join(self.viewports)})")
