# test/unit/test_config.py

import pytest

from storefront_e2e.config import config as config_module
from storefront_e2e.config.config import SessionConfig, env_flag, env_float


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("BASE_URL", "BROWSER", "CI", "HEADLESS", "WINDOW_WIDTH", "WINDOW_HEIGHT",
                 "EXPLICIT_WAIT", "IMPLICIT_WAIT", "PAGE_LOAD_TIMEOUT", "POLL_INTERVAL", "SCREENSHOT_DIR"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_from_env_defaults(clean_env):
    config = SessionConfig.from_env()

    assert config.base_url == "http://localhost:5005"
    assert config.browser == "chrome"
    assert config.headless is False
    assert (config.window_width, config.window_height) == (1920, 1080)
    assert config.implicit_wait == 0
    assert config.explicit_wait == 15


def test_from_env_reads_overrides(clean_env):
    clean_env.setenv("BASE_URL", "https://staging.shop.test/")
    clean_env.setenv("BROWSER", "Firefox")
    clean_env.setenv("WINDOW_WIDTH", "1024")
    clean_env.setenv("EXPLICIT_WAIT", "2.5")

    config = SessionConfig.from_env()

    assert config.base_url == "https://staging.shop.test"
    assert config.browser == "firefox"
    assert config.window_width == 1024
    assert config.explicit_wait == 2.5


@pytest.mark.parametrize("name,value,expected", [
    ("CI", "true", True),
    ("CI", "1", True),
    ("HEADLESS", "YES", True),
    ("HEADLESS", "false", False),
    ("HEADLESS", "0", False),
])
def test_headless_flags(clean_env, name, value, expected):
    clean_env.setenv(name, value)

    assert SessionConfig.from_env().headless is expected


def test_env_flag_default_when_unset(clean_env):
    assert env_flag("HEADLESS") is False
    assert env_flag("HEADLESS", default=True) is True


def test_env_float_rejects_garbage(clean_env):
    clean_env.setenv("EXPLICIT_WAIT", "soon")

    with pytest.raises(ValueError, match="EXPLICIT_WAIT"):
        env_float("EXPLICIT_WAIT", 15)


def test_unsupported_browser_rejected():
    with pytest.raises(ValueError, match="Unsupported browser"):
        SessionConfig(browser="netscape")


@pytest.mark.parametrize("overrides", [
    {"window_width": 0},
    {"window_height": -1},
    {"explicit_wait": 0},
    {"poll_interval": 0},
    {"implicit_wait": -1},
])
def test_invalid_sizes_and_timeouts_rejected(overrides):
    with pytest.raises(ValueError):
        SessionConfig(**overrides)


def test_url_for():
    config = SessionConfig(base_url="http://shop.test/")

    assert config.url_for("/products") == "http://shop.test/products"
    assert config.url_for("cart") == "http://shop.test/cart"
    assert config.url_for("https://other.test/x") == "https://other.test/x"


def test_with_overrides_returns_copy():
    config = SessionConfig(browser="chrome")

    firefox = config.with_overrides(browser="firefox")

    assert firefox.browser == "firefox"
    assert config.browser == "chrome"


def test_viewports():
    config = SessionConfig()

    assert config.viewport("mobile") == (375, 667)
    assert config.viewport("tablet") == (768, 1024)
    with pytest.raises(ValueError, match="Unknown viewport"):
        config.viewport("watch")


def test_supported_browsers():
    assert config_module.SUPPORTED_BROWSERS == ("chrome", "firefox")


def test_config_is_hashable_and_comparable():
    config = SessionConfig(browser="chrome")

    assert hash(config) == hash(SessionConfig(browser="chrome"))
    assert {config: "chrome"}[SessionConfig(browser="chrome")] == "chrome"
    assert config != config.with_overrides(browser="firefox")


def test_from_env_and_module_defaults_agree(clean_env):
    assert SessionConfig.from_env() == SessionConfig(**config_module.read_session_settings())
    assert set(config_module.read_session_settings()) == {
        "base_url", "browser", "headless", "window_width", "window_height", "implicit_wait",
        "explicit_wait", "page_load_timeout", "poll_interval", "screenshot_dir",
    }
