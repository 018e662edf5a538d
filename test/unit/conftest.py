# test/unit/conftest.py

from unittest.mock import MagicMock

import pytest

from storefront_e2e.config.config import SessionConfig
from storefront_e2e.core.session_manager import setup_browser, teardown

from fake_dom import FakePage


# --- Pytest Fixtures ---

@pytest.fixture
def unit_config(tmp_path):
    # Short waits so timeout paths stay fast
    return SessionConfig(
        base_url="http://shop.test/",
        browser="chrome",
        headless=True,
        window_width=1280,
        window_height=800,
        implicit_wait=0,
        explicit_wait=0.3,
        page_load_timeout=0.3,
        poll_interval=0.05,
        screenshot_dir=str(tmp_path / "screenshots"),
    )


@pytest.fixture
def fake_page():
    return FakePage()


@pytest.fixture
def mock_driver(fake_page):
    driver = MagicMock(name="WebDriver")
    driver.current_url = "http://shop.test/"
    driver.find_elements.side_effect = fake_page.find_elements
    return driver


@pytest.fixture
def mock_create_driver(mocker, mock_driver):
    # Launching a real browser is replaced by handing back the mock driver
    return mocker.patch("storefront_e2e.core.session_manager.create_driver", return_value=mock_driver)


@pytest.fixture
def ready_session(unit_config, mock_create_driver):
    session = setup_browser(config=unit_config)
    yield session
    teardown(session)


@pytest.fixture
def facade(ready_session):
    return ready_session.commands
