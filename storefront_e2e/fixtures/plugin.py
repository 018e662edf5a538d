# storefront_e2e/fixtures/plugin.py

"""
pytest integration: browser fixtures, GREP filtering and e2e runner settings.

Every test that asks for ``commands`` gets its own browser session, and the
session is torn down whatever the test outcome.
"""

import logging
import os
import re
import time

import pytest
from selenium.common.exceptions import WebDriverException

from ..config.config import TEST_RETRIES, TEST_TIMEOUT, SessionConfig, env_float, env_int
from ..config.logging_config import setup_logging
from ..core.session_manager import BrowserSession, teardown
from ..page_objects.cart_page import CartPage
from ..page_objects.checkout_page import CheckoutPage
from ..page_objects.login_page import LoginPage
from ..page_objects.products_page import ProductsPage
from ..page_objects.signup_page import SignupPage
from .storefront_data import ENDPOINTS, default_test_user, new_user

logger = logging.getLogger(__name__)

E2E_MARKER = "e2e"


def pytest_addoption(parser):
    group = parser.getgroup("storefront-e2e")
    group.addoption(
        "--browser",
        action="store",
        default=None,
        help="browser kind for e2e tests (chrome, firefox); overrides BROWSER",
    )


def pytest_configure(config):
    setup_logging()
    config.addinivalue_line("markers", f"{E2E_MARKER}: drives a real browser against BASE_URL")


# --- GREP filtering ---

def grep_matches(nodeid: str, pattern: str) -> bool:
    """Regular expression search over the node id; plain substring if the pattern is not a valid regex."""
    try:
        return re.search(pattern, nodeid) is not None
    except re.error:
        return pattern in nodeid


def filter_by_grep(items, pattern: str):
    """Splits items into (selected, deselected) by GREP pattern."""
    if not pattern:
        return list(items), []
    selected, deselected = [], []
    for item in items:
        (selected if grep_matches(item.nodeid, pattern) else deselected).append(item)
    return selected, deselected


def pytest_collection_modifyitems(config, items):
    pattern = os.getenv("GREP", "")
    if pattern:
        selected, deselected = filter_by_grep(items, pattern)
        if deselected:
            config.hook.pytest_deselected(items=deselected)
            items[:] = selected

    # Runner-level resilience for live browser tests: timeout plus whole-test re-runs
    retries = env_int("TEST_RETRIES", TEST_RETRIES)
    timeout = env_float("TEST_TIMEOUT", TEST_TIMEOUT)
    for item in items:
        if item.get_closest_marker(E2E_MARKER) is None:
            continue
        if item.get_closest_marker("timeout") is None:
            item.add_marker(pytest.mark.timeout(timeout))
        if retries > 0 and item.get_closest_marker("flaky") is None:
            item.add_marker(pytest.mark.flaky(reruns=retries))


@pytest.hookimpl(hookwrapper=True, tryfirst=True)
def pytest_runtest_makereport(item, call):
    # Keep each phase's report on the item so fixtures can see if the test failed
    outcome = yield
    report = outcome.get_result()
    setattr(item, "rep_" + report.when, report)


# --- Fixtures ---

@pytest.fixture(scope="session")
def session_config(request) -> SessionConfig:
    """Session configuration from the environment, with --browser applied."""
    config = SessionConfig.from_env()
    browser = request.config.getoption("--browser")
    if browser:
        config = config.with_overrides(browser=browser)
    return config


def _screenshot_name(nodeid: str) -> str:
    safe = re.sub(r"[^\w.-]+", "_", nodeid).strip("_")
    return f"failure-{safe}-{int(time.time() * 1000)}.png"


@pytest.fixture
def browser_session(request, session_config):
    """A fresh READY session per test, opened on the storefront home page with empty storage."""
    session = BrowserSession(session_config)
    try:
        session.start()
        session.commands.visit("/")
        session.commands.clear_all_storage()
        yield session
    finally:
        report = getattr(request.node, "rep_call", None)
        if report is not None and report.failed and session.is_ready:
            try:
                session.save_screenshot(_screenshot_name(request.node.nodeid))
            except (WebDriverException, OSError):
                logger.warning("Could not take failure screenshot", exc_info=True)
        teardown(session)


@pytest.fixture
def commands(browser_session):
    return browser_session.commands


@pytest.fixture
def test_user():
    return default_test_user()


@pytest.fixture
def fresh_user():
    return new_user()


@pytest.fixture
def storefront_endpoints():
    return ENDPOINTS


@pytest.fixture
def login_page(commands):
    return LoginPage(commands)


@pytest.fixture
def signup_page(commands):
    return SignupPage(commands)


@pytest.fixture
def products_page(commands):
    return ProductsPage(commands)


@pytest.fixture
def cart_page(commands):
    return CartPage(commands)


@pytest.fixture
def checkout_page(commands):
    return CheckoutPage(commands)
