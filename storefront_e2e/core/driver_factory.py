# storefront_e2e/core/driver_factory.py

import logging

from selenium import webdriver
from selenium.webdriver.chrome.service import Service as ChromeService
from selenium.webdriver.firefox.service import Service as FirefoxService
# From webdriver_manager for easier driver handling
from webdriver_manager.chrome import ChromeDriverManager
from webdriver_manager.firefox import GeckoDriverManager

from ..config.config import SessionConfig

logger = logging.getLogger(__name__)


def chrome_options(config: SessionConfig) -> webdriver.ChromeOptions:
    options = webdriver.ChromeOptions()
    options.add_argument("--no-sandbox")
    options.add_argument("--disable-dev-shm-usage")
    options.add_argument("--disable-gpu")
    options.add_argument(f"--window-size={config.window_width},{config.window_height}")
    if config.headless:
        options.add_argument("--headless=new")
    return options


def firefox_options(config: SessionConfig) -> webdriver.FirefoxOptions:
    options = webdriver.FirefoxOptions()
    options.add_argument(f"--width={config.window_width}")
    options.add_argument(f"--height={config.window_height}")
    if config.headless:
        options.add_argument("-headless")
    return options


def create_driver(browser: str, config: SessionConfig):
    """Launches a local WebDriver for the browser kind; the driver binary comes from webdriver_manager."""
    browser = browser.lower()
    logger.info("Launching %s (headless=%s)", browser, config.headless)

    if browser == "chrome":
        # Automatically download and manage ChromeDriver
        service = ChromeService(ChromeDriverManager().install())
        return webdriver.Chrome(service=service, options=chrome_options(config))
    if browser == "firefox":
        # Automatically download and manage GeckoDriver
        service = FirefoxService(GeckoDriverManager().install())
        return webdriver.Firefox(service=service, options=firefox_options(config))
    raise ValueError(f"Unsupported browser: {browser}")


def configure_driver(driver, config: SessionConfig):
    """Applies window size and timeouts to a freshly launched driver."""
    driver.implicitly_wait(config.implicit_wait)
    driver.set_page_load_timeout(config.page_load_timeout)
    driver.set_window_size(config.window_width, config.window_height)
