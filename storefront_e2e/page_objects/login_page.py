# storefront_e2e/page_objects/login_page.py

from typing import Optional

from ..core.commands import EMAIL_INPUT, PASSWORD_INPUT, SUBMIT_BUTTON
from ..fixtures.storefront_data import UserCredentials
from ..utils.wait_helpers import WaitResult
from .base_page import BasePage

# Words the login page shows when the credentials are rejected
ERROR_WORDS = ("invalid", "error", "incorrect", "failed", "wrong")


class LoginPage(BasePage):
    """Page Object for /login."""

    PATH = "/login"

    EMAIL_INPUT = EMAIL_INPUT
    PASSWORD_INPUT = PASSWORD_INPUT
    SUBMIT_BUTTON = SUBMIT_BUTTON
    ERROR_MESSAGE = '.error-message, [role="alert"]'

    def fill(self, email: str, password: str):
        self.commands.type(self.EMAIL_INPUT, email)
        self.commands.type(self.PASSWORD_INPUT, password)
        return self

    def submit(self):
        self.commands.click(self.SUBMIT_BUTTON)

    def login(self, user: UserCredentials, timeout: Optional[float] = None) -> WaitResult:
        """Submits the form and waits for the browser to leave /login."""
        self.fill(user.email, user.password)
        self.submit()
        return self.commands.wait_for_url(self.PATH, present=False, timeout=timeout)

    def error_message(self) -> str:
        """Text of the error banner, or the matching error word from the page body."""
        banners = self.commands.get_all(self.ERROR_MESSAGE)
        if banners and banners[0].text:
            return banners[0].text
        body = self.commands.body_text().lower()
        for word in ERROR_WORDS:
            if word in body:
                return word
        return ""

    def wait_for_error(self, timeout: Optional[float] = None) -> WaitResult:
        return self.commands.wait_until(lambda c: self.error_message(), timeout)

    def invalid_fields(self) -> list:
        """Inputs failing HTML5 validation (e.g. required fields left empty)."""
        return self.commands.get_all("input:invalid")
