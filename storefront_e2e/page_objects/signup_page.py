# storefront_e2e/page_objects/signup_page.py

from typing import Optional

from ..core.commands import EMAIL_INPUT, FIRST_NAME_INPUT, LAST_NAME_INPUT, PASSWORD_INPUT, SUBMIT_BUTTON
from ..fixtures.storefront_data import UserCredentials
from ..utils.wait_helpers import WaitResult
from .base_page import BasePage


class SignupPage(BasePage):
    """Page Object for /signup."""

    PATH = "/signup"

    FIRST_NAME_INPUT = FIRST_NAME_INPUT
    LAST_NAME_INPUT = LAST_NAME_INPUT
    EMAIL_INPUT = EMAIL_INPUT
    PASSWORD_INPUT = PASSWORD_INPUT
    SUBMIT_BUTTON = SUBMIT_BUTTON

    def register(self, user: UserCredentials, timeout: Optional[float] = None) -> WaitResult:
        return self.commands.register_new_user(user, timeout=timeout)

    def submit_empty(self) -> list:
        """Submits without filling anything; returns the inputs flagged invalid."""
        self.commands.click(self.SUBMIT_BUTTON)
        return self.commands.get_all("input:invalid")

    def email_is_valid(self) -> bool:
        email = self.commands.get(self.EMAIL_INPUT)
        return bool(self.commands.execute_script("return arguments[0].validity.valid;", email))
