"""
================================================================================
Login Page Object
================================================================================

Login form: username, password, submit button and the error/success banners.

NOTE:
  Selectors are intentionally generic. Real projects should prefer stable
  `data-testid` attributes.

================================================================================
"""

from __future__ import annotations

import allure

from uisuites.ui_testing.framework.locators import Locator
from uisuites.ui_testing.pages.page_base import PageBase


class LoginPage(PageBase):
    """Login page object."""

    URL_PATH = "/login"
    PAGE_TITLE = "Login"

    USERNAME_FIELD = Locator.id("username", name="username field")
    PASSWORD_FIELD = Locator.id("password", name="password field")
    LOGIN_BUTTON = Locator.id("login-button", name="login button")
    ERROR_MESSAGE = Locator.class_name("error-message", name="login error")
    SUCCESS_MESSAGE = Locator.class_name("success-message", name="login success")

    def enter_username(self, username: str) -> None:
        self.actions.enter_text(self.USERNAME_FIELD, username)

    def enter_password(self, password: str) -> None:
        self.actions.enter_text(self.PASSWORD_FIELD, password)

    def click_login(self) -> None:
        self.actions.click(self.LOGIN_BUTTON)

    @allure.step("Login (username={username})")
    def login(self, username: str, password: str) -> None:
        """Fill the form, submit it and wait for the next page to settle."""
        self.enter_username(username)
        self.enter_password(password)
        self.click_login()
        self.actions.wait_for_page_ready()

    def is_error_displayed(self) -> bool:
        return self.actions.is_visible(self.ERROR_MESSAGE)

    def error_message(self) -> str:
        return self.actions.read_text(self.ERROR_MESSAGE)

    def is_success_displayed(self) -> bool:
        return self.actions.is_visible(self.SUCCESS_MESSAGE)

    def are_all_elements_visible(self) -> bool:
        """Verify the username, password and submit controls are visible."""
        return all(
            self.actions.is_visible(locator)
            for locator in (self.USERNAME_FIELD, self.PASSWORD_FIELD, self.LOGIN_BUTTON)
        )
