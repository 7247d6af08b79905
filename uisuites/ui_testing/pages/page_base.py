"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

A page object *holds* an ElementActions instance and delegates every element
interaction to it; it does not inherit interaction helpers. Any object with
the same methods (e.g. a test double) can be passed in instead.

Locators are declared as class attributes and resolved at the moment of use:

    class LoginPage(PageBase):
        URL_PATH = "/login"
        USERNAME = Locator.id("username", name="username field")

        def enter_username(self, username: str) -> None:
            self.actions.enter_text(self.USERNAME, username)

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import allure
from loguru import logger

from uisuites.ui_testing.framework.element_actions import ElementActions


class PageBase:
    """Base class for all page objects."""

    # Override in subclasses
    URL_PATH: str = "/"
    PAGE_TITLE: str = ""

    def __init__(self, actions: ElementActions, base_url: str = ""):
        """
        Initialize page object.

        Args:
            actions: Interaction core bound to the current session
            base_url: Base URL for the application; defaults to the session config
        """
        self.actions = actions
        if not base_url:
            base_url = actions.session.config.base_url
        self.base_url = base_url.rstrip("/")

    @property
    def url(self) -> str:
        """Get full page URL."""
        return f"{self.base_url}{self.URL_PATH}"

    @allure.step("Open page")
    def open(self) -> "PageBase":
        """Navigate to this page and wait until the document is ready."""
        self.actions.navigate(self.url)
        logger.debug(f"Navigated to: {self.url}")
        self.actions.wait_for_page_ready()
        return self

    def has_expected_title(self) -> bool:
        """True if the document title contains PAGE_TITLE."""
        title = self.actions.title()
        if self.PAGE_TITLE not in title:
            logger.warning(f"Expected title containing '{self.PAGE_TITLE}', got '{title}'")
            return False
        return True


__all__ = [
    "PageBase",
]
