"""
================================================================================
Element Locators
================================================================================

Stateless descriptors for finding elements.

A Locator is declared once (typically as a page-object class attribute) and
resolved against the page at the moment of use. It never holds a live element,
so navigation or re-rendering cannot leave it pointing at a stale node.

Usage:
    USERNAME = Locator.id("username", name="username field")
    actions.enter_text(USERNAME, "demo_user")

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from playwright.sync_api import Locator as PlaywrightLocator
from playwright.sync_api import Page


class By(str, Enum):
    """Supported lookup strategies."""

    ID = "id"
    XPATH = "xpath"
    CLASS_NAME = "class_name"
    CSS = "css"


@dataclass(frozen=True)
class Locator:
    """
    How to find an element.

    Attributes:
        by: Lookup strategy
        value: Identifier, XPath expression, class name or CSS selector
        name: Optional human-readable element name used in messages
    """
    by: By
    value: str
    name: str = ""

    @classmethod
    def id(cls, value: str, name: str = "") -> "Locator":
        return cls(By.ID, value, name)

    @classmethod
    def xpath(cls, value: str, name: str = "") -> "Locator":
        return cls(By.XPATH, value, name)

    @classmethod
    def class_name(cls, value: str, name: str = "") -> "Locator":
        return cls(By.CLASS_NAME, value, name)

    @classmethod
    def css(cls, value: str, name: str = "") -> "Locator":
        return cls(By.CSS, value, name)

    @property
    def selector(self) -> str:
        """Playwright selector string for this locator."""
        if self.by is By.ID:
            return f'[id="{self.value}"]'
        if self.by is By.XPATH:
            return f"xpath={self.value}"
        if self.by is By.CLASS_NAME:
            return f'[class~="{self.value}"]'
        return f"css={self.value}"

    def resolve(self, page: Page) -> PlaywrightLocator:
        """Return a fresh Playwright locator bound to ``page``."""
        return page.locator(self.selector)

    def __str__(self) -> str:
        label = f"{self.by.value}={self.value}"
        return f"{self.name} <{label}>" if self.name else f"<{label}>"


__all__ = [
    "By",
    "Locator",
]
