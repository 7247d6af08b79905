"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for application pages.

Each page class encapsulates:
    - Element locators (class-level Locator descriptors)
    - Page-specific actions, delegated to ElementActions
    - Verification methods

Author: Automation Team
License: MIT
================================================================================
"""

from .form_designer_page import FormDesignerPage
from .form_preview_page import FormPreviewPage
from .login_page import LoginPage
from .page_base import PageBase

__all__ = [
    "FormDesignerPage",
    "FormPreviewPage",
    "LoginPage",
    "PageBase",
]
