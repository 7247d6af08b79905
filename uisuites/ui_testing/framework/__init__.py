"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based browser-interaction core.

Components:
    - exceptions: HarnessError with an ErrorKind discriminant
    - config_loader: Immutable HarnessConfig loaded from YAML / environment
    - browser_manager: Session factory and browser session handle
    - element_actions: Wait-gated element interaction
    - locators: Element locator descriptors
    - wait_helpers: Wait conditions and tri-state outcome polling
    - reporting: Loguru setup and Allure attachments

Author: Automation Team
License: MIT
================================================================================
"""

from .browser_manager import BrowserKind, BrowserSession, SessionFactory
from .config_loader import ConfigLoader, ConfigurationError, HarnessConfig, load_config
from .element_actions import ElementActions
from .exceptions import ErrorKind, HarnessError
from .locators import By, Locator
from .wait_helpers import Outcome, WaitCondition, poll_for_outcome, wait_until

__all__ = [
    "BrowserKind",
    "BrowserSession",
    "By",
    "ConfigLoader",
    "ConfigurationError",
    "ElementActions",
    "ErrorKind",
    "HarnessConfig",
    "HarnessError",
    "Locator",
    "Outcome",
    "SessionFactory",
    "WaitCondition",
    "load_config",
    "poll_for_outcome",
    "wait_until",
]
