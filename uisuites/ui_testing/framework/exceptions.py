"""
================================================================================
Harness Errors
================================================================================

One error type for every failure raised by the browser-interaction core.

Each error carries a ``kind`` discriminant from a closed enum, a human-readable
message and the underlying cause (if any). Callers branch on ``error.kind``
instead of catching a family of subclasses:

    try:
        actions.click(SAVE_BUTTON)
    except HarnessError as e:
        if e.kind is ErrorKind.ELEMENT_NOT_CLICKABLE:
            ...

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from playwright.sync_api import Error as PlaywrightError


class ErrorKind(str, Enum):
    """Closed set of failure kinds."""

    ELEMENT_NOT_FOUND = "element_not_found"
    ELEMENT_NOT_CLICKABLE = "element_not_clickable"
    ELEMENT_NOT_VISIBLE = "element_not_visible"
    TIMEOUT_EXCEEDED = "timeout_exceeded"
    STALE_ELEMENT = "stale_element"
    DRIVER_FAILURE = "driver_failure"
    UNSUPPORTED_BROWSER_KIND = "unsupported_browser_kind"
    GENERAL_FAILURE = "general_failure"


class HarnessError(Exception):
    """
    Typed failure raised by the session factory and the interaction core.

    Attributes:
        kind: Failure category
        message: Human-readable description naming the element/operation
        cause: Underlying exception, if any
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"

    def __repr__(self) -> str:
        return f"HarnessError(kind={self.kind.name}, message={self.message!r})"


# Playwright reports detached nodes with one of these fragments
_STALE_MARKERS = (
    "not attached to the dom",
    "element is detached",
    "element handle refers to a detached",
)


def is_stale(exc: BaseException) -> bool:
    """Return True if ``exc`` is Playwright reporting a detached element."""
    if isinstance(exc, HarnessError):
        return exc.kind is ErrorKind.STALE_ELEMENT
    if not isinstance(exc, PlaywrightError):
        return False
    text = str(exc).lower()
    return any(marker in text for marker in _STALE_MARKERS)


__all__ = [
    "ErrorKind",
    "HarnessError",
    "is_stale",
]
