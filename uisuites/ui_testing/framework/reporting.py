"""
================================================================================
Logging and Report Utilities
================================================================================

Loguru logger setup and Allure attachment helpers shared by the framework
and the pytest hooks.

Features:
    - One-time Loguru sink configuration (console + optional rotating file)
    - Text and screenshot attachments for Allure reports

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import allure
from loguru import logger


DEFAULT_LOG_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
)

_logger_initialized: bool = False


def init_logger(
    level: str = "INFO",
    log_file: Optional[str] = None,
    format_str: str = DEFAULT_LOG_FORMAT,
) -> None:
    """
    Initializes the global Loguru logger with consistent configuration.

    Safe to call more than once; only the first call configures sinks.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional path of a rotating log file
        format_str: Log line format
    """
    global _logger_initialized

    if _logger_initialized:
        return

    logger.remove()
    logger.add(
        sys.stderr,
        level=level.upper(),
        format=format_str,
        colorize=True,
        backtrace=True,
        diagnose=False,
    )

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=level.upper(),
            format=format_str.replace("{level: <8}", "{level}"),
            rotation="10 MB",
            retention="7 days",
            compression="zip",
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {level}")


def attach_text(text: str, name: str = "Text") -> None:
    """
    Attach text content to Allure report.

    Args:
        text: Text to attach
        name: Attachment name
    """
    allure.attach(
        text,
        name=name,
        attachment_type=allure.attachment_type.TEXT
    )


def attach_screenshot(page, name: str = "screenshot", full_page: bool = True) -> bool:
    """
    Capture the page and attach it as PNG. Best effort.

    Args:
        page: Playwright page
        name: Attachment name
        full_page: Capture full scrollable page

    Returns:
        True if the screenshot was attached
    """
    try:
        png = page.screenshot(full_page=full_page)
    except Exception as e:
        logger.warning(f"Failed to capture screenshot '{name}': {e}")
        return False

    allure.attach(
        png,
        name=name,
        attachment_type=allure.attachment_type.PNG
    )
    return True


__all__ = [
    "attach_screenshot",
    "attach_text",
    "init_logger",
]
