"""
================================================================================
Root Pytest Configuration
================================================================================

This module provides the root pytest configuration for the entire test suite.
It registers common markers, configures logging and attaches a screenshot to
the Allure report when a browser-backed test fails.

================================================================================
"""

import os

import pytest

from uisuites.ui_testing.framework.reporting import attach_screenshot, attach_text, init_logger


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    init_logger(level=os.getenv("LOG_LEVEL", "INFO"), log_file=os.getenv("LOG_FILE"))

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )
    config.addinivalue_line(
        "markers", "P3: Low priority tests - extensive validation"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "unit: Browser-free tests against in-memory fakes"
    )
    config.addinivalue_line(
        "markers", "ui: Tests that drive a real browser"
    )


def pytest_collection_modifyitems(config, items):
    """Auto-mark tests by the directory they live in."""
    for item in items:
        path = str(item.fspath)
        if "ui_testing" in path:
            item.add_marker(pytest.mark.ui)
        elif "unit" in path:
            item.add_marker(pytest.mark.unit)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Attach the failure context and a screenshot when a browser-backed test fails.

    The page comes from the `browser_session` fixture; tests without one are
    left alone.
    """
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        session = getattr(item, "funcargs", {}).get("browser_session")
        if session is not None and session.alive:
            attach_text(
                f"url: {session.page.url}\nbrowser: {session.kind.value}\n\n{report.longreprtext}",
                name="failure_context",
            )
            attach_screenshot(session.page, name="failure_screenshot")


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Browser Interaction Harness",
        "=" * 60,
        "",
    ]
