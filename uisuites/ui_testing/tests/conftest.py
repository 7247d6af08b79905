"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures for browser-backed tests: one SessionFactory per test run and a fresh
BrowserSession per test. Pages are served with `page.set_content`, so no
application server is needed.

If the browser cannot be launched (e.g. `playwright install` was never run)
the tests are skipped instead of failing.

================================================================================
"""

from typing import Generator

import pytest

from uisuites.ui_testing.framework.browser_manager import BrowserSession, SessionFactory
from uisuites.ui_testing.framework.config_loader import HarnessConfig
from uisuites.ui_testing.framework.element_actions import ElementActions
from uisuites.ui_testing.framework.exceptions import ErrorKind, HarnessError


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def ui_config() -> HarnessConfig:
    """Headless chrome with short waits."""
    return HarnessConfig(
        headless=True,
        implicit_wait_seconds=2,
        explicit_wait_seconds=3,
        poll_interval_seconds=0.1,
    )


@pytest.fixture(scope="session")
def session_factory(ui_config: HarnessConfig) -> Generator[SessionFactory, None, None]:
    factory = SessionFactory(ui_config)
    yield factory
    factory.shutdown()


@pytest.fixture
def browser_session(session_factory: SessionFactory) -> Generator[BrowserSession, None, None]:
    """
    Function-scoped browser session.

    Each test gets its own browser so cookies and storage never leak.
    """
    try:
        session = session_factory.create()
    except HarnessError as e:
        if e.kind is ErrorKind.DRIVER_FAILURE:
            pytest.skip(f"browser unavailable: {e.message}")
        raise
    yield session
    session_factory.close(session)


@pytest.fixture
def actions(browser_session: BrowserSession) -> ElementActions:
    return ElementActions(browser_session)
