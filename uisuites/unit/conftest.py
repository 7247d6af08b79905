"""
Fixtures for browser-free unit tests.

Everything here runs against the in-memory fakes in ``fakes.py`` with a fake
clock, so wait-gate timing is asserted without real sleeping.
"""

import pytest

from uisuites.ui_testing.framework.config_loader import HarnessConfig
from uisuites.ui_testing.framework.element_actions import ElementActions
from uisuites.unit.fakes import FakeClock, FakePage, FakePlaywrightManager, FakeSession


@pytest.fixture
def config() -> HarnessConfig:
    """10s explicit wait polled once per second."""
    return HarnessConfig(
        explicit_wait_seconds=10,
        poll_interval_seconds=1,
        headless=True,
        base_url="http://app.test",
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def page() -> FakePage:
    return FakePage()


@pytest.fixture
def session(page, config) -> FakeSession:
    return FakeSession(page, config)


@pytest.fixture
def actions(session, clock) -> ElementActions:
    return ElementActions(session, clock=clock, sleep=clock.sleep)


@pytest.fixture
def playwright_manager() -> FakePlaywrightManager:
    return FakePlaywrightManager()
