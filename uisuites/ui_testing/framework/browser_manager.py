"""
================================================================================
Browser Manager
================================================================================

Browser session lifecycle for UI automation.

Features:
    - One browser instance per session, created for a named browser kind
    - Per-kind launch options selected from a lookup table
    - Session normalization (maximized window, empty cookie jar)
    - Best-effort, idempotent teardown that never raises

Usage:
    with SessionFactory(config) as factory:
        session = factory.create("firefox")
        session.page.goto("https://example.com")
        factory.close(session)

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from loguru import logger
from playwright.sync_api import (
    Browser,
    BrowserContext,
    Page,
    Playwright,
    sync_playwright,
)

from .config_loader import HarnessConfig
from .exceptions import ErrorKind, HarnessError


class BrowserKind(str, Enum):
    """Browsers the factory knows how to start."""

    CHROME = "chrome"
    FIREFOX = "firefox"
    EDGE = "edge"
    SAFARI = "safari"

    @classmethod
    def parse(cls, value: Any) -> "BrowserKind":
        """
        Map a browser name to a BrowserKind (case-insensitive).

        Raises:
            HarnessError: UNSUPPORTED_BROWSER_KIND naming the offending value
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            supported = ", ".join(kind.value for kind in cls)
            raise HarnessError(
                ErrorKind.UNSUPPORTED_BROWSER_KIND,
                f"unsupported browser kind: {value!r} (supported: {supported})",
            ) from None


@dataclass
class LaunchPlan:
    """
    Kind-specific startup recipe.

    Attributes:
        engine: Playwright launcher attribute - 'chromium', 'firefox', 'webkit'
        launch_options: Keyword arguments for ``BrowserType.launch``
        context_options: Keyword arguments for ``Browser.new_context``
        native_maximize: The browser maximizes its own window at startup
    """
    engine: str
    launch_options: Dict[str, Any]
    context_options: Dict[str, Any] = field(default_factory=dict)
    native_maximize: bool = False


def _chromium_args(config: HarnessConfig, *extra: str) -> List[str]:
    args = ["--start-maximized"] if config.maximize_on_start else []
    args.extend(extra)
    return args


def _chromium_family_plan(config: HarnessConfig, channel: Optional[str], *extra: str) -> LaunchPlan:
    launch_options: Dict[str, Any] = {
        "headless": config.headless,
        "args": _chromium_args(config, *extra),
    }
    if channel:
        launch_options["channel"] = channel

    # A headed maximized window only sizes the page if the context has no fixed viewport
    native = config.maximize_on_start and not config.headless
    context_options = {"no_viewport": True} if native else {}
    return LaunchPlan("chromium", launch_options, context_options, native_maximize=native)


def _chrome_plan(config: HarnessConfig) -> LaunchPlan:
    return _chromium_family_plan(
        config,
        None,
        "--disable-notifications",
        "--disable-popup-blocking",
    )


def _edge_plan(config: HarnessConfig) -> LaunchPlan:
    return _chromium_family_plan(config, "msedge")


def _firefox_plan(config: HarnessConfig) -> LaunchPlan:
    return LaunchPlan("firefox", {"headless": config.headless})


def _safari_plan(config: HarnessConfig) -> LaunchPlan:
    return LaunchPlan("webkit", {"headless": config.headless})


# Adding a browser means adding one entry here
LAUNCH_PLANS: Dict[BrowserKind, Callable[[HarnessConfig], LaunchPlan]] = {
    BrowserKind.CHROME: _chrome_plan,
    BrowserKind.FIREFOX: _firefox_plan,
    BrowserKind.EDGE: _edge_plan,
    BrowserKind.SAFARI: _safari_plan,
}


@dataclass(eq=False)
class BrowserSession:
    """
    Handle over one running browser instance.

    Owned by the caller that created it; must not be driven from two threads.
    Closed exactly once through ``SessionFactory.close`` (further closes are
    no-ops).
    """
    kind: BrowserKind
    config: HarnessConfig
    browser: Browser
    context: BrowserContext
    page: Page
    maximized: bool = False
    alive: bool = True
    _factory: Optional["SessionFactory"] = field(default=None, repr=False)

    @property
    def implicit_wait_seconds(self) -> float:
        return self.config.implicit_wait_seconds

    @property
    def explicit_wait_seconds(self) -> float:
        return self.config.explicit_wait_seconds

    @property
    def page_load_timeout_seconds(self) -> float:
        return self.config.page_load_timeout_seconds

    @property
    def script_timeout_seconds(self) -> float:
        return self.config.script_timeout_seconds

    def close(self) -> None:
        """Close this session through its factory."""
        if self._factory is not None:
            self._factory.close(self)
        else:
            SessionFactory.release(self)

    def __enter__(self) -> "BrowserSession":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class SessionFactory:
    """
    Creates and tears down browser sessions.

    The Playwright driver is started lazily on the first ``create`` and shared
    by every session of this factory; each session still gets its own browser
    process.

    Usage:
        factory = SessionFactory(HarnessConfig(headless=True))
        session = factory.create("chrome")
        try:
            ...
        finally:
            factory.close(session)
            factory.shutdown()
    """

    def __init__(
        self,
        config: Optional[HarnessConfig] = None,
        playwright_factory: Callable[[], Any] = sync_playwright,
    ):
        """
        Initialize session factory.

        Args:
            config: Harness configuration (defaults to HarnessConfig())
            playwright_factory: Returns an object whose ``start()`` yields a
                Playwright instance
        """
        self.config = (config or HarnessConfig()).validate()
        self._playwright_factory = playwright_factory
        self._playwright: Optional[Playwright] = None
        self._sessions: List[BrowserSession] = []

    def __enter__(self) -> "SessionFactory":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.shutdown()

    def _ensure_driver(self) -> Playwright:
        if self._playwright is None:
            self._playwright = self._playwright_factory().start()
            logger.debug("Playwright driver started")
        return self._playwright

    def create(self, browser_kind: Any = None) -> BrowserSession:
        """
        Start a browser and return a ready-to-use session.

        Args:
            browser_kind: chrome, firefox, edge or safari
                          (defaults to the configured kind)

        Returns:
            Live BrowserSession

        Raises:
            HarnessError: UNSUPPORTED_BROWSER_KIND for unknown kinds,
                DRIVER_FAILURE when the browser fails to start
        """
        kind = BrowserKind.parse(browser_kind if browser_kind is not None else self.config.browser_kind)
        plan = LAUNCH_PLANS[kind](self.config)
        logger.info(
            f"Starting {kind.value} session "
            f"(engine={plan.engine}, headless={self.config.headless})"
        )

        browser = None
        context = None
        try:
            launcher = getattr(self._ensure_driver(), plan.engine)
            browser = launcher.launch(**plan.launch_options)
            context = browser.new_context(**plan.context_options)
            context.set_default_timeout(self.config.implicit_wait_seconds * 1000)
            context.set_default_navigation_timeout(self.config.page_load_timeout_seconds * 1000)
            page = context.new_page()

            maximized = False
            if self.config.maximize_on_start:
                self._maximize_window(page, plan)
                maximized = True
            context.clear_cookies()
        except Exception as e:
            self._release_resources(context, browser, kind)
            logger.error(f"Failed to start {kind.value} browser: {e}")
            raise HarnessError(
                ErrorKind.DRIVER_FAILURE,
                f"failed to start {kind.value} browser: {e}",
                cause=e,
            ) from e

        session = BrowserSession(
            kind=kind,
            config=self.config,
            browser=browser,
            context=context,
            page=page,
            maximized=maximized,
            alive=True,
            _factory=self,
        )
        self._sessions.append(session)
        logger.debug(f"Session ready: {kind.value} (maximized={maximized})")
        return session

    @staticmethod
    def _maximize_window(page: Page, plan: LaunchPlan) -> None:
        """Size the page to the full available screen unless the browser already did."""
        if plan.native_maximize:
            return
        size = page.evaluate(
            "() => ({width: window.screen.availWidth, height: window.screen.availHeight})"
        )
        page.set_viewport_size({"width": int(size["width"]), "height": int(size["height"])})

    def close(self, session: Optional[BrowserSession]) -> None:
        """
        Terminate a session. Never raises.

        A missing or already closed session is a no-op. Errors raised by the
        browser while shutting down are logged and suppressed.
        """
        if session is None or not session.alive:
            logger.debug("close() on a missing or already closed session - nothing to do")
            return

        self.release(session)
        if session in self._sessions:
            self._sessions.remove(session)

    @staticmethod
    def release(session: BrowserSession) -> None:
        """Close the context and browser of a live session, logging failures."""
        if not session.alive:
            return
        session.alive = False
        SessionFactory._release_resources(session.context, session.browser, session.kind)
        logger.debug(f"Session closed: {session.kind.value}")

    @staticmethod
    def _release_resources(
        context: Optional[BrowserContext],
        browser: Optional[Browser],
        kind: BrowserKind,
    ) -> None:
        for name, resource in (("context", context), ("browser", browser)):
            if resource is None:
                continue
            try:
                resource.close()
            except Exception as e:
                logger.warning(f"Error while closing {kind.value} {name}: {e}")

    def shutdown(self) -> None:
        """Close every live session of this factory and stop the driver. Never raises."""
        for session in list(self._sessions):
            self.close(session)

        if self._playwright is not None:
            try:
                self._playwright.stop()
            except Exception as e:
                logger.warning(f"Error while stopping Playwright driver: {e}")
            self._playwright = None
            logger.debug("Playwright driver stopped")

    @property
    def sessions(self) -> List[BrowserSession]:
        """Sessions created by this factory that are still open."""
        return list(self._sessions)


__all__ = [
    "BrowserKind",
    "BrowserSession",
    "LAUNCH_PLANS",
    "LaunchPlan",
    "SessionFactory",
]
