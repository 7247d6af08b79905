# ================================================================================
# Element Actions Module
# ================================================================================
#
# Wait-gated element interaction for page objects.
#
# Every read or mutation first waits for its own condition (visible, or
# visible and enabled) and only then touches the element. Underlying
# Playwright failures are translated into HarnessError values.
#
# Key Features:
#   - Fixed-interval wait gates bounded by the explicit wait
#   - Locators re-resolved on every probe (no cached element bindings)
#   - Non-throwing visibility probe for boolean assertions
#   - Best-effort scrolling and page-ready polling
#   - Allure step integration
#
# ================================================================================

import time
from typing import Callable, List, Optional, Union

import allure
from loguru import logger
from playwright.sync_api import ElementHandle, Page
from playwright.sync_api import Locator as PlaywrightLocator
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from .exceptions import ErrorKind, HarnessError, is_stale
from .locators import Locator
from .wait_helpers import WaitCondition, wait_until


# Anything the interaction core can act on
Target = Union[Locator, str, PlaywrightLocator, ElementHandle]

# Upper bound for a single non-blocking lookup inside a poll
MAX_PROBE_TIMEOUT_MS = 1000

READY_STATE_SCRIPT = "() => document.readyState"
SCROLL_INTO_VIEW_SCRIPT = "el => el.scrollIntoView(true)"


class ElementActions:
    """
    Interaction core bound to one browser session.

    Page objects hold an instance of this class and delegate to it.

    Example:
        actions = ElementActions(session)
        actions.enter_text(Locator.id("username"), "demo_user")
        actions.click(Locator.id("login-button"))
    """

    def __init__(
        self,
        session,
        explicit_wait_seconds: Optional[float] = None,
        poll_interval_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize ElementActions with a browser session.

        Args:
            session: BrowserSession (anything exposing ``page`` and ``config``)
            explicit_wait_seconds: Wait-gate timeout; defaults to the session config
            poll_interval_seconds: Delay between probes; defaults to the session config
            clock: Monotonic time source
            sleep: Sleep function
        """
        self.session = session
        self.explicit_wait = explicit_wait_seconds or session.config.explicit_wait_seconds
        self.poll_interval = poll_interval_seconds or session.config.poll_interval_seconds
        self._clock = clock
        self._sleep = sleep

    @property
    def page(self) -> Page:
        return self.session.page

    @property
    def _action_timeout_ms(self) -> float:
        return self.explicit_wait * 1000

    @property
    def _probe_timeout_ms(self) -> float:
        return min(self.poll_interval * 1000, MAX_PROBE_TIMEOUT_MS)

    # =========================================================================
    # Wait Gates
    # =========================================================================

    @allure.step("Wait until visible: {target}")
    def wait_visible(self, target: Target, timeout: Optional[float] = None) -> ElementHandle:
        """
        Wait until the target exists and is visible.

        Args:
            target: Locator, selector string, Playwright locator or element handle
            timeout: Seconds to wait; defaults to the explicit wait

        Returns:
            Handle of the visible element

        Raises:
            HarnessError: ELEMENT_NOT_FOUND on timeout
        """
        return self._wait_for(
            target,
            require_enabled=False,
            kind=ErrorKind.ELEMENT_NOT_FOUND,
            failure="element not found or not visible",
            timeout=timeout,
        )

    @allure.step("Wait until clickable: {target}")
    def wait_clickable(self, target: Target, timeout: Optional[float] = None) -> ElementHandle:
        """
        Wait until the target is visible and enabled.

        Raises:
            HarnessError: ELEMENT_NOT_CLICKABLE on timeout
        """
        return self._wait_for(
            target,
            require_enabled=True,
            kind=ErrorKind.ELEMENT_NOT_CLICKABLE,
            failure="element not clickable",
            timeout=timeout,
        )

    def _wait_for(
        self,
        target: Target,
        require_enabled: bool,
        kind: ErrorKind,
        failure: str,
        timeout: Optional[float],
    ) -> ElementHandle:
        description = self.describe(target)
        condition = WaitCondition(
            predicate=lambda: self._probe(target, require_enabled),
            timeout=timeout or self.explicit_wait,
            poll_interval=self.poll_interval,
            description=f"{failure}: {description}",
        )
        try:
            return wait_until(condition, clock=self._clock, sleep=self._sleep)
        except HarnessError as e:
            message = f"{failure}: {description}"
            if e.cause is not None and is_stale(e.cause):
                message += " (stale element reference)"
            logger.error(f"{message} after {condition.timeout}s")
            raise HarnessError(kind, message, cause=e.cause or e) from e

    def _probe(self, target: Target, require_enabled: bool) -> Optional[ElementHandle]:
        """
        Single look at the target; returns its handle when the condition holds.

        The checks go through the locator, so only a passing probe takes an
        element handle.
        """
        locator = self._to_playwright_locator(target)
        if locator is None:
            if not target.is_visible():
                return None
            if require_enabled and not target.is_enabled():
                return None
            return target

        if locator.count() == 0:
            return None
        first = locator.first
        if not first.is_visible():
            return None
        if require_enabled and not first.is_enabled(timeout=self._probe_timeout_ms):
            return None
        return first.element_handle(timeout=self._probe_timeout_ms)

    def _to_playwright_locator(self, target: Target) -> Optional[PlaywrightLocator]:
        if isinstance(target, Locator):
            return target.resolve(self.page)
        if isinstance(target, str):
            return self.page.locator(target)
        if isinstance(target, PlaywrightLocator):
            return target
        return None

    @staticmethod
    def describe(target: Target) -> str:
        """Human-readable element reference for logs and errors."""
        if isinstance(target, Locator):
            return str(target)
        if isinstance(target, str):
            return f"<{target}>"
        return repr(target)

    def _dispatch_error(self, kind: ErrorKind, message: str, exc: Exception) -> HarnessError:
        if is_stale(exc):
            message += " (element went stale after the wait)"
        logger.error(f"{message}: {exc}")
        return HarnessError(kind, message, cause=exc)

    # =========================================================================
    # Gated Interactions
    # =========================================================================

    @allure.step("Click: {target}")
    def click(self, target: Target) -> None:
        """
        Click the target once it is clickable.

        Raises:
            HarnessError: ELEMENT_NOT_CLICKABLE if the wait or the click fails
        """
        description = self.describe(target)
        logger.info(f"Clicking element: {description}")

        handle = self.wait_clickable(target)
        try:
            handle.click(timeout=self._action_timeout_ms)
        except Exception as e:
            raise self._dispatch_error(
                ErrorKind.ELEMENT_NOT_CLICKABLE,
                f"failed to click element: {description}",
                e,
            ) from e

        logger.debug(f"Successfully clicked: {description}")

    @allure.step("Double-click: {target}")
    def double_click(self, target: Target) -> None:
        """
        Double-click the target once it is clickable.

        Raises:
            HarnessError: ELEMENT_NOT_CLICKABLE if the wait or the gesture fails
        """
        description = self.describe(target)
        logger.info(f"Double-clicking element: {description}")

        handle = self.wait_clickable(target)
        try:
            handle.dblclick(timeout=self._action_timeout_ms)
        except Exception as e:
            raise self._dispatch_error(
                ErrorKind.ELEMENT_NOT_CLICKABLE,
                f"failed to double-click element: {description}",
                e,
            ) from e

    @allure.step("Enter text into: {target}")
    def enter_text(self, target: Target, text: str) -> None:
        """
        Replace the content of an input with ``text``.

        Existing content is cleared first, never appended to.

        Raises:
            HarnessError: ELEMENT_NOT_FOUND if the wait or the input fails
        """
        description = self.describe(target)
        logger.info(f"Entering text into: {description}")

        handle = self.wait_visible(target)
        try:
            handle.fill("", timeout=self._action_timeout_ms)
            handle.fill(text, timeout=self._action_timeout_ms)
        except Exception as e:
            raise self._dispatch_error(
                ErrorKind.ELEMENT_NOT_FOUND,
                f"failed to enter text in element: {description}",
                e,
            ) from e

    @allure.step("Read text: {target}")
    def read_text(self, target: Target) -> str:
        """
        Return the rendered text of the target once it is visible.

        Raises:
            HarnessError: ELEMENT_NOT_FOUND if the wait or the read fails
        """
        description = self.describe(target)
        handle = self.wait_visible(target)
        try:
            text = handle.inner_text()
        except Exception as e:
            raise self._dispatch_error(
                ErrorKind.ELEMENT_NOT_FOUND,
                f"failed to get text from element: {description}",
                e,
            ) from e

        logger.debug(f"Got text from {description}: '{text}'")
        return text

    @allure.step("Drag {source} onto {target}")
    def drag_and_drop(self, source: Target, target: Target) -> None:
        """
        Drag one element and drop it onto another.

        Raises:
            HarnessError: ELEMENT_NOT_FOUND if either element never shows up,
                GENERAL_FAILURE if the gesture fails
        """
        source_desc = self.describe(source)
        target_desc = self.describe(target)
        logger.info(f"Dragging {source_desc} onto {target_desc}")

        source_handle = self.wait_visible(source)
        target_handle = self.wait_visible(target)
        try:
            start = _center(source_handle)
            end = _center(target_handle)
            mouse = self.page.mouse
            mouse.move(*start)
            mouse.down()
            mouse.move(*end, steps=10)
            mouse.up()
        except Exception as e:
            raise self._dispatch_error(
                ErrorKind.GENERAL_FAILURE,
                f"failed to drag {source_desc} onto {target_desc}",
                e,
            ) from e

    @allure.step("Upload file into: {target}")
    def upload_file(self, target: Target, files: Union[str, List[str]]) -> None:
        """
        Set file(s) on a file input.

        File inputs are usually hidden behind a styled button, so this does not
        wait for visibility.

        Raises:
            HarnessError: GENERAL_FAILURE if the files cannot be set
        """
        description = self.describe(target)
        logger.info(f"Uploading {files} into: {description}")
        try:
            locator = self._to_playwright_locator(target)
            element = locator.first if locator is not None else target
            element.set_input_files(files, timeout=self._action_timeout_ms)
        except Exception as e:
            raise self._dispatch_error(
                ErrorKind.GENERAL_FAILURE,
                f"failed to upload file into: {description}",
                e,
            ) from e

    # =========================================================================
    # Probes and Best-Effort Helpers
    # =========================================================================

    @allure.step("Check element visible: {target}")
    def is_visible(self, target: Target) -> bool:
        """
        Return True if the target is currently visible. Never raises.
        """
        try:
            locator = self._to_playwright_locator(target)
            subject = target if locator is None else locator.first
            return bool(subject.is_visible())
        except Exception as e:
            logger.debug(f"Visibility probe failed for {self.describe(target)}: {e}")
            return False

    def count(self, target: Target) -> int:
        """Number of elements currently matching the target (0 on error)."""
        try:
            locator = self._to_playwright_locator(target)
            if locator is None:
                return 1 if target.is_visible() else 0
            return locator.count()
        except Exception as e:
            logger.debug(f"Count failed for {self.describe(target)}: {e}")
            return 0

    @allure.step("Scroll to element: {target}")
    def scroll_into_view(self, target: Target) -> None:
        """Scroll the target into view; failures are logged, not raised."""
        try:
            locator = self._to_playwright_locator(target)
            if locator is None:
                target.evaluate(SCROLL_INTO_VIEW_SCRIPT)
            else:
                locator.first.evaluate(SCROLL_INTO_VIEW_SCRIPT, timeout=self._probe_timeout_ms)
        except Exception as e:
            logger.warning(f"Failed to scroll to element {self.describe(target)}: {e}")

    @allure.step("Wait for page ready")
    def wait_for_page_ready(self, timeout: Optional[float] = None) -> bool:
        """
        Poll ``document.readyState`` until it is ``complete``.

        Advisory only: a timeout is logged and reported as False.
        """
        return self.wait_for_condition(
            lambda: self.page.evaluate(READY_STATE_SCRIPT) == "complete",
            description="document.readyState == 'complete'",
            timeout=timeout,
        )

    def wait_for_condition(
        self,
        predicate: Callable[[], object],
        description: str,
        timeout: Optional[float] = None,
    ) -> bool:
        """
        Poll an arbitrary page predicate with this core's timeout and interval.

        Returns:
            True once the predicate holds, False (logged) on timeout
        """
        condition = WaitCondition(
            predicate=predicate,
            timeout=timeout or self.explicit_wait,
            poll_interval=self.poll_interval,
            description=description,
        )
        try:
            wait_until(condition, clock=self._clock, sleep=self._sleep)
            return True
        except HarnessError as e:
            logger.warning(f"Wait failed: {e}")
            return False

    @allure.step("Navigate to {url}")
    def navigate(self, url: str) -> None:
        """
        Load ``url`` in the session's page.

        Raises:
            HarnessError: TIMEOUT_EXCEEDED if the page-load timeout expires,
                GENERAL_FAILURE for any other navigation error
        """
        logger.info(f"Navigating to: {url}")
        try:
            self.page.goto(url)
        except PlaywrightTimeoutError as e:
            logger.error(f"Navigation to {url} timed out: {e}")
            raise HarnessError(
                ErrorKind.TIMEOUT_EXCEEDED,
                f"page load timed out: {url}",
                cause=e,
            ) from e
        except Exception as e:
            raise self._dispatch_error(
                ErrorKind.GENERAL_FAILURE,
                f"failed to navigate to: {url}",
                e,
            ) from e

    def title(self) -> str:
        return self.page.title()

    def current_url(self) -> str:
        return self.page.url


def _center(handle: ElementHandle):
    box = handle.bounding_box()
    if box is None:
        raise HarnessError(ErrorKind.ELEMENT_NOT_VISIBLE, "element has no bounding box")
    return box["x"] + box["width"] / 2, box["y"] + box["height"] / 2


__all__ = [
    "ElementActions",
    "Target",
]
