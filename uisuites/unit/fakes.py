"""
In-memory stand-ins for the Playwright objects the framework touches.

They implement only the calls made by SessionFactory and ElementActions, and
record what was done to them so tests can assert on it.
"""

from typing import Any, Callable, Dict, List, Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError


class FakeClock:
    """Monotonic clock advanced only by its own ``sleep``."""

    def __init__(self):
        self.now = 0.0
        self.sleeps: List[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class FakeElement:
    """ElementHandle lookalike.

    ``visible`` may be a list: each visibility probe consumes one value and the
    last value sticks.
    """

    def __init__(self, text: str = "", visible: Any = True, enabled: Any = True, value: str = ""):
        self.text = text
        self.value = value
        self._visible = list(visible) if isinstance(visible, (list, tuple)) else [visible]
        self._enabled = list(enabled) if isinstance(enabled, (list, tuple)) else [enabled]
        self.stale = False
        self.click_error: Optional[Exception] = None
        self.clicks = 0
        self.double_clicks = 0
        self.fills: List[str] = []
        self.files: Any = None
        self.scripts: List[str] = []
        self.visibility_probes = 0

    def _check_attached(self) -> None:
        if self.stale:
            raise PlaywrightError("Element is not attached to the DOM")

    @staticmethod
    def _next(values: list) -> bool:
        return values.pop(0) if len(values) > 1 else values[0]

    def is_visible(self) -> bool:
        self._check_attached()
        self.visibility_probes += 1
        return self._next(self._visible)

    def is_enabled(self) -> bool:
        self._check_attached()
        return self._next(self._enabled)

    def click(self, timeout: Optional[float] = None) -> None:
        self._check_attached()
        if self.click_error is not None:
            raise self.click_error
        self.clicks += 1

    def dblclick(self, timeout: Optional[float] = None) -> None:
        self._check_attached()
        if self.click_error is not None:
            raise self.click_error
        self.double_clicks += 1

    def fill(self, value: str, timeout: Optional[float] = None) -> None:
        self._check_attached()
        self.fills.append(value)
        self.value = value

    def inner_text(self) -> str:
        self._check_attached()
        return self.text

    def evaluate(self, script: str, arg: Any = None) -> Any:
        self._check_attached()
        self.scripts.append(script)
        return None

    def bounding_box(self) -> Dict[str, float]:
        return {"x": 10, "y": 20, "width": 100, "height": 40}

    def set_input_files(self, files: Any, timeout: Optional[float] = None) -> None:
        self._check_attached()
        self.files = files


class FakeLocator:
    """Playwright Locator lookalike; re-reads the page on every call."""

    def __init__(self, page: "FakePage", selector: str):
        self.page = page
        self.selector = selector

    def _elements(self) -> List[FakeElement]:
        return self.page.elements.get(self.selector, [])

    def count(self) -> int:
        self.page.lookups += 1
        return len(self._elements())

    @property
    def first(self) -> "FakeLocator":
        return self

    def _first_element(self, timeout: Optional[float]) -> FakeElement:
        elements = self._elements()
        if not elements:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded waiting for {self.selector}")
        return elements[0]

    def is_visible(self) -> bool:
        elements = self._elements()
        return bool(elements) and elements[0].is_visible()

    def is_enabled(self, timeout: Optional[float] = None) -> bool:
        return self._first_element(timeout).is_enabled()

    def evaluate(self, script: str, arg: Any = None, timeout: Optional[float] = None) -> Any:
        return self._first_element(timeout).evaluate(script, arg)

    def element_handle(self, timeout: Optional[float] = None) -> FakeElement:
        element = self._first_element(timeout)
        self.page.handles_taken += 1
        return element

    def set_input_files(self, files: Any, timeout: Optional[float] = None) -> None:
        self._first_element(timeout).set_input_files(files, timeout)


class FakeMouse:
    def __init__(self):
        self.events: List[tuple] = []
        self.on_up: Optional[Callable[[], None]] = None

    def move(self, x: float, y: float, steps: int = 1) -> None:
        self.events.append(("move", x, y))

    def down(self) -> None:
        self.events.append(("down",))

    def up(self) -> None:
        self.events.append(("up",))
        if self.on_up is not None:
            self.on_up()


class FakePage:
    """Page lookalike holding selector -> elements."""

    def __init__(self, ready_states: Optional[List[str]] = None):
        self.elements: Dict[str, List[FakeElement]] = {}
        self.ready_states = list(ready_states or ["complete"])
        self.mouse = FakeMouse()
        self.url = "about:blank"
        self.lookups = 0
        self.handles_taken = 0
        self.goto_error: Optional[Exception] = None
        self.viewport: Optional[Dict[str, int]] = None
        self.visited: List[str] = []
        self.screen = {"width": 1920, "height": 1040}

    def add(self, target: Any, *elements: FakeElement) -> None:
        selector = getattr(target, "selector", target)
        self.elements.setdefault(selector, []).extend(elements)

    def locator(self, selector: str) -> FakeLocator:
        return FakeLocator(self, selector)

    def evaluate(self, script: str, arg: Any = None) -> Any:
        if "readyState" in script:
            states = self.ready_states
            return states.pop(0) if len(states) > 1 else states[0]
        if "availWidth" in script:
            return dict(self.screen)
        raise PlaywrightError(f"unexpected script: {script}")

    def set_viewport_size(self, size: Dict[str, int]) -> None:
        self.viewport = size

    def goto(self, url: str) -> None:
        if self.goto_error is not None:
            raise self.goto_error
        self.visited.append(url)
        self.url = url

    def title(self) -> str:
        return "Fake Page"


class FakeContext:
    def __init__(self, options: Dict[str, Any]):
        self.options = options
        self.page = FakePage()
        self.default_timeout: Optional[float] = None
        self.navigation_timeout: Optional[float] = None
        self.cookies_cleared = 0
        self.closed = 0
        self.close_error: Optional[Exception] = None

    def set_default_timeout(self, timeout: float) -> None:
        self.default_timeout = timeout

    def set_default_navigation_timeout(self, timeout: float) -> None:
        self.navigation_timeout = timeout

    def new_page(self) -> FakePage:
        return self.page

    def clear_cookies(self) -> None:
        self.cookies_cleared += 1

    def close(self) -> None:
        self.closed += 1
        if self.close_error is not None:
            raise self.close_error


class FakeBrowser:
    def __init__(self, engine: str, options: Dict[str, Any]):
        self.engine = engine
        self.options = options
        self.contexts: List[FakeContext] = []
        self.closed = 0
        self.close_error: Optional[Exception] = None

    def new_context(self, **options: Any) -> FakeContext:
        context = FakeContext(options)
        self.contexts.append(context)
        return context

    def close(self) -> None:
        self.closed += 1
        if self.close_error is not None:
            raise self.close_error


class FakeBrowserType:
    def __init__(self, engine: str):
        self.engine = engine
        self.launched: List[FakeBrowser] = []
        self.launch_error: Optional[Exception] = None

    def launch(self, **options: Any) -> FakeBrowser:
        if self.launch_error is not None:
            raise self.launch_error
        browser = FakeBrowser(self.engine, options)
        self.launched.append(browser)
        return browser


class FakePlaywright:
    def __init__(self):
        self.chromium = FakeBrowserType("chromium")
        self.firefox = FakeBrowserType("firefox")
        self.webkit = FakeBrowserType("webkit")
        self.stopped = 0

    def stop(self) -> None:
        self.stopped += 1


class FakePlaywrightManager:
    """Stands in for ``sync_playwright()``."""

    def __init__(self):
        self.playwright = FakePlaywright()
        self.starts = 0

    def __call__(self) -> "FakePlaywrightManager":
        return self

    def start(self) -> FakePlaywright:
        self.starts += 1
        return self.playwright


class FakeSession:
    """Minimal session: a page and a config."""

    def __init__(self, page: FakePage, config):
        self.page = page
        self.config = config
