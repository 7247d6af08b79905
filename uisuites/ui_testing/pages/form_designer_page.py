"""
================================================================================
Form Designer Page Object
================================================================================

Form designer: element library on the left, drop canvas in the middle,
properties panel on the right.

Adding an element is a drag from the library onto a canvas drop zone. Whether
it landed is checked against the canvas itself: the number of rendered canvas
elements must grow by the number of elements added.

================================================================================
"""

from __future__ import annotations

from typing import Optional

import allure
from loguru import logger

from uisuites.ui_testing.framework.locators import Locator
from uisuites.ui_testing.pages.page_base import PageBase


class FormDesignerPage(PageBase):
    """Form designer page object."""

    URL_PATH = "/forms/designer"
    PAGE_TITLE = "Form Designer"

    FORM_CANVAS = Locator.class_name("form-canvas", name="form canvas")
    LEFT_MENU = Locator.class_name("left-menu", name="left menu")
    RIGHT_PANEL = Locator.class_name("right-panel", name="right panel")
    ELEMENT_LIBRARY = Locator.class_name("element-library", name="element library")
    ELEMENT_PROPERTIES = Locator.class_name("element-properties", name="element properties")

    TEXTBOX_ELEMENT = Locator.xpath(
        "//div[contains(@class,'form-element') and contains(text(),'Textbox')]",
        name="Textbox library item",
    )
    SELECT_FILE_ELEMENT = Locator.xpath(
        "//div[contains(@class,'form-element') and contains(text(),'Select File')]",
        name="Select File library item",
    )
    DROP_ZONE_1 = Locator.class_name("drop-zone-1", name="drop zone 1")
    DROP_ZONE_2 = Locator.class_name("drop-zone-2", name="drop zone 2")

    # Elements rendered on the canvas after a drop
    CANVAS_ELEMENTS = Locator.css(".form-canvas .canvas-element", name="canvas elements")

    SAVE_FORM_BUTTON = Locator.id("save-form-button", name="save form button")
    PREVIEW_FORM_BUTTON = Locator.id("preview-form-button", name="preview form button")
    TITLE = Locator.class_name("form-designer-title", name="form designer title")

    def __init__(self, actions, base_url: str = ""):
        super().__init__(actions, base_url)
        self._canvas_baseline: Optional[int] = None
        self._elements_added = 0

    def canvas_element_count(self) -> int:
        return self.actions.count(self.CANVAS_ELEMENTS)

    def drag_element_to_canvas(self, element: Locator, drop_zone: Locator) -> None:
        """Drag a library item onto a drop zone and record it as added."""
        if self._canvas_baseline is None:
            self._canvas_baseline = self.canvas_element_count()
        self.actions.drag_and_drop(element, drop_zone)
        self.actions.wait_for_page_ready()
        self._elements_added += 1

    @allure.step("Add Textbox element to canvas")
    def add_textbox_element(self) -> None:
        self.drag_element_to_canvas(self.TEXTBOX_ELEMENT, self.DROP_ZONE_1)

    @allure.step("Add Select File element to canvas")
    def add_select_file_element(self) -> None:
        self.drag_element_to_canvas(self.SELECT_FILE_ELEMENT, self.DROP_ZONE_2)

    @allure.step("Verify dropped elements rendered on canvas")
    def are_form_elements_added_to_canvas(self, timeout: Optional[float] = None) -> bool:
        """
        Verify every element dragged so far is rendered on the canvas.

        Waits (up to the explicit wait) for the canvas element count to reach
        the count seen before the first drop plus the number of drops.

        Returns:
            False if nothing was added or the count never grew enough
        """
        if self._canvas_baseline is None or self._elements_added == 0:
            logger.warning("No elements were dragged onto the canvas")
            return False

        expected = self._canvas_baseline + self._elements_added
        return self.actions.wait_for_condition(
            lambda: self.canvas_element_count() >= expected,
            description=f"canvas element count >= {expected}",
            timeout=timeout,
        )

    def select_element(self, element: Locator) -> None:
        """Click an element to show its properties in the right panel."""
        self.actions.click(element)
        self.actions.wait_for_page_ready()

    def save_form(self) -> None:
        self.actions.click(self.SAVE_FORM_BUTTON)
        self.actions.wait_for_page_ready()

    def preview_form(self) -> None:
        self.actions.click(self.PREVIEW_FORM_BUTTON)
        self.actions.wait_for_page_ready()

    def title_text(self) -> str:
        return self.actions.read_text(self.TITLE)

    def is_form_designer_loaded(self) -> bool:
        return all(
            self.actions.is_visible(locator)
            for locator in (self.FORM_CANVAS, self.LEFT_MENU, self.RIGHT_PANEL)
        )

    def is_left_menu_visible(self) -> bool:
        return all(
            self.actions.is_visible(locator)
            for locator in (
                self.LEFT_MENU,
                self.ELEMENT_LIBRARY,
                self.TEXTBOX_ELEMENT,
                self.SELECT_FILE_ELEMENT,
            )
        )
