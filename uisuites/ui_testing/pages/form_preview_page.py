"""
================================================================================
Form Preview Page Object
================================================================================

Preview of a designed form: text input, file upload, submit/reset and the
upload status banners.

Upload completion is reported as a tri-state Outcome:
    - PENDING while the progress indicator is shown or no banner is up yet
    - SUCCEEDED when the success banner is shown without an error
    - FAILED when the error banner is shown

================================================================================
"""

from __future__ import annotations

import time
from typing import Callable, List, Union

import allure
from loguru import logger

from uisuites.ui_testing.framework.locators import Locator
from uisuites.ui_testing.framework.wait_helpers import Outcome, poll_for_outcome
from uisuites.ui_testing.pages.page_base import PageBase


# Seconds between upload status checks
UPLOAD_POLL_INTERVAL = 1.0


class FormPreviewPage(PageBase):
    """Form preview page object."""

    URL_PATH = "/forms/preview"
    PAGE_TITLE = "Form Preview"

    PREVIEW_CONTAINER = Locator.class_name("form-preview-container", name="preview container")
    PREVIEW_TITLE = Locator.class_name("form-preview-title", name="preview title")
    TEXTBOX_INPUT = Locator.id("textbox-input", name="textbox input")
    FILE_UPLOAD_INPUT = Locator.id("file-upload-input", name="file input")
    FILE_NAME_DISPLAY = Locator.class_name("file-name-display", name="uploaded file name")
    SUBMIT_BUTTON = Locator.id("submit-form-button", name="submit button")
    RESET_BUTTON = Locator.id("reset-form-button", name="reset button")
    UPLOAD_PROGRESS = Locator.class_name("upload-progress", name="upload progress")
    UPLOAD_STATUS = Locator.class_name("upload-status", name="upload status")
    SUCCESS_MESSAGE = Locator.class_name("success-message", name="success banner")
    ERROR_MESSAGE = Locator.class_name("error-message", name="error banner")

    def __init__(
        self,
        actions,
        base_url: str = "",
        sleep: Callable[[float], None] = time.sleep,
    ):
        super().__init__(actions, base_url)
        self._sleep = sleep

    def enter_text_in_textbox(self, text: str) -> None:
        self.actions.enter_text(self.TEXTBOX_INPUT, text)

    def upload_file(self, files: Union[str, List[str]]) -> None:
        self.actions.upload_file(self.FILE_UPLOAD_INPUT, files)
        self.actions.wait_for_page_ready()

    def uploaded_file_name(self) -> str:
        return self.actions.read_text(self.FILE_NAME_DISPLAY)

    def click_submit(self) -> None:
        self.actions.click(self.SUBMIT_BUTTON)
        self.actions.wait_for_page_ready()

    def click_reset(self) -> None:
        self.actions.click(self.RESET_BUTTON)
        self.actions.wait_for_page_ready()

    @allure.step("Submit form with text and file")
    def submit_form(self, text: str, files: Union[str, List[str]]) -> None:
        self.enter_text_in_textbox(text)
        self.upload_file(files)
        self.click_submit()

    def upload_status(self) -> str:
        return self.actions.read_text(self.UPLOAD_STATUS)

    def is_upload_in_progress(self) -> bool:
        return self.actions.is_visible(self.UPLOAD_PROGRESS)

    def is_success_displayed(self) -> bool:
        return self.actions.is_visible(self.SUCCESS_MESSAGE)

    def is_error_displayed(self) -> bool:
        return self.actions.is_visible(self.ERROR_MESSAGE)

    def is_file_upload_successful(self) -> bool:
        return self.is_success_displayed() and not self.is_error_displayed()

    def upload_outcome(self) -> Outcome:
        """Current state of the upload as shown by the page."""
        if self.is_upload_in_progress():
            return Outcome.PENDING
        if self.is_error_displayed():
            return Outcome.FAILED
        if self.is_success_displayed():
            return Outcome.SUCCEEDED
        return Outcome.PENDING

    @allure.step("Wait for file upload to complete (timeout={timeout_seconds}s)")
    def wait_for_file_upload_to_complete(self, timeout_seconds: int) -> bool:
        """
        Poll the upload status once per second.

        Args:
            timeout_seconds: Maximum number of one-second checks; zero or less
                checks nothing

        Returns:
            True if the upload succeeded, False if it failed or is still pending
        """
        max_attempts = int(timeout_seconds)
        if max_attempts < 1:
            logger.warning(f"Upload wait skipped: timeout_seconds={timeout_seconds}")
            return False

        outcome = poll_for_outcome(
            self.upload_outcome,
            max_attempts=max_attempts,
            interval_seconds=UPLOAD_POLL_INTERVAL,
            description="file upload",
            sleep=self._sleep,
        )
        return outcome is Outcome.SUCCEEDED
