import allure
from playwright.sync_api import Error as PlaywrightError

from uisuites.ui_testing.framework import reporting


def test_attach_text_adds_text_attachment(monkeypatch):
    attached = []
    monkeypatch.setattr(allure, "attach", lambda body, name, attachment_type: attached.append((body, name, attachment_type)))

    reporting.attach_text("url: http://app.test/login", name="failure_context")

    assert attached == [("url: http://app.test/login", "failure_context", allure.attachment_type.TEXT)]


def test_attach_screenshot_is_best_effort(monkeypatch):
    attached = []
    monkeypatch.setattr(allure, "attach", lambda body, name, attachment_type: attached.append(name))

    class ClosedPage:
        def screenshot(self, full_page=True):
            raise PlaywrightError("Target page, context or browser has been closed")

    class OpenPage:
        def screenshot(self, full_page=True):
            return b"\x89PNG"

    assert reporting.attach_screenshot(ClosedPage()) is False
    assert reporting.attach_screenshot(OpenPage(), name="failure_screenshot") is True
    assert attached == ["failure_screenshot"]
