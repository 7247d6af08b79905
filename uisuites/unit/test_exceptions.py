from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from uisuites.ui_testing.framework.exceptions import ErrorKind, HarnessError, is_stale


def test_error_carries_kind_message_and_cause():
    cause = ValueError("boom")
    error = HarnessError(ErrorKind.ELEMENT_NOT_CLICKABLE, "element not clickable: <#save>", cause=cause)

    assert error.kind is ErrorKind.ELEMENT_NOT_CLICKABLE
    assert error.message == "element not clickable: <#save>"
    assert error.cause is cause
    assert str(error) == "element_not_clickable: element not clickable: <#save>"


def test_cause_is_optional():
    error = HarnessError(ErrorKind.GENERAL_FAILURE, "something failed")
    assert error.cause is None
    assert "GENERAL_FAILURE" in repr(error)


def test_taxonomy_is_closed():
    assert {kind.name for kind in ErrorKind} == {
        "ELEMENT_NOT_FOUND",
        "ELEMENT_NOT_CLICKABLE",
        "ELEMENT_NOT_VISIBLE",
        "TIMEOUT_EXCEEDED",
        "STALE_ELEMENT",
        "DRIVER_FAILURE",
        "UNSUPPORTED_BROWSER_KIND",
        "GENERAL_FAILURE",
    }


def test_is_stale_recognises_detached_elements():
    assert is_stale(PlaywrightError("Element is not attached to the DOM"))
    assert is_stale(HarnessError(ErrorKind.STALE_ELEMENT, "gone"))


def test_is_stale_rejects_other_errors():
    assert not is_stale(PlaywrightTimeoutError("Timeout 1000ms exceeded"))
    assert not is_stale(RuntimeError("Element is not attached to the DOM"))
    assert not is_stale(HarnessError(ErrorKind.ELEMENT_NOT_FOUND, "missing"))
