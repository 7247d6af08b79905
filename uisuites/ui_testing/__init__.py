"""Browser-backed framework, page objects and UI tests."""
