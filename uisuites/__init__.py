"""
Browser interaction harness.

  - `ui_testing.framework`: session factory, wait-gated element actions,
    error taxonomy, configuration and reporting
  - `ui_testing.pages`: page objects built on the framework by composition
  - `unit`: browser-free tests against in-memory Playwright fakes
"""
