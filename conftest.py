"""
Repository-level pytest configuration.

Provides safe defaults for demo credentials so page-object flows can run
locally. Browser and application settings are deliberately left alone: they
come from `uisuites/config/config.yaml` or explicit environment variables.
"""

from __future__ import annotations

import os
from typing import Generator

import pytest


@pytest.fixture(scope="session", autouse=True)
def _demo_safe_env_defaults() -> Generator[None, None, None]:
    """Set placeholder credentials if not already provided by the user/CI."""
    defaults = {
        "UI_USERNAME": "demo_user",
        "UI_PASSWORD": "demo_password",
    }

    for k, v in defaults.items():
        os.environ.setdefault(k, v)

    yield
