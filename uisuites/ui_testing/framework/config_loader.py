"""
================================================================================
Configuration Loader
================================================================================

YAML-based harness configuration with environment variable override support.

The loader produces one immutable ``HarnessConfig`` value which is passed
explicitly to the session factory and the interaction core. Nothing reads
configuration from module-level state.

Configuration hierarchy (highest to lowest priority):
    1. Environment variables (BROWSER_KIND overrides browser.kind)
    2. YAML configuration file
    3. HarnessConfig defaults

Example YAML:
    browser:
      kind: firefox
      headless: true
      explicit_wait_seconds: 15
    app:
      base_url: https://staging.example.com

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger


# Default configuration file path
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "config.yaml"


class ConfigurationError(Exception):
    """Raised when configuration loading or validation fails."""
    pass


@dataclass(frozen=True)
class HarnessConfig:
    """
    Immutable browser harness configuration.

    Attributes:
        browser_kind: One of chrome, firefox, edge, safari
        implicit_wait_seconds: Default timeout for single driver actions
        explicit_wait_seconds: Timeout for wait-gated element operations
        page_load_timeout_seconds: Navigation timeout
        script_timeout_seconds: Timeout recorded for script execution
        headless: Run browser without a visible window
        maximize_on_start: Maximize the window when the session is created
        poll_interval_seconds: Interval between wait-condition probes
        base_url: Application base URL used by page objects
    """
    browser_kind: str = "chrome"
    implicit_wait_seconds: float = 10
    explicit_wait_seconds: float = 10
    page_load_timeout_seconds: float = 30
    script_timeout_seconds: float = 30
    headless: bool = False
    maximize_on_start: bool = True
    poll_interval_seconds: float = 0.5
    base_url: str = "http://localhost:3000"

    def validate(self) -> "HarnessConfig":
        """Check value ranges; returns self so it can be chained."""
        for name in (
            "implicit_wait_seconds",
            "explicit_wait_seconds",
            "page_load_timeout_seconds",
            "script_timeout_seconds",
            "poll_interval_seconds",
        ):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or value <= 0:
                raise ConfigurationError(f"{name} must be a positive number, got {value!r}")

        if self.poll_interval_seconds > self.explicit_wait_seconds:
            raise ConfigurationError(
                "poll_interval_seconds must not exceed explicit_wait_seconds "
                f"({self.poll_interval_seconds} > {self.explicit_wait_seconds})"
            )
        return self

    def with_overrides(self, **changes: Any) -> "HarnessConfig":
        """Return a validated copy with the given fields replaced."""
        return replace(self, **changes).validate()


# YAML dot path -> HarnessConfig field
CONFIG_KEYS: Dict[str, str] = {
    "browser.kind": "browser_kind",
    "browser.headless": "headless",
    "browser.maximize": "maximize_on_start",
    "browser.implicit_wait_seconds": "implicit_wait_seconds",
    "browser.explicit_wait_seconds": "explicit_wait_seconds",
    "browser.page_load_timeout_seconds": "page_load_timeout_seconds",
    "browser.script_timeout_seconds": "script_timeout_seconds",
    "browser.poll_interval_seconds": "poll_interval_seconds",
    "app.base_url": "base_url",
}


class ConfigLoader:
    """
    Reads harness configuration from YAML and environment variables.

    Usage:
        >>> config = ConfigLoader("config/config.yaml").load()
        >>> config.browser_kind
        'chrome'

    Environment Variable Mapping:
        - browser.kind -> BROWSER_KIND
        - browser.headless -> BROWSER_HEADLESS
        - app.base_url -> APP_BASE_URL
    """

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """
        Initialize configuration loader.

        Args:
            config_path: Path to YAML configuration file.
                        Uses DEFAULT_CONFIG_PATH if not specified.
        """
        self._config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._config: Dict[str, Any] = {}
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        if not self._config_path.exists():
            logger.warning(
                f"Configuration file not found: {self._config_path}. "
                f"Using defaults and environment variables only."
            )
            self._config = {}
            return

        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file: {e}"
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration root must be a mapping: {self._config_path}"
            )
        self._config = data
        logger.debug(f"Loaded configuration from: {self._config_path}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-notation path.

        First checks environment variables, then YAML config, then default.

        Args:
            key: Dot-notation path (e.g., "browser.kind")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        env_key = key.upper().replace(".", "_")
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return self._convert_type(env_value, default)

        value: Any = self._config
        for part in key.split("."):
            if isinstance(value, dict):
                value = value.get(part)
            else:
                value = None

            if value is None:
                return default

        return value

    def load(self) -> HarnessConfig:
        """
        Build a validated HarnessConfig.

        Raises:
            ConfigurationError: If a value is out of range
        """
        defaults = HarnessConfig()
        values = {
            field_name: self.get(key, getattr(defaults, field_name))
            for key, field_name in CONFIG_KEYS.items()
        }
        values["browser_kind"] = str(values["browser_kind"]).strip().lower()

        known = {f.name for f in fields(HarnessConfig)}
        config = HarnessConfig(**{k: v for k, v in values.items() if k in known})
        logger.debug(f"Harness configuration: {config}")
        return config.validate()

    def reload(self) -> HarnessConfig:
        """Re-read the YAML file and return a fresh configuration."""
        self._load_config()
        logger.info(f"Configuration reloaded from: {self._config_path}")
        return self.load()

    def _convert_type(self, value: str, reference: Any) -> Any:
        """
        Convert string value to match reference type.

        Used for environment variables which are always strings.
        """
        if reference is None:
            return value

        if isinstance(reference, bool):
            return value.lower() in ("true", "1", "yes", "on")
        if isinstance(reference, (int, float)):
            try:
                number = float(value)
            except ValueError as e:
                raise ConfigurationError(
                    f"Expected a number, got {value!r}"
                ) from e
            return int(number) if number.is_integer() and isinstance(reference, int) else number

        return value


def load_config(config_path: Optional[Path] = None) -> HarnessConfig:
    """Shortcut for ``ConfigLoader(config_path).load()``."""
    return ConfigLoader(config_path).load()


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "HarnessConfig",
    "load_config",
]
