import pytest
import yaml

from uisuites.ui_testing.framework.config_loader import (
    ConfigLoader,
    ConfigurationError,
    HarnessConfig,
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "BROWSER_KIND",
        "BROWSER_HEADLESS",
        "BROWSER_MAXIMIZE",
        "BROWSER_EXPLICIT_WAIT_SECONDS",
        "BROWSER_POLL_INTERVAL_SECONDS",
        "APP_BASE_URL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults_when_file_missing(tmp_path):
    config = ConfigLoader(config_path=tmp_path / "missing.yaml").load()

    assert config == HarnessConfig()
    assert config.browser_kind == "chrome"
    assert config.implicit_wait_seconds == 10
    assert config.explicit_wait_seconds == 10
    assert config.page_load_timeout_seconds == 30
    assert config.script_timeout_seconds == 30
    assert config.headless is False
    assert config.maximize_on_start is True


def test_yaml_values_and_env_override(monkeypatch, tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        yaml.dump({"browser": {"kind": "Firefox", "explicit_wait_seconds": 15}}),
        encoding="utf-8",
    )

    config = ConfigLoader(config_path=config_path).load()
    assert config.browser_kind == "firefox"
    assert config.explicit_wait_seconds == 15

    monkeypatch.setenv("BROWSER_KIND", "edge")
    monkeypatch.setenv("BROWSER_HEADLESS", "true")
    monkeypatch.setenv("BROWSER_EXPLICIT_WAIT_SECONDS", "2.5")
    config = ConfigLoader(config_path=config_path).load()
    assert config.browser_kind == "edge"
    assert config.headless is True
    assert config.explicit_wait_seconds == 2.5


def test_reload_updates_values(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.dump({"app": {"base_url": "http://a.test"}}), encoding="utf-8")

    loader = ConfigLoader(config_path=config_path)
    assert loader.load().base_url == "http://a.test"

    config_path.write_text(yaml.dump({"app": {"base_url": "http://b.test"}}), encoding="utf-8")
    assert loader.reload().base_url == "http://b.test"


def test_invalid_yaml_raises(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("browser: [unclosed", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        ConfigLoader(config_path=config_path)


def test_non_numeric_env_value_raises(monkeypatch, tmp_path):
    monkeypatch.setenv("BROWSER_EXPLICIT_WAIT_SECONDS", "soon")
    with pytest.raises(ConfigurationError):
        ConfigLoader(config_path=tmp_path / "missing.yaml").load()


def test_validation_rejects_bad_ranges():
    with pytest.raises(ConfigurationError):
        HarnessConfig(explicit_wait_seconds=0).validate()
    with pytest.raises(ConfigurationError):
        HarnessConfig(explicit_wait_seconds=1, poll_interval_seconds=2).validate()


def test_config_is_immutable():
    config = HarnessConfig()
    with pytest.raises(AttributeError):
        config.browser_kind = "firefox"

    changed = config.with_overrides(browser_kind="safari")
    assert changed.browser_kind == "safari"
    assert config.browser_kind == "chrome"
