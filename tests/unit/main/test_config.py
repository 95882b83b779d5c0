from __future__ import annotations

from healthboard.main.config import AppSettings, get_settings
from healthboard.shared.consts import EnumEnvironment


def test_get_settings_loads_defaults(monkeypatch) -> None:
    monkeypatch.delenv("DASHBOARD_SETTINGS_FILE", raising=False)
    monkeypatch.delenv("DASHBOARD_SETTINGS_PATH", raising=False)
    monkeypatch.delenv("DASHBOARD_TIMEOUT_SECONDS", raising=False)
    settings = get_settings()

    assert settings.dashboard.settings_file == "dashboard-settings.json"
    assert settings.dashboard.timeout_seconds == 5
    assert settings.dashboard.refresh_interval_seconds == 30
    assert settings.environment == EnumEnvironment.DEVELOPMENT


def test_settings_respect_environment_variables(monkeypatch) -> None:
    monkeypatch.setenv("DASHBOARD_SETTINGS_PATH", "/etc/healthboard/services.json")
    monkeypatch.setenv("DASHBOARD_TIMEOUT_SECONDS", "12")
    monkeypatch.setenv("SERVER_TITLE", "Testing")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = AppSettings()

    assert settings.dashboard.settings_file == "/etc/healthboard/services.json"
    assert settings.dashboard.timeout_seconds == 12
    assert settings.server.title == "Testing"
    assert settings.logging.level.value == "DEBUG"
