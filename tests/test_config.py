from weather_report.app.config import Settings
from weather_report.app.schemas import Mode


def test_defaults(monkeypatch):
    for name in ("FORECAST_API_KEY", "FORECAST_BASE_URL", "DEFAULT_LOCATION", "DEFAULT_MODE", "COLOR"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.default_location == "iceland"
    assert settings.default_mode is Mode.CURRENT
    assert settings.color is True
    assert settings.forecast_api_key is None
    assert settings.endpoint_root == "http://api.openweathermap.org/data/2.5"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("FORECAST_API_KEY", "abc123")
    monkeypatch.setenv("DEFAULT_MODE", "week")
    monkeypatch.setenv("COLOR", "false")
    monkeypatch.setenv("REQUEST_TIMEOUT_SECONDS", "3.5")

    settings = Settings(_env_file=None)

    assert settings.forecast_api_key == "abc123"
    assert settings.default_mode is Mode.WEEK
    assert settings.color is False
    assert settings.request_timeout_seconds == 3.5
