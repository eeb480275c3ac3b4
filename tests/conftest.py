import pytest

from weather_report.app.config import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        forecast_base_url="https://owm.test/data/2.5/",
        forecast_api_key=None,
        request_timeout_seconds=2.0,
    )


@pytest.fixture
def current_payload() -> dict:
    return {
        "coord": {"lon": -21.9, "lat": 64.1},
        "weather": [{"id": 500, "main": "Rain", "description": "light rain", "icon": "10d"}],
        "main": {
            "temp": 300.0,
            "feels_like": 301.2,
            "temp_min": 298.15,
            "temp_max": 301.15,
            "pressure": 1012,
            "humidity": 87,
        },
        "clouds": {"all": 40},
        "rain": {"3h": 6.0},
        "dt": 1700000000,
        "sys": {"country": "IS", "sunrise": 1699950000},
        "name": "Reykjavik",
        "cod": 200,
    }


@pytest.fixture
def per3h_payload() -> dict:
    entries = []
    for i in range(3):
        entries.append(
            {
                "dt": 1700000000 + i * 10800,
                "main": {"temp": 280.15 + i, "temp_min": 279.15, "temp_max": 281.15, "humidity": 70 + i},
                "weather": [{"main": "Clouds", "description": "overcast clouds"}],
                "clouds": {"all": 90},
                "rain": {"3h": 0.3},
                "dt_txt": "2023-11-14 22:00:00",
            }
        )
    return {
        "cod": "200",
        "message": 0,
        "cnt": len(entries),
        "list": entries,
        "city": {"id": 3413829, "name": "Reykjavik", "country": "IS"},
    }


@pytest.fixture
def week_payload() -> dict:
    entries = []
    for i in range(7):
        entries.append(
            {
                "dt": 1700046000 + i * 86400,
                "temp": {"day": 275.15 + i, "min": 270.15, "max": 280.15, "night": 271.0},
                "pressure": 1003.5,
                "humidity": 60 + i,
                "weather": [{"main": "Snow", "description": "light snow"}],
                "speed": 6.2,
                "clouds": 40 + i,
                "rain": 24,
            }
        )
    return {
        "cod": "200",
        "message": 0.01,
        "city": {"name": "Reykjavik", "country": "IS"},
        "cnt": 7,
        "list": entries,
    }
