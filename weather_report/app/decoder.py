import json
import logging
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from .errors import ApiError, DecodeError
from .payloads import Clouds, DailyTemp, ForecastEntry, MainBlock, Observation, WeatherResponse
from .schemas import WeatherReport, WeatherSample
from .units import kelvin_to_celsius

logger = logging.getLogger(__name__)

OK_STATUS = 200
DAILY_RAIN_HOURS = 24


def decode(raw: bytes) -> WeatherReport:
    """
    Turn a raw API response body into a WeatherReport.

    Raises ApiError when the document carries a failing ``cod`` and
    DecodeError when it is not a well-formed weather document.
    """
    try:
        document = json.loads(raw, parse_constant=_reject_constant)
    except ValueError as exc:
        raise DecodeError(f"response is not valid JSON: {exc}") from exc
    if not isinstance(document, dict):
        raise DecodeError(f"expected a JSON object, got {type(document).__name__}")

    _check_status(document)

    try:
        response = WeatherResponse.model_validate(document)
        report = _build_report(response)
    except ValidationError as exc:
        raise DecodeError(f"unexpected response shape: {exc}") from exc

    logger.debug("Decoded %s sample(s) for %s", len(report.samples), report.city_name)
    return report


def _reject_constant(name: str) -> None:
    raise ValueError(f"non-standard JSON constant {name}")


def _check_status(document: Dict[str, Any]) -> None:
    if "cod" not in document:
        return
    code = _status_code(document["cod"])
    if code is None or code == OK_STATUS:
        return
    message = document.get("message")
    if not isinstance(message, str):
        message = f"API returned status {document['cod']}"
    raise ApiError(message, code=code)


def _status_code(value: Any) -> Optional[int]:
    # Numbers and numeric strings are status codes; a string that is not a
    # number is a failure status. Other JSON types carry no status.
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return 0
    return None


def _build_report(response: WeatherResponse) -> WeatherReport:
    city_name = response.name
    country_name = response.sys.country if response.sys else None
    if response.city is not None:
        city_name = response.city.name
        country_name = response.city.country

    if response.entries is None:
        samples = [_sample_from(response)]
    elif not response.entries:
        raise DecodeError("forecast list is empty")
    else:
        samples = [_sample_from(entry) for entry in response.entries]

    return WeatherReport(city_name=city_name, country_name=country_name, samples=samples)


def _sample_from(observation: Observation) -> WeatherSample:
    fields: Dict[str, Any] = {
        "timestamp": int(observation.dt) if observation.dt is not None else 0,
        "cloud_cover_percent": cloud_cover(observation.clouds),
        "rain_mm_per_hour": rain_rate(observation.rain),
    }
    if observation.weather:
        fields["condition"] = observation.weather[0].main
        fields["condition_detail"] = observation.weather[0].description

    if isinstance(observation, ForecastEntry):
        if observation.humidity is not None:
            fields["humidity_percent"] = int(observation.humidity)
        if observation.temp is not None:
            fields.update(_daily_temperatures(observation.temp))

    if observation.main is not None:
        fields.update(_main_block(observation.main))

    return WeatherSample(**fields)


def _main_block(main: MainBlock) -> Dict[str, Any]:
    fields = {
        "temperature": _celsius(main.temp),
        "min_temperature": _celsius(main.temp_min),
        "max_temperature": _celsius(main.temp_max),
    }
    if main.humidity is not None:
        fields["humidity_percent"] = int(main.humidity)
    return fields


def _daily_temperatures(temp: DailyTemp) -> Dict[str, float]:
    return {
        "temperature": _celsius(temp.day),
        "min_temperature": _celsius(temp.min),
        "max_temperature": _celsius(temp.max),
    }


def _celsius(kelvin: Optional[float]) -> float:
    if kelvin is None:
        return 0.0
    return kelvin_to_celsius(kelvin)


def cloud_cover(value: Union[float, Clouds, None]) -> int:
    """Cloud cover percentage from either ``{"all": n}`` or a bare ``n``."""
    if value is None:
        return 0
    if isinstance(value, Clouds):
        return int(value.all) if value.all is not None else 0
    return int(value)


def rain_rate(value: Union[float, Dict[str, float], None]) -> float:
    """
    Normalize a rain reading to millimetres per hour.

    ``{"3h": 6.0}`` is an accumulation over the window named by the key and
    becomes 2.0; a bare number is a daily total and is divided by 24.
    """
    if value is None:
        return 0.0
    if not isinstance(value, dict):
        return value / DAILY_RAIN_HOURS
    if not value:
        return 0.0
    if len(value) > 1:
        raise DecodeError(f"rain must name a single window, got {sorted(value)}")
    window, amount = next(iter(value.items()))
    return amount / _window_hours(window)


def _window_hours(window: str) -> float:
    try:
        hours = float(window[:-1])
    except ValueError as exc:
        raise DecodeError(f"unrecognized rain window {window!r}") from exc
    if not hours > 0:
        raise DecodeError(f"unrecognized rain window {window!r}")
    return hours
