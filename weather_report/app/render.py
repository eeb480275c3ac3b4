from datetime import datetime, tzinfo
from typing import List, Optional

from .schemas import WeatherReport, WeatherSample
from .units import celsius_to_fahrenheit

TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S"
SEPARATOR = "==="

# ANSI SGR codes
RESET = "\033[0m"
BOLD = "\033[1m"
CYAN = "\033[36m"
YELLOW = "\033[33m"
BLUE = "\033[34m"


def _paint(text: str, code: str, color: bool) -> str:
    return f"{code}{text}{RESET}" if color else text


def format_timestamp(timestamp: int, tz: Optional[tzinfo] = None) -> str:
    """
    Format Unix seconds in ``tz``, or in the system local zone when ``tz`` is None.

    Seconds outside the range the platform can convert are printed as-is.
    """
    try:
        if tz is None:
            moment = datetime.fromtimestamp(timestamp).astimezone()
        else:
            moment = datetime.fromtimestamp(timestamp, tz=tz)
    except (OverflowError, OSError, ValueError):
        return f"{timestamp} [s]"
    return moment.strftime(TIMESTAMP_FORMAT)


def render_header(report: WeatherReport, color: bool = False) -> str:
    place = f"[{report.city_name or ''},{report.country_name or ''}]"
    return _paint(place, BOLD, color)


def render_sample(
    sample: WeatherSample,
    color: bool = False,
    fahrenheit: bool = False,
    tz: Optional[tzinfo] = None,
) -> List[str]:
    temps = (sample.temperature, sample.min_temperature, sample.max_temperature)
    unit = "C"
    if fahrenheit:
        temps = tuple(celsius_to_fahrenheit(t) for t in temps)
        unit = "F"
    temp, temp_min, temp_max = temps

    def line(label: str, value: str, code: str) -> str:
        return f"{_paint(f'{label:>9}:', CYAN, color)} {_paint(value, code, color)}"

    return [
        line("datetime", format_timestamp(sample.timestamp, tz), BOLD),
        line("weather", f"{sample.condition} ({sample.condition_detail})", BOLD),
        line("temp", f"{temp:5.2f}[{unit}] (min:{temp_min:.2f} / max:{temp_max:.2f})", YELLOW),
        line("cloud", f"{sample.cloud_cover_percent:5d}[%]", BLUE),
        line("hmdy", f"{sample.humidity_percent:5d}[%]", BLUE),
        line("rain", f"{sample.rain_mm_per_hour:5.2f}[mm/1h]", BLUE),
        SEPARATOR,
    ]


def render(
    report: WeatherReport,
    *,
    color: bool = False,
    fahrenheit: bool = False,
    tz: Optional[tzinfo] = None,
) -> str:
    lines = [render_header(report, color)]
    for sample in report.samples:
        lines.extend(render_sample(sample, color=color, fahrenheit=fahrenheit, tz=tz))
    return "\n".join(lines) + "\n"
