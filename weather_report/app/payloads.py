"""
Typed views of the OpenWeatherMap 2.5 JSON documents.

Only the keys the decoder reads are declared; everything else is ignored.
Leaf values are strict so that a recognized key carrying the wrong JSON type
(a quoted temperature, an object timestamp) fails validation instead of
being coerced.
"""

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictStr


class _Payload(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, allow_inf_nan=False)


class Condition(_Payload):
    main: StrictStr = ""
    description: StrictStr = ""


class Clouds(_Payload):
    all: Optional[StrictFloat] = None


class MainBlock(_Payload):
    # Kelvin
    temp: Optional[StrictFloat] = None
    temp_min: Optional[StrictFloat] = None
    temp_max: Optional[StrictFloat] = None
    humidity: Optional[StrictFloat] = None


class DailyTemp(_Payload):
    # Kelvin
    day: Optional[StrictFloat] = None
    min: Optional[StrictFloat] = None
    max: Optional[StrictFloat] = None


class Observation(_Payload):
    dt: Optional[StrictFloat] = None
    weather: List[Condition] = []
    # {"all": 40} on current conditions, bare 40 on daily entries
    clouds: Union[StrictFloat, Clouds, None] = None
    # {"3h": 6.0}
    rain: Optional[Dict[str, StrictFloat]] = None
    main: Optional[MainBlock] = None


class ForecastEntry(Observation):
    # bare 24h total on daily entries
    rain: Union[StrictFloat, Dict[str, StrictFloat], None] = None
    humidity: Optional[StrictFloat] = None
    temp: Optional[DailyTemp] = None


class SysBlock(_Payload):
    country: Optional[StrictStr] = None


class CityBlock(_Payload):
    name: Optional[StrictStr] = None
    country: Optional[StrictStr] = None


class WeatherResponse(Observation):
    """A current-conditions document, or a forecast document when ``list`` is set."""

    name: Optional[StrictStr] = None
    sys: Optional[SysBlock] = None
    city: Optional[CityBlock] = None
    entries: Optional[List[ForecastEntry]] = Field(default=None, alias="list")
