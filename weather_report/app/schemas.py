from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Mode(str, Enum):
    CURRENT = "current"
    PER3H = "per3h"
    NEXTDAY = "nextday"
    WEEK = "week"


class WeatherSample(BaseModel):
    model_config = ConfigDict(frozen=True)

    timestamp: int = 0
    condition: str = ""
    condition_detail: str = ""
    temperature: float = 0.0
    min_temperature: float = 0.0
    max_temperature: float = 0.0
    cloud_cover_percent: int = Field(default=0, ge=0, le=100)
    rain_mm_per_hour: float = 0.0
    humidity_percent: int = Field(default=0, ge=0, le=100)


class WeatherReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    city_name: Optional[str] = None
    country_name: Optional[str] = None
    samples: List[WeatherSample] = Field(
        min_length=1,
        description="One sample for current conditions, one per period for forecasts.",
    )
