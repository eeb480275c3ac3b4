from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from .schemas import Mode


class Settings(BaseSettings):
    forecast_base_url: str = "http://api.openweathermap.org/data/2.5"
    forecast_api_key: str | None = None
    request_timeout_seconds: float = 10.0

    default_location: str = "iceland"
    default_mode: Mode = Mode.CURRENT
    color: bool = True

    log_level: str = "WARNING"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    @property
    def endpoint_root(self) -> str:
        return self.forecast_base_url.rstrip("/")


@lru_cache
def get_settings() -> Settings:
    return Settings()
