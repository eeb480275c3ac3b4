import logging
from typing import Any, Dict, Optional, Tuple

import httpx

from .config import Settings
from .errors import TransportError
from .schemas import Mode

logger = logging.getLogger(__name__)

# mode -> (endpoint path, extra query params)
ENDPOINTS: Dict[Mode, Tuple[str, Dict[str, Any]]] = {
    Mode.CURRENT: ("weather", {}),
    Mode.PER3H: ("forecast", {}),
    Mode.NEXTDAY: ("forecast/daily", {"cnt": 2}),
    Mode.WEEK: ("forecast/daily", {"cnt": 7}),
}


def build_request(mode: Mode, location: str, settings: Settings) -> Tuple[str, Dict[str, Any]]:
    path, extra = ENDPOINTS[Mode(mode)]
    url = f"{settings.endpoint_root}/{path}"
    params: Dict[str, Any] = {"q": location, **extra}
    if settings.forecast_api_key:
        params["appid"] = settings.forecast_api_key
    return url, params


class WeatherClient:
    """Fetches raw OpenWeatherMap response bodies; decoding happens elsewhere."""

    def __init__(self, settings: Settings, transport: Optional[httpx.BaseTransport] = None):
        self.settings = settings
        self._transport = transport

    def fetch(self, mode: Mode, location: str) -> bytes:
        mode = Mode(mode)
        url, params = build_request(mode, location, self.settings)
        logger.debug("GET %s q=%s cnt=%s", url, location, params.get("cnt"))
        try:
            with httpx.Client(
                timeout=self.settings.request_timeout_seconds, transport=self._transport
            ) as client:
                resp = client.get(url, params=params)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("Weather fetch failed for %s (%s): %s", location, mode.value, exc)
            raise TransportError(f"request to {url} failed: {exc}") from exc

        if resp.is_error and not _carries_api_status(resp):
            logger.warning("Weather fetch for %s returned HTTP %s", location, resp.status_code)
            raise TransportError(f"HTTP {resp.status_code} from {url}")
        return resp.content


def _carries_api_status(resp: httpx.Response) -> bool:
    # Error bodies like {"cod": "404", "message": "city not found"} are left
    # for the decoder so the API's own message reaches the user.
    try:
        body = resp.json()
    except ValueError:
        return False
    return isinstance(body, dict) and "cod" in body
