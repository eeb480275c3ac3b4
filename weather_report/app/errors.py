from typing import Optional


class WeatherReportError(Exception):
    """Base class for failures that end a report run."""


class TransportError(WeatherReportError):
    """The raw response body could not be fetched."""


class ApiError(WeatherReportError):
    """The API answered with a status code other than 200."""

    def __init__(self, message: str, code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.code = code


class DecodeError(WeatherReportError):
    """The response is not a well-formed weather document."""
