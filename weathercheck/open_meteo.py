"""Weather service backed by the Open-Meteo forecast API."""

from __future__ import annotations

import http.client
import json
import math
import urllib.request

from weathercheck.models import WeatherData, WeatherService

DEFAULT_BASE_URL = "http://api.open-meteo.com"
_FORECAST_PATH = "/v1/forecast"

_UNAVAILABLE = WeatherData(math.nan, math.nan, False)


def _number(value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected a number, got {value!r}")
    return float(value)


class OpenMeteoWeatherService(WeatherService):
    """Fetches current weather from the Open-Meteo API."""

    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: float = 10.0) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _forecast_url(self, latitude: float, longitude: float) -> str:
        return (
            f"{self.base_url}{_FORECAST_PATH}"
            f"?latitude={latitude:f}&longitude={longitude:f}&current_weather=true"
        )

    def _fetch(self, url: str) -> bytes | None:
        try:
            with urllib.request.urlopen(url, timeout=self.timeout) as response:
                if response.status != 200:
                    return None
                return response.read()
        except (OSError, http.client.HTTPException):
            return None

    def get_weather_data(self, latitude: float, longitude: float) -> WeatherData:
        """Return current conditions, or unsuccessful NaN data on failure.

        A response that announces current weather but lacks a numeric
        temperature or wind speed raises KeyError or TypeError.
        """
        body = self._fetch(self._forecast_url(latitude, longitude))
        if body is None:
            return _UNAVAILABLE
        try:
            payload = json.loads(body)
        except ValueError:
            return _UNAVAILABLE
        if not isinstance(payload, dict) or "current_weather" not in payload:
            return _UNAVAILABLE
        current = payload["current_weather"]
        return WeatherData(
            temperature=_number(current["temperature"]),
            wind_speed=_number(current["windspeed"]),
            success=True,
        )