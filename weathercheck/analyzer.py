"""Interpretation of weather data into advice and warnings."""

from __future__ import annotations

from dataclasses import dataclass

from weathercheck.models import WeatherData, WeatherService

_OUTDOOR_MIN_TEMPERATURE = 15.0
_OUTDOOR_MAX_WIND_SPEED = 10.0
_HIGH_WIND_SPEED = 20.0
_FREEZING_TEMPERATURE = 0.0


@dataclass(frozen=True)
class WeatherInfo:
    """Weather data together with the conclusions drawn from it."""

    data: WeatherData
    is_good_for_outdoor: bool
    has_high_wind_warning: bool
    has_cold_warning: bool


class WeatherAnalyzer:
    """Fetches weather from a service and evaluates the latest result."""

    def __init__(self, weather_service: WeatherService) -> None:
        self._weather_service = weather_service
        self._weather_data = WeatherData(0.0, 0.0, False)

    def get_weather_data(self, latitude: float, longitude: float) -> WeatherData:
        """Fetch and remember the weather at the given coordinates."""
        self._weather_data = self._weather_service.get_weather_data(latitude, longitude)
        return self._weather_data

    def get_weather_info(self) -> WeatherInfo:
        """Return the latest data with its evaluation."""
        return WeatherInfo(
            data=self._weather_data,
            is_good_for_outdoor=self.is_good_for_outdoor_activities(),
            has_high_wind_warning=self.is_high_wind_warning(),
            has_cold_warning=self.is_cold_weather_warning(),
        )

    def is_good_for_outdoor_activities(self) -> bool:
        return (
            self._weather_data.temperature > _OUTDOOR_MIN_TEMPERATURE
            and self._weather_data.wind_speed < _OUTDOOR_MAX_WIND_SPEED
        )

    def is_high_wind_warning(self) -> bool:
        return self._weather_data.wind_speed > _HIGH_WIND_SPEED

    def is_cold_weather_warning(self) -> bool:
        return self._weather_data.temperature < _FREEZING_TEMPERATURE