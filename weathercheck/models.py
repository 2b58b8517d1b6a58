"""Core weather data types and the weather service interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class WeatherData:
    """Current conditions at one location.

    ``success`` is False when no data could be obtained. The numbers are
    then meaningless and usually NaN.
    """

    temperature: float
    wind_speed: float
    success: bool


class WeatherService(ABC):
    """A source of current weather data for geographic coordinates."""

    @abstractmethod
    def get_weather_data(self, latitude: float, longitude: float) -> WeatherData:
        """Return the current weather at the given coordinates."""