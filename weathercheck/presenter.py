"""Text output of analysed weather."""

from __future__ import annotations

import sys
from typing import TextIO

from weathercheck.analyzer import WeatherInfo


def _format_number(value: float) -> str:
    return f"{value:g}"


class WeatherPresenter:
    """Writes a human-readable weather report to a text stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def display_weather(self, info: WeatherInfo, location_name: str) -> None:
        """Write the report for one location; stdout unless a stream was given."""
        out = self._stream if self._stream is not None else sys.stdout
        lines = [f"{location_name}:"]
        if info.data.success:
            lines.append(f"Temperature: {_format_number(info.data.temperature)} °C")
            lines.append(f"Wind Speed: {_format_number(info.data.wind_speed)} km/h")
            if info.is_good_for_outdoor:
                lines.append("It's a good day for outdoor activities!")
            else:
                lines.append("The weather is not ideal for outdoor activities.")
            if info.has_high_wind_warning:
                lines.append("Warning: High winds! Be cautious with outdoor activities.")
            if info.has_cold_warning:
                lines.append("Warning: Freezing temperatures! Dress warmly.")
        else:
            lines.append(f"Unable to retrieve weather data for {location_name}.")
        out.write("".join(f"{line}\n" for line in lines))