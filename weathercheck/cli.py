"""Command that prints the current weather for a fixed set of places."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Sequence

from weathercheck.analyzer import WeatherAnalyzer
from weathercheck.open_meteo import OpenMeteoWeatherService
from weathercheck.presenter import WeatherPresenter


@dataclass(frozen=True)
class _Location:
    name: str
    latitude: float
    longitude: float


_LOCATIONS = (
    _Location("Esslingen University", 48.738, 9.311),
    _Location("Lahaina, Hawaii", 20.878, -156.683),
)


def main(argv: Sequence[str] | None = None) -> int:
    """Fetch, analyse and print the weather for each known location."""
    parser = argparse.ArgumentParser(
        prog="weathercheck",
        description="Show current weather and outdoor advice for preset locations.",
    )
    parser.parse_args(argv)

    analyzer = WeatherAnalyzer(OpenMeteoWeatherService())
    presenter = WeatherPresenter()
    for location in _LOCATIONS:
        analyzer.get_weather_data(location.latitude, location.longitude)
        presenter.display_weather(analyzer.get_weather_info(), location.name)
    return 0


if __name__ == "__main__":
    sys.exit(main())