# weathercheck

weathercheck gets the current temperature and wind speed for a pair of
coordinates from the Open-Meteo forecast service. It tells you whether the
conditions suit outdoor activities, and it warns you about high winds or
freezing temperatures.

It uses only the Python standard library.

## Installation

```
pip install .
```

## Command line

```
weathercheck
```

This prints a report for two fixed locations: Esslingen University, and
Lahaina in Hawaii. The only option is `--help`. Each report looks like this:

```
Esslingen University:
Temperature: 12.3 °C
Wind Speed: 8.1 km/h
The weather is not ideal for outdoor activities.
```

A report can end with `Warning: High winds! Be cautious with outdoor
activities.` or `Warning: Freezing temperatures! Dress warmly.`, or with both.

The report says `Unable to retrieve weather data for <location>.` in any of
these cases:

- the service cannot be reached;
- the service answers with a status other than 200;
- the reply is not JSON;
- the reply has no `current_weather` entry.

If the reply has a `current_weather` entry but its `temperature` or
`windspeed` is missing or not a number, the command stops with a `KeyError`
or a `TypeError`.

## Library use

```python
from weathercheck.open_meteo import OpenMeteoWeatherService
from weathercheck.analyzer import WeatherAnalyzer
from weathercheck.presenter import WeatherPresenter

analyzer = WeatherAnalyzer(OpenMeteoWeatherService())
analyzer.get_weather_data(48.738, 9.311)
WeatherPresenter().display_weather(analyzer.get_weather_info(), "Esslingen")
```

- `weathercheck.models.WeatherData` is a frozen dataclass. Its fields are
  `temperature`, `wind_speed` and `success`. When `success` is `False`, the
  numbers carry no meaning.
- `weathercheck.models.WeatherService` is the abstract interface. Subclass
  it and implement `get_weather_data(latitude, longitude)` so that it returns
  a `WeatherData`. You can then pass your subclass to `WeatherAnalyzer`, for
  example to use another data source or fixed data in tests.
- `OpenMeteoWeatherService(base_url="http://api.open-meteo.com", timeout=10.0)`
  asks the forecast endpoint under `base_url` for current weather. When it
  fails, it returns `WeatherData(nan, nan, False)`.
- `WeatherAnalyzer.get_weather_data(latitude, longitude)` fetches the data
  and keeps it. `get_weather_info()` returns a `WeatherInfo` built from the
  data it kept last. Before the first fetch, that data is
  `WeatherData(0.0, 0.0, False)`. `WeatherInfo` holds `data`,
  `is_good_for_outdoor`, `has_high_wind_warning` and `has_cold_warning`.
- `WeatherPresenter(stream=None)` writes its reports to `stream`, or to
  standard output when no stream is given.

## Rules

- Good for outdoor activities: the temperature is above 15 °C and the wind
  is below 10 km/h.
- High wind warning: the wind is above 20 km/h.
- Cold warning: the temperature is below 0 °C.

## What it does not do

The command cannot take other locations or coordinates. To check any other
place, use the library. The package asks only for current conditions. It does
not give forecasts, store results or cache replies.

## Tests

```
pip install .[test]
pytest
```