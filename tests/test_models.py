import dataclasses

import pytest

from weathercheck.models import WeatherData, WeatherService


class _FixedService(WeatherService):
    def __init__(self, data):
        self.data = data
        self.calls = []

    def get_weather_data(self, latitude, longitude):
        self.calls.append((latitude, longitude))
        return self.data


def test_weather_service_is_abstract():
    with pytest.raises(TypeError):
        WeatherService()


def test_subclass_returns_its_data():
    data = WeatherData(temperature=20.0, wind_speed=5.0, success=True)
    service = _FixedService(data)
    assert service.get_weather_data(1.5, -2.5) == data
    assert service.calls == [(1.5, -2.5)]


def test_weather_data_fields():
    data = WeatherData(-5.0, 5.0, True)
    assert data.temperature == -5.0
    assert data.wind_speed == 5.0
    assert data.success is True


def test_weather_data_is_immutable():
    data = WeatherData(15.0, 55.0, True)
    with pytest.raises(dataclasses.FrozenInstanceError):
        data.temperature = 0.0
    assert data.temperature == 15.0
    assert data == WeatherData(15.0, 55.0, True)


def test_weather_data_equality():
    assert WeatherData(20.0, 5.0, True) == WeatherData(20.0, 5.0, True)
    assert WeatherData(20.0, 5.0, True) != WeatherData(20.0, 5.0, False)