from __future__ import annotations

import copy
from typing import Callable, List

import httpx
import pytest

from owm_weather.weather.client import OwmWeatherClient


BERLIN_PAYLOAD = {
    "coord": {"lon": 13.4105, "lat": 52.5244},
    "weather": [{"id": 500, "main": "Rain", "description": "light rain", "icon": "10d"}],
    "base": "stations",
    "main": {
        "temp": 11.4,
        "feels_like": 10.6,
        "temp_min": 10.2,
        "temp_max": 12.8,
        "pressure": 1012,
        "humidity": 81,
        "sea_level": 1012,
        "grnd_level": 1007,
    },
    "visibility": 10000,
    "wind": {"speed": 4.12, "deg": 240, "gust": 7.2},
    "rain": {"1h": 0.31},
    "clouds": {"all": 75},
    "dt": 1697620000,
    "sys": {"type": 2, "id": 2011538, "country": "DE", "sunrise": 1697607900, "sunset": 1697645400},
    "timezone": 7200,
    "id": 2950159,
    "name": "Berlin",
    "cod": 200,
}


@pytest.fixture()
def payload() -> dict:
    return copy.deepcopy(BERLIN_PAYLOAD)


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: List[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


@pytest.fixture()
def make_client():
    """Build an OwmWeatherClient whose requests are answered by `handler`."""

    def factory(handler: Callable[[httpx.Request], httpx.Response]):
        transport = RecordingTransport(handler)
        return OwmWeatherClient(transport=transport), transport

    return factory
