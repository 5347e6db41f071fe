from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from owm_weather.weather.models import CurrentWeather, OneCall, Volume


def test_current_weather_decodes_provider_payload(payload):
    report = CurrentWeather.model_validate_json(json.dumps(payload))

    assert report.name == "Berlin"
    assert report.id == 2950159
    assert report.coord.lat == pytest.approx(52.5244)
    assert report.weather[0].description == "light rain"
    assert report.main.temp == pytest.approx(11.4)
    assert report.main.sea_level == 1012
    assert report.wind.gust == pytest.approx(7.2)
    assert report.clouds.all == 75
    assert report.sys.country == "DE"
    assert report.sys.message is None
    assert report.timezone == 7200


def test_precipitation_volumes_use_provider_keys(payload):
    report = CurrentWeather.model_validate(payload)

    assert report.rain.h1 == pytest.approx(0.31)
    assert report.rain.h3 is None
    assert report.snow is None


def test_volume_accepts_field_names():
    assert Volume(h3=1.5).h3 == 1.5
    assert Volume.model_validate({"3h": 2.0}).h3 == 2.0


def test_missing_required_field_is_rejected(payload):
    del payload["main"]

    with pytest.raises(ValidationError) as excinfo:
        CurrentWeather.model_validate(payload)

    assert "main" in str(excinfo.value)


def test_one_call_payload():
    data = {
        "lat": 52.52,
        "lon": 13.41,
        "timezone": "Europe/Berlin",
        "timezone_offset": 7200,
        "current": {
            "dt": 1697620000, "sunrise": 1697607900, "sunset": 1697645400,
            "temp": 11.4, "feels_like": 10.6, "pressure": 1012, "humidity": 81,
            "dew_point": 8.2, "clouds": 75, "uvi": 0.9, "visibility": 10000,
            "wind_speed": 4.1, "wind_deg": 240,
            "weather": [{"id": 803, "main": "Clouds", "description": "broken clouds", "icon": "04d"}],
        },
        "minutely": [{"dt": 1697620020, "precipitation": 0}],
        "alerts": [
            {
                "sender_name": "DWD", "event": "wind", "start": 1697620000, "end": 1697640000,
                "description": "Strong gusts", "tags": ["Wind"],
            }
        ],
    }

    one_call = OneCall.model_validate(data)

    assert one_call.current.weather[0].main == "Clouds"
    assert one_call.current.wind_gust is None
    assert one_call.minutely[0].precipitation == 0
    assert one_call.hourly is None
    assert one_call.alerts[0].tags == ["Wind"]
