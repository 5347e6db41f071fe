from __future__ import annotations

import pytest

from owm_weather import main as cli
from owm_weather.weather.models import CurrentWeather
from owm_weather.weather.outcome import Failure, Loading, Success


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    monkeypatch.setattr(cli, "configure_logging", lambda level: None)


def test_describe_outcomes(payload):
    report = CurrentWeather.model_validate(payload)

    assert cli.describe(Loading()) == "loading..."
    assert cli.describe(Failure(reason="401 Unauthorized")) == "update failed: 401 Unauthorized"
    assert cli.describe(Success(report=report)).startswith("Berlin: 11.4 (feels like 10.6), light rain")


def test_missing_api_key_exits_with_usage_error():
    assert cli.main(["--api-key", "", "--interval", "0"]) == 2


def test_single_update_exit_codes(monkeypatch, payload):
    calls = []
    result = Success(report=CurrentWeather.model_validate(payload))

    def fake_weather(location, units, lang, api_key):
        calls.append((location, units, lang, api_key))
        return result

    monkeypatch.setattr(cli, "weather", fake_weather)

    assert cli.main(["--location", "2950159", "--api-key", "k", "--interval", "0"]) == 0
    assert calls == [("2950159", "metric", "en", "k")]

    result = Failure(reason="500 Internal Server Error")
    assert cli.main(["--api-key", "k", "--interval", "0", "--units", "imperial"]) == 1


def test_unknown_units_are_rejected():
    with pytest.raises(SystemExit):
        cli.parse_args(["--units", "kelvin"])


def test_negative_interval_is_rejected():
    with pytest.raises(SystemExit):
        cli.parse_args(["--interval", "-1"])

    assert cli.parse_args(["--interval", "0"]).interval == 0
    assert cli.parse_args(["--interval", "2.5"]).interval == 2.5
