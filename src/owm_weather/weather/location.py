"""Location classification and request URL construction."""

import re
from datetime import timedelta
from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

from owm_weather.config import OWM_API_BASE_URL

_CITY_ID_RE = re.compile(r"\+?[0-9]+")
_COORDINATES_RE = re.compile(r"(-?[0-9]+\.[0-9]+)\s*,\s*(-?[0-9]+\.[0-9]+)")
_DECIMAL_PATTERN = r"^-?\d+\.\d+$"
_APPID_RE = re.compile(r"(appid=)[^&\s\"]*")

_MAX_CITY_ID = 2 ** 64 - 1


class Units(str, Enum):
    """Units of measurement supported by the provider."""
    STANDARD = "standard"
    METRIC = "metric"
    IMPERIAL = "imperial"


class ById(BaseModel):
    """Location given as a numeric OpenWeatherMap city id."""
    model_config = ConfigDict(frozen=True)

    city_id: str = Field(..., pattern=r"^\+?\d+$", description="City id digits as given")

    @field_validator("city_id", mode="before")
    @classmethod
    def _stringify(cls, value):
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @property
    def value(self) -> int:
        return int(self.city_id)

    def query(self) -> str:
        return f"id={self.city_id}"


class ByCoordinates(BaseModel):
    """Location given as a latitude/longitude pair, kept with its original precision."""
    model_config = ConfigDict(frozen=True)

    lat: str = Field(..., pattern=_DECIMAL_PATTERN, description="Latitude as given")
    lon: str = Field(..., pattern=_DECIMAL_PATTERN, description="Longitude as given")

    @property
    def latitude(self) -> float:
        return float(self.lat)

    @property
    def longitude(self) -> float:
        return float(self.lon)

    def query(self) -> str:
        return f"lat={self.lat}&lon={self.lon}"


class ByName(BaseModel):
    """Location given as free text, e.g. "Berlin" or "Springfield,IL,US"."""
    model_config = ConfigDict(frozen=True)

    name: str

    def query(self) -> str:
        return f"q={self.name}"


LocationSpec = Union[ById, ByCoordinates, ByName]


class PollConfig(BaseModel):
    """Settings for one polling session."""
    model_config = ConfigDict(frozen=True)

    units: Units = Field(Units.METRIC, description="Units of measurement")
    lang: str = Field("en", description="Language code for descriptions")
    api_key: SecretStr = Field(..., description="Provider API key")
    poll_interval: timedelta = Field(
        timedelta(0), description="Wait between updates, zero for a single update"
    )
    base_url: str = Field(OWM_API_BASE_URL, description="Current weather endpoint")

    @field_validator("poll_interval")
    @classmethod
    def _non_negative(cls, value: timedelta) -> timedelta:
        if value < timedelta(0):
            raise ValueError(f"poll_interval must not be negative, got {value}")
        return value

    @property
    def single_shot(self) -> bool:
        return self.poll_interval == timedelta(0)


def classify_location(raw: str) -> LocationSpec:
    """Classify a raw location string.

    Args:
        raw: City id, "<lat>,<lon>" pair or city name

    Returns:
        ById if the whole string is an unsigned 64-bit integer, ByCoordinates
        if it contains a decimal pair, ByName otherwise
    """
    if _CITY_ID_RE.fullmatch(raw) and int(raw) <= _MAX_CITY_ID:
        return ById(city_id=raw)

    match = _COORDINATES_RE.search(raw)
    if match:
        return ByCoordinates(lat=match.group(1), lon=match.group(2))

    return ByName(name=raw)


def build_request_url(location: LocationSpec, config: PollConfig) -> str:
    """Compose the current weather request URL.

    Values are embedded as given; percent-encoding is left to the HTTP client.
    """
    return (
        f"{config.base_url}?{location.query()}"
        f"&units={config.units.value}&lang={config.lang}"
        f"&appid={config.api_key.get_secret_value()}"
    )


def redact_url(url: str) -> str:
    """Mask the API key in a request URL for logging."""
    return _APPID_RE.sub(r"\1***", url)
