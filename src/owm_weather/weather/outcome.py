"""Outcomes published by a polling session."""

from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from owm_weather.weather.models import CurrentWeather

LOADING = "loading..."


class Loading(BaseModel):
    """Placeholder emitted once when a session starts, before any request."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["loading"] = "loading"
    message: Literal["loading..."] = LOADING

    @property
    def ok(self) -> bool:
        return False


class Success(BaseModel):
    """A successfully fetched and decoded report."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["success"] = "success"
    report: CurrentWeather = Field(..., description="Decoded current weather report")

    @property
    def ok(self) -> bool:
        return True


class Failure(BaseModel):
    """A failed poll iteration with a human readable reason."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["failure"] = "failure"
    reason: str = Field(..., description="Status line, parser message or transport error")

    @property
    def ok(self) -> bool:
        return False


UpdateOutcome = Union[Loading, Success, Failure]
FetchResult = Union[Success, Failure]
