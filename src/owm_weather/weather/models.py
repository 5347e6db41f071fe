"""Data models for OpenWeatherMap API responses."""

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Coord(BaseModel):
    """Location coordinates."""
    lon: float = Field(..., description="Longitude in decimal degrees")
    lat: float = Field(..., description="Latitude in decimal degrees")


class WeatherCondition(BaseModel):
    """Weather condition descriptor."""
    id: int = Field(..., description="Weather condition id")
    main: str = Field(..., description="Group of weather parameters (Rain, Snow, Extreme etc.)")
    description: str = Field(..., description="Weather condition within the group")
    icon: str = Field(..., description="Weather icon id")


class MainMeasurements(BaseModel):
    """Aggregate measurements. Temperature unit depends on the requested units."""
    temp: float = Field(..., description="Temperature")
    feels_like: float = Field(..., description="Temperature accounting for human perception")
    pressure: float = Field(..., description="Atmospheric pressure, hPa")
    humidity: float = Field(..., description="Humidity, %")
    temp_min: float = Field(..., description="Minimum currently observed temperature")
    temp_max: float = Field(..., description="Maximum currently observed temperature")
    sea_level: Optional[float] = Field(None, description="Atmospheric pressure on the sea level, hPa")
    grnd_level: Optional[float] = Field(None, description="Atmospheric pressure on the ground level, hPa")


class Wind(BaseModel):
    """Wind report. Speed is m/s for standard and metric units, mph for imperial."""
    speed: float = Field(..., description="Wind speed")
    deg: float = Field(..., description="Wind direction, degrees (meteorological)")
    gust: Optional[float] = Field(None, description="Wind gust")


class Clouds(BaseModel):
    """Cloud cover report."""
    all: float = Field(..., description="Cloudiness, %")


class Volume(BaseModel):
    """Rain or snow volume report."""
    model_config = ConfigDict(populate_by_name=True)

    h1: Optional[float] = Field(None, alias="1h", description="Volume for the last hour, mm")
    h3: Optional[float] = Field(None, alias="3h", description="Volume for the last 3 hours, mm")


class Sys(BaseModel):
    """Additional information."""
    type: Optional[int] = Field(None, description="Internal parameter")
    id: Optional[int] = Field(None, description="Internal parameter")
    message: Optional[float] = Field(None, description="Internal parameter")
    country: str = Field(..., description="Country code (GB, JP etc.)")
    sunrise: int = Field(..., description="Sunrise time, unix, UTC")
    sunset: int = Field(..., description="Sunset time, unix, UTC")


class CurrentWeather(BaseModel):
    """Current weather report as returned by the /data/2.5/weather endpoint."""
    coord: Coord = Field(..., description="Report origin coordinates")
    weather: List[WeatherCondition] = Field(..., description="Weather condition descriptors")
    base: str = Field(..., description="Internal parameter")
    main: MainMeasurements = Field(..., description="Aggregate measurements")
    visibility: int = Field(..., description="Visibility, meter")
    wind: Wind = Field(..., description="Wind report")
    clouds: Clouds = Field(..., description="Cloud cover report")
    rain: Optional[Volume] = Field(None, description="Rain volume report")
    snow: Optional[Volume] = Field(None, description="Snow volume report")
    dt: int = Field(..., description="Time of data calculation, unix, UTC")
    sys: Sys = Field(..., description="Additional information")
    timezone: int = Field(..., description="Shift in seconds from UTC")
    id: int = Field(..., description="City ID")
    name: str = Field(..., description="City name")
    cod: int = Field(..., description="Internal parameter")


# One Call API models


class Current(BaseModel):
    """Current conditions block of a One Call response."""
    dt: int
    sunrise: int
    sunset: int
    temp: float
    feels_like: float
    pressure: float
    humidity: float
    dew_point: float
    clouds: int
    uvi: float
    visibility: int
    wind_speed: float
    wind_deg: float
    wind_gust: Optional[float] = None
    weather: List[WeatherCondition]
    rain: Optional[Volume] = None
    snow: Optional[Volume] = None


class Minute(BaseModel):
    """Minutely precipitation forecast entry."""
    dt: int
    precipitation: Optional[float] = Field(None, description="Precipitation volume, mm")


class Hour(BaseModel):
    """Hourly forecast entry."""
    dt: int
    temp: float
    feels_like: float
    pressure: float
    humidity: float
    dew_point: float
    clouds: int
    uvi: float
    visibility: int
    wind_speed: float
    wind_deg: float
    wind_gust: Optional[float] = None
    weather: List[WeatherCondition]
    pop: float = Field(..., description="Probability of precipitation")
    rain: Optional[Volume] = None
    snow: Optional[Volume] = None


class DailyTemp(BaseModel):
    """Daily temperature breakdown."""
    morn: float
    day: float
    eve: float
    night: float
    min: float
    max: float


class DailyFeelsLike(BaseModel):
    """Daily perceived temperature breakdown."""
    morn: float
    day: float
    eve: float
    night: float


class Day(BaseModel):
    """Daily forecast entry."""
    dt: int
    sunrise: int
    sunset: int
    moonrise: int
    moonset: int
    moon_phase: float = Field(..., description="0 and 1 new moon, 0.25 first quarter, 0.5 full, 0.75 last quarter")
    temp: DailyTemp
    feels_like: DailyFeelsLike
    pressure: float
    humidity: float
    dew_point: float
    clouds: int
    uvi: float
    wind_speed: float
    wind_deg: float
    wind_gust: Optional[float] = None
    weather: List[WeatherCondition]
    pop: float
    rain: Optional[float] = Field(None, description="Precipitation volume, mm")
    snow: Optional[float] = Field(None, description="Snow volume, mm")


class Alert(BaseModel):
    """National weather alert."""
    sender_name: str
    event: str
    start: int
    end: int
    description: str
    tags: Union[List[str], str] = Field(..., description="Type of severe weather")


class OneCall(BaseModel):
    """Response of the One Call API."""
    lat: float
    lon: float
    timezone: str = Field(..., description="Timezone name")
    timezone_offset: int = Field(..., description="Shift in seconds from UTC")
    current: Optional[Current] = None
    minutely: Optional[List[Minute]] = None
    hourly: Optional[List[Hour]] = None
    daily: Optional[List[Day]] = None
    alerts: Optional[List[Alert]] = None
