"""
Response models for the Apixu weather API.

This module defines Pydantic models for every payload the API returns:
condition codes, location search results, current weather, forecasts
and history. Field names follow the API's JSON keys.

Unknown keys are ignored so that new API fields don't break parsing,
and all models are frozen once built.
"""

import datetime as dt
from typing import Iterator, List, Optional

from pydantic import BaseModel, ConfigDict, Field, RootModel


class ApiModel(BaseModel):
    """Base class for API payload models."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class Condition(ApiModel):
    """
    Weather condition attached to a current/day/hour reading.

    Attributes:
        text: Human-readable description (e.g. 'Partly cloudy')
        icon: Icon URL
        code: Apixu condition code (see Conditions)
    """

    text: str = Field(..., description="Condition description")
    icon: Optional[str] = Field(default=None, description="Icon URL")
    code: int = Field(..., description="Condition code")


class Location(ApiModel):
    """
    Location the API resolved a query to.

    Attributes:
        name: Location name
        region: Region or state
        country: Country name
        lat: Latitude in decimal degrees (-90 to 90)
        lon: Longitude in decimal degrees (-180 to 180)
        tz_id: IANA time zone (e.g. 'Europe/London')
        localtime_epoch: Local time as a Unix timestamp
        localtime: Local time as 'YYYY-MM-DD HH:MM'
    """

    name: str = Field(..., description="Location name")
    region: str = Field(default="", description="Region or state")
    country: str = Field(default="", description="Country name")
    lat: float = Field(..., ge=-90, le=90, description="Latitude in decimal degrees")
    lon: float = Field(..., ge=-180, le=180, description="Longitude in decimal degrees")
    tz_id: Optional[str] = Field(default=None, description="Time zone id")
    localtime_epoch: Optional[int] = Field(default=None, description="Local time (epoch)")
    localtime: Optional[str] = Field(default=None, description="Local time")

    @property
    def geocode(self) -> str:
        """Format as API-compatible 'lat,lon' query string."""
        return f"{self.lat},{self.lon}"

    @property
    def local_datetime(self) -> Optional[dt.datetime]:
        """Parse localtime into a naive datetime."""
        if not self.localtime:
            return None
        return dt.datetime.strptime(self.localtime, "%Y-%m-%d %H:%M")

    def __str__(self) -> str:
        parts = [p for p in (self.name, self.region, self.country) if p]
        return ", ".join(parts)


class Current(ApiModel):
    """Current weather reading for a location."""

    last_updated_epoch: int = Field(..., description="Reading time (epoch)")
    last_updated: str = Field(..., description="Reading time, local")
    temp_c: float
    temp_f: float
    is_day: bool = Field(..., description="Day or night at the location")
    condition: Condition
    wind_mph: Optional[float] = None
    wind_kph: Optional[float] = None
    wind_degree: Optional[int] = Field(default=None, ge=0, le=360)
    wind_dir: Optional[str] = Field(default=None, description="16 point compass direction")
    pressure_mb: Optional[float] = None
    pressure_in: Optional[float] = None
    precip_mm: Optional[float] = None
    precip_in: Optional[float] = None
    humidity: Optional[int] = Field(default=None, ge=0, le=100)
    cloud: Optional[int] = Field(default=None, ge=0, le=100)
    feelslike_c: Optional[float] = None
    feelslike_f: Optional[float] = None
    vis_km: Optional[float] = None
    vis_miles: Optional[float] = None
    uv: Optional[float] = None
    gust_mph: Optional[float] = None
    gust_kph: Optional[float] = None


class CurrentWeather(ApiModel):
    """Response of the `current` method."""

    location: Location
    current: Current


class Day(ApiModel):
    """Daily summary within a forecast or history day."""

    maxtemp_c: float
    maxtemp_f: float
    mintemp_c: float
    mintemp_f: float
    avgtemp_c: Optional[float] = None
    avgtemp_f: Optional[float] = None
    maxwind_mph: Optional[float] = None
    maxwind_kph: Optional[float] = None
    totalprecip_mm: Optional[float] = None
    totalprecip_in: Optional[float] = None
    avgvis_km: Optional[float] = None
    avgvis_miles: Optional[float] = None
    avghumidity: Optional[float] = None
    condition: Condition
    uv: Optional[float] = None


class Astro(ApiModel):
    """Sun and moon times, as local 'hh:mm AM' strings."""

    sunrise: Optional[str] = None
    sunset: Optional[str] = None
    moonrise: Optional[str] = None
    moonset: Optional[str] = None


class Hour(ApiModel):
    """Hourly reading within a forecast or history day."""

    time_epoch: int
    time: str
    temp_c: float
    temp_f: float
    is_day: Optional[bool] = None
    condition: Condition
    wind_mph: Optional[float] = None
    wind_kph: Optional[float] = None
    wind_degree: Optional[int] = Field(default=None, ge=0, le=360)
    wind_dir: Optional[str] = None
    pressure_mb: Optional[float] = None
    pressure_in: Optional[float] = None
    precip_mm: Optional[float] = None
    precip_in: Optional[float] = None
    humidity: Optional[int] = Field(default=None, ge=0, le=100)
    cloud: Optional[int] = Field(default=None, ge=0, le=100)
    feelslike_c: Optional[float] = None
    feelslike_f: Optional[float] = None
    windchill_c: Optional[float] = None
    windchill_f: Optional[float] = None
    heatindex_c: Optional[float] = None
    heatindex_f: Optional[float] = None
    dewpoint_c: Optional[float] = None
    dewpoint_f: Optional[float] = None
    will_it_rain: Optional[bool] = None
    chance_of_rain: Optional[int] = Field(default=None, ge=0, le=100)
    will_it_snow: Optional[bool] = None
    chance_of_snow: Optional[int] = Field(default=None, ge=0, le=100)
    vis_km: Optional[float] = None
    vis_miles: Optional[float] = None
    gust_mph: Optional[float] = None
    gust_kph: Optional[float] = None


class ForecastDay(ApiModel):
    """
    One calendar day of forecast or history data.

    Attributes:
        date: Calendar date
        date_epoch: Date as a Unix timestamp
        day: Daily summary
        astro: Astronomy data
        hour: Hourly readings (a single entry when `hour` was requested)
    """

    date: dt.date
    date_epoch: Optional[int] = None
    day: Day
    astro: Optional[Astro] = None
    hour: List[Hour] = Field(default_factory=list)


class ForecastDays(ApiModel):
    """Wrapper matching the API's `forecast` object."""

    forecastday: List[ForecastDay] = Field(default_factory=list)


class Forecast(ApiModel):
    """Response of the `forecast` method."""

    location: Location
    current: Current
    forecast: ForecastDays

    @property
    def days(self) -> List[ForecastDay]:
        """Forecast days in date order."""
        return self.forecast.forecastday


class History(ApiModel):
    """Response of the `history` method."""

    location: Location
    forecast: ForecastDays

    @property
    def days(self) -> List[ForecastDay]:
        """History days in date order."""
        return self.forecast.forecastday

    def get_day(self, day: dt.date) -> Optional[ForecastDay]:
        """Get the entry for a calendar date, if present."""
        for forecast_day in self.forecast.forecastday:
            if forecast_day.date == day:
                return forecast_day
        return None


class SearchLocation(ApiModel):
    """Single location returned by `search`."""

    id: Optional[int] = None
    name: str
    region: str = ""
    country: str = ""
    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)
    url: Optional[str] = Field(default=None, description="URL-safe location slug")


class Search(RootModel[List[SearchLocation]]):
    """Response of the `search` method: matching locations."""

    model_config = ConfigDict(frozen=True)

    def __iter__(self) -> Iterator[SearchLocation]:
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> SearchLocation:
        return self.root[index]


class WeatherCondition(ApiModel):
    """
    Entry of the weather conditions reference list.

    Attributes:
        code: Condition code used in Condition.code
        day: Description during the day
        night: Description at night
        icon: Icon number
    """

    code: int
    day: str
    night: str
    icon: int


class Conditions(RootModel[List[WeatherCondition]]):
    """Weather condition codes reference list."""

    model_config = ConfigDict(frozen=True)

    def __iter__(self) -> Iterator[WeatherCondition]:
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> WeatherCondition:
        return self.root[index]

    def get(self, code: int) -> Optional[WeatherCondition]:
        """Get the reference entry for a condition code."""
        for condition in self.root:
            if condition.code == code:
                return condition
        return None

    def describe(self, condition: Condition, is_day: bool = True) -> Optional[str]:
        """Get the day or night description for a reading's condition."""
        reference = self.get(condition.code)
        if reference is None:
            return None
        return reference.day if is_day else reference.night
