"""
Data module for Apixu response models and deserialization.
"""

from apixu.data.models import (
    Astro,
    Condition,
    Conditions,
    Current,
    CurrentWeather,
    Day,
    Forecast,
    ForecastDay,
    History,
    Hour,
    Location,
    Search,
    SearchLocation,
    WeatherCondition,
)
from apixu.data.serializer import PydanticSerializer, Serializer

__all__ = [
    # Responses
    "Conditions",
    "CurrentWeather",
    "Forecast",
    "History",
    "Search",
    # Nested models
    "Astro",
    "Condition",
    "Current",
    "Day",
    "ForecastDay",
    "Hour",
    "Location",
    "SearchLocation",
    "WeatherCondition",
    # Deserialization
    "Serializer",
    "PydanticSerializer",
]
