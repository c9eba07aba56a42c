import json
from unittest.mock import MagicMock

import pytest

from apixu.api.client import ApixuClient
from apixu.api.transport import Api
from apixu.data.serializer import PydanticSerializer, Serializer


LOCATION = {
    "name": "London",
    "region": "City of London, Greater London",
    "country": "United Kingdom",
    "lat": 51.52,
    "lon": -0.11,
    "tz_id": "Europe/London",
    "localtime_epoch": 1546340400,
    "localtime": "2019-01-01 11:00",
}

CONDITION = {
    "text": "Partly cloudy",
    "icon": "//cdn.apixu.com/weather/64x64/day/116.png",
    "code": 1003,
}

CURRENT = {
    "last_updated_epoch": 1546339509,
    "last_updated": "2019-01-01 10:45",
    "temp_c": 7.0,
    "temp_f": 44.6,
    "is_day": 1,
    "condition": CONDITION,
    "wind_mph": 8.1,
    "wind_kph": 13.0,
    "wind_degree": 280,
    "wind_dir": "W",
    "pressure_mb": 1040.0,
    "pressure_in": 31.2,
    "precip_mm": 0.0,
    "precip_in": 0.0,
    "humidity": 81,
    "cloud": 75,
    "feelslike_c": 4.8,
    "feelslike_f": 40.6,
    "vis_km": 10.0,
    "vis_miles": 6.0,
    "uv": 1.0,
    "gust_mph": 10.3,
    "gust_kph": 16.6,
}

DAY = {
    "maxtemp_c": 8.2,
    "maxtemp_f": 46.8,
    "mintemp_c": 4.1,
    "mintemp_f": 39.4,
    "avgtemp_c": 6.3,
    "avgtemp_f": 43.3,
    "maxwind_mph": 10.5,
    "maxwind_kph": 16.9,
    "totalprecip_mm": 0.0,
    "totalprecip_in": 0.0,
    "avgvis_km": 10.0,
    "avgvis_miles": 6.0,
    "avghumidity": 82.0,
    "condition": CONDITION,
    "uv": 0.6,
}

ASTRO = {
    "sunrise": "08:06 AM",
    "sunset": "04:02 PM",
    "moonrise": "03:49 AM",
    "moonset": "01:19 PM",
}

HOUR = {
    "time_epoch": 1546351200,
    "time": "2019-01-01 14:00",
    "temp_c": 7.9,
    "temp_f": 46.2,
    "is_day": 1,
    "condition": CONDITION,
    "wind_mph": 9.2,
    "wind_kph": 14.8,
    "wind_degree": 277,
    "wind_dir": "W",
    "pressure_mb": 1039.0,
    "pressure_in": 31.2,
    "precip_mm": 0.0,
    "precip_in": 0.0,
    "humidity": 78,
    "cloud": 70,
    "feelslike_c": 5.6,
    "feelslike_f": 42.1,
    "windchill_c": 5.6,
    "windchill_f": 42.1,
    "heatindex_c": 7.9,
    "heatindex_f": 46.2,
    "dewpoint_c": 4.3,
    "dewpoint_f": 39.7,
    "will_it_rain": 0,
    "chance_of_rain": "0",
    "will_it_snow": 0,
    "chance_of_snow": "0",
    "vis_km": 10.0,
    "vis_miles": 6.0,
    "gust_mph": 12.1,
    "gust_kph": 19.4,
}


def forecast_day(day: str, epoch: int) -> dict:
    return {
        "date": day,
        "date_epoch": epoch,
        "day": DAY,
        "astro": ASTRO,
        "hour": [HOUR],
    }


@pytest.fixture
def current_body():
    """Body of a `current` response."""
    return json.dumps({"location": LOCATION, "current": CURRENT})


@pytest.fixture
def forecast_body():
    """Body of a two day `forecast` response."""
    return json.dumps({
        "location": LOCATION,
        "current": CURRENT,
        "forecast": {
            "forecastday": [
                forecast_day("2019-01-01", 1546300800),
                forecast_day("2019-01-02", 1546387200),
            ]
        },
    })


@pytest.fixture
def history_body():
    """Body of a `history` response covering 2019-01-01 to 2019-01-03."""
    return json.dumps({
        "location": LOCATION,
        "forecast": {
            "forecastday": [
                forecast_day("2019-01-01", 1546300800),
                forecast_day("2019-01-02", 1546387200),
                forecast_day("2019-01-03", 1546473600),
            ]
        },
    })


@pytest.fixture
def search_body():
    """Body of a `search` response."""
    return json.dumps([
        {
            "id": 2801268,
            "name": "London, City of London, Greater London, United Kingdom",
            "region": "City of London, Greater London",
            "country": "United Kingdom",
            "lat": 51.52,
            "lon": -0.11,
            "url": "london-city-of-london-greater-london-united-kingdom",
        },
        {
            "id": 315398,
            "name": "London, Ontario, Canada",
            "region": "Ontario",
            "country": "Canada",
            "lat": 42.98,
            "lon": -81.25,
            "url": "london-ontario-canada",
        },
    ])


@pytest.fixture
def conditions_body():
    """Body of the weather conditions reference document."""
    return json.dumps([
        {"code": 1000, "day": "Sunny", "night": "Clear", "icon": 113},
        {"code": 1003, "day": "Partly cloudy", "night": "Partly cloudy", "icon": 116},
        {"code": 1006, "day": "Cloudy", "night": "Cloudy", "icon": 119},
    ])


@pytest.fixture
def mock_api():
    """Transport double returning an empty JSON object."""
    api = MagicMock(spec=Api)
    api.call.return_value = "{}"
    return api


@pytest.fixture
def mock_serializer():
    """Serializer double returning a sentinel result."""
    serializer = MagicMock(spec=Serializer)
    serializer.unserialize.return_value = MagicMock(name="result")
    return serializer


@pytest.fixture
def client(mock_api, mock_serializer):
    """Client wired with transport and serializer doubles."""
    return ApixuClient(mock_api, mock_serializer)


@pytest.fixture
def serializer():
    return PydanticSerializer()
