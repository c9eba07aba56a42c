"""
Apixu weather API client.

This module provides the main interface to the Apixu API: current
weather, location search, forecasts, history and the weather conditions
reference list. Inputs are validated before anything is sent; the HTTP
call and the body parsing are delegated to the injected Api and
Serializer.

Usage:
    from apixu.api.client import create_client

    client = create_client()
    weather = client.current("London", lang="fr")
    history = client.history("Paris", since=date(2019, 1, 1), until=date(2019, 1, 5))
"""

import logging
from datetime import date
from typing import TYPE_CHECKING, Any, Dict, Optional

from apixu.api.constants import (
    DEFAULT_LANGUAGE,
    DOC_WEATHER_CONDITIONS_URL,
    HISTORY_DATE_FORMAT,
    MAX_QUERY_LENGTH,
    RESPONSE_FORMAT,
)
from apixu.api.transport import Api, HttpApi
from apixu.api.validation import (
    validate_date,
    validate_hour,
    validate_language,
    validate_query,
)
from apixu.data.models import Conditions, CurrentWeather, Forecast, History, Search
from apixu.data.serializer import PydanticSerializer, Serializer

if TYPE_CHECKING:
    from config.settings import Settings

logger = logging.getLogger(__name__)


class ApixuClient:
    """
    Client for the Apixu weather API.

    Holds no state besides its collaborators, so one instance can serve
    any number of calls.

    Attributes:
        api: Transport used to call the API
        serializer: Deserializer turning bodies into models
        max_query_length: Maximum query length accepted
    """

    def __init__(
        self,
        api: Api,
        serializer: Serializer,
        max_query_length: int = MAX_QUERY_LENGTH,
    ):
        self.api = api
        self.serializer = serializer
        self.max_query_length = max_query_length

    def conditions(self) -> Conditions:
        """
        Fetch the weather conditions reference list.

        Returns:
            Conditions with the description and icon of every condition code
        """
        url = DOC_WEATHER_CONDITIONS_URL % RESPONSE_FORMAT
        body = self.api.call(url)

        return self.serializer.unserialize(body, Conditions)

    def current(self, query: str, lang: str = DEFAULT_LANGUAGE) -> CurrentWeather:
        """
        Fetch current weather for a location.

        Args:
            query: Location (city name, 'lat,lon', postcode, IP...)
            lang: Language for condition texts

        Returns:
            CurrentWeather for the resolved location

        Raises:
            InvalidQueryError: For an empty/too long query or unsupported language
        """
        self._validate_query(query)
        validate_language(lang)

        return self._request("current", {"q": query, "lang": lang}, CurrentWeather)

    def search(self, query: str) -> Search:
        """
        Search locations matching a query.

        Raises:
            InvalidQueryError: For an empty or too long query
        """
        self._validate_query(query)

        return self._request("search", {"q": query}, Search)

    def forecast(
        self,
        query: str,
        days: int,
        hour: Optional[int] = None,
        lang: str = DEFAULT_LANGUAGE,
    ) -> Forecast:
        """
        Fetch a weather forecast.

        Args:
            query: Location
            days: Number of forecast days
            hour: Restrict hourly data to this hour (0-23); all hours if None
            lang: Language for condition texts

        Returns:
            Forecast with current weather and one entry per day

        Raises:
            InvalidQueryError: For invalid query, hour or language
        """
        self._validate_query(query)
        validate_hour(hour)
        validate_language(lang)

        params = {
            "q": query,
            "days": days,
            "lang": lang,
        }
        if hour is not None:
            params["hour"] = hour

        return self._request("forecast", params, Forecast)

    def history(
        self,
        query: str,
        since: date,
        until: Optional[date] = None,
        lang: str = DEFAULT_LANGUAGE,
    ) -> History:
        """
        Fetch historical weather.

        Args:
            query: Location
            since: First day
            until: Last day (single day if None)
            lang: Language for condition texts

        Returns:
            History with one entry per day

        Raises:
            InvalidQueryError: For an invalid query, date or language
        """
        self._validate_query(query)
        validate_date(since, "since")
        validate_date(until, "until", required=False)
        validate_language(lang)

        params = {
            "q": query,
            "dt": since.strftime(HISTORY_DATE_FORMAT),
            "lang": lang,
        }
        if until is not None:
            params["end_dt"] = until.strftime(HISTORY_DATE_FORMAT)

        return self._request("history", params, History)

    def _validate_query(self, query: str) -> None:
        validate_query(query, max_length=self.max_query_length)

    def _request(self, method: str, params: Dict[str, Any], target):
        """Call an API method and deserialize the body into `target`."""
        logger.debug(f"Calling {method} params={params}")
        body = self.api.call(method, params)

        return self.serializer.unserialize(body, target)


def create_client(
    api_key: Optional[str] = None,
    settings: Optional["Settings"] = None,
) -> ApixuClient:
    """
    Create a client wired with the default HTTP transport and serializer.

    Args:
        api_key: API key (uses settings if not provided)
        settings: Settings object (uses default if not provided)

    Returns:
        Ready to use ApixuClient

    Raises:
        ApiKeyMissingError: If no API key is provided or configured
    """
    # Lazy import: config.settings imports apixu constants
    from config.settings import get_settings

    settings = settings or get_settings()

    api = HttpApi(
        api_key=api_key or settings.apixu_api_key,
        base_url=settings.apixu_base_url,
        timeout=settings.request_timeout,
    )

    logger.info("ApixuClient initialized")
    return ApixuClient(api, PydanticSerializer(), max_query_length=settings.max_query_length)
