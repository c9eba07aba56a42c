"""
API module for Apixu weather data retrieval.
"""

from apixu.api.client import ApixuClient, create_client
from apixu.api.exceptions import (
    ApiKeyMissingError,
    ApiResponseError,
    ApixuError,
    DeserializationError,
    InvalidQueryError,
    TransportError,
)
from apixu.api.transport import Api, HttpApi

__all__ = [
    "ApixuClient",
    "create_client",
    "Api",
    "HttpApi",
    # Exceptions
    "ApixuError",
    "InvalidQueryError",
    "ApiKeyMissingError",
    "TransportError",
    "ApiResponseError",
    "DeserializationError",
]
