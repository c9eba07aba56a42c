"""
Input validation for Apixu requests.

All checks run before a request is built, so a failure here means no
network call was made.
"""

from datetime import date
from typing import Optional

from apixu.api.constants import MAX_QUERY_LENGTH, SUPPORTED_LANGUAGES
from apixu.api.exceptions import InvalidQueryError


def validate_query(query: Optional[str], max_length: int = MAX_QUERY_LENGTH) -> None:
    """
    Validate a location query.

    Args:
        query: Free-text location (city name, coordinates, postcode...)
        max_length: Maximum size in UTF-8 bytes after trimming

    Raises:
        InvalidQueryError: If the query is empty or too long
    """
    if query is None:
        raise InvalidQueryError("Query is missing")
    if not isinstance(query, str):
        raise InvalidQueryError(f"Query must be a string, got {type(query).__name__}")

    query = query.strip()

    if query == "":
        raise InvalidQueryError("Query is missing")

    # The API limit is in bytes, so multi-byte characters count more than once
    if len(query.encode("utf-8")) > max_length:
        raise InvalidQueryError(f"Query exceeds maximum length ({max_length})")


def validate_language(lang: Optional[str]) -> None:
    """
    Validate a response language code.

    Raises:
        InvalidQueryError: If the code is not one of SUPPORTED_LANGUAGES
    """
    if not isinstance(lang, str) or lang.strip() not in SUPPORTED_LANGUAGES:
        raise InvalidQueryError("Language not supported")


def validate_hour(hour: Optional[int]) -> None:
    """Validate an optional forecast hour (0-23)."""
    if hour is None:
        return
    if isinstance(hour, bool) or not isinstance(hour, int) or not 0 <= hour <= 23:
        raise InvalidQueryError("Hour must be between 0 and 23")


def validate_date(value: Optional[date], name: str, required: bool = True) -> None:
    """
    Validate a history date (datetimes are accepted, only the date is used).

    Raises:
        InvalidQueryError: If a required date is missing or the value isn't a date
    """
    if value is None:
        if required:
            raise InvalidQueryError(f"{name} date is missing")
        return
    if not isinstance(value, date):
        raise InvalidQueryError(f"{name} must be a date, got {type(value).__name__}")
