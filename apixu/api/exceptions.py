"""
Exception hierarchy for the Apixu client.

InvalidQueryError is raised locally before any request is made. Everything
under TransportError comes from the HTTP layer, DeserializationError from
turning a response body into a model.
"""

from typing import Optional

import requests


class ApixuError(Exception):
    """Base exception for Apixu client errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidQueryError(ApixuError):
    """Raised when request input fails validation."""
    pass


class ApiKeyMissingError(ApixuError):
    """Raised when the HTTP transport is created without an API key."""
    pass


class TransportError(ApixuError):
    """Raised when the HTTP request itself fails."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response: Optional[requests.Response] = None,
    ):
        self.status_code = status_code
        self.response = response
        super().__init__(message)


class ApiResponseError(TransportError):
    """
    Raised when the API answers with an HTTP error status.

    Attributes:
        error_code: Apixu error code from the response payload (e.g. 1006
            for "No matching location found."), if the body carried one
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error_code: Optional[int] = None,
        response: Optional[requests.Response] = None,
    ):
        self.error_code = error_code
        super().__init__(message, status_code=status_code, response=response)


class DeserializationError(ApixuError):
    """Raised when a response body does not match the expected model."""
    pass
