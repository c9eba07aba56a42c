"""
Apixu weather client

A Python client for the Apixu weather API: current conditions, location
search, forecasts and historical weather, returned as Pydantic models.
"""

from apixu.api import ApixuClient, create_client

__version__ = "1.0.0"
__author__ = "Apixu Client Project"

__all__ = ["ApixuClient", "create_client"]
