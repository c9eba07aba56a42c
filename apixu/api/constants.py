"""
Constants for the Apixu weather API.

Process-wide values shared by the transport, the validators and the
client facade.
"""

# API Endpoints
BASE_URL = "https://api.apixu.com/v1/"
RESPONSE_FORMAT = "json"
DOC_WEATHER_CONDITIONS_URL = "https://www.apixu.com/doc/Apixu_weather_conditions.%s"

# Request limits
MAX_QUERY_LENGTH = 256
DEFAULT_TIMEOUT_SECONDS = 30

# History dates are sent without a time component
HISTORY_DATE_FORMAT = "%Y-%m-%d"

DEFAULT_LANGUAGE = "en"

SUPPORTED_LANGUAGES = frozenset({
    "en",
    "ar",
    "bn",
    "bg",
    "zh",
    "zh_tw",
    "cs",
    "da",
    "nl",
    "fi",
    "fr",
    "de",
    "el",
    "hi",
    "hu",
    "it",
    "ja",
    "jv",
    "ko",
    "zh_cmn",
    "mr",
    "pl",
    "pa",
    "ro",
    "ru",
    "sr",
    "si",
    "sk",
    "es",
    "sv",
    "ta",
    "te",
    "tr",
    "uk",
    "ur",
    "vi",
    "zh_wuu",
    "zh_hsn",
    "zh_yue",
    "zu",
})

__all__ = [
    "BASE_URL",
    "RESPONSE_FORMAT",
    "DOC_WEATHER_CONDITIONS_URL",
    "MAX_QUERY_LENGTH",
    "DEFAULT_TIMEOUT_SECONDS",
    "HISTORY_DATE_FORMAT",
    "DEFAULT_LANGUAGE",
    "SUPPORTED_LANGUAGES",
]
