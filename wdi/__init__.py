"""Search and fetch World Bank World Development Indicators as pandas tables."""

from .cache import (
    ReferenceCache,
    get_countries,
    get_indicators,
    reset_country_cache,
    reset_indicator_cache,
)
from .exceptions import (
    DateParseError,
    DownloadError,
    MalformedResponseError,
    ValidationError,
    WDIError,
)
from .search import search, search_countries, search_indicators
from .sources_worldbank import fetch_indicators

__all__ = [
    "DateParseError",
    "DownloadError",
    "MalformedResponseError",
    "ReferenceCache",
    "ValidationError",
    "WDIError",
    "fetch_indicators",
    "get_countries",
    "get_indicators",
    "reset_country_cache",
    "reset_indicator_cache",
    "search",
    "search_countries",
    "search_indicators",
]
