"""
In-process cache of the countries and indicators reference tables.

Each slot is downloaded on first access and reused until reset.
"""

from __future__ import annotations

import threading

import pandas as pd

from .config import API_BASE, PER_PAGE
from .logging_config import create_logger
from .parsers import parse_countries, parse_indicators
from .transport import FetchJson, fetch_json

logger = create_logger(__name__)


def countries_url() -> str:
    return f"{API_BASE}/countries/all?per_page={PER_PAGE}&format=json"


def indicators_url() -> str:
    return f"{API_BASE}/indicators?per_page={PER_PAGE}&format=json"


def download_countries(fetch: FetchJson = fetch_json, verbose: bool = False) -> pd.DataFrame:
    return parse_countries(fetch(countries_url(), verbose=verbose))


def download_indicators(fetch: FetchJson = fetch_json, verbose: bool = False) -> pd.DataFrame:
    return parse_indicators(fetch(indicators_url(), verbose=verbose))


class ReferenceCache:
    """Two-slot cache; fetch_json is also the transport for indicator downloads."""

    def __init__(self, fetch_json: FetchJson = fetch_json):
        self.fetch_json = fetch_json
        self._countries: pd.DataFrame | None = None
        self._indicators: pd.DataFrame | None = None
        self._lock = threading.Lock()

    def countries(self, verbose: bool = False) -> pd.DataFrame:
        with self._lock:
            if self._countries is None:
                self._countries = download_countries(self.fetch_json, verbose=verbose)
                logger.info(f"Cached {len(self._countries)} countries")
            return self._countries

    def indicators(self, verbose: bool = False) -> pd.DataFrame:
        with self._lock:
            if self._indicators is None:
                self._indicators = download_indicators(self.fetch_json, verbose=verbose)
                logger.info(f"Cached {len(self._indicators)} indicators")
            return self._indicators

    def reset_countries(self) -> None:
        with self._lock:
            self._countries = None
        logger.debug("Country cache reset")

    def reset_indicators(self) -> None:
        with self._lock:
            self._indicators = None
        logger.debug("Indicator cache reset")


default_cache = ReferenceCache()


def get_countries(verbose: bool = False) -> pd.DataFrame:
    return default_cache.countries(verbose=verbose)


def get_indicators(verbose: bool = False) -> pd.DataFrame:
    return default_cache.indicators(verbose=verbose)


def reset_country_cache() -> None:
    default_cache.reset_countries()


def reset_indicator_cache() -> None:
    default_cache.reset_indicators()
