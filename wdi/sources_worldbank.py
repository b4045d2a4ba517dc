"""
Download WDI indicator series and join them into one table.

Example:
    fetch_indicators(["SP.POP.TOTL", "NY.GDP.MKTP.CD"], ["US", "BR"], 1980, 2012, extra=True)
"""

from __future__ import annotations

from datetime import date, datetime
from numbers import Integral
from typing import Iterable

import pandas as pd

from .cache import ReferenceCache, default_cache
from .config import API_BASE, PER_PAGE
from .exceptions import ValidationError
from .logging_config import create_logger
from .parsers import KEY_COLUMNS, parse_wdi, unwrap_envelope, value_column
from .transport import FetchJson

logger = create_logger(__name__)

DEFAULT_START = date(1000, 1, 1)
DEFAULT_END = date(3000, 1, 1)
AGGREGATES_REGION = "Aggregates"


def _as_list(items: str | Iterable[str]) -> list[str]:
    if isinstance(items, str):
        return [items]
    return list(items)


def _unique(items: list[str]) -> list[str]:
    return list(dict.fromkeys(items))


def _as_date(bound: date | int, month: int, day: int) -> date:
    if isinstance(bound, Integral) and not isinstance(bound, bool):
        return date(int(bound), month, day)
    if isinstance(bound, datetime):
        return bound.date()
    if isinstance(bound, date):
        return bound
    raise ValidationError(f"expected a date or a year, got {bound!r}")


def _start_date(start: date | int) -> date:
    return _as_date(start, 1, 1)


def _end_date(end: date | int) -> date:
    return _as_date(end, 12, 31)


def get_url(indicator: str, countries: str | Iterable[str]) -> str:
    codes = ";".join(_as_list(countries))
    return f"{API_BASE}/countries/{codes}/indicators/{indicator}?format=json&per_page={PER_PAGE}"


def wdi_download(
    indicator: str,
    countries: str | Iterable[str],
    start: date,
    end: date,
    *,
    fetch_json: FetchJson,
    verbose: bool = False,
) -> pd.DataFrame:
    payload = fetch_json(get_url(indicator, countries), verbose=verbose)
    return parse_wdi(indicator, unwrap_envelope(payload), start, end)


def resolve_countries(countries: str | Iterable[str], cache: ReferenceCache, verbose: bool = False) -> list[str]:
    """Expand the "all" and "all_countries" shortcuts into iso2c codes."""
    if isinstance(countries, str):
        if countries == "all":
            return cache.countries(verbose=verbose)["iso2c"].tolist()
        if countries == "all_countries":
            table = cache.countries(verbose=verbose)
            return table.loc[table["region"] != AGGREGATES_REGION, "iso2c"].tolist()
        return [countries]
    resolved = _as_list(countries)
    if not resolved:
        raise ValidationError("no countries given")
    return resolved


def _check_value_columns(indicators: list[str]) -> None:
    seen: dict[str, str] = {}
    for indicator in indicators:
        column = value_column(indicator)
        if column in seen:
            raise ValidationError(
                f"indicators {seen[column]!r} and {indicator!r} share the column name {column!r}"
            )
        seen[column] = indicator


def fetch_indicators(
    indicators: str | Iterable[str],
    countries: str | Iterable[str] = "all",
    start: date | int = DEFAULT_START,
    end: date | int = DEFAULT_END,
    *,
    extra: bool = False,
    verbose: bool = False,
    cache: ReferenceCache | None = None,
    fetch_json: FetchJson | None = None,
) -> pd.DataFrame:
    """Download WDI indicators for a set of countries; int bounds are whole years."""
    cache = cache or default_cache
    fetch_json = fetch_json or cache.fetch_json
    start, end = _start_date(start), _end_date(end)

    if not start <= end:
        raise ValidationError(f"start has to be <= end. start={start}. end={end}")

    indicators = _unique(_as_list(indicators))
    if not indicators:
        raise ValidationError("no indicators given")
    _check_value_columns(indicators)

    countries = _unique(resolve_countries(countries, cache, verbose=verbose))

    df = wdi_download(indicators[0], countries, start, end, fetch_json=fetch_json, verbose=verbose)
    for indicator in indicators[1:]:
        other = wdi_download(indicator, countries, start, end, fetch_json=fetch_json, verbose=verbose)
        df = df.merge(other, on=KEY_COLUMNS, how="outer")

    if extra:
        df = df.merge(cache.countries(verbose=verbose), on="iso2c", how="inner")

    df = df.sort_values(["iso2c", "year"], kind="mergesort").reset_index(drop=True)
    logger.debug(f"Fetched {len(df)} rows for {len(indicators)} indicators, {len(countries)} countries")
    return df
