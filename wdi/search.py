from __future__ import annotations

import re

import pandas as pd

from .cache import ReferenceCache, default_cache
from .exceptions import ValidationError

COUNTRY_FIELDS = ["name", "region", "capital", "iso2c", "iso3c", "income", "lending"]
INDICATOR_FIELDS = ["name", "description", "topics", "source_database", "source_organization"]


def _compile(pattern: str | re.Pattern) -> re.Pattern:
    if not isinstance(pattern, str):
        return pattern
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise ValidationError(f"invalid search pattern {pattern!r}: {exc}") from exc


def _match(df: pd.DataFrame, field: str, regex: re.Pattern) -> pd.DataFrame:
    hits = df[field].map(lambda cell: isinstance(cell, str) and regex.search(cell) is not None)
    return df[hits.astype(bool)].reset_index(drop=True)


def search_countries(field: str, pattern: str | re.Pattern, cache: ReferenceCache | None = None) -> pd.DataFrame:
    if field not in COUNTRY_FIELDS:
        raise ValidationError(f"unsupported country field: {field!r}. supported are: {COUNTRY_FIELDS}")
    regex = _compile(pattern)
    return _match((cache or default_cache).countries(), field, regex)


def search_indicators(field: str, pattern: str | re.Pattern, cache: ReferenceCache | None = None) -> pd.DataFrame:
    if field not in INDICATOR_FIELDS:
        raise ValidationError(f"unsupported indicator field: {field!r}. supported are: {INDICATOR_FIELDS}")
    regex = _compile(pattern)
    return _match((cache or default_cache).indicators(), field, regex)


def search(domain: str, field: str, pattern: str | re.Pattern, cache: ReferenceCache | None = None) -> pd.DataFrame:
    """
    Search the countries or indicators reference table.

    Examples:
        search("countries", "name", re.compile("united", re.I))
        search("indicators", "description", "(?i)gross national")
    """
    if domain == "countries":
        return search_countries(field, pattern, cache)
    if domain == "indicators":
        return search_indicators(field, pattern, cache)
    raise ValidationError(f"unsupported data source: {domain!r}. supported are: 'countries' or 'indicators'")
