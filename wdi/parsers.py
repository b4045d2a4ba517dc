"""
JSON-to-DataFrame conversion for World Bank API payloads.

Observation records become one row per (country, date). Reference payloads
(countries, indicators) become lookup tables. Nested fields are read with
nested_value, which returns None when any level is missing or null.
"""

from __future__ import annotations

from datetime import date
from typing import Any

import pandas as pd

from .dates import parse_date
from .exceptions import MalformedResponseError

KEY_COLUMNS = ["iso2c", "country", "frequency", "date", "year"]
COUNTRY_COLUMNS = [
    "iso3c",
    "iso2c",
    "name",
    "region",
    "capital",
    "longitude",
    "latitude",
    "income",
    "lending",
]
INDICATOR_COLUMNS = [
    "indicator",
    "name",
    "description",
    "source_database",
    "source_organization",
    "topics",
]
MISSING_TEXT = "NA"


def value_column(indicator: str) -> str:
    """Column name for an indicator: "NY.GNP.PCAP.CD" -> "NY_GNP_PCAP_CD"."""
    return indicator.replace(".", "_")


def nested_value(record: dict, *keys: str) -> Any:
    current: Any = record
    for key in keys:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current


def to_float(text: Any) -> float | None:
    if text is None:
        return None
    try:
        return float(text)
    except (TypeError, ValueError):
        return None


def _text_or_missing(text: str | None) -> str:
    # downstream joins rely on non-null country fields
    return MISSING_TEXT if text is None else text


def unwrap_envelope(payload: Any) -> list | None:
    """
    Return the records half of a [metadata, records] response.

    A one-element envelope is the API's error form; its message key and
    value are raised in a MalformedResponseError.
    """
    if isinstance(payload, list) and len(payload) == 1:
        head = payload[0]
        messages = head.get("message") if isinstance(head, dict) else None
        msg = messages[0] if isinstance(messages, list) and messages else None
        if isinstance(msg, dict):
            raise MalformedResponseError(
                f"request error. response key={msg.get('key')} value={msg.get('value')}",
                key=msg.get("key"),
                value=msg.get("value"),
            )
        raise MalformedResponseError(f"json data problem: {payload}")
    if not isinstance(payload, list) or len(payload) != 2:
        raise MalformedResponseError(f"wrong length json reply: {payload}")
    return payload[1]


def parse_wdi(indicator: str, records: list[dict] | None, start: date, end: date) -> pd.DataFrame:
    """
    Build the observation table for one indicator.

    Null country fields become "NA", null values become NaN. Only rows
    dated within [start, end] are kept, so rows without a usable date drop
    out. records=None gives an empty table with the same schema.
    """
    iso2c: list[str] = []
    country: list[str] = []
    frequency: list[str] = []
    dates: list[date] = []
    values: list[float | None] = []

    for item in records or []:
        day, freq = parse_date(item.get("date") or "")
        if day is None or not start <= day <= end:
            continue
        iso2c.append(_text_or_missing(nested_value(item, "country", "id")))
        country.append(_text_or_missing(nested_value(item, "country", "value")))
        frequency.append(freq)
        dates.append(day)
        values.append(item.get("value"))

    return pd.DataFrame(
        {
            "iso2c": pd.Series(iso2c, dtype="object"),
            "country": pd.Series(country, dtype="object"),
            "frequency": pd.Series(frequency, dtype="object"),
            "date": pd.to_datetime(pd.Series(dates, dtype="object")).astype("datetime64[ns]"),
            # float for compatibility with consumers of the older year-only API
            "year": pd.Series([float(d.year) for d in dates], dtype="float64"),
            value_column(indicator): pd.Series(values, dtype="float64"),
        }
    )


def _topic_names(record: dict) -> str:
    topics = record.get("topics") or []
    names = [t.get("value").strip() for t in topics if isinstance(t, dict) and t.get("value")]
    return "; ".join(n for n in names if n)


def parse_indicators(payload: Any) -> pd.DataFrame:
    records = unwrap_envelope(payload) or []
    rows = [
        {
            "indicator": item.get("id"),
            "name": item.get("name"),
            "description": item.get("sourceNote"),
            "source_database": nested_value(item, "source", "value"),
            "source_organization": item.get("sourceOrganization"),
            "topics": _topic_names(item),
        }
        for item in records
    ]
    return pd.DataFrame(rows, columns=INDICATOR_COLUMNS, dtype="object")


def parse_countries(payload: Any) -> pd.DataFrame:
    """
    Build the countries reference table.

    id, iso2Code and name are expected on every record; region, income
    level and lending type are nested objects and may be absent. Longitude
    and latitude arrive as strings and become NaN when empty or unparseable.
    """
    records = unwrap_envelope(payload) or []
    rows = [
        {
            "iso3c": item.get("id"),
            "iso2c": item.get("iso2Code"),
            "name": item.get("name"),
            "region": nested_value(item, "region", "value"),
            "capital": item.get("capitalCity"),
            "longitude": to_float(item.get("longitude")),
            "latitude": to_float(item.get("latitude")),
            "income": nested_value(item, "incomeLevel", "value"),
            "lending": nested_value(item, "lendingType", "value"),
        }
        for item in records
    ]
    df = pd.DataFrame(rows, columns=COUNTRY_COLUMNS, dtype="object")
    df["longitude"] = df["longitude"].astype("float64")
    df["latitude"] = df["latitude"].astype("float64")
    return df
