"""Conversion of WDI date codes ("1997", "1997M03", "1997Q2") to calendar dates."""

from __future__ import annotations

from datetime import date, datetime

from .exceptions import DateParseError

QUARTER_MONTHS = {"1": "01", "2": "04", "3": "07", "4": "10"}


def quarter_month(digit: str) -> str:
    """First month of a quarter as two digits, or "NA" for an unknown quarter."""
    return QUARTER_MONTHS.get(digit, "NA")


def _strptime(text: str, fmt: str, code: str) -> date:
    try:
        return datetime.strptime(text, fmt).date()
    except ValueError as exc:
        raise DateParseError(f"cannot parse WDI date code {code!r}") from exc


def parse_yearly(code: str) -> date:
    return _strptime(code, "%Y", code)


def parse_monthly(code: str) -> date:
    return _strptime(code, "%YM%m", code)


def parse_quarterly(code: str) -> date:
    year, _, quarter = code.partition("Q")
    return _strptime(year + quarter_month(quarter), "%Y%m", code)


def parse_date(code: str) -> tuple[date | None, str]:
    """
    Return (date, frequency) for a WDI date code.

    Frequency is "Q", "M", "Y" or "NA". Codes of no known shape give
    (None, "NA"); quarterly or monthly codes that do not parse raise
    DateParseError.
    """
    if "Q" in code:
        return parse_quarterly(code), "Q"
    if "M" in code:
        return parse_monthly(code), "M"
    if len(code) == 4:
        return parse_yearly(code), "Y"
    return None, "NA"
