"""
Exceptions raised by the wdi package.

Every error derives from WDIError so callers can catch the whole family.
"""

from __future__ import annotations


class WDIError(Exception):
    """Base exception for all wdi errors."""


class DownloadError(WDIError):
    """
    Raised when the World Bank API answers with a non-200 status.

    The failing URL and status code are kept for the caller.
    """

    def __init__(self, url: str, status_code: int):
        super().__init__(f"download failed: status={status_code} url={url}")
        self.url = url
        self.status_code = status_code


class MalformedResponseError(WDIError):
    """
    Raised when a response is not the expected [metadata, records] envelope.

    When the API sends a one-element error envelope, the server-provided
    message key and value are available as attributes.
    """

    def __init__(self, message: str, key: str | None = None, value: str | None = None):
        super().__init__(message)
        self.key = key
        self.value = value


class ValidationError(WDIError, ValueError):
    """Raised for invalid caller input: date ranges, search fields, country sets."""


class DateParseError(WDIError, ValueError):
    """Raised for WDI date codes that look monthly or quarterly but do not parse."""
