from __future__ import annotations

from typing import Any, Callable

import requests

from .config import HTTP_TIMEOUT
from .exceptions import DownloadError
from .logging_config import create_logger

logger = create_logger(__name__)

FetchJson = Callable[..., Any]


def fetch_json(url: str, *, verbose: bool = False, timeout: float = HTTP_TIMEOUT) -> Any:
    """GET a URL and return the decoded JSON body. Non-200 answers raise DownloadError."""
    if verbose:
        logger.info(f"download: {url}")
    else:
        logger.debug(f"download: {url}")
    resp = requests.get(url, timeout=timeout)
    if resp.status_code != 200:
        logger.error(f"download failed with status {resp.status_code}: {url}")
        raise DownloadError(url, resp.status_code)
    return resp.json()
