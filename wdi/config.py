"""Settings for the wdi package, read from the environment."""

from __future__ import annotations

import os

API_BASE = os.getenv("WDI_API_BASE", "https://api.worldbank.org/v2").rstrip("/")
PER_PAGE = int(os.getenv("WDI_PER_PAGE", "25000"))
HTTP_TIMEOUT = float(os.getenv("WDI_HTTP_TIMEOUT", "60"))

LOG_LEVEL = os.getenv("WDI_LOG_LEVEL", "INFO").upper()
LOG_DIR = os.getenv("WDI_LOG_DIR") or None
