# salary_rise/data_extraction.py
"""
Fetches the raw CPI document, from a local file or an http(s) URL.
"""

from pathlib import Path
from typing import Optional

import requests

from .config import settings
from .errors import TransportError
from .logging_config import log


def _is_url(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


def fetch_cpi_text(source: Optional[str] = None) -> str:
    source = source or settings.CPI_DATA_SOURCE
    log.info(f"Loading CPI data from {source}...")

    if _is_url(source):
        try:
            response = requests.get(source, timeout=settings.HTTP_TIMEOUT)
            response.raise_for_status()
        except requests.RequestException as e:
            log.error(f"Failed to download CPI data: {e}")
            raise TransportError(f"Could not download CPI data from {source}: {e}") from e
        response.encoding = response.encoding or "utf-8"
        text = response.text
    else:
        try:
            text = Path(source).read_text(encoding="utf-8")
        except OSError as e:
            log.error(f"Failed to read CPI file: {e}")
            raise TransportError(f"Could not read CPI data from {source}: {e}") from e

    log.success(f"CPI document loaded ({len(text)} characters).")
    return text.lstrip("\ufeff")
