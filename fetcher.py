"""HTML page retrieval for journal issue pages."""

from __future__ import annotations

import logging
import os

import requests
from bs4 import BeautifulSoup, ParserRejectedMarkup

# Polite identification only; nature.com serves the same markup without it.
USER_AGENT = os.getenv(
    "NATCHAT_USER_AGENT",
    "Mozilla/5.0 (compatible; NatChat/1.1)",
)
HTML_PARSER = "html.parser"

LOGGER = logging.getLogger(__name__)


def _parse_timeout(raw: str | None) -> float | None:
    """Seconds from NATURE_REQUEST_TIMEOUT; None (transport default) when unset or invalid."""
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        LOGGER.warning("Ignoring invalid NATURE_REQUEST_TIMEOUT=%r; using transport default", raw)
        return None


REQUEST_TIMEOUT_SECONDS = _parse_timeout(os.getenv("NATURE_REQUEST_TIMEOUT"))


def fetch_page(url: str) -> BeautifulSoup | None:
    """Fetch ``url`` once and parse it, or return None when unreachable.

    No retries and no caching: every call is a fresh round trip. Transport
    errors, non-2xx responses and markup the parser rejects all collapse to
    None so that callers can degrade to an empty result.
    """
    try:
        response = requests.get(
            url,
            headers={"User-Agent": USER_AGENT},
            timeout=REQUEST_TIMEOUT_SECONDS,
        )
        response.raise_for_status()
    except requests.RequestException as exc:
        LOGGER.warning("Page fetch failed for url=%s: %s", url, exc)
        return None

    try:
        return BeautifulSoup(response.content, HTML_PARSER)
    except ParserRejectedMarkup as exc:
        LOGGER.warning("Page at url=%s could not be parsed: %s", url, exc)
        return None
