"""Nature current-issue ingestion: catalog lookup, page fetch and extraction."""

from __future__ import annotations

import logging
import os

from extractor import build_records, extract_cards
from fetcher import fetch_page
from journals import lookup
from models import ArticleSelectors, RetrievalResult

NATURE_ISSUE_URL_TEMPLATE = os.getenv(
    "NATURE_ISSUE_URL_TEMPLATE", "https://www.nature.com/{slug}/current-issue"
)

LOGGER = logging.getLogger(__name__)


class UnsupportedJournalError(ValueError):
    """Raised when a journal name has no case-insensitive match in the catalog."""

    def __init__(self, journal: str) -> None:
        self.journal = journal
        super().__init__(
            f"The journal name '{journal}' is not supported. "
            "Use journals.find_journals() to list the available journals."
        )


def issue_url(slug: str) -> str:
    return NATURE_ISSUE_URL_TEMPLATE.format(slug=slug)


def get_articles(
    journal: str,
    selectors: ArticleSelectors | None = None,
    verbose: bool = False,
) -> RetrievalResult:
    """Scrape the current issue of ``journal`` into a RetrievalResult.

    Only an unknown journal name raises. An unreachable page, a page with no
    article cards, and any unexpected parsing error all return an empty result
    and log a diagnostic, so one broken journal cannot abort a batch.

    Args:
        journal: Full journal name, matched case-insensitively against the catalog.
        selectors: CSS selectors for cards and fields; defaults match nature.com.
        verbose: Log the URL used and the number of articles found.
    """
    entry = lookup(journal)
    if entry is None:
        raise UnsupportedJournalError(journal)

    selectors = selectors or ArticleSelectors()
    source = entry.name
    url = issue_url(entry.slug)
    if verbose:
        LOGGER.info("Fetching current issue of %s from %s", source, url)

    try:
        document = fetch_page(url)
    except Exception as exc:  # any transport fault counts as unreachable
        LOGGER.warning("Page fetch for %s raised %s: %s", url, type(exc).__name__, exc)
        document = None
    if document is None:
        LOGGER.warning(
            "The current issue of %s could not be retrieved at this time; "
            "check that %s exists.",
            source,
            url,
        )
        return RetrievalResult(journal=source)

    try:
        raw = extract_cards(document, selectors, base_url=url)
        if not raw:
            LOGGER.warning(
                "No articles found on page for %s (article selector %r matched nothing)",
                source,
                selectors.article,
            )
            return RetrievalResult(journal=source)
        records = build_records(raw, source=source)
    except Exception as exc:  # broad by design: extraction failures degrade to empty
        LOGGER.error("Error scraping %s: %s", source, exc)
        return RetrievalResult(journal=source)

    if verbose:
        LOGGER.info(
            "Extracted %s articles from %s (cards=%s)", len(records), source, len(raw)
        )
    return RetrievalResult(journal=source, records=tuple(records))
