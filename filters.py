"""Whitelist keyword filter applied to retrieved articles (no LLM calls)."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import replace

from models import ArticleRecord, RetrievalResult, is_retrieval_result

LOGGER = logging.getLogger(__name__)


def matches_whitelist(record: ArticleRecord, terms: frozenset[str]) -> bool:
    """Return True if any term occurs in the record's title or abstract."""
    text = f"{record.title} {record.abstract}".lower()
    return any(term in text for term in terms)


def filter_articles(
    result: RetrievalResult,
    whitelist_terms: Iterable[str] | None,
) -> RetrievalResult:
    """Keep only articles mentioning at least one whitelist term.

    Matching is case-insensitive substring search over title + abstract.
    A missing or empty whitelist keeps everything.
    """
    if not is_retrieval_result(result):
        raise TypeError("filter_articles expects a RetrievalResult from get_articles()")

    terms = frozenset(
        term.strip().lower() for term in (whitelist_terms or ()) if term and term.strip()
    )
    if not terms:
        return result

    kept = tuple(record for record in result if matches_whitelist(record, terms))
    LOGGER.info(
        "Whitelist filter: journal=%s total=%s kept=%s dropped=%s",
        result.journal,
        len(result),
        len(kept),
        len(result) - len(kept),
    )
    return replace(result, records=kept)
