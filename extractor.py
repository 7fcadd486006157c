"""Article-card extraction and normalization for journal issue pages."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from models import ABSTRACT_PLACEHOLDER, ArticleRecord, ArticleSelectors

LOGGER = logging.getLogger(__name__)

_WHITESPACE_RUN = re.compile(r"\s+")


@dataclass(frozen=True, slots=True)
class RawArticle:
    """Fields pulled from one article card; None marks a missing value."""

    title: str | None
    url: str | None
    abstract: str | None


def extract_cards(
    document: BeautifulSoup | Tag,
    selectors: ArticleSelectors,
    base_url: str,
) -> list[RawArticle]:
    """Select every article card and pull its title, link and abstract.

    Each field is looked up independently per card, so a card missing one
    field still yields the others. An empty list means the article selector
    matched nothing.
    """
    cards = document.select(selectors.article)
    raw: list[RawArticle] = []
    for card in cards:
        raw.append(
            RawArticle(
                title=_node_text(card.select_one(selectors.title)),
                url=_node_href(card.select_one(selectors.url), base_url),
                abstract=_node_text(card.select_one(selectors.abstract)),
            )
        )
    return raw


def _node_text(node: Tag | None) -> str | None:
    if node is None:
        return None
    return node.get_text().strip()


def _node_href(node: Tag | None, base_url: str) -> str | None:
    if node is None:
        return None
    href = node.get("href")
    if not isinstance(href, str) or not href.strip():
        return None
    return urljoin(base_url, href.strip())


def normalize_abstract(text: str | None) -> str:
    """Collapse whitespace runs to one space; substitute the placeholder when empty."""
    if text is None:
        return ABSTRACT_PLACEHOLDER
    cleaned = _WHITESPACE_RUN.sub(" ", text.strip())
    return cleaned or ABSTRACT_PLACEHOLDER


def collect_fields(raw: list[RawArticle]) -> tuple[list[str], list[str], list[str]]:
    """Split cards into positional title/url/abstract lists.

    Cards without a title or link contribute nothing to that list, so the
    three lists may differ in length. Abstracts always get an entry because
    missing ones are replaced by the placeholder.
    """
    titles = [article.title for article in raw if article.title is not None]
    urls = [article.url for article in raw if article.url is not None]
    abstracts = [normalize_abstract(article.abstract) for article in raw]
    return titles, urls, abstracts


def reconcile_lengths(
    titles: list[str],
    urls: list[str],
    abstracts: list[str],
) -> tuple[list[str], list[str], list[str]]:
    """Truncate the three field lists to their shortest common length.

    Positional and lossy: when a selector misses on some cards, the surviving
    entries are not realigned to their original cards.
    """
    min_len = min(len(titles), len(urls), len(abstracts))
    if len(titles) == len(urls) == len(abstracts):
        return titles, urls, abstracts

    LOGGER.warning(
        "Mismatch in lengths: titles (%d), urls (%d), abstracts (%d). Trimming to minimum (%d).",
        len(titles),
        len(urls),
        len(abstracts),
        min_len,
    )
    return titles[:min_len], urls[:min_len], abstracts[:min_len]


def deduplicate(records: list[ArticleRecord]) -> list[ArticleRecord]:
    """Drop records whose title was already seen, keeping the first occurrence."""
    seen: set[str] = set()
    unique: list[ArticleRecord] = []
    for record in records:
        if record.title in seen:
            continue
        seen.add(record.title)
        unique.append(record)
    return unique


def build_records(raw: list[RawArticle], source: str) -> list[ArticleRecord]:
    """Turn raw cards into deduplicated ArticleRecords in document order."""
    titles, urls, abstracts = reconcile_lengths(*collect_fields(raw))
    records = [
        ArticleRecord(title=title, url=url, abstract=abstract, source=source)
        for title, url, abstract in zip(titles, urls, abstracts)
    ]
    return deduplicate(records)
