"""Shared typed models for the pipeline."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

RESULT_KIND = "nature_journal_result"
ABSTRACT_PLACEHOLDER = "Abstract not available"
COLUMNS: tuple[str, ...] = ("title", "url", "abstract", "source")


@dataclass(frozen=True, slots=True)
class JournalEntry:
    """One row of the static journal catalog."""

    name: str
    slug: str


@dataclass(frozen=True, slots=True)
class ArticleRecord:
    """Normalized article scraped from a journal's current-issue page."""

    title: str
    url: str
    abstract: str
    source: str

    def to_row(self) -> dict[str, str]:
        return {
            "title": self.title,
            "url": self.url,
            "abstract": self.abstract,
            "source": self.source,
        }


@dataclass(frozen=True, slots=True)
class ArticleSelectors:
    """CSS selectors used to locate article cards and their fields."""

    article: str = ".c-card.c-card--flush"
    title: str = "h3 a"
    url: str = "h3 a"
    abstract: str = ".c-card__summary"


@dataclass(frozen=True, slots=True)
class RetrievalResult:
    """Ordered, deduplicated articles from one retrieval call.

    ``kind`` marks the result as produced by the retrieval pipeline so that
    downstream stages can reject arbitrary input. An empty ``records`` tuple is
    how every recoverable failure is represented.
    """

    journal: str
    records: tuple[ArticleRecord, ...] = ()
    kind: str = field(default=RESULT_KIND)

    columns = COLUMNS

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[ArticleRecord]:
        return iter(self.records)

    def to_rows(self) -> list[dict[str, str]]:
        return [record.to_row() for record in self.records]


def is_retrieval_result(value: object) -> bool:
    return isinstance(value, RetrievalResult) and value.kind == RESULT_KIND
