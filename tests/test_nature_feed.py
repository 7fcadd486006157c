"""Tests for nature_feed.get_articles with the network boundary mocked."""

from __future__ import annotations

import logging
from unittest.mock import MagicMock, patch

import pytest
import requests
from bs4 import ParserRejectedMarkup

from models import ABSTRACT_PLACEHOLDER, COLUMNS, RESULT_KIND, ArticleSelectors, RetrievalResult
from nature_feed import UnsupportedJournalError, get_articles, issue_url


def _card(title: str, href: str, abstract: str | None) -> str:
    summary = f'<div class="c-card__summary"><p>{abstract}</p></div>' if abstract is not None else ""
    return (
        '<article class="c-card c-card--flush">'
        f'<h3 class="c-card__title"><a href="{href}">{title}</a></h3>{summary}'
        "</article>"
    )


def _page(*cards: str) -> bytes:
    return f"<html><body><section>{''.join(cards)}</section></body></html>".encode()


def _mock_resp(content: bytes) -> MagicMock:
    mock = MagicMock()
    mock.content = content
    return mock


def test_issue_url_uses_slug() -> None:
    assert issue_url("nm") == "https://www.nature.com/nm/current-issue"


def test_get_articles_unknown_journal_raises_with_name() -> None:
    with pytest.raises(UnsupportedJournalError) as excinfo:
        get_articles("Unsupported Journal")

    assert "'Unsupported Journal'" in str(excinfo.value)
    assert excinfo.value.journal == "Unsupported Journal"
    assert isinstance(excinfo.value, ValueError)


def test_get_articles_unknown_journal_does_not_fetch() -> None:
    with patch("nature_feed.fetch_page") as mock_fetch, pytest.raises(UnsupportedJournalError):
        get_articles("Journal of Nothing")

    mock_fetch.assert_not_called()


def test_get_articles_well_formed_page() -> None:
    page = _page(
        _card("Gene therapy in mice", "/articles/s41591-001", "First  line.\n\n Second\tline."),
        _card("CRISPR screens", "/articles/s41591-002", "Screens."),
        _card("Protein folding", "https://www.nature.com/articles/s41591-003", "Folds."),
    )

    with patch("fetcher.requests.get", return_value=_mock_resp(page)) as mock_get:
        result = get_articles("nature medicine")

    mock_get.assert_called_once()
    assert mock_get.call_args.args[0] == "https://www.nature.com/nm/current-issue"
    assert isinstance(result, RetrievalResult)
    assert result.kind == RESULT_KIND
    assert len(result) == 3
    assert {r.source for r in result} == {"Nature Medicine"}
    assert result.records[0].abstract == "First line. Second line."
    assert all("  " not in r.abstract for r in result)
    assert [r.url for r in result] == [
        "https://www.nature.com/articles/s41591-001",
        "https://www.nature.com/articles/s41591-002",
        "https://www.nature.com/articles/s41591-003",
    ]


def test_get_articles_duplicate_titles_keep_first() -> None:
    page = _page(
        _card("Same title", "/articles/1", "first"),
        _card("Other", "/articles/2", "other"),
        _card("Same title", "/articles/3", "second"),
    )

    with patch("fetcher.requests.get", return_value=_mock_resp(page)):
        result = get_articles("Nature")

    assert [r.title for r in result] == ["Same title", "Other"]
    assert result.records[0].url == "https://www.nature.com/articles/1"
    assert result.records[0].abstract == "first"


def test_get_articles_missing_abstract_uses_placeholder() -> None:
    page = _page(_card("No abstract here", "/articles/1", None))

    with patch("fetcher.requests.get", return_value=_mock_resp(page)):
        result = get_articles("Nature")

    assert result.records[0].abstract == ABSTRACT_PLACEHOLDER


def test_get_articles_unreachable_returns_empty_result(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING), patch(
        "fetcher.requests.get", side_effect=requests.ConnectionError("no such host")
    ):
        result = get_articles("Nature Biotechnology")

    assert len(result) == 0
    assert result.columns == COLUMNS == ("title", "url", "abstract", "source")
    assert result.to_rows() == []
    assert result.journal == "Nature Biotechnology"
    assert "could not be retrieved" in caplog.text


def test_get_articles_no_cards_is_distinct_warning(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING), patch(
        "fetcher.requests.get", return_value=_mock_resp(b"<html><body><p>Empty</p></body></html>")
    ):
        result = get_articles("Nature")

    assert len(result) == 0
    assert "No articles found on page for Nature" in caplog.text
    assert "could not be retrieved" not in caplog.text


def test_get_articles_selector_syntax_error_returns_empty(caplog: pytest.LogCaptureFixture) -> None:
    page = _page(_card("T", "/a", "A"))

    with caplog.at_level(logging.ERROR), patch(
        "fetcher.requests.get", return_value=_mock_resp(page)
    ):
        result = get_articles("Nature", selectors=ArticleSelectors(article="[[[not-a-selector"))

    assert len(result) == 0
    assert "Error scraping Nature" in caplog.text


def test_get_articles_custom_selectors() -> None:
    page = (
        b"<html><body>"
        b'<div class="teaser"><h2><a href="/x/1">Custom one</a></h2><span class="blurb">B1</span></div>'
        b'<div class="teaser"><h2><a href="/x/2">Custom two</a></h2><span class="blurb">B2</span></div>'
        b"</body></html>"
    )
    selectors = ArticleSelectors(article="div.teaser", title="h2 a", url="h2 a", abstract=".blurb")

    with patch("fetcher.requests.get", return_value=_mock_resp(page)):
        result = get_articles("Nature", selectors=selectors)

    assert [r.title for r in result] == ["Custom one", "Custom two"]
    assert [r.abstract for r in result] == ["B1", "B2"]


def test_get_articles_is_deterministic() -> None:
    page = _page(
        _card("A", "/articles/a", "alpha"),
        _card("B", "/articles/b", "beta"),
    )

    with patch("fetcher.requests.get", side_effect=[_mock_resp(page), _mock_resp(page)]) as mock_get:
        first = get_articles("Nature")
        second = get_articles("Nature")

    assert mock_get.call_count == 2
    assert first == second
    assert first.to_rows() == second.to_rows()


def test_get_articles_verbose_logs_url_and_count(caplog: pytest.LogCaptureFixture) -> None:
    page = _page(_card("A", "/articles/a", "alpha"))

    with caplog.at_level(logging.INFO, logger="nature_feed"), patch(
        "fetcher.requests.get", return_value=_mock_resp(page)
    ):
        result = get_articles("Nature", verbose=True)

    assert len(result) == 1
    assert "https://www.nature.com/nature/current-issue" in caplog.text
    assert "Extracted 1 articles" in caplog.text


def test_get_articles_non_requests_transport_error_returns_empty(
    caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level(logging.WARNING), patch(
        "fetcher.requests.get", side_effect=UnicodeError("label too long")
    ):
        result = get_articles("Nature")

    assert len(result) == 0
    assert result.columns == COLUMNS
    assert "UnicodeError" in caplog.text
    assert "could not be retrieved" in caplog.text


def test_get_articles_parser_rejection_returns_empty(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING), patch(
        "fetcher.requests.get", return_value=_mock_resp(b"<html></html>")
    ), patch("fetcher.BeautifulSoup", side_effect=ParserRejectedMarkup("x")):
        result = get_articles("Nature Medicine")

    assert len(result) == 0
    assert result.journal == "Nature Medicine"
    assert "could not be parsed" in caplog.text
    assert "could not be retrieved" in caplog.text
