"""Entrypoint for the journal-issue summarization pipeline."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from filters import filter_articles
from llm_client import OLLAMA_MODEL, add_summary
from nature_feed import UnsupportedJournalError, get_articles
from prompts import add_prompt
from report import save_report


def summarize_journal(
    journal: str,
    filename: str = "natchat_summary",
    outdir: str | Path = ".",
    model: str | None = None,
    save_csv: bool = True,
    save_html: bool = True,
    verbose: bool = True,
    whitelist: list[str] | None = None,
) -> dict[str, str]:
    """Scrape, filter, summarize and save one journal's current issue.

    Runs get_articles -> filter_articles -> add_prompt -> add_summary ->
    save_report and returns the saved file paths. Raises RuntimeError when
    there is nothing to summarize.
    """
    model = model or OLLAMA_MODEL

    if verbose:
        logging.info("Scraping articles from journal: %s", journal)
    articles = get_articles(journal)
    if len(articles) == 0:
        raise RuntimeError(
            f"No articles found for {journal}. Check the journal name with "
            "journals.find_journals() or try again later."
        )

    if whitelist:
        if verbose:
            logging.info("Filtering articles using whitelist terms: %s", ", ".join(whitelist))
        articles = filter_articles(articles, whitelist_terms=whitelist)
        if len(articles) == 0:
            raise RuntimeError("No articles matched the whitelist terms. Try different keywords.")

    if verbose:
        logging.info("Building prompts for %s articles", len(articles))
    rows = add_prompt(articles)

    if verbose:
        logging.info("Generating summaries using model: %s", model)
    rows = add_summary(rows, model=model)

    if verbose:
        logging.info("Saving report...")
    return save_report(
        rows,
        filename=filename,
        save_csv=save_csv,
        save_html=save_html,
        verbose=verbose,
        outdir=outdir,
        model=model,
    )


def _split_env_list(raw: str | None) -> list[str]:
    return [item.strip() for item in (raw or "").split(",") if item.strip()]


def run(journals: list[str], whitelist: list[str] | None, outdir: str, filename: str) -> None:
    """Summarize each journal in turn; one failing journal does not stop the rest."""
    processed = 0
    failed = 0

    for journal in journals:
        # One report per journal, so the base filename carries the journal.
        slug_name = f"{filename}_{journal.lower().replace(' ', '_').replace('&', 'and')}"
        try:
            paths = summarize_journal(
                journal,
                filename=slug_name,
                outdir=outdir,
                whitelist=whitelist,
            )
            processed += 1
            logging.info("Report for %s: %s", journal, paths)
        except UnsupportedJournalError as exc:
            failed += 1
            logging.error("%s", exc)
        except Exception as exc:  # broad by design to keep the batch resilient
            failed += 1
            logging.exception("Failed summarizing journal=%s: %s", journal, exc)

    logging.info("Run complete. processed=%s failed=%s", processed, failed)


def main() -> None:
    """Initialize config from the environment and execute the pipeline."""
    load_dotenv()
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")

    journals = _split_env_list(os.getenv("NATCHAT_JOURNALS", "Nature"))
    whitelist = _split_env_list(os.getenv("NATCHAT_WHITELIST")) or None
    run(
        journals=journals,
        whitelist=whitelist,
        outdir=os.getenv("NATCHAT_OUTDIR", "."),
        filename=os.getenv("NATCHAT_FILENAME", "natchat_summary"),
    )


if __name__ == "__main__":
    main()
