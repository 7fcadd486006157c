"""Summarization prompt templates."""

from __future__ import annotations

from collections.abc import Sequence

from models import RetrievalResult, is_retrieval_result

DEFAULT_INSTRUCTIONS: tuple[str, ...] = (
    "I am giving you a paper's title and abstract.",
    "Summarize the paper in as many sentences as I instruct.",
    "Do not include any preamble text to the summary,",
    "just give me the summary with no preface or intro sentence.",
    "Focus on the findings in the last 2 sentences of the abstract.",
    "If there is no abstract, just write abstract is not available.",
    "Highlight any novel contribution or claim made in the abstract.",
    "Briefly mention the key method or dataset, if explicitly stated.",
    "Indicate the tone of confidence (e.g., suggestive, strong evidence, preliminary).",
    "Optionally, provide a one-sentence lay summary for a general audience.",
)


def build_prompt(
    title: str,
    abstract: str,
    nsentences: int = 3,
    instructions: Sequence[str] = DEFAULT_INSTRUCTIONS,
) -> str:
    """Build the prompt sent to the local model for one article.

    Layout: the instructions joined by spaces, then one line each for the
    sentence count, the title and the abstract.
    """
    whole = isinstance(nsentences, int) or (
        isinstance(nsentences, float) and nsentences.is_integer()
    )
    if isinstance(nsentences, bool) or not whole or nsentences <= 0:
        raise ValueError("nsentences must be a positive whole number")

    joined = " ".join(instructions)
    return (
        f"{joined}\n"
        f"Number of sentences in summary: {int(nsentences)}\n"
        f"Title: {title}\n"
        f"Abstract: {abstract}"
    )


def add_prompt(
    result: RetrievalResult,
    nsentences: int = 3,
    instructions: Sequence[str] = DEFAULT_INSTRUCTIONS,
) -> list[dict[str, str]]:
    """Return one row per article with an extra ``prompt`` column."""
    if not is_retrieval_result(result):
        raise TypeError("add_prompt expects a RetrievalResult from get_articles()")

    rows = result.to_rows()
    for row in rows:
        row["prompt"] = build_prompt(
            row["title"], row["abstract"], nsentences=nsentences, instructions=instructions
        )
    return rows
