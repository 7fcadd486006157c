"""Local LLM client (Ollama's OpenAI-compatible endpoint) for article summaries."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Sequence
from typing import Any

from openai import OpenAI

OLLAMA_BASE_URL = os.getenv("OLLAMA_BASE_URL", "http://localhost:11434/v1")
OLLAMA_MODEL = os.getenv("OLLAMA_MODEL", "llama3.1")
OLLAMA_TEMPERATURE = float(os.getenv("OLLAMA_TEMPERATURE", "0.1"))
# Ollama ignores the key, but the SDK refuses to build a client without one.
OLLAMA_API_KEY = os.getenv("OLLAMA_API_KEY", "ollama")
MAX_ATTEMPTS = 2
SUMMARY_PLACEHOLDER = "Summary not available"

LOGGER = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


def make_client() -> OpenAI:
    return OpenAI(base_url=OLLAMA_BASE_URL, api_key=OLLAMA_API_KEY)


def summarize_prompt(prompt: str, model: str | None = None, client: OpenAI | None = None) -> str:
    """Send one prompt to the local model and return the stripped completion.

    Retries up to MAX_ATTEMPTS times; an empty completion counts as a failure.
    Raises RuntimeError carrying the last error when every attempt fails.
    """
    model = model or OLLAMA_MODEL
    client = client or make_client()
    last_error: Exception | None = None

    for attempt in range(1, MAX_ATTEMPTS + 1):
        try:
            response = client.chat.completions.create(
                model=model,
                temperature=OLLAMA_TEMPERATURE,
                messages=[{"role": "user", "content": prompt}],
            )
            content = response.choices[0].message.content
            if not content or not content.strip():
                raise RuntimeError("Local model returned an empty response")
            return content.strip()
        except Exception as exc:
            last_error = exc
            LOGGER.warning(
                "Summarization failed with model=%s on attempt %s/%s: %s",
                model,
                attempt,
                MAX_ATTEMPTS,
                exc,
            )

    raise RuntimeError(f"Summarization failed with model={model}: {last_error}")


def _log_progress(done: int, total: int) -> None:
    LOGGER.info("Summarized %s/%s articles", done, total)


def add_summary(
    rows: Sequence[dict[str, Any]],
    model: str | None = None,
    progress: ProgressCallback | None = None,
    client: OpenAI | None = None,
) -> list[dict[str, Any]]:
    """Summarize each row's ``prompt`` in order and return rows with ``summary``.

    Rows are processed one at a time, and output order matches input order.
    A row whose summarization still fails after retries gets
    SUMMARY_PLACEHOLDER so the rest of the batch is not lost.

    Args:
        rows: Row dicts as produced by prompts.add_prompt().
        model: Local model name; defaults to OLLAMA_MODEL.
        progress: Called as progress(done, total) after each row.
        client: Optional pre-built OpenAI client (mainly for tests).
    """
    missing = [index for index, row in enumerate(rows) if "prompt" not in row]
    if missing:
        raise KeyError(f"Rows {missing} have no 'prompt' column; run add_prompt() first")

    model = model or OLLAMA_MODEL
    progress = progress or _log_progress
    client = client or make_client()
    total = len(rows)

    LOGGER.info("Generating %s summaries with model=%s", total, model)
    summarized: list[dict[str, Any]] = []
    for index, row in enumerate(rows, 1):
        try:
            summary = summarize_prompt(row["prompt"], model=model, client=client)
        except RuntimeError as exc:
            LOGGER.exception("Summary failed for title=%s: %s", row.get("title"), exc)
            summary = SUMMARY_PLACEHOLDER
        summarized.append({**row, "summary": summary})
        progress(index, total)

    return summarized
