"""Report output: saves summarized articles as a dated CSV and HTML page.

Both files share one base name, ``<filename>_<YYYYMMDD>``, inside ``outdir``:

  <base>.csv   : the selected columns only, one row per article.
  <base>.html  : a standalone page with report information (date, journals,
                 model) followed by the article table.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from datetime import datetime
from pathlib import Path
from typing import Any

from jinja2 import BaseLoader, Environment

from csv_sink import write_csv
from llm_client import OLLAMA_MODEL

LOGGER = logging.getLogger(__name__)

GENERATOR_NAME = "NatChat"
GENERATOR_VERSION = "1.1.0"
DEFAULT_REPORT_MODEL = OLLAMA_MODEL

# ---------------------------------------------------------------------------
# HTML template
# ---------------------------------------------------------------------------

_HTML_TEMPLATE = """<html>
  <head>
    <meta charset="UTF-8">
    <title>{{ title }}</title>
    <style>
      body { font-family: 'Segoe UI', 'Helvetica Neue', sans-serif; padding: 40px; background-color: #fdfdfd; color: #333; }
      h1 { text-align: center; margin-bottom: 5px; font-size: 32px; color: #2c3e50; }
      p.date { text-align: center; font-size: 16px; color: #666; margin-bottom: 30px; font-weight: bold; }
      h2 { font-size: 22px; margin-top: 40px; border-bottom: 2px solid #eee; padding-bottom: 5px; color: #34495e; }
      ul { margin-top: 10px; padding-left: 20px; }
      ul li { font-size: 16px; margin-bottom: 6px; }
      .spacer { margin-top: 50px; }
      table { width: 100%; border-collapse: collapse; margin-top: 20px; box-shadow: 0 2px 8px rgba(0,0,0,0.05); background-color: #fff; }
      th, td { border: 1px solid #ddd; padding: 12px 15px; text-align: left; font-size: 15px; }
      th { background-color: #3498db; color: white; font-weight: bold; }
      tr:nth-child(even) { background-color: #f9f9f9; }
      tr:hover { background-color: #f1f1f1; }
    </style>
  </head>
  <body>
    <h1>{{ title }}</h1>
    <p class="date">{{ date_str }}</p>
    <h2>Report Information</h2>
    <ul>
      <li><strong>Generated by:</strong> {{ generator }} v{{ version }}</li>
      <li><strong>Date:</strong> {{ date_str }}</li>
      <li><strong>Time:</strong> {{ time_str }}</li>
      <li><strong>Journal:</strong> {{ journal_name }}</li>
      <li><strong>Model:</strong> {{ model }}</li>
    </ul>
    <div class="spacer"></div>
    <h2>Articles Summary</h2>
    <table>
      <colgroup>
{%- for pct in widths %}
        <col style="width: {{ pct }}%">
{%- endfor %}
      </colgroup>
      <thead>
        <tr>
{%- for col in cols %}
          <th>{{ col | capitalize }}</th>
{%- endfor %}
        </tr>
      </thead>
      <tbody>
{%- for row in rows %}
        <tr>
{%- for col in cols %}
          <td>{{ row.get(col, "") }}</td>
{%- endfor %}
        </tr>
{%- endfor %}
      </tbody>
    </table>
    <div class="spacer"></div>
    <hr style="margin-top: 60px;">
    <p style="text-align: center; font-size: 14px; color: #aaa;">
      Report generated by <strong>{{ generator }}</strong> - <em>Powered by local LLMs</em>
    </p>
  </body>
</html>
"""

_ENV = Environment(loader=BaseLoader(), autoescape=True)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _journal_label(rows: Sequence[Mapping[str, Any]]) -> str:
    """Comma-joined unique ``source`` values in first-seen order, or 'Unknown'."""
    if not any("source" in row for row in rows):
        return "Unknown"
    seen: dict[str, None] = {}
    for row in rows:
        source = row.get("source")
        if source:
            seen.setdefault(str(source), None)
    return ", ".join(seen) or "Unknown"


def _column_widths(cols: Sequence[str], width: Sequence[float]) -> list[float]:
    """Convert relative widths into percentages, falling back to equal widths."""
    if len(width) != len(cols) or any(w <= 0 for w in width):
        return [round(100 / len(cols), 2) for _ in cols]
    total = sum(width)
    return [round(100 * w / total, 2) for w in width]


def render_html(
    rows: Sequence[Mapping[str, Any]],
    cols: Sequence[str],
    width: Sequence[float],
    title: str,
    model: str,
    generated_at: datetime,
) -> str:
    template = _ENV.from_string(_HTML_TEMPLATE)
    return template.render(
        title=title,
        date_str=generated_at.strftime("%B %d, %Y"),
        time_str=generated_at.strftime("%H:%M:%S"),
        generator=GENERATOR_NAME,
        version=GENERATOR_VERSION,
        journal_name=_journal_label(rows),
        model=model,
        cols=list(cols),
        widths=_column_widths(cols, width),
        rows=rows,
    )


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------


def save_report(
    rows: Sequence[Mapping[str, Any]],
    filename: str = "natchat_summary",
    save_csv: bool = True,
    save_html: bool = True,
    title: str = "Article Summary Report",
    cols: Sequence[str] = ("title", "summary"),
    width: Sequence[float] = (1, 3),
    verbose: bool = True,
    outdir: str | Path = ".",
    model: str | None = None,
    generated_at: datetime | None = None,
) -> dict[str, str]:
    """Write ``rows`` as CSV and/or HTML and return the saved paths.

    Returns a dict with ``csv`` and/or ``html`` keys for the files written;
    empty when both outputs are disabled.
    """
    if not isinstance(rows, (list, tuple)) or not all(isinstance(r, Mapping) for r in rows):
        raise TypeError("rows must be a list of mappings (e.g. the output of add_summary())")
    if not cols:
        raise ValueError("cols must name at least one column")

    present: set[str] = set().union(*(row.keys() for row in rows))
    missing_cols = [col for col in cols if col not in present]
    if rows and missing_cols:
        raise ValueError(f"The following columns are missing in input: {', '.join(missing_cols)}")

    if not save_csv and not save_html:
        if verbose:
            LOGGER.info("No output saved: both save_csv and save_html are False.")
        return {}

    generated_at = generated_at or datetime.now()
    base_name = f"{Path(filename).with_suffix('')}_{generated_at.strftime('%Y%m%d')}"
    out = Path(outdir)
    out.mkdir(parents=True, exist_ok=True)

    saved: dict[str, str] = {}

    if save_csv:
        csv_path = write_csv(rows, out / f"{base_name}.csv", cols)
        if verbose:
            LOGGER.info("CSV saved to: %s", csv_path)
        saved["csv"] = str(csv_path)

    if save_html:
        html_path = out / f"{base_name}.html"
        html = render_html(
            rows,
            cols=cols,
            width=width,
            title=title,
            model=model or DEFAULT_REPORT_MODEL,
            generated_at=generated_at,
        )
        html_path.write_text(html, encoding="utf-8")
        if verbose:
            LOGGER.info("HTML saved to: %s", html_path)
        saved["html"] = str(html_path)

    return saved
