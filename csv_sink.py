"""CSV file sink for article summary reports."""

from __future__ import annotations

import csv
import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

LOGGER = logging.getLogger(__name__)


def write_csv(
    rows: Sequence[Mapping[str, Any]],
    path: str | Path,
    columns: Sequence[str],
) -> Path:
    """Write ``columns`` of each row to ``path``, overwriting any existing file.

    Keys outside ``columns`` are dropped; absent keys are written as empty cells.
    """
    path = Path(path)
    with path.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.DictWriter(fh, fieldnames=list(columns), extrasaction="ignore", restval="")
        writer.writeheader()
        for row in rows:
            writer.writerow({key: _as_text(row.get(key)) for key in columns})

    LOGGER.info("Wrote %s CSV rows to %s", len(rows), path)
    return path


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)
