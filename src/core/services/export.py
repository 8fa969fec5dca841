"""
CSV export for back-office downloads.
"""

from __future__ import annotations

import csv
import io
from collections.abc import Mapping, Sequence
from typing import Any

CSV_CONTENT_TYPE = "text/csv;charset=UTF-8"


def convert_to_csv(rows: Sequence[Mapping[str, Any]]) -> str:
    """
    Render rows as CSV text.

    The header comes from the first row's keys. Values are quoted only when
    needed. An empty sequence gives an empty string.
    """
    if not rows:
        return ""

    buffer = io.StringIO()
    writer = csv.DictWriter(
        buffer,
        fieldnames=list(rows[0].keys()),
        extrasaction="ignore",
        lineterminator="\n",
    )
    writer.writeheader()
    for row in rows:
        writer.writerow({k: "" if v is None else v for k, v in row.items()})
    return buffer.getvalue()
