"""CSV export of data dictionary rows."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Sequence

from ..logging import get_logger
from ..models import RESULT_COLUMNS, ResultRow

logger = get_logger("exporters.delimited")


def export_to_csv(rows: Sequence[ResultRow], output_path: Path) -> Path:
    """Write ``rows`` to ``output_path`` with every value quoted."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.unlink(missing_ok=True)
    with output_path.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.writer(handle, quoting=csv.QUOTE_ALL, lineterminator="\n")
        writer.writerow(RESULT_COLUMNS)
        for row in rows:
            writer.writerow(row.as_list())
    logger.info("CSV file generated at: %s", output_path)
    return output_path


__all__ = ["export_to_csv"]
