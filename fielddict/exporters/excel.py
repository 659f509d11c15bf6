"""Excel workbook export of data dictionary rows."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font
from openpyxl.utils import get_column_letter

from ..logging import get_logger
from ..models import RESULT_COLUMNS, ResultRow

logger = get_logger("exporters.excel")

MAX_COLUMN_WIDTH = 50
_MAX_SHEET_TITLE = 31
_INVALID_SHEET_CHARS = set("[]:*?/\\")


def sheet_title(object_name: str) -> str:
    """Return a worksheet title Excel will accept for ``object_name``."""
    cleaned = "".join(char for char in f"{object_name} Fields" if char not in _INVALID_SHEET_CHARS)
    return cleaned[:_MAX_SHEET_TITLE] or "Fields"


def export_to_excel(rows: Sequence[ResultRow], object_name: str, output_path: Path) -> Path:
    """Write ``rows`` to a single-sheet workbook with a title and filterable header."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.unlink(missing_ok=True)

    workbook = Workbook()
    sheet = workbook.active
    sheet.title = sheet_title(object_name)
    column_count = len(RESULT_COLUMNS)

    sheet.append([f"{object_name} Field Analysis"])
    sheet.merge_cells(start_row=1, start_column=1, end_row=1, end_column=column_count)
    sheet["A1"].font = Font(bold=True, size=14)
    sheet["A1"].alignment = Alignment(horizontal="center")

    sheet.append(list(RESULT_COLUMNS))
    for cell in sheet[2]:
        cell.font = Font(bold=True)
        cell.alignment = Alignment(horizontal="center")

    last_column = get_column_letter(column_count)
    sheet.auto_filter.ref = f"A2:{last_column}2"
    sheet.freeze_panes = "A3"

    for row in rows:
        sheet.append(row.as_list())

    for excel_row in sheet.iter_rows(min_row=3, max_row=sheet.max_row, max_col=column_count):
        for cell in excel_row:
            cell.alignment = Alignment(vertical="top", wrap_text=True)

    records = [row.as_dict() for row in rows]
    for index, column in enumerate(RESULT_COLUMNS, start=1):
        values = [column] + [record[column] for record in records]
        longest = max(len(value) for value in values)
        sheet.column_dimensions[get_column_letter(index)].width = min(
            longest + 5, MAX_COLUMN_WIDTH
        )

    workbook.save(output_path)
    logger.info("Excel file generated at: %s", output_path)
    return output_path


__all__ = ["MAX_COLUMN_WIDTH", "export_to_excel", "sheet_title"]
