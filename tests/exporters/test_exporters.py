"""Tests for the CSV and Excel exporters."""

from __future__ import annotations

import csv
from pathlib import Path

from openpyxl import load_workbook

from fielddict.exporters import export_to_csv, export_to_excel
from fielddict.exporters.excel import MAX_COLUMN_WIDTH, sheet_title
from fielddict.models import RESULT_COLUMNS, FieldDescriptor, FieldReferences, ResultRow


def _rows() -> list[ResultRow]:
    usage = FieldReferences(
        layouts=["Case-Support.layout-meta.xml", "Case-Sales.layout-meta.xml"],
        references=["Apex: CaseService.cls", "Flow: Escalate.flow-meta.xml"],
        access=["Profile: Admin.profile-meta.xml"],
    )
    descriptor = FieldDescriptor(
        name="Priority__c",
        label="Priority",
        description='Says "urgent"',
        data_type="Picklist",
        picklist_values="High, Low",
    )
    return [ResultRow.build(descriptor, usage, last_modified="2024-01-01")]


def test_csv_export_quotes_every_value(tmp_path: Path) -> None:
    output = tmp_path / "Case_Field_Analysis.csv"
    output.write_text("stale", encoding="utf-8")

    export_to_csv(_rows(), output)

    text = output.read_text(encoding="utf-8")
    assert text.splitlines()[0] == ",".join(f'"{column}"' for column in RESULT_COLUMNS)
    assert '"Says ""urgent"""' in text

    with output.open(encoding="utf-8", newline="") as handle:
        records = list(csv.DictReader(handle))
    assert records[0]["Layouts"] == "Case-Support.layout-meta.xml; Case-Sales.layout-meta.xml"
    assert records[0]["References"] == "Apex: CaseService.cls;\nFlow: Escalate.flow-meta.xml"
    assert records[0]["ProfilesAndPermSets"] == "Profile: Admin.profile-meta.xml"


def test_csv_export_writes_header_for_empty_result(tmp_path: Path) -> None:
    output = export_to_csv([], tmp_path / "empty.csv")
    assert output.read_text(encoding="utf-8").strip() == ",".join(
        f'"{column}"' for column in RESULT_COLUMNS
    )


def test_excel_export_layout(tmp_path: Path) -> None:
    output = tmp_path / "Case_Field_Analysis.xlsx"

    export_to_excel(_rows(), "Case", output)

    workbook = load_workbook(output)
    sheet = workbook["Case Fields"]
    assert sheet["A1"].value == "Case Field Analysis"
    assert sheet["A1"].font.bold is True
    assert [cell.value for cell in sheet[2]] == list(RESULT_COLUMNS)
    assert sheet.freeze_panes == "A3"
    assert sheet.auto_filter.ref == "A2:Q2"
    assert sheet["A3"].value == "Priority__c"
    assert sheet["J3"].value == "High, Low"
    assert sheet["A3"].alignment.wrap_text is True
    assert any(str(merged) == "A1:Q1" for merged in sheet.merged_cells.ranges)
    widths = [sheet.column_dimensions[letter].width for letter in "ABCDEFGHIJKLMNOPQ"]
    assert max(widths) <= MAX_COLUMN_WIDTH


def test_sheet_title_is_trimmed_for_excel() -> None:
    assert sheet_title("Case") == "Case Fields"
    assert sheet_title("Very_Long_Custom_Object_Name__c") == "Very_Long_Custom_Object_Name__c"[:31]
    assert sheet_title("Odd/Name") == "OddName Fields"
