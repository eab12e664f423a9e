"""Validation report workbook writer service."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Alignment
from openpyxl.utils import get_column_letter

from .report_models import InputValidation, RunMetadata, ValidationStatus

RESULTS_SHEET_NAME = "Results"
RUN_INFO_SHEET_NAME = "RunInfo"
RESULT_COLUMNS = ("input", "item", "schema", "status", "mismatches")
_COLUMN_WIDTHS = (60, 8, 36, 12, 80)


def write_validation_report(
    output_path: Path | str,
    validations: Sequence[InputValidation],
    run_metadata: RunMetadata,
) -> Path:
    """Write a report workbook with one row per validated document."""
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = RESULTS_SHEET_NAME
    _write_headers(sheet)
    for row, validation in enumerate(validations, start=2):
        _write_validation_row(sheet, row, validation)

    _write_run_info_sheet(workbook, run_metadata, validations)

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output)
    return output.resolve()


def _write_headers(sheet) -> None:
    columns = zip(RESULT_COLUMNS, _COLUMN_WIDTHS, strict=True)
    for column, (name, width) in enumerate(columns, start=1):
        sheet.cell(row=1, column=column, value=name)
        sheet.cell(row=1, column=column).style = "Headline 1"
        sheet.column_dimensions[get_column_letter(column)].width = width
    sheet.freeze_panes = "A2"


def _write_validation_row(sheet, row: int, validation: InputValidation) -> None:
    values = (
        str(validation.input_path),
        validation.item_index,
        validation.schema_name,
        validation.status.value,
        _format_mismatches(validation),
    )
    for column, value in enumerate(values, start=1):
        sheet.cell(row=row, column=column, value=value)
    sheet.cell(row=row, column=len(values)).alignment = Alignment(wrap_text=True, vertical="top")


def _format_mismatches(validation: InputValidation) -> str:
    if validation.result.passed:
        return ValidationStatus.OK.value
    return "\n".join(validation.result.messages())


def _write_run_info_sheet(
    workbook,
    run_metadata: RunMetadata,
    validations: Sequence[InputValidation],
) -> None:
    sheet = workbook.create_sheet(RUN_INFO_SHEET_NAME)
    passed = sum(1 for validation in validations if validation.result.passed)
    entries = (
        ("run_start", run_metadata.run_start.isoformat()),
        ("schema", run_metadata.schema_name),
        ("config_path", str(run_metadata.config_path) if run_metadata.config_path else ""),
        ("output_path", str(run_metadata.output_path)),
        ("inputs", len({validation.input_path for validation in validations})),
        ("total", len(validations)),
        ("passed", passed),
        ("failed", len(validations) - passed),
    )
    for row, (key, value) in enumerate(entries, start=1):
        sheet.cell(row=row, column=1, value=key)
        sheet.cell(row=row, column=2, value=value)
