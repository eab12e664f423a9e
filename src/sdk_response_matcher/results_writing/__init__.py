"""Results writing domain exports."""

from .report_models import InputValidation, RunMetadata, ValidationStatus
from .validation_report_writer import (
    RESULT_COLUMNS,
    RESULTS_SHEET_NAME,
    RUN_INFO_SHEET_NAME,
    write_validation_report,
)

__all__ = [
    "InputValidation",
    "RunMetadata",
    "ValidationStatus",
    "RESULT_COLUMNS",
    "RESULTS_SHEET_NAME",
    "RUN_INFO_SHEET_NAME",
    "write_validation_report",
]
