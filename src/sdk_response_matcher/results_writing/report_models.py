"""Results writing entities."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path

from sdk_response_matcher.matching_validation.matching_outcomes import MatchResult


class ValidationStatus(str, Enum):
    """Rendered status in the report status column."""

    OK = "OK"
    MISMATCH = "MISMATCH"


@dataclass(frozen=True)
class InputValidation:
    """One validated document (or array element) from one input file."""

    input_path: Path
    item_index: int | None
    schema_name: str
    result: MatchResult

    @property
    def status(self) -> ValidationStatus:
        return ValidationStatus.OK if self.result.passed else ValidationStatus.MISMATCH

    @property
    def label(self) -> str:
        """Return the input reference used in diagnostics."""
        if self.item_index is None:
            return str(self.input_path)
        return f"{self.input_path}[{self.item_index}]"


@dataclass(frozen=True)
class RunMetadata:
    """Metadata rendered into the RunInfo sheet."""

    run_start: datetime
    schema_name: str
    config_path: Path | None
    output_path: Path
