"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from sdk_response_matcher.results_writing.report_models import InputValidation


@dataclass(frozen=True)
class RunRequest:
    """Input contract for executing one validation run."""

    schema_name: str
    input_paths: tuple[str, ...]
    config_path: str | None = None
    report_path: str | None = None
    each: bool = False


@dataclass(frozen=True)
class RunOutcome:
    """Output contract for one completed run."""

    validations: tuple[InputValidation, ...]
    report_path: Path | None

    @property
    def failed(self) -> tuple[InputValidation, ...]:
        return tuple(validation for validation in self.validations if not validation.result.passed)

    @property
    def passed(self) -> bool:
        return not self.failed
