"""Tests for run execution domain entities."""

from __future__ import annotations

from pathlib import Path

from sdk_response_matcher.matching_validation.matching_outcomes import (
    MatchResult,
    MismatchKind,
    SchemaMismatch,
)
from sdk_response_matcher.results_writing.report_models import InputValidation
from sdk_response_matcher.run_execution.run_contracts import RunOutcome, RunRequest


def test_run_request_defaults_to_whole_document_without_report() -> None:
    request = RunRequest(schema_name="EstimateFee", input_paths=("fee.json",))

    assert request.each is False
    assert request.config_path is None
    assert request.report_path is None


def test_run_outcome_exposes_failed_validations() -> None:
    failing = MatchResult(
        mismatches=(
            SchemaMismatch(path="class_hash", kind=MismatchKind.MISSING, expected="hex-string"),
        )
    )
    outcome = RunOutcome(
        validations=(
            InputValidation(Path("a.json"), None, "DeclareContractResponse", MatchResult()),
            InputValidation(Path("b.json"), None, "DeclareContractResponse", failing),
        ),
        report_path=None,
    )

    assert outcome.passed is False
    assert [validation.input_path.name for validation in outcome.failed] == ["b.json"]


def test_empty_outcome_passes() -> None:
    assert RunOutcome(validations=(), report_path=Path("/tmp/report.xlsx")).passed
