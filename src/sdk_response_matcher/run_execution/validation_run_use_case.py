"""Run execution use-case service."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from datetime import UTC, datetime
from pathlib import Path

from sdk_response_matcher.assertion_integration import SchemaMatcher, initialize_matcher
from sdk_response_matcher.configuration import (
    Configuration,
    ConfigurationError,
    default_configuration,
    load_configuration,
)
from sdk_response_matcher.results_writing import (
    InputValidation,
    RunMetadata,
    write_validation_report,
)
from sdk_response_matcher.schema_management import SchemaError, SchemaRegistryError

from .run_contracts import RunOutcome, RunRequest

logger = logging.getLogger(__name__)


class RunExecutionError(Exception):
    """Raised when a run use case cannot be completed."""


def build_schema_matcher(configuration: Configuration) -> SchemaMatcher:
    """Create a registry populated from the configured schema sources."""
    try:
        return initialize_matcher(
            schema_files=configuration.schemas.files,
            include_builtin=configuration.schemas.include_builtin,
            overwrite=configuration.schemas.overwrite,
        )
    except (SchemaError, SchemaRegistryError) as exc:
        raise RunExecutionError(str(exc)) from exc


def load_run_configuration(config_path: str | None) -> Configuration:
    if config_path is None:
        return default_configuration()
    try:
        return load_configuration(config_path)
    except ConfigurationError as exc:
        raise RunExecutionError(str(exc)) from exc


def execute_schema_validation_run(request: RunRequest) -> RunOutcome:
    """Validate every input document against the requested schema."""
    if not request.input_paths:
        raise RunExecutionError("At least one input file is required.")

    run_start = datetime.now(UTC)
    configuration = load_run_configuration(request.config_path)
    matcher = build_schema_matcher(configuration)
    if request.schema_name not in matcher.registry:
        raise RunExecutionError(f"Unknown schema: {request.schema_name}")

    validations: list[InputValidation] = []
    for raw_path in request.input_paths:
        input_path = Path(raw_path).resolve()
        for item_index, value in _iter_documents(input_path, each=request.each):
            try:
                result = matcher.match(value, request.schema_name)
            except (SchemaError, SchemaRegistryError) as exc:
                raise RunExecutionError(str(exc)) from exc
            validations.append(
                InputValidation(
                    input_path=input_path,
                    item_index=item_index,
                    schema_name=request.schema_name,
                    result=result,
                )
            )
    logger.info(
        "Validated %d document(s) against %s: %d failed",
        len(validations),
        request.schema_name,
        sum(1 for validation in validations if not validation.result.passed),
    )

    report_path = _resolve_report_path(request, configuration, run_start)
    if report_path is not None:
        report_path = _write_report(
            report_path,
            validations,
            RunMetadata(
                run_start=run_start,
                schema_name=request.schema_name,
                config_path=configuration.path.resolve() if configuration.path else None,
                output_path=report_path.resolve(),
            ),
        )
        logger.info("Validation report written to %s", report_path)
    return RunOutcome(validations=tuple(validations), report_path=report_path)


def _iter_documents(input_path: Path, *, each: bool) -> Iterator[tuple[int | None, object]]:
    try:
        document = json.loads(input_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise RunExecutionError(f"Cannot read input file {input_path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise RunExecutionError(f"Input file {input_path} is not valid JSON: {exc}") from exc

    if not each:
        yield None, document
        return
    if not isinstance(document, list):
        raise RunExecutionError(f"Input file {input_path} must contain a JSON array with --each.")
    yield from enumerate(document)


def _resolve_report_path(
    request: RunRequest, configuration: Configuration, run_start: datetime
) -> Path | None:
    if request.report_path:
        return Path(request.report_path)
    if configuration.report.output_dir is None:
        return None
    timestamp = run_start.strftime("%Y%m%d-%H%M%S")
    return configuration.report.output_dir / f"{request.schema_name}-results-{timestamp}.xlsx"


def _write_report(
    report_path: Path, validations: list[InputValidation], run_metadata: RunMetadata
) -> Path:
    try:
        return write_validation_report(report_path, validations, run_metadata)
    except OSError as exc:
        raise RunExecutionError(f"Cannot write report {report_path}: {exc}") from exc
