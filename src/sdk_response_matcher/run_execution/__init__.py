"""Run execution domain exports."""

from .run_contracts import RunOutcome, RunRequest
from .validation_run_use_case import (
    RunExecutionError,
    build_schema_matcher,
    execute_schema_validation_run,
    load_run_configuration,
)

__all__ = [
    "RunRequest",
    "RunOutcome",
    "RunExecutionError",
    "build_schema_matcher",
    "execute_schema_validation_run",
    "load_run_configuration",
]
