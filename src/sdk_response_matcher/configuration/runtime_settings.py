"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SchemaSourceSettings:
    """Where registry schemas come from."""

    include_builtin: bool
    overwrite: bool
    files: tuple[Path, ...]


@dataclass(frozen=True)
class ReportSettings:
    """Validation report output settings."""

    output_dir: Path | None


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None
    schemas: SchemaSourceSettings
    report: ReportSettings


def default_configuration() -> Configuration:
    """Configuration used when no file is given: built-in schemas only."""
    return Configuration(
        path=None,
        schemas=SchemaSourceSettings(include_builtin=True, overwrite=False, files=()),
        report=ReportSettings(output_dir=None),
    )
