"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import Configuration, ReportSettings, SchemaSourceSettings


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.is_file():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Cannot read configuration file {path}: {exc}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    schemas = _parse_schemas_section(parsed.get("schemas"), path.parent)
    report = _parse_report_section(parsed.get("report"), path.parent)
    return Configuration(path=path, schemas=schemas, report=report)


def _parse_schemas_section(value: Any, base_path: Path) -> SchemaSourceSettings:
    section = _optional_mapping(value, "schemas")
    include_builtin = _optional_bool(
        section.get("include_builtin", True), "schemas.include_builtin"
    )
    overwrite = _optional_bool(section.get("overwrite", False), "schemas.overwrite")
    files = tuple(
        _resolve_existing_file(base_path, raw_path, "schemas.files")
        for raw_path in _normalize_string_sequence(section.get("files"), "schemas.files")
    )
    if not include_builtin and not files:
        raise ConfigurationError(
            "schemas.files must list at least one file when schemas.include_builtin is false."
        )
    return SchemaSourceSettings(include_builtin=include_builtin, overwrite=overwrite, files=files)


def _parse_report_section(value: Any, base_path: Path) -> ReportSettings:
    section = _optional_mapping(value, "report")
    output_dir = _optional_string(section.get("output_dir"), "report.output_dir")
    return ReportSettings(
        output_dir=_resolve_path(base_path, output_dir) if output_dir else None,
    )


def _normalize_string_sequence(value: Any, field_name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        stripped = value.strip()
        return (stripped,) if stripped else ()
    if isinstance(value, Sequence):
        normalized = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError(f"{field_name} entries must be strings.")
            stripped = item.strip()
            if stripped:
                normalized.append(stripped)
        return tuple(normalized)
    raise ConfigurationError(f"{field_name} must be a string or list of strings.")


def _resolve_existing_file(base_path: Path, raw_path: str, field_name: str) -> Path:
    resolved = _resolve_path(base_path, raw_path)
    if not resolved.is_file():
        raise ConfigurationError(f"{field_name} entry not found: {resolved}")
    return resolved


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _optional_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be true or false.")
    return value


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None
