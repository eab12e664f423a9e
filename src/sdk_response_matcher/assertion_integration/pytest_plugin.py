"""pytest plugin exposing schema reference fixtures and assertion output."""

from __future__ import annotations

from pathlib import Path

import pytest

from sdk_response_matcher.schema_management import SchemaRegistry

from .matcher_setup import MatchesSchemaRef, SchemaMatcher, initialize_matcher

_SCHEMA_FILES_INI = "schema_files"


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("schema-ref", "named response schema matching")
    group.addoption(
        "--schema-file",
        action="append",
        dest="schema_files",
        default=[],
        metavar="PATH",
        help="Additional YAML/JSON schema document to register (repeatable).",
    )
    parser.addini(
        _SCHEMA_FILES_INI,
        type="linelist",
        default=[],
        help="Schema documents registered alongside the built-in schemas.",
    )


def pytest_report_header(config: pytest.Config) -> str | None:
    schema_files = _configured_schema_files(config)
    if not schema_files:
        return None
    return "schema files: " + ", ".join(str(path) for path in schema_files)


def pytest_assertrepr_compare(op: str, left: object, right: object) -> list[str] | None:
    if op != "==":
        return None
    if isinstance(right, MatchesSchemaRef):
        return right.explain(left)
    if isinstance(left, MatchesSchemaRef):
        return left.explain(right)
    return None


@pytest.fixture(scope="session")
def schema_registry(pytestconfig: pytest.Config) -> SchemaRegistry:
    """Registry owned by this test process, populated once per session."""
    registry = SchemaRegistry()
    initialize_matcher(registry, schema_files=_configured_schema_files(pytestconfig))
    return registry


@pytest.fixture(scope="session")
def schema_matcher(schema_registry: SchemaRegistry) -> SchemaMatcher:
    return SchemaMatcher(schema_registry)


def _configured_schema_files(config: pytest.Config) -> list[Path]:
    ini_files = [
        (config.rootpath / entry).resolve() for entry in config.getini(_SCHEMA_FILES_INI)
    ]
    option_files = [Path(entry).resolve() for entry in config.getoption("schema_files") or []]
    return [*ini_files, *option_files]
