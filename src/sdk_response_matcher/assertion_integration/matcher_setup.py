"""Schema reference assertions for test suites."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path

from sdk_response_matcher.matching_validation import MatchResult, matches
from sdk_response_matcher.schema_management import (
    DuplicateSchemaError,
    SchemaDefinition,
    SchemaRegistry,
    builtin_schemas,
    load_schema_file,
)

logger = logging.getLogger(__name__)


class SchemaAssertionError(AssertionError):
    """Raised when a value does not match its named schema."""

    def __init__(self, schema_name: str, result: MatchResult) -> None:
        super().__init__(format_schema_failure(schema_name, result))
        self.schema_name = schema_name
        self.result = result


def match_schema_ref(value: object, schema_name: str, registry: SchemaRegistry) -> MatchResult:
    """Match ``value`` against the schema registered as ``schema_name``.

    Raises:
      UnknownSchemaError: If ``schema_name`` (or a schema it references) is
        not registered.
    """
    return matches(value, registry.get(schema_name), resolve=registry.get)


def assert_matches_schema_ref(value: object, schema_name: str, registry: SchemaRegistry) -> None:
    """Raise ``SchemaAssertionError`` listing every mismatch when ``value`` fails."""
    result = match_schema_ref(value, schema_name, registry)
    if not result.passed:
        raise SchemaAssertionError(schema_name, result)


def format_schema_failure(schema_name: str, result: MatchResult) -> str:
    """Render a failing result as an assertion message."""
    lines = [f"value does not match schema '{schema_name}':"]
    lines.extend(f"  - {message}" for message in result.messages())
    return "\n".join(lines)


def install_schemas(
    registry: SchemaRegistry,
    definitions: Mapping[str, SchemaDefinition],
    *,
    overwrite: bool = False,
) -> int:
    """Register ``definitions``, skipping entries already registered identically.

    Returns the number of newly written entries.
    """
    pending: dict[str, SchemaDefinition] = {}
    for name, definition in definitions.items():
        if name in registry and registry.get(name) == definition:
            continue
        if name in registry and not overwrite:
            raise DuplicateSchemaError(name)
        pending[name] = definition
    registry.register_many(pending, overwrite=overwrite)
    return len(pending)


def initialize_matcher(
    registry: SchemaRegistry | None = None,
    *,
    schema_files: Iterable[Path | str] = (),
    include_builtin: bool = True,
    overwrite: bool = False,
) -> SchemaMatcher:
    """Populate ``registry`` and return the matcher bound to it.

    Safe to call repeatedly with the same registry: built-in and file schemas
    that are already registered unchanged are left alone.
    """
    target = registry if registry is not None else SchemaRegistry()
    written = 0
    if include_builtin:
        written += install_schemas(target, builtin_schemas(), overwrite=overwrite)
    for schema_file in schema_files:
        written += install_schemas(target, load_schema_file(schema_file), overwrite=overwrite)
    logger.debug("Schema matcher initialized: %d new, %d total", written, len(target))
    return SchemaMatcher(target)


class SchemaMatcher:
    """Assertion adapter bound to one registry."""

    def __init__(self, registry: SchemaRegistry) -> None:
        self.registry = registry

    def match(self, value: object, schema_name: str) -> MatchResult:
        return match_schema_ref(value, schema_name, self.registry)

    def assert_matches(self, value: object, schema_name: str) -> None:
        assert_matches_schema_ref(value, schema_name, self.registry)

    def ref(self, schema_name: str) -> MatchesSchemaRef:
        """Return an equality helper, failing fast on unknown names."""
        self.registry.get(schema_name)
        return MatchesSchemaRef(schema_name, self.registry)


class MatchesSchemaRef:
    """Compares equal to any value that matches the named schema.

    Used as ``assert response == schema_matcher.ref("EstimateFee")``; the
    pytest plugin renders the mismatches when the comparison fails.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, schema_name: str, registry: SchemaRegistry) -> None:
        self.schema_name = schema_name
        self.registry = registry
        self.last_result: MatchResult | None = None

    def __eq__(self, other: object) -> bool:
        self.last_result = match_schema_ref(other, self.schema_name, self.registry)
        return self.last_result.passed

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def __repr__(self) -> str:
        return f"<MatchesSchemaRef {self.schema_name}>"

    def explain(self, value: object) -> list[str]:
        """Return failure lines for ``value`` in pytest's assertrepr format."""
        result = match_schema_ref(value, self.schema_name, self.registry)
        return format_schema_failure(self.schema_name, result).splitlines()
