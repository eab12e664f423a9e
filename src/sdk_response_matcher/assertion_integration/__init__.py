"""Assertion integration exports."""

from .matcher_setup import (
    MatchesSchemaRef,
    SchemaAssertionError,
    SchemaMatcher,
    assert_matches_schema_ref,
    format_schema_failure,
    initialize_matcher,
    install_schemas,
    match_schema_ref,
)

__all__ = [
    "MatchesSchemaRef",
    "SchemaAssertionError",
    "SchemaMatcher",
    "assert_matches_schema_ref",
    "format_schema_failure",
    "initialize_matcher",
    "install_schemas",
    "match_schema_ref",
]
