"""Matching and validation domain exports."""

from .matching_outcomes import MatchResult, MismatchKind, SchemaMismatch
from .primitive_rules import describe_actual, primitive_accepts
from .structural_matcher import SchemaResolver, matches

__all__ = [
    "MatchResult",
    "MismatchKind",
    "SchemaMismatch",
    "SchemaResolver",
    "describe_actual",
    "matches",
    "primitive_accepts",
]
