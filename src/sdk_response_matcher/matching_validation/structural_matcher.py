"""Structural matching of values against schema definitions."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import cast

from sdk_response_matcher.schema_management.schema_models import (
    ArrayOf,
    ObjectShape,
    OneOf,
    Primitive,
    Ref,
    SchemaDefinition,
)
from sdk_response_matcher.schema_management.schema_projection import SchemaError
from sdk_response_matcher.schema_management.schema_registry import UnknownSchemaError

from .matching_outcomes import ROOT_PATH_LABEL, MatchResult, MismatchKind, SchemaMismatch
from .primitive_rules import describe_actual, primitive_accepts

SchemaResolver = Callable[[str], SchemaDefinition]

_ABSENT = object()


@dataclass(frozen=True)
class _MatchingContext:
    """Read-only context shared by every node visit."""

    resolve: SchemaResolver | None
    pending_refs: frozenset[str] = frozenset()

    def descend(self) -> _MatchingContext:
        """Return a context for a child value; reference tracking restarts."""
        if not self.pending_refs:
            return self
        return _MatchingContext(resolve=self.resolve)


def matches(
    value: object,
    definition: SchemaDefinition,
    resolve: SchemaResolver | None = None,
) -> MatchResult:
    """Match ``value`` against ``definition`` and collect every mismatch.

    Args:
      value: Response value to validate. Mappings and dataclass instances
        are treated as keyed structures; lists and tuples as arrays.
      definition: Schema to validate against.
      resolve: Lookup for ``Ref`` nodes, usually ``SchemaRegistry.get``.

    Raises:
      UnknownSchemaError: If a referenced schema is not registered.
      SchemaError: If the definition contains ``Ref`` nodes but no resolver
        was given, or references form a cycle.
    """
    mismatches = _match_node(value, definition, path="", context=_MatchingContext(resolve))
    return MatchResult(mismatches=tuple(mismatches))


def _match_node(
    value: object,
    definition: SchemaDefinition,
    *,
    path: str,
    context: _MatchingContext,
) -> list[SchemaMismatch]:
    if isinstance(definition, Primitive):
        return _match_primitive(value, definition, path)
    if isinstance(definition, ObjectShape):
        return _match_object(value, definition, path=path, context=context)
    if isinstance(definition, ArrayOf):
        return _match_array(value, definition, path=path, context=context)
    if isinstance(definition, OneOf):
        return _match_one_of(value, definition, path=path, context=context)
    if isinstance(definition, Ref):
        return _match_ref(value, definition, path=path, context=context)
    raise SchemaError(f"Unsupported schema definition at {path or '$'}: {definition!r}")


def _match_primitive(value: object, definition: Primitive, path: str) -> list[SchemaMismatch]:
    if primitive_accepts(definition.kind, value):
        return []
    return [
        SchemaMismatch(
            path=path,
            kind=MismatchKind.INVALID,
            expected=definition.kind.value,
            actual=describe_actual(value),
        )
    ]


def _match_object(
    value: object,
    definition: ObjectShape,
    *,
    path: str,
    context: _MatchingContext,
) -> list[SchemaMismatch]:
    if not _is_keyed(value):
        return [
            SchemaMismatch(
                path=path,
                kind=MismatchKind.INVALID,
                expected="object",
                actual=describe_actual(value),
            )
        ]

    child_context = context.descend()
    mismatches: list[SchemaMismatch] = []
    for field_name, field_spec in definition.fields.items():
        field_path = field_name if not path else f"{path}.{field_name}"
        field_value = _read_field(value, field_name)
        if field_value is _ABSENT or (field_value is None and not field_spec.required):
            if field_spec.required:
                mismatches.append(
                    SchemaMismatch(
                        path=field_path,
                        kind=MismatchKind.MISSING,
                        expected=_describe_definition(field_spec.definition),
                    )
                )
            continue
        mismatches.extend(
            _match_node(
                field_value, field_spec.definition, path=field_path, context=child_context
            )
        )
    return mismatches


def _match_array(
    value: object,
    definition: ArrayOf,
    *,
    path: str,
    context: _MatchingContext,
) -> list[SchemaMismatch]:
    if not _is_array(value):
        return [
            SchemaMismatch(
                path=path,
                kind=MismatchKind.INVALID,
                expected="array",
                actual=describe_actual(value),
            )
        ]

    child_context = context.descend()
    mismatches: list[SchemaMismatch] = []
    for index, item in enumerate(cast(Sequence[object], value)):
        mismatches.extend(
            _match_node(
                item, definition.element, path=f"{path}[{index}]", context=child_context
            )
        )
    return mismatches


def _match_one_of(
    value: object,
    definition: OneOf,
    *,
    path: str,
    context: _MatchingContext,
) -> list[SchemaMismatch]:
    closest_index = 0
    closest_mismatches: list[SchemaMismatch] | None = None
    for index, alternative in enumerate(definition.alternatives):
        mismatches = _match_node(value, alternative, path=path, context=context)
        if not mismatches:
            return []
        if closest_mismatches is None or len(mismatches) < len(closest_mismatches):
            closest_index = index
            closest_mismatches = mismatches

    labels = [_describe_definition(item) for item in definition.alternatives]
    summary = SchemaMismatch(
        path=path,
        kind=MismatchKind.NO_ALTERNATIVE,
        expected=f"one of [{', '.join(labels)}]",
        actual=describe_actual(value),
        detail=labels[closest_index],
    )
    return [summary, *(closest_mismatches or [])]


def _match_ref(
    value: object,
    definition: Ref,
    *,
    path: str,
    context: _MatchingContext,
) -> list[SchemaMismatch]:
    if context.resolve is None:
        raise SchemaError(
            f"Cannot resolve schema reference '{definition.name}' without a registry."
        )
    if definition.name in context.pending_refs:
        raise SchemaError(
            f"Circular schema reference '{definition.name}' at {path or ROOT_PATH_LABEL}."
        )
    target = context.resolve(definition.name)
    if target is None:
        raise UnknownSchemaError(definition.name)
    ref_context = _MatchingContext(
        resolve=context.resolve,
        pending_refs=context.pending_refs | {definition.name},
    )
    return _match_node(value, target, path=path, context=ref_context)


def _describe_definition(definition: SchemaDefinition) -> str:
    if isinstance(definition, Primitive):
        return definition.kind.value
    if isinstance(definition, Ref):
        return definition.name
    if isinstance(definition, ObjectShape):
        return definition.title or "object"
    if isinstance(definition, ArrayOf):
        return f"array of {_describe_definition(definition.element)}"
    if isinstance(definition, OneOf):
        return " | ".join(_describe_definition(item) for item in definition.alternatives)
    return type(definition).__name__


def _is_keyed(value: object) -> bool:
    if isinstance(value, Mapping):
        return True
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def _is_array(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, str | bytes | bytearray)


def _read_field(value: object, field_name: str) -> object:
    if isinstance(value, Mapping):
        return value.get(field_name, _ABSENT)
    return getattr(value, field_name, _ABSENT)
