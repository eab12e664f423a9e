"""Schema management entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum


class PrimitiveKind(str, Enum):
    """Supported leaf value kinds."""

    STRING = "string"
    NUMBER = "number"
    NUMERIC_STRING = "numeric-string"
    BOOLEAN = "boolean"
    HEX_STRING = "hex-string"


@dataclass(frozen=True)
class Primitive:
    """Leaf node validated by kind and lexical format."""

    kind: PrimitiveKind


@dataclass(frozen=True)
class FieldSpec:
    """One declared object field."""

    definition: SchemaDefinition
    required: bool = True


@dataclass(frozen=True)
class ObjectShape:
    """Keyed structure with a minimum set of declared fields."""

    fields: Mapping[str, FieldSpec] = field(default_factory=dict)
    title: str | None = None


@dataclass(frozen=True)
class ArrayOf:
    """Ordered sequence with a homogeneous element schema."""

    element: SchemaDefinition


@dataclass(frozen=True)
class OneOf:
    """Polymorphic node that passes when any alternative passes."""

    alternatives: tuple[SchemaDefinition, ...]

    def __post_init__(self) -> None:
        if not self.alternatives:
            raise ValueError("OneOf requires at least one alternative.")


@dataclass(frozen=True)
class Ref:
    """Reference to another registered schema, resolved at match time."""

    name: str


SchemaDefinition = Primitive | ObjectShape | ArrayOf | OneOf | Ref
