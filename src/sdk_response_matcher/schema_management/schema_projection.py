"""Schema document parsing and dumping service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .schema_models import (
    ArrayOf,
    FieldSpec,
    ObjectShape,
    OneOf,
    Primitive,
    PrimitiveKind,
    Ref,
    SchemaDefinition,
)

_PRIMITIVE_KINDS = {kind.value: kind for kind in PrimitiveKind}
_NODE_KEYS = frozenset({"type", "properties", "items", "oneOf", "$ref", "title", "required"})


class SchemaError(Exception):
    """Raised for schema parsing or resolution failures."""


def load_schema_document(text: str, source: str | None = None) -> dict[str, SchemaDefinition]:
    """Parse schema document text into named definitions, in document order."""
    label = source or "<inline>"
    try:
        root = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SchemaError(f"Invalid schema document {label}: {exc}") from exc

    if not isinstance(root, Mapping):
        raise SchemaError(f"Schema document {label} must be a mapping.")
    schemas = root.get("schemas")
    if not isinstance(schemas, Mapping) or not schemas:
        raise SchemaError(f"Schema document {label} requires a non-empty 'schemas' mapping.")

    definitions: dict[str, SchemaDefinition] = {}
    for name, raw in schemas.items():
        if not isinstance(name, str) or not name.strip():
            raise SchemaError(f"Schema names in {label} must be non-empty strings.")
        definitions[name] = parse_schema_node(raw, path=name)
    return definitions


def load_schema_file(path: Path | str) -> dict[str, SchemaDefinition]:
    """Read and parse one schema document file."""
    schema_path = Path(path)
    if not schema_path.is_file():
        raise SchemaError(f"Schema file not found: {schema_path}")
    try:
        text = schema_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SchemaError(f"Cannot read schema file {schema_path}: {exc}") from exc
    return load_schema_document(text, source=str(schema_path))


def parse_schema_node(raw: Any, *, path: str, field: bool = False) -> SchemaDefinition:
    """Convert one raw document node into a schema definition.

    ``field`` marks an object property, the only place ``required`` may appear.
    """
    if isinstance(raw, str):
        return Primitive(kind=_parse_primitive_kind(raw, path))
    if not isinstance(raw, Mapping):
        raise SchemaError(f"{path}: schema node must be a kind name or a mapping.")

    unknown_keys = set(raw) - _NODE_KEYS
    if unknown_keys:
        raise SchemaError(f"{path}: unsupported schema keys {sorted(unknown_keys)}.")
    if "required" in raw and not field:
        raise SchemaError(f"{path}: required is only allowed on object properties.")
    if "title" in raw and not _is_object_node(raw):
        raise SchemaError(f"{path}: title is only allowed on object nodes.")

    if "$ref" in raw:
        return _parse_ref(raw, path)
    if "oneOf" in raw:
        return _parse_one_of(raw, path)

    node_type = raw.get("type")
    if node_type is None and "properties" in raw:
        node_type = "object"
    if node_type == "object":
        return _parse_object(raw, path)
    if node_type == "array":
        return _parse_array(raw, path)
    if isinstance(node_type, str):
        return Primitive(kind=_parse_primitive_kind(node_type, path))
    raise SchemaError(f"{path}: schema node requires a type.")


def dump_schema_node(definition: SchemaDefinition) -> Any:
    """Return plain data for a definition in the document notation."""
    if isinstance(definition, Primitive):
        return definition.kind.value
    if isinstance(definition, Ref):
        return {"$ref": definition.name}
    if isinstance(definition, ArrayOf):
        return {"type": "array", "items": dump_schema_node(definition.element)}
    if isinstance(definition, OneOf):
        return {"oneOf": [dump_schema_node(item) for item in definition.alternatives]}
    if isinstance(definition, ObjectShape):
        dumped: dict[str, Any] = {"type": "object"}
        if definition.title:
            dumped["title"] = definition.title
        dumped["properties"] = {
            name: _dump_field(spec) for name, spec in definition.fields.items()
        }
        return dumped
    raise SchemaError(f"Unsupported schema definition: {definition!r}")


def _dump_field(spec: FieldSpec) -> Any:
    dumped = dump_schema_node(spec.definition)
    if spec.required:
        return dumped
    if isinstance(dumped, str):
        dumped = {"type": dumped}
    return {**dumped, "required": False}


def _parse_primitive_kind(value: str, path: str) -> PrimitiveKind:
    kind = _PRIMITIVE_KINDS.get(value.strip())
    if kind is None:
        supported = ", ".join(sorted(_PRIMITIVE_KINDS))
        raise SchemaError(f"{path}: unsupported kind '{value}' (expected one of {supported}).")
    return kind


def _is_object_node(raw: Mapping[str, Any]) -> bool:
    if "$ref" in raw or "oneOf" in raw:
        return False
    node_type = raw.get("type")
    return node_type == "object" or (node_type is None and "properties" in raw)


def _parse_ref(raw: Mapping[str, Any], path: str) -> Ref:
    name = raw["$ref"]
    if not isinstance(name, str) or not name.strip():
        raise SchemaError(f"{path}: $ref must be a non-empty schema name.")
    return Ref(name=name.strip())


def _parse_one_of(raw: Mapping[str, Any], path: str) -> OneOf:
    alternatives = raw["oneOf"]
    if isinstance(alternatives, str | bytes) or not isinstance(alternatives, Sequence):
        raise SchemaError(f"{path}: oneOf must be a list of schema nodes.")
    if not alternatives:
        raise SchemaError(f"{path}: oneOf requires at least one alternative.")
    return OneOf(
        alternatives=tuple(
            parse_schema_node(item, path=f"{path}.oneOf[{index}]")
            for index, item in enumerate(alternatives)
        )
    )


def _parse_object(raw: Mapping[str, Any], path: str) -> ObjectShape:
    properties = raw.get("properties") or {}
    if not isinstance(properties, Mapping):
        raise SchemaError(f"{path}: properties must be a mapping.")
    title = raw.get("title")
    if title is not None and not isinstance(title, str):
        raise SchemaError(f"{path}: title must be a string.")

    fields: dict[str, FieldSpec] = {}
    for name, child in properties.items():
        child_path = f"{path}.{name}"
        fields[str(name)] = FieldSpec(
            definition=parse_schema_node(child, path=child_path, field=True),
            required=_parse_required_flag(child, child_path),
        )
    return ObjectShape(fields=fields, title=title)


def _parse_array(raw: Mapping[str, Any], path: str) -> ArrayOf:
    if "items" not in raw:
        raise SchemaError(f"{path}: array node requires items.")
    return ArrayOf(element=parse_schema_node(raw["items"], path=f"{path}[]"))


def _parse_required_flag(raw: Any, path: str) -> bool:
    if not isinstance(raw, Mapping):
        return True
    required = raw.get("required", True)
    if not isinstance(required, bool):
        raise SchemaError(f"{path}: required must be true or false.")
    return required
