"""Schema management exports."""

from .builtin_catalog import REQUIRED_BUILTIN_SCHEMAS, builtin_schemas
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
from .schema_projection import (
    SchemaError,
    dump_schema_node,
    load_schema_document,
    load_schema_file,
    parse_schema_node,
)
from .schema_registry import (
    DuplicateSchemaError,
    SchemaRegistry,
    SchemaRegistryError,
    UnknownSchemaError,
)

__all__ = [
    "ArrayOf",
    "FieldSpec",
    "ObjectShape",
    "OneOf",
    "Primitive",
    "PrimitiveKind",
    "Ref",
    "SchemaDefinition",
    "SchemaError",
    "SchemaRegistry",
    "SchemaRegistryError",
    "DuplicateSchemaError",
    "UnknownSchemaError",
    "REQUIRED_BUILTIN_SCHEMAS",
    "builtin_schemas",
    "dump_schema_node",
    "load_schema_document",
    "load_schema_file",
    "parse_schema_node",
]
