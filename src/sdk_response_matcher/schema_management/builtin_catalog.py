"""Packaged built-in response schemas."""

from __future__ import annotations

from collections.abc import Mapping
from functools import cache
from importlib import resources
from types import MappingProxyType

from .schema_models import SchemaDefinition
from .schema_projection import load_schema_document

BUILTIN_SCHEMA_RESOURCE = "builtin_schemas.yaml"

REQUIRED_BUILTIN_SCHEMAS = (
    "EstimateFee",
    "GetTransactionReceiptResponse",
    "DeclareContractResponse",
    "DeployContractUDCResponse",
    "MultiDeployContractResponse",
)


@cache
def builtin_schemas() -> Mapping[str, SchemaDefinition]:
    """Return the parsed built-in schema set, read once per process."""
    text = (
        resources.files(__package__)
        .joinpath(BUILTIN_SCHEMA_RESOURCE)
        .read_text(encoding="utf-8")
    )
    return MappingProxyType(load_schema_document(text, source=BUILTIN_SCHEMA_RESOURCE))
