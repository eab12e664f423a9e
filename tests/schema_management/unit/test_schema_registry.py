"""Schema registry tests."""

from __future__ import annotations

import pytest
from sdk_response_matcher.schema_management.schema_models import Primitive, PrimitiveKind
from sdk_response_matcher.schema_management.schema_registry import (
    DuplicateSchemaError,
    SchemaRegistry,
    SchemaRegistryError,
    UnknownSchemaError,
)

_HEX = Primitive(PrimitiveKind.HEX_STRING)
_TEXT = Primitive(PrimitiveKind.STRING)


def test_register_and_get_definition() -> None:
    registry = SchemaRegistry()

    registry.register("TransactionHash", _HEX)

    assert registry.get("TransactionHash") is _HEX
    assert "TransactionHash" in registry
    assert len(registry) == 1


def test_unknown_name_fails_fast() -> None:
    registry = SchemaRegistry()

    with pytest.raises(UnknownSchemaError, match="Unknown schema: EstimateFee") as excinfo:
        registry.get("EstimateFee")

    assert excinfo.value.name == "EstimateFee"
    assert isinstance(excinfo.value, KeyError)
    assert isinstance(excinfo.value, SchemaRegistryError)


def test_duplicate_registration_is_rejected_by_default() -> None:
    registry = SchemaRegistry()
    registry.register("Name", _HEX)

    with pytest.raises(DuplicateSchemaError, match="already registered: Name"):
        registry.register("Name", _TEXT)

    assert registry.get("Name") is _HEX


def test_overwrite_replaces_existing_definition() -> None:
    registry = SchemaRegistry()
    registry.register("Name", _HEX)

    registry.register("Name", _TEXT, overwrite=True)

    assert registry.get("Name") is _TEXT
    assert len(registry) == 1


def test_blank_names_are_rejected() -> None:
    with pytest.raises(ValueError, match="must not be empty"):
        SchemaRegistry().register("  ", _HEX)


def test_register_many_is_all_or_nothing_on_collision() -> None:
    registry = SchemaRegistry()
    registry.register("B", _HEX)

    with pytest.raises(DuplicateSchemaError):
        registry.register_many({"A": _TEXT, "B": _TEXT})

    assert registry.names() == ("B",)


def test_names_are_sorted_and_iterable() -> None:
    registry = SchemaRegistry()
    registry.register_many({"Zeta": _HEX, "Alpha": _TEXT})

    assert registry.names() == ("Alpha", "Zeta")
    assert list(registry) == ["Alpha", "Zeta"]
