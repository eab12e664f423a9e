"""Named schema registry."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping

from .schema_models import SchemaDefinition

logger = logging.getLogger(__name__)


class SchemaRegistryError(Exception):
    """Base class for registry configuration errors."""


class UnknownSchemaError(SchemaRegistryError, KeyError):
    """Raised when a schema name is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown schema: {self.name}"


class DuplicateSchemaError(SchemaRegistryError, ValueError):
    """Raised when a schema name is registered twice without overwrite."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Schema already registered: {name}")
        self.name = name


class SchemaRegistry:
    """Mapping from unique schema names to definitions.

    The registry is populated during setup and only read afterwards. Each
    test process owns its own instance.
    """

    def __init__(self) -> None:
        self._definitions: dict[str, SchemaDefinition] = {}

    def register(self, name: str, definition: SchemaDefinition, *, overwrite: bool = False) -> None:
        """Insert a schema under ``name``.

        Raises:
          DuplicateSchemaError: If ``name`` exists and ``overwrite`` is false.
          ValueError: If ``name`` is blank.
        """
        if not name or not name.strip():
            raise ValueError("Schema name must not be empty.")
        if name in self._definitions:
            if not overwrite:
                raise DuplicateSchemaError(name)
            logger.debug("Overwriting schema %s", name)
        else:
            logger.debug("Registering schema %s", name)
        self._definitions[name] = definition

    def register_many(
        self, definitions: Mapping[str, SchemaDefinition], *, overwrite: bool = False
    ) -> None:
        """Register several schemas; nothing is inserted when any name collides."""
        if not overwrite:
            for name in definitions:
                if name in self._definitions:
                    raise DuplicateSchemaError(name)
        for name, definition in definitions.items():
            self.register(name, definition, overwrite=overwrite)

    def get(self, name: str) -> SchemaDefinition:
        """Return the definition registered as ``name``."""
        try:
            return self._definitions[name]
        except KeyError:
            raise UnknownSchemaError(name) from None

    def names(self) -> tuple[str, ...]:
        """Return registered names in sorted order."""
        return tuple(sorted(self._definitions))

    def __contains__(self, name: object) -> bool:
        return name in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())
