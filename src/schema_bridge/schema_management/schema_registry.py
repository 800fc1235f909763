"""Schema registry service."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any

from schema_bridge.bridge_errors import InvalidSchemaError, SchemaNotFoundError

from .schema_definitions import type_schema_from_definition
from .schema_models import TypeSchema

_LOGGER = logging.getLogger(__name__)


class SchemaRegistry:
    """Mapping from type key to type schema.

    Registration overwrites an existing entry (last write wins). The registry
    is expected to be populated during startup and only read afterwards.
    """

    def __init__(self) -> None:
        self._schemas: dict[str, TypeSchema] = {}

    def register(self, schema: TypeSchema) -> None:
        """Register schema under its type key and bind it to this registry.

        A schema belongs to at most one live registry; registering it in a
        second one fails with InvalidSchemaError.
        """
        if not schema.type_key:
            raise InvalidSchemaError("Type schema must define a type key.")
        schema.bind_registry(self)
        if schema.type_key in self._schemas:
            _LOGGER.debug("Replacing schema for type %s", schema.type_key)
        self._schemas[schema.type_key] = schema

    def define(self, definition: Mapping[str, Any]) -> TypeSchema:
        """Parse a plain schema definition and register the result."""
        schema = type_schema_from_definition(definition, registry=self)
        self.register(schema)
        return schema

    def has(self, type_key: str) -> bool:
        return type_key in self._schemas

    def get(self, type_key: str) -> TypeSchema:
        """Return the schema registered for type_key."""
        try:
            return self._schemas[type_key]
        except KeyError:
            raise SchemaNotFoundError(f"No schema registered for type '{type_key}'.") from None

    def type_keys(self) -> tuple[str, ...]:
        return tuple(self._schemas)

    def schema_for_object(self, obj: object) -> TypeSchema:
        """Return the schema matching a live object.

        A string ``type_key`` carried by the object itself (as on generic
        records) is tried first, then the fully qualified class name
        (``module.QualName``), then the bare class name.
        """
        cls = type(obj)
        candidates = [_qualified_class_name(cls), cls.__name__]
        own_key = getattr(obj, "type_key", None)
        if isinstance(own_key, str):
            candidates.insert(0, own_key)
        for candidate in candidates:
            if candidate in self._schemas:
                return self._schemas[candidate]
        raise SchemaNotFoundError(
            f"No schema registered for class '{_qualified_class_name(cls)}'."
        )

    def __contains__(self, type_key: object) -> bool:
        return type_key in self._schemas

    def __len__(self) -> int:
        return len(self._schemas)

    def __iter__(self) -> Iterator[TypeSchema]:
        return iter(tuple(self._schemas.values()))


def _qualified_class_name(cls: type) -> str:
    module = cls.__module__
    if module is None or module == "builtins":
        return cls.__qualname__
    return f"{module}.{cls.__qualname__}"
