"""Object to JSON projection service."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from schema_bridge.bridge_errors import (
    InvalidPropertySubsetError,
    MissingPropertyError,
    NoIdentifierPropertyError,
)
from schema_bridge.object_access import has_property, is_empty, is_sequence, read_property
from schema_bridge.schema_management import PropertySchema, SchemaRegistry, TypeSchema

_LOGGER = logging.getLogger(__name__)

JsonObject = dict[str, Any]


class Projector:
    """Turn a live object graph into JSON-compatible dicts and lists."""

    def __init__(self, registry: SchemaRegistry) -> None:
        self._registry = registry

    def project_object(
        self, source: Any, property_names: Sequence[str] | None = None
    ) -> JsonObject:
        """Project source using the schema registered for its class."""
        return self.project(source, self._registry.schema_for_object(source), property_names)

    def project(
        self,
        source: Any,
        type_schema: TypeSchema,
        property_names: Sequence[str] | None = None,
    ) -> JsonObject:
        """Project source according to type_schema.

        Args:
          source: Object read through the accessor boundary.
          type_schema: Schema describing the projected shape.
          property_names: Optional subset; every schema property when omitted.

        Raises:
          InvalidPropertySubsetError: A requested name is not in the schema.
          MissingPropertyError: The source lacks a schema property.
        """
        names = self._select_property_names(type_schema, property_names)
        _LOGGER.debug("Projecting %s (%d properties)", type_schema.type_key, len(names))

        result: JsonObject = {}
        for name in names:
            property_schema = type_schema.get_property(name)
            if not has_property(source, name):
                raise MissingPropertyError(
                    f"Property '{name}' not found on object of type "
                    f"{type(source).__name__} (schema '{type_schema.type_key}')."
                )
            result[name] = self._project_value(
                read_property(source, name), property_schema, type_schema
            )
        return result

    def _select_property_names(
        self, type_schema: TypeSchema, property_names: Sequence[str] | None
    ) -> tuple[str, ...]:
        if not property_names:
            return type_schema.property_names()
        for name in property_names:
            if not type_schema.has_property(name):
                raise InvalidPropertySubsetError(
                    f"Property '{name}' is not in the schema for '{type_schema.type_key}'."
                )
        return tuple(property_names)

    def _project_value(
        self, value: Any, property_schema: PropertySchema, owner: TypeSchema
    ) -> Any:
        if is_empty(value):
            return None
        if property_schema.is_primitive:
            return list(value) if is_sequence(value) else value

        nested_schema = owner.get_nested_schema(property_schema.type)
        if property_schema.is_reference:
            return _map_items(value, lambda item: _reference_ids(item, nested_schema))
        return _map_items(value, lambda item: self.project(item, nested_schema))


def _map_items(value: Any, project_item: Callable[[Any], JsonObject]) -> Any:
    # Cardinality follows the value; wrapping and unwrapping happen only on input.
    if is_sequence(value):
        return [project_item(item) for item in value]
    return project_item(value)


def _reference_ids(item: Any, referenced_schema: TypeSchema) -> JsonObject:
    """Return only the identifier fields of a referenced object."""
    identifiers = referenced_schema.identifier_properties
    if not identifiers:
        raise NoIdentifierPropertyError(
            f"Type '{referenced_schema.type_key}' has no identifier properties defined."
        )
    reference: JsonObject = {}
    for name in identifiers:
        if not has_property(item, name):
            raise MissingPropertyError(
                f"Identifier property '{name}' not found on referenced "
                f"{type(item).__name__} (schema '{referenced_schema.type_key}')."
            )
        reference[name] = read_property(item, name)
    return reference
