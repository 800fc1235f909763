"""JSON to generic record factory service."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from schema_bridge.bridge_errors import ArrayCardinalityMismatchError, UnknownTypeError
from schema_bridge.object_access import is_sequence
from schema_bridge.schema_management import PropertySchema, SchemaRegistry

from .record_models import GenericRecord


def normalize_cardinality(value: Any, expect_array: bool) -> Any:
    """Reconcile scalar and one-element-array encodings of the same value.

    Producers disagree on whether a singleton collection is sent as a scalar
    or as a one-element array; records always follow the schema's flag.

    Raises:
      ArrayCardinalityMismatchError: A scalar property received an empty
        array or an array with more than one element.
    """
    if value is None:
        return None
    value_is_array = is_sequence(value)
    if expect_array and not value_is_array:
        return [value]
    if not expect_array and value_is_array:
        if len(value) == 0:
            raise ArrayCardinalityMismatchError("Expected scalar, got empty array.")
        if len(value) > 1:
            raise ArrayCardinalityMismatchError(
                f"Expected scalar, got array of size {len(value)}."
            )
        return value[0]
    return value


class RecordFactory:
    """Create generic records from JSON values using registered schemas."""

    def __init__(self, registry: SchemaRegistry) -> None:
        self._registry = registry

    def create(self, type_key: str, json_value: Any) -> GenericRecord | None:
        """Build a record of type_key from a decoded JSON object.

        A null input returns None without consulting the registry.
        """
        if json_value is None:
            return None
        type_schema = self._registry.get(type_key)
        if not isinstance(json_value, Mapping):
            raise TypeError(
                f"Record of type '{type_key}' requires a JSON object, "
                f"got {type(json_value).__name__}."
            )
        return GenericRecord(
            type_schema,
            (
                (name, self.instantiate_property(json_value.get(name), property_schema))
                for name, property_schema in type_schema.properties.items()
            ),
        )

    def instantiate_property(self, value: Any, property_schema: PropertySchema) -> Any:
        """Normalize one JSON field and expand nested records."""
        if value is None:
            return None
        try:
            value = normalize_cardinality(value, property_schema.is_array)
        except ArrayCardinalityMismatchError as exc:
            raise ArrayCardinalityMismatchError(
                f"Property '{property_schema.name}': {exc}"
            ) from exc

        # References stay as raw identifiers; resolving them needs the live graph.
        if property_schema.is_reference or property_schema.is_primitive:
            return value
        if not self._registry.has(property_schema.type):
            raise UnknownTypeError(
                f"Unknown type '{property_schema.type}' for property "
                f"'{property_schema.name}': not a primitive and no schema registered."
            )
        if property_schema.is_array:
            return [self.create(property_schema.type, item) for item in value]
        return self.create(property_schema.type, value)
