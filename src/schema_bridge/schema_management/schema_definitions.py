"""Conversion of plain schema definition records into type schemas."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from schema_bridge.bridge_errors import InvalidSchemaError

from .schema_models import PropertySchema, TypeSchema

if TYPE_CHECKING:
    from .schema_registry import SchemaRegistry

_FLAG_FIELDS = (
    ("isArray", "is_array"),
    ("isReference", "is_reference"),
    ("readOnly", "read_only"),
    ("clientReadOnly", "client_read_only"),
)


def type_schema_from_definition(
    definition: Any, registry: SchemaRegistry | None = None
) -> TypeSchema:
    """Build a type schema from a parsed definition record.

    Expected shape::

        {
          "typeKey": "app.Parent",
          "displayName": "Parent",
          "identifierProperties": ["SessionID"],
          "properties": {"Name": {"type": "string"}, ...}
        }
    """
    if not isinstance(definition, Mapping):
        raise InvalidSchemaError("Schema definition must be a mapping.")

    type_key = definition.get("typeKey")
    if not isinstance(type_key, str) or not type_key.strip():
        raise InvalidSchemaError("Schema definition is missing required field 'typeKey'.")
    type_key = type_key.strip()

    display_name = definition.get("displayName")
    if display_name is not None and not isinstance(display_name, str):
        raise InvalidSchemaError(f"Schema '{type_key}': displayName must be a string.")

    identifiers = _normalize_identifier_properties(
        definition.get("identifierProperties"), type_key
    )

    raw_properties = definition.get("properties")
    if not isinstance(raw_properties, Mapping):
        raise InvalidSchemaError(
            f"Schema '{type_key}' is missing required mapping field 'properties'."
        )
    properties = [
        property_schema_from_definition(str(name), raw)
        for name, raw in raw_properties.items()
    ]

    return TypeSchema(
        type_key,
        properties,
        display_name=display_name,
        identifier_properties=identifiers,
        registry=registry,
    )


def property_schema_from_definition(name: str, definition: Any) -> PropertySchema:
    """Build one property schema; flags default to False, clientReadOnly to readOnly."""
    if not isinstance(definition, Mapping):
        raise InvalidSchemaError(f"Property '{name}' definition must be a mapping.")
    declared_type = definition.get("type")
    if not isinstance(declared_type, str) or not declared_type.strip():
        raise InvalidSchemaError(f"Property '{name}' is missing required field 'type'.")

    flags: dict[str, bool] = {}
    for source_key, target in _FLAG_FIELDS:
        if source_key not in definition:
            continue
        value = definition[source_key]
        if not isinstance(value, bool):
            raise InvalidSchemaError(f"Property '{name}': {source_key} must be a boolean.")
        flags[target] = value

    return PropertySchema(name=name, type=declared_type.strip(), **flags)


def _normalize_identifier_properties(value: Any, type_key: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        stripped = value.strip()
        return (stripped,) if stripped else ()
    if isinstance(value, Sequence):
        identifiers = []
        for item in value:
            if not isinstance(item, str) or not item.strip():
                raise InvalidSchemaError(
                    f"Schema '{type_key}': identifierProperties entries must be strings."
                )
            identifiers.append(item.strip())
        return tuple(identifiers)
    raise InvalidSchemaError(
        f"Schema '{type_key}': identifierProperties must be a string or list of strings."
    )
