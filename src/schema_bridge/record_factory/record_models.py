"""Generic record entity produced by the record factory."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from schema_bridge.bridge_errors import UnknownPropertyError
from schema_bridge.schema_management import PropertySchema, TypeSchema


class GenericRecord(dict[str, Any]):
    """Type-erased record: a plain dict payload plus schema metadata.

    The metadata sits in slots, outside the mapping, so iteration, equality
    and ``json.dumps`` only ever see the property values.
    """

    __slots__ = ("_type_key", "_display_name", "_properties", "_identifier_properties")

    def __init__(self, type_schema: TypeSchema, values: Iterable[tuple[str, Any]] = ()) -> None:
        super().__init__(values)
        self._type_key = type_schema.type_key
        self._display_name = type_schema.display_name
        self._properties = type_schema.properties
        self._identifier_properties = type_schema.identifier_properties

    @property
    def type_key(self) -> str:
        return self._type_key

    @property
    def display_name(self) -> str:
        return self._display_name

    def property_names(self) -> tuple[str, ...]:
        return tuple(self._properties)

    def identifier_properties(self) -> tuple[str, ...]:
        return self._identifier_properties

    def property_metadata(self, name: str) -> PropertySchema:
        try:
            return self._properties[name]
        except KeyError:
            raise UnknownPropertyError(
                f"Unknown property '{name}' for record of type '{self._type_key}'."
            ) from None

    def __repr__(self) -> str:
        return f"GenericRecord({self._type_key!r}, {dict.__repr__(self)})"
