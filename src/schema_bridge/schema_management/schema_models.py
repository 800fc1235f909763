"""Schema management entities."""

from __future__ import annotations

import weakref
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from schema_bridge.bridge_errors import (
    InvalidSchemaError,
    NestedSchemaNotFoundError,
    UnknownPropertyError,
)

if TYPE_CHECKING:
    from .schema_registry import SchemaRegistry

PRIMITIVE_TYPES = frozenset({"string", "double", "boolean", "logical", "number"})


@dataclass(frozen=True)
class PropertySchema:
    """Immutable description of one projectable property."""

    name: str
    type: str
    is_array: bool = False
    is_reference: bool = False
    read_only: bool = False
    client_read_only: bool | None = None

    def __post_init__(self) -> None:
        if self.client_read_only is None:
            object.__setattr__(self, "client_read_only", self.read_only)

    @property
    def is_primitive(self) -> bool:
        """Return True when the declared type is a primitive tag."""
        return self.type in PRIMITIVE_TYPES


class TypeSchema:
    """Named collection of property schemas for one domain type.

    The schema keeps only a weak handle on its registry. Nested types are
    looked up by name through that handle when a projection or factory call
    needs them, so schemas may be defined in any order and may reference
    each other cyclically.
    """

    def __init__(
        self,
        type_key: str,
        properties: Sequence[PropertySchema] | Mapping[str, PropertySchema] = (),
        *,
        display_name: str | None = None,
        identifier_properties: Sequence[str] = (),
        registry: SchemaRegistry | None = None,
    ) -> None:
        if isinstance(properties, Mapping):
            properties = tuple(properties.values())
        self._type_key = type_key
        self._display_name = display_name or type_key
        self._identifier_properties = tuple(identifier_properties)
        self._properties: dict[str, PropertySchema] = {prop.name: prop for prop in properties}
        self._registry_ref: weakref.ReferenceType[SchemaRegistry] | None = None
        if registry is not None:
            self.bind_registry(registry)

    @property
    def type_key(self) -> str:
        return self._type_key

    @property
    def display_name(self) -> str:
        return self._display_name

    @property
    def identifier_properties(self) -> tuple[str, ...]:
        return self._identifier_properties

    @property
    def properties(self) -> Mapping[str, PropertySchema]:
        return dict(self._properties)

    def bind_registry(self, registry: SchemaRegistry) -> None:
        """Attach the lookup-only registry handle used for nested types.

        Raises:
          InvalidSchemaError: The schema is already bound to another registry
            that is still alive.
        """
        current = self._registry()
        if current is not None and current is not registry:
            raise InvalidSchemaError(
                f"Type schema '{self._type_key}' is already bound to another registry."
            )
        self._registry_ref = weakref.ref(registry)

    def property_names(self) -> tuple[str, ...]:
        """Return property names in definition order."""
        return tuple(self._properties)

    def has_property(self, name: str) -> bool:
        return name in self._properties

    def get_property(self, name: str) -> PropertySchema:
        """Return the property schema for name."""
        try:
            return self._properties[name]
        except KeyError:
            raise UnknownPropertyError(
                f"Property '{name}' is not defined for type '{self._type_key}'."
            ) from None

    def has_nested_schema(self, type_key: str) -> bool:
        registry = self._registry()
        return registry is not None and registry.has(type_key)

    def get_nested_schema(self, type_key: str) -> TypeSchema:
        """Return the registered schema for a nested property type."""
        registry = self._registry()
        if registry is None or not registry.has(type_key):
            raise NestedSchemaNotFoundError(
                f"No schema registered for nested type '{type_key}' "
                f"(referenced from '{self._type_key}')."
            )
        return registry.get(type_key)

    def _registry(self) -> SchemaRegistry | None:
        if self._registry_ref is None:
            return None
        return self._registry_ref()

    def __repr__(self) -> str:
        return (
            f"TypeSchema(type_key={self._type_key!r}, display_name={self._display_name!r}, "
            f"properties={list(self._properties)!r})"
        )
