"""Property and type schema entity tests."""

from __future__ import annotations

import gc

import pytest
from schema_bridge.bridge_errors import (
    NestedSchemaNotFoundError,
    UnknownPropertyError,
    UnknownTypeError,
)
from schema_bridge.schema_management import PropertySchema, SchemaRegistry, TypeSchema


def test_property_schema_defaults_to_plain_scalar() -> None:
    prop = PropertySchema(name="StartTime", type="double")

    assert prop.is_array is False
    assert prop.is_reference is False
    assert prop.read_only is False
    assert prop.client_read_only is False
    assert prop.is_primitive is True


def test_client_read_only_follows_read_only_when_unspecified() -> None:
    assert PropertySchema(name="ID", type="double", read_only=True).client_read_only is True
    assert (
        PropertySchema(name="ID", type="double", read_only=True, client_read_only=False)
        .client_read_only
        is False
    )


@pytest.mark.parametrize("type_name", ["string", "double", "boolean", "logical", "number"])
def test_primitive_tags_are_recognized(type_name: str) -> None:
    assert PropertySchema(name="Value", type=type_name).is_primitive is True


def test_registered_type_names_are_not_primitive() -> None:
    assert PropertySchema(name="Species", type="Species").is_primitive is False


def test_property_schema_is_immutable() -> None:
    prop = PropertySchema(name="Name", type="string")

    with pytest.raises(AttributeError):
        prop.name = "Other"  # type: ignore[misc]


def test_type_schema_preserves_property_order() -> None:
    schema = TypeSchema(
        "Child",
        [
            PropertySchema(name="Units", type="string"),
            PropertySchema(name="Name", type="string"),
            PropertySchema(name="Value", type="double"),
        ],
    )

    assert schema.property_names() == ("Units", "Name", "Value")
    assert schema.display_name == "Child"
    assert schema.identifier_properties == ()


def test_get_property_rejects_unknown_names() -> None:
    schema = TypeSchema("Child", [PropertySchema(name="Name", type="string")])

    assert schema.get_property("Name").type == "string"
    with pytest.raises(UnknownPropertyError, match="Missing"):
        schema.get_property("Missing")


def test_nested_schema_lookup_goes_through_registry() -> None:
    registry = SchemaRegistry()
    child = TypeSchema("Child", [PropertySchema(name="Name", type="string")])
    parent = TypeSchema("Parent", [PropertySchema(name="Child", type="Child")])
    registry.register(parent)

    assert parent.has_nested_schema("Child") is False
    with pytest.raises(NestedSchemaNotFoundError):
        parent.get_nested_schema("Child")

    registry.register(child)

    assert parent.has_nested_schema("Child") is True
    assert parent.get_nested_schema("Child") is child


def test_nested_schema_not_found_counts_as_unknown_type() -> None:
    parent = TypeSchema("Parent", [PropertySchema(name="Child", type="Child")])

    with pytest.raises(UnknownTypeError):
        parent.get_nested_schema("Child")


def test_type_schema_does_not_keep_registry_alive() -> None:
    registry = SchemaRegistry()
    registry.define({"typeKey": "Child", "properties": {"Name": {"type": "string"}}})
    parent = registry.define(
        {"typeKey": "Parent", "properties": {"Child": {"type": "Child"}}}
    )
    assert parent.has_nested_schema("Child") is True

    del registry
    gc.collect()

    assert parent.has_nested_schema("Child") is False


def test_nested_lookup_after_registry_is_collected_fails() -> None:
    registry = SchemaRegistry()
    registry.define({"typeKey": "Child", "properties": {"Name": {"type": "string"}}})
    parent = registry.define({"typeKey": "Parent", "properties": {"Child": {"type": "Child"}}})

    del registry
    gc.collect()

    with pytest.raises(NestedSchemaNotFoundError, match="Child"):
        parent.get_nested_schema("Child")
