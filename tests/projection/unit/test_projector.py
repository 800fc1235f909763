"""Projector service tests."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest
from schema_bridge.bridge_errors import (
    InvalidPropertySubsetError,
    MissingPropertyError,
    NestedSchemaNotFoundError,
    NoIdentifierPropertyError,
    UnknownTypeError,
)
from schema_bridge.projection import Projector
from schema_bridge.record_factory import RecordFactory
from schema_bridge.schema_management import SchemaRegistry


@dataclass
class SimpleObject:
    Name: str = ""
    Value: float = 0
    IsActive: bool = False
    SessionID: float = 0


@dataclass
class ChildObject:
    SessionID: float = 0
    Name: str = ""
    Value: float = 0
    Units: str = ""


@dataclass
class ParentObject:
    SessionID: float = 0
    Name: str = ""
    Children: list[ChildObject] = field(default_factory=list)
    SelectedChildren: list[ChildObject] = field(default_factory=list)
    StartTime: float = 0
    StopTime: float = 100


def _registry() -> SchemaRegistry:
    registry = SchemaRegistry()
    registry.define(
        {
            "typeKey": "SimpleObject",
            "identifierProperties": "SessionID",
            "properties": {
                "Name": {"type": "string"},
                "Value": {"type": "double"},
                "IsActive": {"type": "boolean"},
                "SessionID": {"type": "double"},
            },
        }
    )
    registry.define(
        {
            "typeKey": "ChildObject",
            "identifierProperties": ["SessionID"],
            "properties": {
                "SessionID": {"type": "double"},
                "Name": {"type": "string"},
                "Value": {"type": "double"},
                "Units": {"type": "string"},
            },
        }
    )
    registry.define(
        {
            "typeKey": "ParentObject",
            "properties": {
                "SessionID": {"type": "double"},
                "Name": {"type": "string"},
                "Children": {"type": "ChildObject", "isArray": True},
                "SelectedChildren": {
                    "type": "ChildObject",
                    "isArray": True,
                    "isReference": True,
                },
                "StartTime": {"type": "double"},
                "StopTime": {"type": "double"},
            },
        }
    )
    return registry


def _parent_with_children() -> ParentObject:
    parent = ParentObject(SessionID=1, Name="Parent1")
    first = ChildObject(101, "Child1", 10, "mg")
    second = ChildObject(102, "Child2", 20, "kg")
    parent.Children.extend([first, second])
    parent.SelectedChildren.append(first)
    return parent


def test_projects_simple_object_in_schema_order() -> None:
    registry = _registry()
    projector = Projector(registry)

    result = projector.project(SimpleObject("TestName", 42.5, True, 12345), registry.get("SimpleObject"))

    assert result == {"Name": "TestName", "Value": 42.5, "IsActive": True, "SessionID": 12345}
    assert list(result) == ["Name", "Value", "IsActive", "SessionID"]


def test_projects_property_subset_only() -> None:
    registry = _registry()

    result = Projector(registry).project(
        SimpleObject("TestName", 42.5, True, 12345),
        registry.get("SimpleObject"),
        ["Value", "Name"],
    )

    assert result == {"Value": 42.5, "Name": "TestName"}
    assert list(result) == ["Value", "Name"]


def test_subset_with_unknown_name_fails() -> None:
    registry = _registry()

    with pytest.raises(InvalidPropertySubsetError, match="Bogus"):
        Projector(registry).project(SimpleObject(), registry.get("SimpleObject"), ["Name", "Bogus"])


def test_missing_accessor_on_source_fails() -> None:
    registry = _registry()

    with pytest.raises(MissingPropertyError, match="IsActive"):
        Projector(registry).project(
            {"Name": "n", "Value": 1, "SessionID": 3}, registry.get("SimpleObject")
        )


def test_embeds_children_and_flattens_references() -> None:
    registry = _registry()

    result = Projector(registry).project(_parent_with_children(), registry.get("ParentObject"))

    assert result["Children"] == [
        {"SessionID": 101, "Name": "Child1", "Value": 10, "Units": "mg"},
        {"SessionID": 102, "Name": "Child2", "Value": 20, "Units": "kg"},
    ]
    assert result["SelectedChildren"] == [{"SessionID": 101}]


def test_scalar_reference_projects_identifier_fields_only() -> None:
    registry = _registry()
    registry.define(
        {
            "typeKey": "Analysis",
            "properties": {"Species": {"type": "ChildObject", "isReference": True}},
        }
    )

    result = Projector(registry).project(
        {"Species": ChildObject(7, "Mouse", 3, "g")}, registry.get("Analysis")
    )

    assert result == {"Species": {"SessionID": 7}}
    assert list(result["Species"]) == ["SessionID"]


def test_empty_values_project_to_none_regardless_of_array_flag() -> None:
    registry = _registry()
    parent = ParentObject(SessionID=1, Name="Lonely")

    result = Projector(registry).project(parent, registry.get("ParentObject"))

    assert result["Children"] is None
    assert result["SelectedChildren"] is None


def test_array_cardinality_passes_through_unchanged() -> None:
    registry = _registry()
    parent = ParentObject(SessionID=1, Name="Single")
    parent.Children = ChildObject(5, "Only", 1, "mg")  # type: ignore[assignment]

    result = Projector(registry).project(parent, registry.get("ParentObject"), ["Children"])

    assert result == {"Children": {"SessionID": 5, "Name": "Only", "Value": 1, "Units": "mg"}}


def test_reference_to_type_without_identifiers_fails() -> None:
    registry = _registry()
    registry.define({"typeKey": "Anonymous", "properties": {"Name": {"type": "string"}}})
    registry.define(
        {
            "typeKey": "Holder",
            "properties": {"Target": {"type": "Anonymous", "isReference": True}},
        }
    )

    with pytest.raises(NoIdentifierPropertyError, match="Anonymous"):
        Projector(registry).project({"Target": {"Name": "x"}}, registry.get("Holder"))


def test_reference_missing_identifier_accessor_fails() -> None:
    registry = _registry()
    registry.define(
        {
            "typeKey": "Holder",
            "properties": {"Target": {"type": "ChildObject", "isReference": True}},
        }
    )

    with pytest.raises(MissingPropertyError, match="SessionID"):
        Projector(registry).project({"Target": {"Name": "no id"}}, registry.get("Holder"))


@pytest.mark.parametrize(
    ("is_array", "value"),
    [(False, {"Name": "x"}), (True, [{"Name": "x"}])],
)
def test_unregistered_nested_type_fails(is_array: bool, value: object) -> None:
    registry = _registry()
    registry.define(
        {
            "typeKey": "Holder",
            "properties": {"Thing": {"type": "Unregistered", "isArray": is_array}},
        }
    )

    with pytest.raises(NestedSchemaNotFoundError) as excinfo:
        Projector(registry).project({"Thing": value}, registry.get("Holder"))
    assert isinstance(excinfo.value, UnknownTypeError)


def test_projection_is_idempotent() -> None:
    registry = _registry()
    parent = _parent_with_children()
    projector = Projector(registry)

    assert projector.project(parent, registry.get("ParentObject")) == projector.project(
        parent, registry.get("ParentObject")
    )


def test_project_object_infers_schema_from_class() -> None:
    registry = _registry()

    result = Projector(registry).project_object(SimpleObject("n", 1, False, 2), ["Name"])

    assert result == {"Name": "n"}


def test_primitive_arrays_are_copied_into_the_output() -> None:
    registry = _registry()
    registry.define(
        {
            "typeKey": "Series",
            "properties": {"Values": {"type": "double", "isArray": True}},
        }
    )
    source = {"Values": [1, 2]}

    result = Projector(registry).project(source, registry.get("Series"))
    result["Values"].append(3)

    assert source["Values"] == [1, 2]
    assert Projector(registry).project(source, registry.get("Series")) == {"Values": [1, 2]}


def test_project_object_uses_record_type_key() -> None:
    registry = _registry()
    record = RecordFactory(registry).create("ChildObject", {"SessionID": 7, "Name": "c"})

    result = Projector(registry).project_object(record)

    assert result == {"SessionID": 7, "Name": "c", "Value": None, "Units": None}
