"""Schema management exports."""

from .schema_definitions import property_schema_from_definition, type_schema_from_definition
from .schema_loader import SchemaLoadError, load_definition_file, load_schema_directory
from .schema_models import PRIMITIVE_TYPES, PropertySchema, TypeSchema
from .schema_registry import SchemaRegistry

__all__ = [
    "PRIMITIVE_TYPES",
    "PropertySchema",
    "TypeSchema",
    "SchemaRegistry",
    "SchemaLoadError",
    "load_definition_file",
    "load_schema_directory",
    "property_schema_from_definition",
    "type_schema_from_definition",
]
