"""Error taxonomy shared by the schema, projection, factory and path services."""

from __future__ import annotations


class SchemaBridgeError(Exception):
    """Base class for every failure raised by the marshalling core."""


class SchemaNotFoundError(SchemaBridgeError):
    """Raised when a type key is not registered."""


class InvalidSchemaError(SchemaBridgeError):
    """Raised when a type schema or its definition is malformed."""


class UnknownTypeError(SchemaBridgeError):
    """Raised when a property type is neither primitive nor a registered schema."""


class NestedSchemaNotFoundError(UnknownTypeError, SchemaNotFoundError):
    """Raised when a nested property type has no registered schema."""


class NoIdentifierPropertyError(SchemaBridgeError):
    """Raised when a referenced type declares no identifier properties."""


class MissingPropertyError(SchemaBridgeError):
    """Raised when a source object lacks a property the schema requires."""


class UnknownPropertyError(SchemaBridgeError):
    """Raised when a property name is not declared by a type schema."""


class InvalidPropertySubsetError(SchemaBridgeError):
    """Raised when a projection subset names a property the schema lacks."""


class ArrayCardinalityMismatchError(SchemaBridgeError):
    """Raised when an array value cannot be normalized to a scalar property."""


class InvalidPathError(SchemaBridgeError):
    """Raised when a path segment names a property the current node lacks."""


class IndexOutOfBoundsError(SchemaBridgeError):
    """Raised when a path index exceeds the addressed sequence."""


class InvalidPathSyntaxError(SchemaBridgeError):
    """Raised when a path string is malformed."""


class InvalidIndexError(SchemaBridgeError):
    """Raised when a path index is below one."""
