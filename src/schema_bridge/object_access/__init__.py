"""Object accessor exports."""

from .accessors import (
    as_indexable,
    has_property,
    is_empty,
    is_sequence,
    read_property,
    write_property,
)

__all__ = [
    "as_indexable",
    "has_property",
    "is_empty",
    "is_sequence",
    "read_property",
    "write_property",
]
