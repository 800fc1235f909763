"""Read/write access to live objects by property name.

Mappings are addressed by key, every other object by attribute. This keeps
plain dicts (including generic records) and ordinary domain classes usable
interchangeably by the projector and the path resolver.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping, Sequence
from typing import Any


def has_property(obj: Any, name: str) -> bool:
    """Return True when obj exposes a property called name."""
    if isinstance(obj, Mapping):
        return name in obj
    return hasattr(obj, name)


def read_property(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj[name]
    return getattr(obj, name)


def write_property(obj: Any, name: str, value: Any) -> None:
    if isinstance(obj, MutableMapping):
        obj[name] = value
        return
    setattr(obj, name, value)


def is_sequence(value: Any) -> bool:
    """Return True for list-like values; strings, bytes and mappings are scalars."""
    return isinstance(value, (list, tuple))


def is_empty(value: Any) -> bool:
    """Return True for None and zero-length sequences."""
    if value is None:
        return True
    return is_sequence(value) and len(value) == 0


def as_indexable(value: Any) -> Sequence[Any]:
    """Return value as an ordered sequence.

    None is an empty sequence and any non-sequence value is a sequence of one.
    """
    if value is None:
        return ()
    if is_sequence(value):
        return value
    return (value,)
