"""Model path parsing and resolution service.

Path format::

    ""                  root object
    "Name"              property of the root
    "Child.Name"        nested property
    "Children[1]"       sequence element, 1-based
    "Children[1].Name"  property of a sequence element

Indices are 1-based and must be at least 1. Callers using 0-based indexing
convert before building a path.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any

from schema_bridge.bridge_errors import (
    IndexOutOfBoundsError,
    InvalidIndexError,
    InvalidPathError,
    InvalidPathSyntaxError,
)
from schema_bridge.object_access import (
    as_indexable,
    has_property,
    read_property,
    write_property,
)

from .path_models import PathSegment

_INDEXED_SEGMENT = re.compile(r"(\w+)\[(\d+)\]")
_PLAIN_SEGMENT = re.compile(r"\w+")
_INVALID_CHARACTERS = re.compile(r"[^\w.\[\]]")


def validate_path_syntax(path_string: str) -> None:
    """Cheap syntax pre-check: character set and bracket balance only."""
    if path_string == "":
        return
    if _INVALID_CHARACTERS.search(path_string):
        raise InvalidPathSyntaxError(f"Path contains invalid characters: '{path_string}'")
    if path_string.count("[") != path_string.count("]"):
        raise InvalidPathSyntaxError(f"Unmatched brackets in path: '{path_string}'")


def parse_path(path_string: str) -> tuple[PathSegment, ...]:
    """Split a path string into ordered segments."""
    if path_string == "":
        return ()
    return tuple(_parse_segment(part) for part in path_string.split("."))


def _parse_segment(part: str) -> PathSegment:
    indexed = _INDEXED_SEGMENT.fullmatch(part)
    if indexed:
        index = int(indexed.group(2))
        if index < 1:
            raise InvalidIndexError(
                f"Index must be >= 1 (1-based indexing). Got {index} in path segment '{part}'"
            )
        return PathSegment(property=indexed.group(1), index=index)
    if "[" in part or "]" in part:
        raise InvalidPathSyntaxError(f"Invalid bracket syntax in path segment '{part}'")
    if not _PLAIN_SEGMENT.fullmatch(part):
        raise InvalidPathSyntaxError(f"Invalid property name in path segment '{part}'")
    return PathSegment(property=part)


class ModelPath:
    """Parsed, immutable path into an object graph.

    One instance can be resolved repeatedly against different roots.
    """

    __slots__ = ("_path_string", "_segments")

    def __init__(self, path_string: str = "") -> None:
        self._path_string = path_string
        self._segments = parse_path(path_string)

    @property
    def segments(self) -> tuple[PathSegment, ...]:
        return self._segments

    @property
    def is_root(self) -> bool:
        return not self._segments

    @property
    def segment_count(self) -> int:
        return len(self._segments)

    def resolve(self, root: Any) -> Any:
        """Return the node this path addresses under root."""
        return self._walk(root, self._segments)

    def assign(self, root: Any, value: Any) -> None:
        """Replace the node this path addresses under root with value."""
        if self.is_root:
            raise InvalidPathError("Cannot assign to the root path.")
        parent = self._walk(root, self._segments[:-1])
        last = self._segments[-1]
        self._require_property(parent, last, self.segment_count)
        if not last.is_indexed:
            write_property(parent, last.property, value)
            return

        current = read_property(parent, last.property)
        items = as_indexable(current)
        self._check_bounds(items, last)
        if isinstance(current, list):
            current[last.index - 1] = value
        elif isinstance(current, tuple):
            replaced = list(current)
            replaced[last.index - 1] = value
            write_property(parent, last.property, tuple(replaced))
        else:
            write_property(parent, last.property, value)

    def _walk(self, root: Any, segments: Sequence[PathSegment]) -> Any:
        current = root
        for position, segment in enumerate(segments, start=1):
            self._require_property(current, segment, position)
            value = read_property(current, segment.property)
            if segment.is_indexed:
                items = as_indexable(value)
                self._check_bounds(items, segment)
                current = items[segment.index - 1]
            else:
                current = value
        return current

    def _require_property(self, node: Any, segment: PathSegment, position: int) -> None:
        if not has_property(node, segment.property):
            raise InvalidPathError(
                f"Property '{segment.property}' not found at path segment {position} "
                f"of '{self._path_string}'"
            )

    def _check_bounds(self, items: Sequence[Any], segment: PathSegment) -> None:
        if segment.index > len(items):
            raise IndexOutOfBoundsError(
                f"Index {segment.index} exceeds array size {len(items)} for property "
                f"'{segment.property}' in path '{self._path_string}'"
            )

    def __str__(self) -> str:
        return self._path_string

    def __repr__(self) -> str:
        return f"ModelPath({self._path_string!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModelPath):
            return NotImplemented
        return self._segments == other._segments

    def __hash__(self) -> int:
        return hash(self._segments)
