"""Model path entities."""

from __future__ import annotations

from dataclasses import dataclass

NO_INDEX = 0


@dataclass(frozen=True)
class PathSegment:
    """One ``Property`` or ``Property[index]`` step of a model path."""

    property: str
    index: int = NO_INDEX

    @property
    def is_indexed(self) -> bool:
        return self.index != NO_INDEX

    def __str__(self) -> str:
        if self.is_indexed:
            return f"{self.property}[{self.index}]"
        return self.property
