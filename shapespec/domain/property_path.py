"""Property path value object.

A path records where, inside a nested value, a conversion is currently
working. It is only used to build readable diagnostics.
"""

from collections.abc import Iterable, Iterator
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

ROOT_LABEL = "<root>"


class PropertyPath(BaseModel):
    """Immutable sequence of field names and array indices.

    Appending never mutates a path; it returns a new one, so sibling
    element conversions can branch from the same parent.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    segments: tuple[str, ...] = Field(default=(), description="Path segments from the root")

    @classmethod
    def root(cls) -> "PropertyPath":
        """Return the empty path."""
        return cls()

    def extend(self, segment: str | int) -> "PropertyPath":
        """Return a new path with ``segment`` appended.

        Integer segments (array indices) are stored as their decimal string.
        """
        return PropertyPath(segments=(*self.segments, str(segment)))

    def concat(self, segments: Iterable[str | int]) -> "PropertyPath":
        """Return a new path with every segment in ``segments`` appended."""
        return PropertyPath(segments=self.segments + tuple(str(s) for s in segments))

    def __str__(self) -> str:
        """Dotted rendering used in diagnostics."""
        return ".".join(self.segments) if self.segments else ROOT_LABEL

    def __len__(self) -> int:
        return len(self.segments)

    def __bool__(self) -> bool:
        """Paths are always truthy, the root included."""
        return True

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.segments)

    def __eq__(self, other: Any) -> bool:
        """Equality comparison, also against plain lists and tuples."""
        if isinstance(other, PropertyPath):
            return self.segments == other.segments
        if isinstance(other, list | tuple):
            return list(self.segments) == list(other)
        return False

    def __hash__(self) -> int:
        """Make hashable for use in sets and dicts."""
        return hash(self.segments)
