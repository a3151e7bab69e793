"""Point and rectangle primitives for Karnaugh map groups."""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, List, Sequence, Tuple


@dataclass(frozen=True)
class Point:
    """Integer coordinate on the map (x = row position, y = column position)."""

    x: int = 0
    y: int = 0


# Every rectangle a 4x4 map can hold, by (x, y) size. Order matters only for
# the order of the raw group list.
SHAPES: Sequence[Point] = (
    Point(1, 1),
    Point(2, 1),
    Point(1, 2),
    Point(4, 1),
    Point(1, 4),
    Point(2, 2),
    Point(4, 2),
    Point(2, 4),
    Point(4, 4),
)


@dataclass(frozen=True)
class GroupRect:
    """Axis-aligned rectangle described by its start corner and size."""

    start: Point
    size: Point

    @property
    def area(self) -> int:
        return self.size.x * self.size.y

    @property
    def end(self) -> Point:
        """Exclusive far corner."""
        return Point(self.start.x + self.size.x, self.start.y + self.size.y)

    def contains(self, other: "GroupRect") -> bool:
        """Return True when ``other`` lies inside this rectangle (edges inclusive)."""
        return (
            other.start.x >= self.start.x
            and other.start.y >= self.start.y
            and other.end.x <= self.end.x
            and other.end.y <= self.end.y
        )

    def is_in(self, other: "GroupRect") -> bool:
        return other.contains(self)

    def points(self) -> List[Point]:
        """Covered coordinates, x-major."""
        return [
            Point(self.start.x + dx, self.start.y + dy)
            for dx in range(self.size.x)
            for dy in range(self.size.y)
        ]

    @property
    def cells(self) -> FrozenSet[Tuple[int, int]]:
        return frozenset((p.x, p.y) for p in self.points())


__all__ = ["Point", "GroupRect", "SHAPES"]
