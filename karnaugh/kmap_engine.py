"""Karnaugh map grouping: rectangle enumeration and redundancy filtering."""

from __future__ import annotations

from typing import List, Sequence, Set, Tuple

from .geometry import SHAPES, GroupRect, Point
from .grid import Cell, KMap


def all_rects(size_x: int, size_y: int) -> List[GroupRect]:
    """Every catalogue shape at every start that stays inside the map (no wrap-around)."""
    rects: List[GroupRect] = []
    for shape in SHAPES:
        for x in range(size_x - shape.x + 1):
            for y in range(size_y - shape.y + 1):
                rects.append(GroupRect(start=Point(x, y), size=shape))
    return rects


def check_group(kmap: KMap, group: GroupRect, value: bool) -> bool:
    """True when every loaded cell inside the group holds ``value``.

    Coordinates without a loaded row impose no constraint.
    """
    for point in group.points():
        found = kmap.value_at(point.x, point.y)
        if found is not None and found != value:
            return False
    return True


def group_cells(kmap: KMap, group: GroupRect) -> List[Cell]:
    """Loaded cells covered by the group, x-major."""
    cells = []
    for point in group.points():
        cell = kmap.cell_at(point.x, point.y)
        if cell is not None:
            cells.append(cell)
    return cells


def enumerate_groups(kmap: KMap, value: bool) -> List[GroupRect]:
    """Return every in-bounds rectangle whose cells all equal ``value``."""
    return [
        rect
        for rect in all_rects(kmap.size_x, kmap.size_y)
        if check_group(kmap, rect, value)
    ]


def filter_groups(groups: Sequence[GroupRect]) -> List[GroupRect]:
    """Reduce raw groups to an irredundant cover in two passes.

    Pass one drops every group lying inside a different, larger group; equal
    groups do not eliminate each other there. Pass two keeps a survivor only
    if it covers a cell none of the other survivors cover. The second pass is
    greedy: mutually redundant groups may all be dropped.
    """
    survivors = [
        group
        for group in groups
        if not any(other != group and other.contains(group) for other in groups)
    ]

    result: List[GroupRect] = []
    for i, group in enumerate(survivors):
        covered: Set[Tuple[int, int]] = set()
        for j, other in enumerate(survivors):
            if i != j:
                covered |= other.cells
        if group.cells - covered:
            result.append(group)
    return result


def get_filtered_groups(kmap: KMap, value: bool) -> List[GroupRect]:
    return filter_groups(enumerate_groups(kmap, value))


__all__ = [
    "all_rects",
    "check_group",
    "enumerate_groups",
    "filter_groups",
    "get_filtered_groups",
    "group_cells",
]
