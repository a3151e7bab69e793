"""Karnaugh map grid model built from truth table rows."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple, Union

import numpy as np

from .errors import InvalidRowError, KarnaughError, UnsupportedVariableCount

# Gray-code ordering for two-bit combinations
GRAY4: Sequence[Tuple[int, int]] = ((0, 0), (0, 1), (1, 1), (1, 0))

# Axis position order keyed by the number of variables on the axis.
AXIS_ORDERS = {
    0: ((),),
    1: ((0,), (1,)),
    2: GRAY4,
}

ROW_AXIS = "row"
COL_AXIS = "col"

Row = Tuple[Sequence[int], int]


def axis_order(count: int) -> Sequence[Tuple[int, ...]]:
    """Return the Gray-code position order for an axis with ``count`` variables."""
    try:
        return AXIS_ORDERS[count]
    except KeyError:
        raise UnsupportedVariableCount(
            f"K-map axes hold at most 2 variables (got {count}); "
            f"tables are limited to 4 variables."
        ) from None


def split_variables(variables: Sequence[str]) -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
    """Split declared variables into (row axis, column axis), each sorted by name.

    The first half goes to the row axis; for an odd count the middle variable
    joins the row axis too.
    """
    cut = (len(variables) + 1) // 2
    return tuple(sorted(variables[:cut])), tuple(sorted(variables[cut:]))


@dataclass(frozen=True)
class AxisAssignment:
    """Values of one axis' variables at a cell, plus the axis position."""

    bits: Tuple[Tuple[str, bool], ...]
    position: int

    @property
    def values(self) -> Mapping[str, bool]:
        return MappingProxyType(dict(self.bits))

    def __contains__(self, var: str) -> bool:
        return any(name == var for name, _ in self.bits)

    def get(self, var: str) -> Optional[bool]:
        for name, value in self.bits:
            if name == var:
                return value
        return None


@dataclass(frozen=True)
class Cell:
    """One truth table row placed on the map."""

    row: AxisAssignment
    col: AxisAssignment
    value: bool

    @property
    def coord(self) -> Tuple[int, int]:
        return self.row.position, self.col.position

    def state_of(self, var: str) -> Optional[bool]:
        """Return the variable's value from whichever axis carries it."""
        if var in self.row:
            return self.row.get(var)
        if var in self.col:
            return self.col.get(var)
        return None


def _as_bool(token, what: str) -> bool:
    if isinstance(token, bool):
        return token
    if token in (0, 1):
        return bool(token)
    raise InvalidRowError(f"{what} must be 0 or 1, got {token!r}")


class KMap:
    """Truth table indexed by Gray-code ordered (row, column) positions."""

    def __init__(self, variables: Sequence[str], rows: Iterable[Row] = ()):
        self.variables: Tuple[str, ...] = tuple(variables)
        bad = [var for var in self.variables if not isinstance(var, str) or len(var) != 1]
        if bad:
            raise KarnaughError(f"Variable names must be single characters, got {bad}")
        if len(set(self.variables)) != len(self.variables):
            raise KarnaughError(f"Duplicate variable names in {list(self.variables)}")
        self.row_variables, self.col_variables = split_variables(self.variables)
        self._row_order = axis_order(len(self.row_variables))
        self._col_order = axis_order(len(self.col_variables))
        self._cells: List[Cell] = [self._make_cell(bits, outcome) for bits, outcome in rows]

    @classmethod
    def from_table(cls, table) -> "KMap":
        """Build a map from a parsed :class:`~karnaugh.truth_table.TruthTable`."""
        return cls(table.variables, table.rows)

    def _axis_assignment(
        self, names: Sequence[str], order, assignment: Mapping[str, bool]
    ) -> AxisAssignment:
        bits = tuple((name, assignment[name]) for name in names)
        key = tuple(int(value) for _, value in bits)
        return AxisAssignment(bits=bits, position=list(order).index(key))

    def _make_cell(self, bits: Sequence[int], outcome: int) -> Cell:
        bits = list(bits)
        if len(bits) != len(self.variables):
            raise InvalidRowError(
                f"Row {bits} has {len(bits)} values for {len(self.variables)} variables"
            )
        assignment = {
            var: _as_bool(bit, f"Value of {var}") for var, bit in zip(self.variables, bits)
        }
        return Cell(
            row=self._axis_assignment(self.row_variables, self._row_order, assignment),
            col=self._axis_assignment(self.col_variables, self._col_order, assignment),
            value=_as_bool(outcome, "Outcome"),
        )

    # ------------------------------------------------------------------ sizes
    @property
    def size_x(self) -> int:
        return 2 ** len(self.row_variables) if self.variables else 0

    @property
    def size_y(self) -> int:
        return 2 ** len(self.col_variables) if self.variables else 0

    @property
    def size(self) -> int:
        return self.size_x * self.size_y

    @property
    def empty(self) -> bool:
        return self.size == 0

    @property
    def cells(self) -> Tuple[Cell, ...]:
        return tuple(self._cells)

    # ---------------------------------------------------------------- lookups
    def cell_at(self, x: int, y: int) -> Optional[Cell]:
        for cell in self._cells:
            if cell.row.position == x and cell.col.position == y:
                return cell
        return None

    def value_at(self, x: int, y: int) -> Optional[bool]:
        """Outcome at (x, y), or None when no row was loaded for it."""
        cell = self.cell_at(x, y)
        return None if cell is None else cell.value

    def assignment_at(self, x: int, y: int) -> Optional[Tuple[AxisAssignment, AxisAssignment]]:
        cell = self.cell_at(x, y)
        return None if cell is None else (cell.row, cell.col)

    def axis_assignment_for(
        self, position: int, axis: Union[str, int] = ROW_AXIS
    ) -> Optional[Mapping[str, bool]]:
        """Variable values for a single axis position, from the first cell using it."""
        if axis in (ROW_AXIS, 0):
            attr = "row"
        elif axis in (COL_AXIS, 1):
            attr = "col"
        else:
            raise ValueError(f"Unknown axis {axis!r}; use 'row' or 'col'.")
        for cell in self._cells:
            assignment = getattr(cell, attr)
            if assignment.position == position:
                return assignment.values
        return None

    # ------------------------------------------------------------- rendering
    def axis_labels(self, axis: Union[str, int] = ROW_AXIS) -> List[str]:
        """Gray-code labels such as ``"AB=01"`` for every position of an axis."""
        if axis in (ROW_AXIS, 0):
            names, order = self.row_variables, self._row_order
        else:
            names, order = self.col_variables, self._col_order
        if not names:
            return [""] * len(order)
        prefix = "".join(names)
        return [f"{prefix}={''.join(str(bit) for bit in key)}" for key in order]

    def as_array(self) -> np.ndarray:
        """Outcomes as an int array of shape (size_x, size_y); -1 marks missing cells."""
        grid = np.full((self.size_x, self.size_y), -1, dtype=int)
        for cell in self._cells:
            x, y = cell.coord
            if grid[x, y] == -1:
                grid[x, y] = int(cell.value)
        return grid

    def __repr__(self) -> str:
        return (
            f"KMap(variables={list(self.variables)}, "
            f"size={self.size_x}x{self.size_y}, cells={len(self._cells)})"
        )


__all__ = [
    "AXIS_ORDERS",
    "AxisAssignment",
    "Cell",
    "COL_AXIS",
    "GRAY4",
    "KMap",
    "ROW_AXIS",
    "axis_order",
    "split_variables",
]
