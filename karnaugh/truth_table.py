"""Parser for the plain-text truth table format.

::

    A B C      <- variable names
    0 0 0 0    <- A=0 B=0 C=0 gives 0
    0 0 1 1    <- A=0 B=0 C=1 gives 1
    ...

Blank lines and lines starting with ``#`` are ignored.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, NamedTuple, Tuple, Union

from .errors import TruthTableError


class TruthTable(NamedTuple):
    variables: Tuple[str, ...]
    rows: List[Tuple[Tuple[int, ...], int]]

    def is_complete(self) -> bool:
        """True when every assignment of the variables appears exactly once."""
        seen = {bits for bits, _ in self.rows}
        return len(seen) == len(self.rows) == 2 ** len(self.variables)


def _parse_bit(token: str, lineno: int) -> int:
    if token not in ("0", "1"):
        raise TruthTableError(f"expected 0 or 1, got {token!r}", line=lineno)
    return int(token)


def parse_truth_table(text: str) -> TruthTable:
    """Parse the header line and value rows of a truth table."""
    variables: Tuple[str, ...] = ()
    rows: List[Tuple[Tuple[int, ...], int]] = []
    header_seen = False

    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        tokens = line.split()

        if not header_seen:
            bad = [tok for tok in tokens if len(tok) != 1]
            if bad:
                raise TruthTableError(
                    f"variable names must be single characters, got {', '.join(bad)}",
                    line=lineno,
                )
            if len(set(tokens)) != len(tokens):
                raise TruthTableError("duplicate variable name in header", line=lineno)
            variables = tuple(tokens)
            header_seen = True
            continue

        if len(tokens) != len(variables) + 1:
            raise TruthTableError(
                f"expected {len(variables) + 1} values "
                f"({len(variables)} inputs and the outcome), got {len(tokens)}",
                line=lineno,
            )
        bits = tuple(_parse_bit(tok, lineno) for tok in tokens)
        rows.append((bits[:-1], bits[-1]))

    if not header_seen:
        raise TruthTableError("truth table is empty")
    return TruthTable(variables=variables, rows=rows)


def load_truth_table(path: Union[str, Path]) -> TruthTable:
    """Read and parse a truth table file."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise TruthTableError(f"{path} is not UTF-8 text ({exc.reason})") from exc
    return parse_truth_table(text)


__all__ = ["TruthTable", "load_truth_table", "parse_truth_table"]
