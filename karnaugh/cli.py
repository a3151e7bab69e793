"""Command line entry point: minimize a truth table file into SOP/POS.

Usage: python -m karnaugh TABLE.txt [--sop] [--pos] [--map] [--check]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .errors import KarnaughError
from .grid import COL_AXIS, ROW_AXIS, KMap
from .logic import minimize, verify_formula
from .truth_table import load_truth_table


def format_map(kmap: KMap) -> str:
    """ASCII rendering of the map; ``.`` marks a coordinate with no row."""
    grid = kmap.as_array()
    row_labels = kmap.axis_labels(ROW_AXIS)
    col_labels = kmap.axis_labels(COL_AXIS)
    width = max([len(lab) for lab in row_labels] + [1])
    cell_width = max([len(lab) for lab in col_labels] + [1])

    lines = [" " * width + " | " + " ".join(lab.center(cell_width) for lab in col_labels)]
    lines.append("-" * len(lines[0]))
    for x, label in enumerate(row_labels):
        values = ["." if v < 0 else str(v) for v in grid[x]]
        lines.append(label.ljust(width) + " | " + " ".join(v.center(cell_width) for v in values))
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        prog="karnaugh",
        description="Minimize a truth table with a Karnaugh map",
    )
    p.add_argument("table", type=Path, help="Truth table file (variable header, then 0/1 rows)")
    p.add_argument("--sop", action="store_true", help="Print the sum of products")
    p.add_argument("--pos", action="store_true", help="Print the product of sums")
    p.add_argument("--map", action="store_true", help="Print the Karnaugh map grid")
    p.add_argument(
        "--check",
        action="store_true",
        help="Verify the expressions reproduce every row (exit 1 on mismatch)",
    )
    args = p.parse_args(argv)

    if not args.table.exists():
        print(f"Input file not found: {args.table}", file=sys.stderr)
        return 1

    try:
        table = load_truth_table(args.table)
        kmap = KMap.from_table(table)
    except (KarnaughError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not table.is_complete():
        print(
            f"Warning: {len(table.rows)} of {2 ** len(table.variables)} rows given; "
            "missing rows are treated as unconstrained.",
            file=sys.stderr,
        )

    show_sop = args.sop or not args.pos
    show_pos = args.pos or not args.sop
    result = minimize(kmap)

    if args.map:
        print(format_map(kmap))
    if show_sop:
        print(f"SOP: {result.sop}")
    if show_pos:
        print(f"POS: {result.pos}")

    if args.check:
        failed = False
        for value, name, shown in ((True, "SOP", show_sop), (False, "POS", show_pos)):
            if not shown:
                continue
            for mismatch in verify_formula(kmap, value):
                failed = True
                bits = " ".join(f"{k}={int(v)}" for k, v in mismatch.assignment.items())
                print(
                    f"{name} mismatch at {bits}: expected {int(mismatch.expected)}, "
                    f"got {int(mismatch.got)}",
                    file=sys.stderr,
                )
        if failed:
            return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
