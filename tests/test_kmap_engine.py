import itertools
import unittest

from karnaugh.geometry import GroupRect, Point
from karnaugh.grid import KMap
from karnaugh.kmap_engine import (
    all_rects,
    check_group,
    enumerate_groups,
    filter_groups,
    get_filtered_groups,
)


def rect(x, y, sx, sy):
    return GroupRect(start=Point(x, y), size=Point(sx, sy))


def kmap_from_outputs(variables, outputs):
    """Map whose i-th row (in binary counting order) has outcome outputs[i]."""
    assignments = itertools.product([0, 1], repeat=len(variables))
    return KMap(variables, list(zip(assignments, outputs)))


def all_functions(variables):
    n = 2 ** len(variables)
    for outputs in itertools.product([0, 1], repeat=n):
        yield kmap_from_outputs(variables, outputs)


class TestAllRects(unittest.TestCase):
    def test_two_by_two_placements_in_order(self):
        rects = all_rects(2, 2)
        self.assertEqual(len(rects), 9)
        self.assertEqual(rects[:4], [rect(0, 0, 1, 1), rect(0, 1, 1, 1), rect(1, 0, 1, 1), rect(1, 1, 1, 1)])
        self.assertEqual(rects[4:6], [rect(0, 0, 2, 1), rect(0, 1, 2, 1)])
        self.assertEqual(rects[-1], rect(0, 0, 2, 2))

    def test_four_by_four_placements(self):
        rects = all_rects(4, 4)
        self.assertEqual(len(rects), 64)
        for r in rects:
            self.assertLessEqual(r.end.x, 4)
            self.assertLessEqual(r.end.y, 4)

    def test_shapes_larger_than_map_are_skipped(self):
        sizes = {(r.size.x, r.size.y) for r in all_rects(2, 1)}
        self.assertEqual(sizes, {(1, 1), (2, 1)})


class TestEnumerateGroups(unittest.TestCase):
    def test_uniformity_invariant(self):
        for kmap in all_functions("ABC"):
            for value in (True, False):
                for group in enumerate_groups(kmap, value):
                    for x, y in group.cells:
                        self.assertEqual(kmap.value_at(x, y), value)

    def test_uniformity_invariant_four_variables(self):
        outputs = [0, 1, 1, 0, 1, 1, 1, 1, 0, 0, 1, 0, 0, 1, 1, 1]
        kmap = kmap_from_outputs("ABCD", outputs)
        for value in (True, False):
            for group in enumerate_groups(kmap, value):
                self.assertTrue(all(kmap.value_at(x, y) == value for x, y in group.cells))

    def test_missing_cells_do_not_disqualify(self):
        kmap = KMap("AB", [((0, 0), 1), ((0, 1), 1), ((1, 1), 1)])
        self.assertTrue(check_group(kmap, rect(0, 0, 2, 2), True))
        self.assertIn(rect(0, 0, 2, 2), enumerate_groups(kmap, True))

    def test_no_wraparound(self):
        # F = not B on rows AB (Gray order 00 01 11 10): true rows sit at x=0 and x=3
        kmap = kmap_from_outputs("ABC", [1, 1, 0, 0, 1, 1, 0, 0])
        for group in enumerate_groups(kmap, True):
            xs = {x for x, _ in group.cells}
            self.assertFalse({0, 3} <= xs)
        self.assertEqual(get_filtered_groups(kmap, True), [rect(0, 0, 1, 2), rect(3, 0, 1, 2)])

    def test_constant_map(self):
        kmap = kmap_from_outputs("AB", [1, 1, 1, 1])
        self.assertEqual(enumerate_groups(kmap, False), [])
        self.assertEqual(len(enumerate_groups(kmap, True)), 9)


class TestFilterGroups(unittest.TestCase):
    def test_contained_groups_dropped(self):
        groups = [rect(0, 0, 1, 1), rect(1, 1, 1, 1), rect(0, 0, 2, 2)]
        self.assertEqual(filter_groups(groups), [rect(0, 0, 2, 2)])

    def test_group_without_private_cell_dropped(self):
        # .[x x]x      . x[x x]     . x x[x]
        # . . . x      . . . x      . . .[x]
        groups = [rect(0, 1, 1, 2), rect(0, 2, 1, 2), rect(0, 3, 2, 1)]
        self.assertEqual(filter_groups(groups), [rect(0, 1, 1, 2), rect(0, 3, 2, 1)])

    def test_equal_groups_both_dropped(self):
        g = rect(0, 0, 2, 1)
        self.assertEqual(filter_groups([g, g]), [])

    def test_order_preserved(self):
        groups = [rect(1, 0, 1, 2), rect(0, 0, 2, 1)]
        self.assertEqual(filter_groups(groups), groups)

    def test_empty(self):
        self.assertEqual(filter_groups([]), [])

    def test_containment_and_essentiality_invariants(self):
        for kmap in all_functions("ABC"):
            for value in (True, False):
                groups = get_filtered_groups(kmap, value)
                for i, g in enumerate(groups):
                    others = [o for j, o in enumerate(groups) if j != i]
                    self.assertFalse(any(o.contains(g) for o in others))
                    covered = set()
                    for o in others:
                        covered |= o.cells
                    self.assertTrue(g.cells - covered)


if __name__ == "__main__":
    unittest.main()
