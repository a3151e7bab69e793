import io
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout

from karnaugh.cli import format_map, main
from karnaugh.grid import KMap


class TestCli(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)

    def write(self, text, name="table.txt"):
        path = os.path.join(self._tmp.name, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
        return path

    def run_cli(self, *argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main(list(argv))
        return code, out.getvalue(), err.getvalue()

    def test_prints_sop_and_pos(self):
        path = self.write("A B\n0 0 0\n0 1 1\n1 1 1\n1 0 1\n")
        code, out, err = self.run_cli(path)
        self.assertEqual(code, 0)
        self.assertEqual(out, "SOP: (B) + (A)\nPOS: (A + B)\n")
        self.assertEqual(err, "")

    def test_single_form(self):
        path = self.write("A B\n0 0 0\n0 1 1\n1 0 1\n1 1 0\n")
        code, out, _ = self.run_cli(path, "--pos")
        self.assertEqual(code, 0)
        self.assertEqual(out, "POS: (A + B) x (!A + !B)\n")

    def test_map_output(self):
        path = self.write("A B\n0 0 0\n0 1 1\n1 1 1\n1 0 1\n")
        code, out, _ = self.run_cli(path, "--map", "--sop")
        self.assertEqual(code, 0)
        self.assertIn("B=0", out)
        self.assertIn("A=1", out)
        self.assertTrue(out.rstrip().endswith("SOP: (B) + (A)"))

    def test_missing_file(self):
        code, _, err = self.run_cli(os.path.join(self._tmp.name, "nope.txt"))
        self.assertEqual(code, 1)
        self.assertIn("not found", err)

    def test_malformed_table(self):
        path = self.write("A B\n0 0\n")
        code, out, err = self.run_cli(path)
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("Error: line 2", err)

    def test_non_utf8_file(self):
        path = os.path.join(self._tmp.name, "bad.txt")
        with open(path, "wb") as f:
            f.write(b"A B\n0 0 \xff\n")
        code, out, err = self.run_cli(path)
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("Error:", err)

    def test_directory_argument(self):
        code, out, err = self.run_cli(self._tmp.name)
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("Error:", err)

    def test_too_many_variables(self):
        path = self.write("A B C D E\n")
        code, _, err = self.run_cli(path)
        self.assertEqual(code, 1)
        self.assertIn("at most 2 variables", err)

    def test_incomplete_table_warns(self):
        path = self.write("A B\n0 1 1\n")
        code, _, err = self.run_cli(path)
        self.assertEqual(code, 0)
        self.assertIn("Warning: 1 of 4 rows", err)

    def test_check_passes(self):
        path = self.write("A B\n0 0 1\n0 1 0\n1 0 0\n1 1 1\n")
        code, _, err = self.run_cli(path, "--check")
        self.assertEqual(code, 0)
        self.assertEqual(err, "")

    def test_check_reports_uncovered_row(self):
        path = self.write(
            "A B C\n"
            "0 0 0 1\n0 0 1 1\n0 1 0 1\n0 1 1 0\n"
            "1 0 0 0\n1 0 1 0\n1 1 0 1\n1 1 1 1\n"
        )
        code, _, err = self.run_cli(path, "--sop", "--check")
        self.assertEqual(code, 1)
        self.assertIn("SOP mismatch at A=0 B=1 C=0: expected 1, got 0", err)


class TestFormatMap(unittest.TestCase):
    def test_grid_layout(self):
        kmap = KMap("AB", [((0, 0), 0), ((0, 1), 1), ((1, 1), 1)])
        lines = format_map(kmap).splitlines()
        self.assertEqual(lines[0], "    | B=0 B=1")
        self.assertEqual(lines[2], "A=0 |  0   1 ")
        self.assertEqual(lines[3], "A=1 |  .   1 ")


if __name__ == "__main__":
    unittest.main()
