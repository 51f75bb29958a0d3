from __future__ import annotations

import importlib.util
import tempfile
import unittest
from pathlib import Path

import numpy as np

from lutinterp.diagnostics import run_diagnostics, table_diagnostics
from lutinterp.lookup_table import InterpolableLUT
from lutinterp.sample_tables import ph_buffer_table
from lutinterp.table_io import detect_format, read_raw_table, read_table, write_table


def _has_pandas() -> bool:
    return importlib.util.find_spec("pandas") is not None


def _has_parquet_engine() -> bool:
    return _has_pandas() and (
        importlib.util.find_spec("pyarrow") is not None or importlib.util.find_spec("fastparquet") is not None
    )


class _TmpDirCase(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)
        self.lut = ph_buffer_table()

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def assertSameTable(self, other) -> None:
        np.testing.assert_array_equal(other.table, self.lut.table)
        np.testing.assert_array_equal(other.x_ref, self.lut.x_ref)
        np.testing.assert_array_equal(other.y_ref, self.lut.y_ref)


class TestTextTables(_TmpDirCase):
    def test_full_precision_round_trip(self) -> None:
        path = write_table(self.tmp / "ph.txt", self.lut)
        self.assertSameTable(read_table(path))

    def test_layout(self) -> None:
        path = write_table(self.tmp / "ph.txt", self.lut, precision=2)
        lines = path.read_text(encoding="ascii").splitlines()
        self.assertEqual(lines[0], "x_ref\t1.68\t4.01\t6.86\t7.00\t9.18\t10.01\t12.46")
        self.assertEqual(lines[1], "0.00\t1.67\t4.01\t6.98\t7.12\t9.46\t10.32\t13.47\t")
        self.assertEqual(len(lines), 13)
        self.assertSameTable(read_table(path, fmt="text"))

    def test_missing_header(self) -> None:
        path = self.tmp / "bad.txt"
        path.write_text("0.00\t1.00\t2.00\t\n5.00\t1.50\t2.50\t\n", encoding="ascii")
        with self.assertRaises(ValueError):
            read_table(path)

    def test_missing_file(self) -> None:
        with self.assertRaises(FileNotFoundError):
            read_table(self.tmp / "nope.txt")

    def test_unknown_format(self) -> None:
        with self.assertRaises(ValueError):
            write_table(self.tmp / "ph.txt", self.lut, fmt="xml")
        with self.assertRaises(ValueError):
            read_table(self.tmp / "ph.txt", fmt="xml")

    def test_rounding_that_merges_values_is_rejected(self) -> None:
        lut = InterpolableLUT([[1.001, 1.004], [2.0, 3.0]], [0.0, 1.0], [0.0, 1.0])
        path = self.tmp / "merged.txt"
        with self.assertRaisesRegex(ValueError, "2 decimals"):
            write_table(path, lut, precision=2)
        self.assertFalse(path.exists())
        # full precision still round-trips
        self.assertEqual(read_table(write_table(path, lut)).row(0).tolist(), [1.001, 1.004])

    def test_detect_format(self) -> None:
        self.assertEqual(detect_format("a/b.csv"), "csv")
        self.assertEqual(detect_format("a/b.PKL"), "pickle")
        self.assertEqual(detect_format("a/b.parquet"), "parquet")
        self.assertEqual(detect_format("a/b.dat"), "text")


@unittest.skipUnless(_has_pandas(), "pandas is not installed")
class TestDataFrameTables(_TmpDirCase):
    def test_csv_round_trip(self) -> None:
        path = write_table(self.tmp / "ph.csv", self.lut, fmt="auto")
        self.assertSameTable(read_table(path))

    def test_pickle_round_trip(self) -> None:
        path = write_table(self.tmp / "ph.pkl", self.lut, fmt="pickle")
        self.assertSameTable(read_table(path))

    def test_repeated_x_ref_round_trips(self) -> None:
        lut = InterpolableLUT([[1.0, 2.0, 3.0], [2.0, 3.0, 4.0]], [1.0, 1.0, 2.0], [0.0, 1.0])
        for name in ("dup.csv", "dup.pkl"):
            with self.subTest(name=name):
                out = read_table(write_table(self.tmp / name, lut, fmt="auto"))
                np.testing.assert_array_equal(out.x_ref, [1.0, 1.0, 2.0])
                np.testing.assert_array_equal(out.table, lut.table)

    @unittest.skipUnless(_has_parquet_engine(), "no parquet engine installed")
    def test_repeated_x_ref_parquet(self) -> None:
        lut = InterpolableLUT([[1.0, 2.0, 3.0], [2.0, 3.0, 4.0]], [1.0, 1.0, 2.0], [0.0, 1.0])
        out = read_table(write_table(self.tmp / "dup.parquet", lut))
        np.testing.assert_array_equal(out.x_ref, [1.0, 1.0, 2.0])

    @unittest.skipUnless(_has_parquet_engine(), "no parquet engine installed")
    def test_parquet_round_trip(self) -> None:
        path = write_table(self.tmp / "ph.parquet", self.lut, fmt="parquet")
        self.assertSameTable(read_table(path))


class TestDiagnostics(_TmpDirCase):
    def test_table_diagnostics(self) -> None:
        diag = table_diagnostics(self.lut)
        self.assertEqual(diag["shape"], [12, 7])
        self.assertEqual(diag["y_range"], [0.0, 55.0])
        self.assertEqual(diag["x_ref_range"], [1.68, 12.46])
        self.assertEqual(diag["row_coverage"][0], [1.67, 13.47])
        self.assertTrue(diag["all_checks_pass"])

    def test_run_diagnostics_from_file(self) -> None:
        path = write_table(self.tmp / "ph.txt", self.lut)
        diag = run_diagnostics(path)
        self.assertEqual(diag["format"], "text")
        self.assertEqual(diag["shape"], [12, 7])

    def test_malformed_file_reports_failed_checks(self) -> None:
        path = self.tmp / "bad.txt"
        path.write_text("x_ref\t1.0\tnan\n0.0\t2.0\t1.0\t\n5.0\t3.0\t4.0\t\n", encoding="ascii")
        with self.assertRaises(ValueError):
            read_table(path)
        diag = run_diagnostics(path)
        self.assertFalse(diag["all_checks_pass"])
        self.assertFalse(diag["checks"]["rows_increasing"])
        self.assertFalse(diag["checks"]["all_finite"])
        self.assertTrue(diag["checks"]["y_ref_increasing"])
        self.assertTrue(diag["checks"]["shape_consistent"])
        self.assertEqual(diag["row_coverage"][0], [2.0, 1.0])

    def test_mismatched_lengths_and_decreasing_y(self) -> None:
        path = self.tmp / "bad.txt"
        path.write_text("x_ref\t1.0\n5.0\t1.0\t2.0\t\n0.0\t3.0\t4.0\t\n", encoding="ascii")
        table, x_ref, y_ref = read_raw_table(path)
        self.assertEqual(table.shape, (2, 2))
        diag = run_diagnostics(path)
        self.assertFalse(diag["checks"]["shape_consistent"])
        self.assertFalse(diag["checks"]["y_ref_increasing"])
        self.assertTrue(diag["checks"]["rows_increasing"])


if __name__ == "__main__":
    unittest.main()
