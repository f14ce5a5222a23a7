"""Tests for microbench.results: the BenchmarkResult record."""

from __future__ import annotations

import dataclasses
import unittest

from microbench.results import BenchmarkResult


class TestBenchmarkResult(unittest.TestCase):
    """Tests for BenchmarkResult."""

    def test_create(self) -> None:
        r = BenchmarkResult(1, 2, 3, 4, 5, 6)
        self.assertEqual((r.q1, r.q2, r.q3), (1, 2, 3))
        self.assertEqual((r.mean, r.std_dev, r.resolution), (4, 5, 6))

    def test_str_format(self) -> None:
        r = BenchmarkResult(1.0, 1.0, 1.0, 1.0, 1.0, 1.0)
        self.assertEqual(
            str(r),
            "Mean = 1.000E+00 s; Std.Dev = 1.000E+00 s; Q1 = 1.000E+00 s; "
            "Q2 = 1.000E+00 s; Q3 = 1.000E+00 s; Resolution: 1.000E+00 s",
        )

    def test_str_field_order(self) -> None:
        r = BenchmarkResult(
            q1=3e-6, q2=4e-6, q3=5e-6, mean=1.23456e-6, std_dev=2e-7, resolution=1e-9
        )
        text = str(r)
        self.assertTrue(text.startswith("Mean = 1.235E-06 s; Std.Dev = 2.000E-07 s"))
        self.assertIn("Q1 = 3.000E-06 s", text)
        self.assertIn("Q2 = 4.000E-06 s", text)
        self.assertIn("Q3 = 5.000E-06 s", text)
        self.assertTrue(text.endswith("Resolution: 1.000E-09 s"))

    def test_str_exponent_width(self) -> None:
        # Two digits when they suffice; three only when needed.
        self.assertTrue(str(BenchmarkResult(0, 0, 0, 0, 0, 1e-9)).endswith("1.000E-09 s"))
        self.assertNotIn("E+000", str(BenchmarkResult(1, 1, 1, 1, 1, 1)))
        self.assertTrue(str(BenchmarkResult(0, 0, 0, 0, 0, 1e-100)).endswith("1.000E-100 s"))

    def test_str_contains_all_labels(self) -> None:
        text = str(BenchmarkResult(0.0, 0.0, 0.0, 0.0, 0.0, 0.0))
        for label in ("Mean", "Std.Dev", "Q1", "Q2", "Q3", "Resolution"):
            self.assertIn(label, text)

    def test_immutable(self) -> None:
        r = BenchmarkResult(1, 1, 1, 1, 1, 1)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            r.mean = 2.0  # type: ignore[misc]

    def test_iqr(self) -> None:
        self.assertEqual(BenchmarkResult(1.0, 2.0, 4.5, 0, 0, 0).iqr, 3.5)

    def test_to_dict(self) -> None:
        d = BenchmarkResult(1, 2, 3, 4, 5, 6).to_dict()
        self.assertEqual(
            d,
            {"q1": 1, "q2": 2, "q3": 3, "mean": 4, "std_dev": 5, "resolution": 6},
        )

    def test_from_dict_ignores_unknown(self) -> None:
        data = BenchmarkResult(1, 2, 3, 4, 5, 6).to_dict()
        data["extra"] = "ignored"
        self.assertEqual(BenchmarkResult.from_dict(data), BenchmarkResult(1, 2, 3, 4, 5, 6))


if __name__ == "__main__":
    unittest.main()
