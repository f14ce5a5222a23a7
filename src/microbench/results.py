"""Benchmark result record.

A :class:`BenchmarkResult` is produced exactly once per benchmark run by
:func:`microbench.stats.summarize` and is immutable afterwards.  All
values are in seconds.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class BenchmarkResult:
    """Quartiles, mean and spread of one benchmark run."""

    q1: float  # first quartile
    q2: float  # median
    q3: float  # third quartile
    mean: float
    std_dev: float  # population standard deviation
    resolution: float  # seconds per clock tick

    @property
    def iqr(self) -> float:
        """Interquartile range (Q3 - Q1)."""
        return self.q3 - self.q1

    def __str__(self) -> str:
        """One-line summary with every value in ``.3E`` notation.

        Python prints at least two exponent digits (``1.000E+00``), not a
        fixed three-digit exponent (``1.000E+000``).
        """
        return (
            f"Mean = {self.mean:.3E} s; "
            f"Std.Dev = {self.std_dev:.3E} s; "
            f"Q1 = {self.q1:.3E} s; "
            f"Q2 = {self.q2:.3E} s; "
            f"Q3 = {self.q3:.3E} s; "
            f"Resolution: {self.resolution:.3E} s"
        )

    def to_dict(self) -> dict[str, float]:
        """Serialize to a JSON-compatible dict."""
        return {
            "q1": self.q1,
            "q2": self.q2,
            "q3": self.q3,
            "mean": self.mean,
            "std_dev": self.std_dev,
            "resolution": self.resolution,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BenchmarkResult:
        """Deserialize from a dict, ignoring unknown fields."""
        known = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: float(v) for k, v in data.items() if k in known}
        return cls(**filtered)
