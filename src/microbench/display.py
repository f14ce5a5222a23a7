"""Terminal display formatting for benchmark results.

Produces aligned plain-text tables with adaptive time units.
"""

from __future__ import annotations

import math
from typing import Any

from microbench.results import BenchmarkResult


# ---------------------------------------------------------------------------
# Value formatting
# ---------------------------------------------------------------------------


def format_time(seconds: float, precision: int = 3) -> str:
    """Format a time value with adaptive units."""
    if math.isnan(seconds):
        return "N/A"
    magnitude = abs(seconds)
    if magnitude == 0:
        return "0s"
    if magnitude < 1e-6:
        return f"{seconds * 1e9:.{precision}f}ns"
    if magnitude < 1e-3:
        return f"{seconds * 1e6:.{precision}f}µs"
    if magnitude < 1:
        return f"{seconds * 1e3:.{precision}f}ms"
    return f"{seconds:.{precision}f}s"


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------


def format_table(
    headers: list[str],
    rows: list[list[str]],
    *,
    alignments: list[str] | None = None,
    indent: int = 2,
) -> str:
    """Format a list of rows as an aligned text table.

    Column widths come from the content.  Columns marked ``'r'`` in
    *alignments* are right-aligned, the rest left-aligned.
    """
    if not headers:
        return ""

    ncols = len(headers)
    aligns = list(alignments or [])
    aligns += ["l"] * (ncols - len(aligns))

    proc_rows = [(list(row) + [""] * ncols)[:ncols] for row in rows]

    widths = [len(h) for h in headers]
    for row in proc_rows:
        for ci, cell in enumerate(row):
            widths[ci] = max(widths[ci], len(cell))

    def _format_row(cells: list[str]) -> str:
        parts = [
            cell.rjust(widths[i]) if aligns[i] == "r" else cell.ljust(widths[i])
            for i, cell in enumerate(cells)
        ]
        return (" " * indent + "  ".join(parts)).rstrip()

    lines = [_format_row(list(headers))]
    lines.append(" " * indent + "  ".join("─" * w for w in widths))
    lines.extend(_format_row(row) for row in proc_rows)
    return "\n".join(lines)


def format_result(result: BenchmarkResult, *, title: str = "") -> str:
    """Format a BenchmarkResult as a two-column table."""
    rows = [
        ["Mean", format_time(result.mean)],
        ["Std.Dev", format_time(result.std_dev)],
        ["Q1", format_time(result.q1)],
        ["Q2 (median)", format_time(result.q2)],
        ["Q3", format_time(result.q3)],
        ["IQR", format_time(result.iqr)],
        ["Resolution", format_time(result.resolution)],
    ]
    table = format_table(["Statistic", "Value"], rows, alignments=["l", "r"])
    if not title:
        return table
    return f"{title}\n{'─' * len(title)}\n{table}"


def format_clock_info(info: dict[str, Any]) -> str:
    """Format the output of :func:`microbench.clock.clock_info`."""
    rows = [
        ["Clock", str(info["name"])],
        ["Frequency", f"{info['frequency_hz']:.0f} Hz"],
        ["Tick", format_time(info["resolution_s"])],
        ["Implementation", str(info["implementation"])],
        ["OS resolution", format_time(info["os_resolution_s"])],
        ["Monotonic", "yes" if info["monotonic"] else "no"],
    ]
    return format_table(["Property", "Value"], rows)
