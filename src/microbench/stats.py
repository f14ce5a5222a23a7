"""Statistics engine for benchmark samples.

Turns raw elapsed-time samples (clock ticks) into a
:class:`~microbench.results.BenchmarkResult`:

1. sort the samples ascending;
2. optionally drop outliers with Tukey's fences;
3. compute quartiles, mean and population standard deviation;
4. scale everything from ticks to seconds.

Quartiles use a weighted-interpolation method with a fixed case split
on the sample count (see :func:`quartiles`).  It differs from the linear
interpolation of ``numpy.percentile`` and from ``statistics.quantiles``;
both would produce different numbers for most sample sizes.

References:
    Tukey's fences: Tukey, J. W. (1977). "Exploratory Data Analysis."
        Addison-Wesley.
"""

from __future__ import annotations

import statistics
from typing import Sequence

from microbench.errors import AllSamplesFilteredError, EmptySampleError
from microbench.logging import get_logger
from microbench.results import BenchmarkResult

log = get_logger("stats")


# ---------------------------------------------------------------------------
# Quartiles
# ---------------------------------------------------------------------------


def quartiles(sorted_samples: Sequence[float]) -> tuple[float, float, float]:
    """Compute (Q1, Q2, Q3) of an ascending sequence.

    Even sizes split into two halves and take the median of each half.
    Odd sizes larger than one interpolate between neighbours with 1/4
    and 3/4 weights, depending on whether the size is of the form
    ``4p + 1`` or ``4p + 3``.

    Args:
        sorted_samples: Values sorted in ascending order.

    Returns:
        The three quartiles; Q2 is the median.

    Raises:
        EmptySampleError: If *sorted_samples* is empty.
    """
    n = len(sorted_samples)
    if n == 0:
        raise EmptySampleError("Cannot compute quartiles of an empty sample.")

    s = sorted_samples
    if n == 1:
        return s[0], s[0], s[0]

    mid = n // 2

    if n % 2 == 0:
        q2 = (s[mid - 1] + s[mid]) / 2
        mid_mid = mid // 2
        if mid % 2 == 0:
            q1 = (s[mid_mid - 1] + s[mid_mid]) / 2
            q3 = (s[mid + mid_mid - 1] + s[mid + mid_mid]) / 2
        else:
            q1 = s[mid_mid]
            q3 = s[mid_mid + mid]
        return q1, q2, q3

    q2 = s[mid]
    if (n - 1) % 4 == 0:
        p = (n - 1) // 4
        q1 = 0.25 * s[p - 1] + 0.75 * s[p]
        q3 = 0.75 * s[3 * p] + 0.25 * s[3 * p + 1]
    else:
        # Every odd n > 1 not of the form 4p + 1 is 4p + 3.
        p = (n - 3) // 4
        q1 = 0.75 * s[p] + 0.25 * s[p + 1]
        q3 = 0.25 * s[3 * p + 1] + 0.75 * s[3 * p + 2]
    return q1, q2, q3


# ---------------------------------------------------------------------------
# Outlier filtering
# ---------------------------------------------------------------------------


def tukey_fences(sorted_samples: Sequence[float], k: float = 1.5) -> list[float]:
    """Drop values outside Tukey's fences.

    A value is kept if it lies in ``[Q1 - k*IQR, Q3 + k*IQR]`` (both ends
    inclusive), where the quartiles come from :func:`quartiles` over the
    full input.  Order is preserved.

    Args:
        sorted_samples: Values sorted in ascending order.
        k: Fence coefficient.  1.5 marks "mild" outliers, 3.0 "extreme"
            ones; larger values filter less.

    Returns:
        The kept values, never longer than the input.
    """
    if not sorted_samples:
        return []

    q1, _, q3 = quartiles(sorted_samples)
    iqr = q3 - q1
    # inf * 0 is NaN; a zero-width box keeps its fences at Q1 and Q3.
    margin = k * iqr if iqr else 0.0
    lower = q1 - margin
    upper = q3 + margin

    return [v for v in sorted_samples if lower <= v <= upper]


# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------


def summarize(
    samples: Sequence[float],
    resolution: float,
    *,
    filter_outliers: bool = True,
    k: float = 1.5,
) -> BenchmarkResult:
    """Summarize raw samples into a BenchmarkResult.

    Args:
        samples: Elapsed times in clock ticks, in any order.
        resolution: Seconds per tick, used to scale every statistic.
        filter_outliers: Apply :func:`tukey_fences` before summarizing.
        k: Fence coefficient passed to :func:`tukey_fences`.

    Raises:
        EmptySampleError: If *samples* is empty.
        AllSamplesFilteredError: If outlier filtering removes every sample.
    """
    if not samples:
        raise EmptySampleError("No samples to summarize.")

    sorted_v = sorted(samples)

    if filter_outliers:
        kept = tukey_fences(sorted_v, k)
        if not kept:
            raise AllSamplesFilteredError(
                f"Outlier filtering with k={k} removed all {len(sorted_v)} samples."
            )
        if len(kept) < len(sorted_v):
            log.debug(
                "Tukey's fences (k=%s) removed %d of %d samples",
                k,
                len(sorted_v) - len(kept),
                len(sorted_v),
            )
    else:
        kept = sorted_v

    q1, q2, q3 = quartiles(kept)
    mean = statistics.fmean(kept)
    std_dev = statistics.pstdev(kept, mean)

    return BenchmarkResult(
        q1=q1 * resolution,
        q2=q2 * resolution,
        q3=q3 * resolution,
        mean=mean * resolution,
        std_dev=std_dev * resolution,
        resolution=resolution,
    )
