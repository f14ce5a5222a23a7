"""Exception hierarchy for microbench.

Configuration problems are detected before the benchmarked action runs
and are raised as subclasses of :class:`InvalidConfigError`.  Errors
raised by the benchmarked action or its hooks are never wrapped.
"""

from __future__ import annotations


class BenchmarkError(Exception):
    """Base class for all errors raised by microbench itself."""


class ActionRequiredError(BenchmarkError, TypeError):
    """No callable was given as the action to benchmark."""


class InvalidConfigError(BenchmarkError, ValueError):
    """A benchmark parameter is out of range.

    ``field`` names the offending :class:`~microbench.config.BenchConfig`
    attribute (or ``"measured"`` for the iterations/skip combination).
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class InvalidIterationCountError(InvalidConfigError):
    """The total iteration count is negative."""


class InvalidSkipCountError(InvalidConfigError):
    """The warm-up (skip) count is negative."""


class InsufficientIterationsError(InvalidConfigError):
    """The iteration count leaves no measured iterations after warm-up."""


class EmptySampleError(BenchmarkError, ValueError):
    """Statistics were requested for an empty sample set."""


class AllSamplesFilteredError(EmptySampleError):
    """Outlier filtering discarded every sample."""
