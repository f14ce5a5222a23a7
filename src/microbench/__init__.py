"""microbench: an in-process micro-benchmarking helper.

Runs a zero-argument callable repeatedly, times each call with a
high-resolution clock, optionally drops outliers with Tukey's fences and
summarizes the samples as quartiles, mean and standard deviation.
"""

from microbench.clock import PERF_COUNTER, Clock
from microbench.config import BenchConfig
from microbench.errors import (
    ActionRequiredError,
    AllSamplesFilteredError,
    BenchmarkError,
    EmptySampleError,
    InsufficientIterationsError,
    InvalidConfigError,
    InvalidIterationCountError,
    InvalidSkipCountError,
)
from microbench.results import BenchmarkResult
from microbench.runner import collect_samples, run, run_config
from microbench.stats import quartiles, summarize, tukey_fences

__version__ = "0.1.0"

__all__ = [
    "PERF_COUNTER",
    "ActionRequiredError",
    "AllSamplesFilteredError",
    "BenchConfig",
    "BenchmarkError",
    "BenchmarkResult",
    "Clock",
    "EmptySampleError",
    "InsufficientIterationsError",
    "InvalidConfigError",
    "InvalidIterationCountError",
    "InvalidSkipCountError",
    "__version__",
    "collect_samples",
    "quartiles",
    "run",
    "run_config",
    "summarize",
    "tukey_fences",
]
