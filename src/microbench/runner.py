"""Benchmark driver.

Runs an action a fixed number of times, discarding the timings of the
first few (warm-up) iterations, and hands the remaining samples to the
statistics engine.

Everything runs synchronously on the caller's thread.  Each call owns
its own sample list; the only shared state is the read-only default
clock.
"""

from __future__ import annotations

import gc
from typing import Callable

from microbench.clock import PERF_COUNTER, Clock
from microbench.config import BenchConfig, validate_config
from microbench.errors import (
    ActionRequiredError,
    InsufficientIterationsError,
    InvalidConfigError,
    InvalidIterationCountError,
    InvalidSkipCountError,
)
from microbench.logging import get_logger
from microbench.results import BenchmarkResult
from microbench.stats import summarize

log = get_logger("runner")

Action = Callable[[], object]

_ERRORS_BY_FIELD: dict[str, type[InvalidConfigError]] = {
    "iterations": InvalidIterationCountError,
    "skip": InvalidSkipCountError,
    "measured": InsufficientIterationsError,
}


def _noop() -> None:
    pass


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def check_config(config: BenchConfig) -> None:
    """Raise for the first error in *config*; log any warnings.

    Raises:
        InvalidIterationCountError: ``iterations`` is negative.
        InvalidSkipCountError: ``skip`` is negative.
        InsufficientIterationsError: ``iterations <= skip``.
        InvalidConfigError: Any other invalid field.
    """
    problems = validate_config(config)
    for w in problems:
        if w.severity == "warning":
            log.warning("Config warning: %s: %s", w.field, w.message)

    errors = [e for e in problems if e.severity == "error"]
    if errors:
        first = errors[0]
        exc_type = _ERRORS_BY_FIELD.get(first.field, InvalidConfigError)
        raise exc_type(first.field, first.message)


# ---------------------------------------------------------------------------
# Measurement loop
# ---------------------------------------------------------------------------


def collect_samples(
    action: Action,
    config: BenchConfig,
    *,
    before_action: Action | None = _noop,
    after_action: Action | None = _noop,
    clock: Clock = PERF_COUNTER,
) -> list[int]:
    """Run the warm-up and measurement loop and return raw tick samples.

    For every one of ``config.iterations`` iterations: call
    *before_action*, optionally force a garbage collection, call
    *action* (timed only once the first ``config.skip`` iterations have
    passed), then call *after_action*.  Exceptions from any of the
    callables propagate unchanged.

    Returns:
        ``config.measured`` tick differences, in iteration order.
    """
    if action is None or not callable(action):
        raise ActionRequiredError("An action to benchmark is required.")
    check_config(config)

    before = before_action or _noop
    after = after_action or _noop
    read = clock.read
    collect = gc.collect if config.gc_collect else _noop

    log.debug(
        "Running %d iterations (%d warm-up, %d measured) on %s",
        config.iterations,
        config.skip,
        config.measured,
        clock.name,
    )

    samples: list[int] = []
    for i in range(config.iterations):
        before()
        collect()
        if i >= config.skip:
            start = read()
            action()
            end = read()
            samples.append(end - start)
        else:
            action()
        after()

    log.debug("Collected %d samples", len(samples))
    return samples


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------


def run_config(
    action: Action,
    config: BenchConfig,
    *,
    before_action: Action | None = _noop,
    after_action: Action | None = _noop,
    clock: Clock = PERF_COUNTER,
) -> BenchmarkResult:
    """Benchmark *action* with the parameters in *config*."""
    samples = collect_samples(
        action,
        config,
        before_action=before_action,
        after_action=after_action,
        clock=clock,
    )
    return summarize(
        samples,
        clock.resolution,
        filter_outliers=config.filter_outliers,
        k=config.k,
    )


def run(
    action: Action,
    before_action: Action | None = _noop,
    after_action: Action | None = _noop,
    n: int = 100,
    n_skip: int = 5,
    filter_outliers: bool = True,
    k: float = 1.5,
    *,
    clock: Clock = PERF_COUNTER,
    gc_collect: bool = True,
) -> BenchmarkResult:
    """Benchmark a zero-argument callable.

    Args:
        action: The callable to time.
        before_action: Called before every iteration, untimed.
        after_action: Called after every iteration, untimed.
        n: Total number of iterations, warm-up included.
        n_skip: Leading iterations whose timings are discarded, so that
            one-time costs (imports, caches, specialization) do not
            skew the result.
        filter_outliers: Drop samples outside Tukey's fences.
        k: Fence coefficient; larger values filter less.
        clock: Tick source; defaults to ``time.perf_counter_ns``.
        gc_collect: Force a garbage collection before every iteration.

    Returns:
        The summarized result, in seconds.

    Raises:
        ActionRequiredError: *action* is missing or not callable.
        InvalidConfigError: *n* or *n_skip* is out of range.
        AllSamplesFilteredError: Outlier filtering removed every sample.
    """
    config = BenchConfig(
        iterations=n,
        skip=n_skip,
        filter_outliers=filter_outliers,
        k=k,
        gc_collect=gc_collect,
    )
    return run_config(
        action,
        config,
        before_action=before_action,
        after_action=after_action,
        clock=clock,
    )
