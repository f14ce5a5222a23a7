"""High-resolution clocks for timing benchmark iterations.

A :class:`Clock` pairs a tick source with its tick frequency.  Samples are
collected as raw tick differences and only converted to seconds at the
end, by multiplying with :attr:`Clock.resolution`.

:data:`PERF_COUNTER` is created once at import time and never modified;
it is the default clock for :func:`microbench.run`.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Callable


# ---------------------------------------------------------------------------
# Clock
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Clock:
    """A monotonic tick source and its frequency in ticks per second."""

    name: str
    read: Callable[[], int]
    frequency: float

    def __post_init__(self) -> None:
        if not self.frequency > 0:
            raise ValueError(f"Clock frequency must be positive (got {self.frequency}).")

    @property
    def resolution(self) -> float:
        """Seconds per tick."""
        return 1.0 / self.frequency


PERF_COUNTER = Clock(
    name="perf_counter_ns",
    read=time.perf_counter_ns,
    frequency=1_000_000_000.0,
)


# ---------------------------------------------------------------------------
# Introspection
# ---------------------------------------------------------------------------


def clock_info(clock: Clock = PERF_COUNTER) -> dict[str, Any]:
    """Describe *clock* together with the interpreter's perf_counter.

    ``resolution_s`` is the tick size the benchmark reports; the
    ``implementation`` and ``os_resolution_s`` keys come from
    :func:`time.get_clock_info` and show what the operating system
    actually provides underneath.
    """
    info = time.get_clock_info("perf_counter")
    return {
        "name": clock.name,
        "frequency_hz": clock.frequency,
        "resolution_s": clock.resolution,
        "implementation": info.implementation,
        "os_resolution_s": info.resolution,
        "monotonic": info.monotonic,
        "adjustable": info.adjustable,
    }
