"""Benchmark configuration and profile loading.

Handles:
- The :class:`BenchConfig` parameters of one benchmark invocation.
- Validating a configuration before anything is executed.
- Loading YAML profiles and merging them with CLI overrides.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

# Below this many measured samples the quartiles, and therefore the
# fences, are built from one or two values.
_MIN_SAMPLES_FOR_FILTERING = 4


# ---------------------------------------------------------------------------
# BenchConfig
# ---------------------------------------------------------------------------


@dataclass
class BenchConfig:
    """Parameters of one benchmark invocation."""

    iterations: int = 100  # Total iterations, warm-up included
    skip: int = 5  # Leading warm-up iterations that are not timed
    filter_outliers: bool = True
    k: float = 1.5  # Tukey fence coefficient
    gc_collect: bool = True  # Force a collection before every iteration

    @property
    def measured(self) -> int:
        """Number of timed iterations."""
        return self.iterations - self.skip


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


@dataclass
class ValidationError:
    """A single configuration validation error."""

    field: str
    message: str
    severity: str = "error"  # "error" or "warning"


def validate_config(config: BenchConfig) -> list[ValidationError]:
    """Validate a benchmark configuration.

    Returns a list of validation errors.  Empty list means valid.
    """
    errors: list[ValidationError] = []

    if config.iterations < 0:
        errors.append(
            ValidationError(
                field="iterations",
                message=f"Iteration count cannot be negative (got {config.iterations}).",
            )
        )

    if config.skip < 0:
        errors.append(
            ValidationError(
                field="skip",
                message=f"Skip count cannot be negative (got {config.skip}).",
            )
        )

    if config.measured <= 0:
        errors.append(
            ValidationError(
                field="measured",
                message=(
                    f"Iteration count {config.iterations} must exceed "
                    f"skip count {config.skip}; no iterations would be measured."
                ),
            )
        )

    if math.isnan(config.k):
        errors.append(
            ValidationError(
                field="k",
                message="Fence coefficient k must be a number (got NaN).",
            )
        )
    elif config.filter_outliers and config.k < 0:
        errors.append(
            ValidationError(
                field="k",
                message=(
                    f"Negative fence coefficient (k={config.k}) discards values "
                    f"inside the interquartile range."
                ),
                severity="warning",
            )
        )

    if config.filter_outliers and 0 < config.measured < _MIN_SAMPLES_FOR_FILTERING:
        errors.append(
            ValidationError(
                field="filter_outliers",
                message=(
                    f"Only {config.measured} measured iterations; "
                    f"outlier fences will be unreliable."
                ),
                severity="warning",
            )
        )

    return errors


# ---------------------------------------------------------------------------
# YAML profile loading
# ---------------------------------------------------------------------------


def load_profile(profile_path: Path) -> dict[str, Any]:
    """Load a benchmark profile from a YAML file.

    Profile format::

        iterations: 200
        skip: 10
        filter_outliers: true
        k: 3.0
        gc_collect: false

    Returns:
        The parsed YAML as a dict.
    """
    if not profile_path.exists():
        raise FileNotFoundError(f"Profile not found: {profile_path}")

    text = profile_path.read_text()
    data = yaml.safe_load(text)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Profile must be a YAML mapping, got {type(data).__name__}")

    return data


_PROFILE_KEYS = {"iterations", "skip", "filter_outliers", "k", "gc_collect"}


def config_from_profile(
    profile_data: dict[str, Any],
    *,
    cli_overrides: dict[str, Any] | None = None,
) -> BenchConfig:
    """Build a BenchConfig from a parsed YAML profile.

    CLI overrides take precedence over profile values, which take
    precedence over the BenchConfig defaults.  Override values of None
    mean "not given on the command line".

    Raises:
        ValueError: On unknown profile keys or values of the wrong type.
    """
    cli = {k: v for k, v in (cli_overrides or {}).items() if v is not None}

    unknown = sorted(set(profile_data) - _PROFILE_KEYS)
    if unknown:
        raise ValueError(
            f"Unknown profile key(s): {', '.join(unknown)}. "
            f"Valid keys: {', '.join(sorted(_PROFILE_KEYS))}"
        )

    merged = {**profile_data, **cli}
    config = BenchConfig()

    for key in ("iterations", "skip"):
        if key in merged:
            value = merged[key]
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"'{key}' must be an integer, got {value!r}")
            setattr(config, key, value)

    if "k" in merged:
        value = merged["k"]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"'k' must be a number, got {value!r}")
        config.k = float(value)

    for key in ("filter_outliers", "gc_collect"):
        if key in merged:
            value = merged[key]
            if not isinstance(value, bool):
                raise ValueError(f"'{key}' must be true or false, got {value!r}")
            setattr(config, key, value)

    return config
