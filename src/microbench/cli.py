"""Command-line interface for microbench.

Subcommands:
    microbench run     Time a Python statement
    microbench clock   Show the timer used for measurements
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import click

from microbench import __version__
from microbench.clock import PERF_COUNTER, clock_info
from microbench.config import config_from_profile, load_profile
from microbench.display import format_clock_info, format_result
from microbench.errors import BenchmarkError
from microbench.logging import get_logger, setup_logging
from microbench.runner import run_config

log = get_logger("cli")


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """microbench: time small pieces of Python code in-process."""


def _compile(source: str, label: str, namespace: dict[str, Any]) -> Callable[[], None]:
    """Compile *source* into a zero-argument callable sharing *namespace*."""
    try:
        code = compile(source, f"<{label}>", "exec")
    except SyntaxError as exc:
        raise click.BadParameter(f"{exc.msg} (line {exc.lineno})", param_hint=label) from exc

    def _call() -> None:
        exec(code, namespace)  # noqa: S102

    return _call


# ---------------------------------------------------------------------------
# run
# ---------------------------------------------------------------------------


@main.command("run")
@click.argument("statement")
@click.option("-s", "--setup", default="pass", show_default=True, help="Executed once first.")
@click.option("--before", "before", default=None, help="Executed before every iteration.")
@click.option("--after", "after", default=None, help="Executed after every iteration.")
@click.option(
    "-n",
    "--iterations",
    type=int,
    default=None,
    help="Total iterations, warm-up included (default: 100).",
)
@click.option("--skip", type=int, default=None, help="Warm-up iterations (default: 5).")
@click.option(
    "--filter/--no-filter",
    "filter_outliers",
    default=None,
    help="Drop outliers with Tukey's fences (default: on).",
)
@click.option("-k", "k", type=float, default=None, help="Tukey fence coefficient (default: 1.5).")
@click.option(
    "--gc/--no-gc",
    "gc_collect",
    default=None,
    help="Force a garbage collection before each iteration (default: on).",
)
@click.option(
    "--profile",
    "profile_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML profile with benchmark settings.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "table", "json"]),
    default="text",
    show_default=True,
)
@click.option("-v", "--verbose", is_flag=True, help="Show debug output.")
@click.option("-q", "--quiet", is_flag=True, help="Only show warnings and errors.")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Also write a DEBUG log to this file.",
)
def run_cmd(  # noqa: PLR0913
    statement: str,
    setup: str,
    before: str | None,
    after: str | None,
    iterations: int | None,
    skip: int | None,
    filter_outliers: bool | None,
    k: float | None,
    gc_collect: bool | None,
    profile_path: Path | None,
    output_format: str,
    verbose: bool,
    quiet: bool,
    log_file: Path | None,
) -> None:
    """Benchmark STATEMENT and print its timing summary.

    \b
    Examples:
        microbench run "sorted(data)" -s "import random; data = random.sample(range(10**4), 10**4)"
        microbench run "d.copy()" -s "d = dict.fromkeys(range(100))" -n 1000 --skip 50 -k 3
    """
    setup_logging(verbose=verbose, quiet=quiet, log_file=log_file)

    try:
        profile = load_profile(profile_path) if profile_path else {}
        config = config_from_profile(
            profile,
            cli_overrides={
                "iterations": iterations,
                "skip": skip,
                "filter_outliers": filter_outliers,
                "k": k,
                "gc_collect": gc_collect,
            },
        )
    except (FileNotFoundError, ValueError) as exc:
        raise click.ClickException(str(exc)) from exc

    namespace: dict[str, Any] = {"__name__": "__microbench__"}
    setup_fn = _compile(setup, "setup", namespace)
    action = _compile(statement, "statement", namespace)
    before_fn = _compile(before, "before", namespace) if before else None
    after_fn = _compile(after, "after", namespace) if after else None

    setup_fn()
    try:
        result = run_config(
            action,
            config,
            before_action=before_fn,
            after_action=after_fn,
            clock=PERF_COUNTER,
        )
    except BenchmarkError as exc:
        raise click.ClickException(str(exc)) from exc

    log.debug("Result: %s", result)

    if output_format == "json":
        click.echo(json.dumps(result.to_dict(), indent=2))
    elif output_format == "table":
        click.echo(format_result(result, title=statement))
    else:
        click.echo(str(result))


# ---------------------------------------------------------------------------
# clock
# ---------------------------------------------------------------------------


@main.command("clock")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def clock_cmd(as_json: bool) -> None:
    """Show the clock used for measurements and its resolution."""
    info = clock_info(PERF_COUNTER)
    if as_json:
        click.echo(json.dumps(info, indent=2))
    else:
        click.echo(format_clock_info(info))
