"""Loggers for microbench.

Library modules log through ``get_logger(<module>)``, which hangs them
under the ``microbench`` namespace (``microbench.runner``,
``microbench.stats``, ...).  Nothing is attached to that namespace until
:func:`setup_logging` is called, so importing the library stays silent;
the ``microbench`` CLI calls it once per command.

Records of interest:

- ``microbench.runner``: iteration counts per run and config warnings.
- ``microbench.stats``: how many samples the fences removed.
- ``microbench.cli``: the final result of ``microbench run``.
"""

from __future__ import annotations

import logging
from pathlib import Path

ROOT = "microbench"

_FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
_CONSOLE_FORMAT = "%(levelname)-8s %(message)s"
_VERBOSE_CONSOLE_FORMAT = "%(levelname)-8s %(name)s: %(message)s"


def _console_level(verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def setup_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_file: Path | None = None,
) -> logging.Logger:
    """Attach handlers to the ``microbench`` logger and return it.

    Calling it again replaces the handlers from the previous call.  In
    verbose mode the console lines also show which module logged them,
    since runner and stats debug output interleave.

    Args:
        verbose: Show DEBUG records on the console.  Wins over *quiet*.
        quiet: Show only warnings and errors on the console.
        log_file: Also write every record, DEBUG included, to this file.
    """
    root = logging.getLogger(ROOT)
    root.setLevel(logging.DEBUG)
    for old in list(root.handlers):
        root.removeHandler(old)
        old.close()

    console = logging.StreamHandler()
    console.setLevel(_console_level(verbose, quiet))
    console.setFormatter(
        logging.Formatter(_VERBOSE_CONSOLE_FORMAT if verbose else _CONSOLE_FORMAT)
    )
    root.addHandler(console)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        root.addHandler(file_handler)

    return root


def get_logger(module: str) -> logging.Logger:
    """Return the ``microbench.<module>`` logger."""
    return logging.getLogger(f"{ROOT}.{module}")
