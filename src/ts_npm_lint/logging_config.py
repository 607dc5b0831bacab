"""
Logging for ts-npm-lint.

Hints are the tool's output and go to stdout; log records are diagnostics
(which files were read, which outDir was picked, what was rewritten) and go
to stderr, so piping the hints somewhere never picks up log noise.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "ts_npm_lint"


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Install a stderr RichHandler and return the package logger.

    Level is WARNING by default, DEBUG with ``verbose`` and ERROR with
    ``quiet``. Time and source columns are only shown when debugging.
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        markup=False,
        show_time=verbose,
        show_path=verbose,
    )
    logging.basicConfig(level=level, format="%(message)s", datefmt="[%X]", handlers=[handler])

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under the ``ts_npm_lint`` namespace; ``get_logger(__name__)`` in modules."""
    if name is None:
        return logging.getLogger(ROOT_LOGGER)
    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
