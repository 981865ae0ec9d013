"""
Logging for Cohesion Peek.

Terminal output goes through rich on stderr so it never mixes with the
summary table printed on stdout. An optional log file records the same
events with the thread name, since metric reports may run on a worker pool.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "cohesion_peek"

LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}

FILE_FORMAT = "%(asctime)s %(levelname)-7s [%(threadName)s] %(name)s: %(message)s"


def setup_logging(
    verbosity: str = "normal", log_file: Optional[Union[str, Path]] = None
) -> logging.Logger:
    """
    Route ``cohesion_peek`` logs to the terminal and, optionally, a file.

    Args:
        verbosity: One of ``quiet``, ``normal`` or ``verbose``, as in
            ``AnalysisConfig.verbosity``
        log_file: Append every record (always at DEBUG) to this file

    Returns:
        The ``cohesion_peek`` logger
    """
    level = LEVELS[verbosity]
    verbose = verbosity == "verbose"

    terminal = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        markup=False,
        show_time=verbose,
        show_path=verbose,
    )
    terminal.setLevel(level)
    terminal.setFormatter(logging.Formatter("%(message)s"))
    handlers: list[logging.Handler] = [terminal]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        handlers.append(file_handler)

    logging.basicConfig(level=logging.WARNING, handlers=handlers, force=True)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(logging.DEBUG if log_file else level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """``get_logger(__name__)`` inside the package; bare names are prefixed."""
    if name is None:
        return logging.getLogger(ROOT_LOGGER)
    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
