"""Logging setup for CLI runs.

Progress lines from the core modules (``[SKIP] vim``, ``[INSTALL] vim``)
are ordinary log records. The console handler renders them through the
shared Rich console; the optional file handler mirrors them into the run
log, which is truncated at the start of every run.
"""

import logging
from pathlib import Path

from rich.logging import RichHandler

from archsetup.utils.formatting import console

LOGGER_NAME = "archsetup"
FILE_FORMAT = "%(asctime)s %(levelname)-8s %(message)s"

# Marker attribute on handlers installed here, so reconfiguring replaces them
_HANDLER_MARK = "_archsetup_handler"


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_file: Path | None = None,
) -> logging.Logger:
    """Configure the ``archsetup`` logger for one CLI invocation.

    Args:
        verbose: Show debug records on the console.
        quiet: Show only warnings and errors on the console.
        log_file: Run log path, truncated before writing. None disables it.

    Returns:
        The configured package logger.

    Raises:
        OSError: If the log file cannot be created.
    """
    logger = logging.getLogger(LOGGER_NAME)
    reset_logging()

    if verbose:
        console_level = logging.DEBUG
    elif quiet:
        console_level = logging.WARNING
    else:
        console_level = logging.INFO

    console_handler = RichHandler(
        console=console,
        level=console_level,
        show_time=False,
        show_path=False,
        show_level=False,
        markup=False,
        rich_tracebacks=False,
    )
    setattr(console_handler, _HANDLER_MARK, True)
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        setattr(file_handler, _HANDLER_MARK, True)
        logger.addHandler(file_handler)

    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    return logger


def reset_logging() -> None:
    """Remove and close handlers installed by :func:`configure_logging`.

    The package logger propagates to the root logger again afterwards.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
