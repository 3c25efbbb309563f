#!/usr/bin/env python3
"""
Logging configuration for strtab.

Maps the CLI verbosity flags (--quiet, --verbose, --debug) to a log level
and installs a stderr handler, plus an optional log file.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

DEFAULT_FORMAT = "%(levelname)s: %(message)s"
DEBUG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: int = logging.WARNING, log_file: Optional[Path] = None) -> None:
    """
    Configure the root logger.

    Subsequent calls replace the handlers installed by earlier ones.

    Args:
        level: The logging level (e.g., logging.DEBUG, logging.INFO)
        log_file: Optional path to a log file; its directory is created if missing
    """
    format_str = DEBUG_FORMAT if level <= logging.DEBUG else DEFAULT_FORMAT

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(format_str))
    root_logger.addHandler(console_handler)

    if log_file is not None:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(logging.Formatter(DEBUG_FORMAT))
            root_logger.addHandler(file_handler)
        except OSError as e:
            logging.getLogger(__name__).warning("Could not set up file logging to %s: %s", log_file, e)

    logging.getLogger("strtab").setLevel(level)


def get_log_level_from_flags(quiet: bool = False, verbose: bool = False, debug: bool = False) -> int:
    """
    Determine the log level from CLI flags.

    --debug wins over --quiet, which wins over --verbose; default is WARNING.
    """
    if debug:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.INFO
    return logging.WARNING


def setup_logging(
    verbose: bool = False,
    debug: bool = False,
    quiet: bool = False,
    log_file: Optional[Path] = None,
) -> None:
    """Configure logging from CLI verbosity flags."""
    level = get_log_level_from_flags(quiet=quiet, verbose=verbose, debug=debug)
    configure_logging(level=level, log_file=log_file)
