"""
Logging configuration for the jwt-codec command line.

Provides a console handler (WARNING by default, DEBUG when verbose) and an
optional file handler that always records DEBUG.
"""

from __future__ import annotations

import logging
import os
import sys

from .config import PROJECT_ROOT


def setup_logging(verbose: bool = False, log_file: str = "") -> str | None:
    """Configure the root logger.

    - Console handler: WARNING+ by default.  When *verbose* is True the
      console level drops to DEBUG so codec pipeline detail is printed too.
    - File handler: only when *log_file* is set; always DEBUG.  Relative
      paths are resolved against the project root.

    Returns the path to the log file, or None when logging to console only.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers (e.g. from basicConfig)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console_fmt = logging.Formatter(
        "%(levelname)-8s  %(message)s" if not verbose
        else "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        datefmt="%H:%M:%S",
    )
    console_handler.setFormatter(console_fmt)
    root_logger.addHandler(console_handler)

    if not log_file:
        return None

    log_path = log_file if os.path.isabs(log_file) else os.path.join(PROJECT_ROOT, log_file)
    log_dir = os.path.dirname(log_path)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    root_logger.addHandler(file_handler)

    return log_path
