"""
logging_config.py — log setup for the lens calculator CLI

WHAT THIS MODULE DOES
---------------------
setup_logging() attaches handlers to the "lenscalc" logger only; library
modules just call logging.getLogger(__name__) and inherit from it.
  • console output goes to stderr, stdout is reserved for the chart sheet
    or the --json payload
  • --log_file adds a second handler writing the same records to disk

© 2025 LensCalc Pro — Optical Parameter & Contrast Chart Calculator
"""
import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None) -> logging.Logger:
    """
    Route "lenscalc" log records to stderr (and optionally a file).

    Calling it again replaces the previous handlers, so main() can run
    several times in one process (as the tests do).

    Parameters
    ----------
    level : int
        Threshold for the logger and its handlers, e.g. logging.INFO.
    log_file : str | None
        Also write records here (overwritten on each run).

    Returns
    -------
    logger : logging.Logger
    """
    logger = logging.getLogger("lenscalc")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S")
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging to stderr%s", f" and {log_file}" if log_file else "")
    return logger
