"""Shared logger for the arithmetic evaluator."""
import logging
import sys

LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger: logging.Logger = logging.getLogger("arithmetic_evaluator")

if not logger.handlers:
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)
    logger.setLevel(logging.INFO)


def set_verbose(verbose: bool) -> None:
    """
    Switch the shared logger between INFO and DEBUG.

    :param bool verbose: True to enable DEBUG messages
    """
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
