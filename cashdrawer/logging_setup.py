"""Logging configuration for the cashdrawer CLI."""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Attach a rich handler to the package logger.

    Safe to call more than once; the handler is only added the first time.

    Args:
        verbose: Log each settlement step (DEBUG) instead of INFO and above.

    Returns:
        The "cashdrawer" logger.
    """
    logger = logging.getLogger("cashdrawer")
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=Console(stderr=True), show_path=False, show_time=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    return logger
