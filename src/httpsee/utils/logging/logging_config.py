"""
Centralized logging configuration for suppressing verbose third-party logs.
"""

import logging
import warnings

from rich.logging import RichHandler

NOISY_LIBRARIES = [
    "httpx",
    "httpcore",
    "hpack",
    "h2",
    "asyncio",
    "urllib3",
    "prompt_toolkit",
]


class NullHandler(logging.Handler):
    """Handler that discards all log records."""

    def emit(self, record):
        pass


def setup_logging(verbose: bool = False) -> None:
    """
    Configure logging for the interactive session.

    Args:
        verbose: If True, show debug output from httpsee and the transport
            libraries. If False, only warnings from httpsee are shown.
    """
    if not verbose:
        warnings.filterwarnings("ignore", category=ResourceWarning)

    root_logger = logging.getLogger()
    root_logger.handlers = [
        RichHandler(show_time=verbose, show_path=verbose, rich_tracebacks=verbose)
    ]
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("httpsee").setLevel(logging.DEBUG if verbose else logging.WARNING)

    for logger_name in NOISY_LIBRARIES:
        logger = logging.getLogger(logger_name)
        if verbose:
            logger.setLevel(logging.DEBUG)
            logger.propagate = True
            logger.handlers = []
        else:
            logger.setLevel(logging.CRITICAL)
            logger.propagate = False
            logger.handlers = [NullHandler()]
