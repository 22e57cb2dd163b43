import logging
import sys
from typing import Optional, TextIO

PACKAGE_LOGGER = "checkfields"
LOG_FORMAT = "%(name)s - %(levelname)s - %(message)s"


def configure_cli_logging(verbose: bool = False, stream: Optional[TextIO] = None) -> logging.Logger:
    """Send ``checkfields.*`` records to stderr.

    stdout is left to the verdict and the JSON error record, so ``--verbose``
    output never ends up inside ``checkfields check ... > record.json``.
    Calling it again replaces the previous handler.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream=stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
    return logger
