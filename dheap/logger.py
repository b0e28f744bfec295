import logging
import sys


LOGGER_LEVEL = {
    0: logging.WARNING,
    1: logging.INFO,
    2: logging.DEBUG,
}

LOG_FORMAT = '%(levelname)-8s %(asctime)-12s %(message)s'

logger = logging.getLogger("dheap")
logger.addHandler(logging.NullHandler())

stream_handler = logging.StreamHandler(sys.stdout)
stream_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S'))


def set_verbosity(verbosity: int) -> None:
    """
    Route package log records to stdout at the given verbosity.

    Parameters
    ----------
    verbosity : int
        0 shows WARNING and above, 1 adds INFO and 2 adds DEBUG records.
    """
    if verbosity not in LOGGER_LEVEL:
        raise ValueError(
            f"verbosity must be one of {sorted(LOGGER_LEVEL)}, got {verbosity}"
        )

    if stream_handler not in logger.handlers:
        logger.addHandler(stream_handler)
    logger.setLevel(LOGGER_LEVEL[verbosity])
