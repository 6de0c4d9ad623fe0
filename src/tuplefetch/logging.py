import sys

from loguru import logger

__all__ = ["configure_logging"]

# Records land on stderr next to CLI output, so keep them short
LOG_FORMAT = "<level>{level: <8}</level> <dim>{name}</dim> {message}"
DEBUG_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> <level>{level: <8}</level> "
    "<cyan>{name}:{line}</cyan> {message}"
)


def configure_logging(level: str = "INFO") -> None:
    """
    Send tuplefetch logs to stderr at the given level.

    The library never calls this on import. The CLI calls it once per run.
    At DEBUG and below the format adds a timestamp and source line.

    Args:
        level: Logging level name (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """
    level = level.upper()
    verbose = logger.level(level).no <= logger.level("DEBUG").no
    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format=DEBUG_FORMAT if verbose else LOG_FORMAT,
        backtrace=False,
        diagnose=False,
    )
