"""Package-wide logger."""
import logging

logger = logging.getLogger("gitea")
logger.addHandler(logging.NullHandler())


def enable_debug_logging(level: int = logging.DEBUG) -> logging.Handler:
    """Attach a stream handler to the package logger and return it."""
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler
