"""
Logging infrastructure.

The API entry point and the operator scripts all log through the root
logger with one shared format.
"""
import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    """
    Configure root logging for a process entry point.

    Does nothing if the root logger already has handlers.

    Args:
        level: Root log level
    """
    logging.basicConfig(level=level, format=LOG_FORMAT)
