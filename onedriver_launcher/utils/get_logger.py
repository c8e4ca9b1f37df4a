import logging

from . import configure_logging as _logging_setup


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Ensures logging is configured (lazy init if needed, though explicit config preferred at app entry).
    """
    if not _logging_setup.is_configured():
        _logging_setup.configure_logging()

    return logging.getLogger(f"onedriver_launcher.{name}")
