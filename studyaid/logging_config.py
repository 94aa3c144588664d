"""Logging configuration for the command-line front end."""
import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "WARNING") -> None:
    """
    Configure the root logger with a single formatted stream handler.

    Handlers from an earlier call are replaced, not stacked.
    """
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, force=True)
    logging.getLogger(__name__).debug(f"Logging configured at {level.upper()}")
