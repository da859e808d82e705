import logging
import sys

from src.configuration.config import Config

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


class Logger:
    """Thin wrapper around the standard logging module."""

    _configured = False

    @staticmethod
    def configure_logger(config: Config) -> None:
        """Configure the root logger with a console handler at the configured level."""
        root = logging.getLogger()
        level = logging.getLevelName(config.log_level.upper())
        if not isinstance(level, int):
            level = logging.INFO
        root.setLevel(level)

        if not Logger._configured:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            root.addHandler(handler)
            Logger._configured = True

    @staticmethod
    def get_logger(name: str) -> logging.Logger:
        return logging.getLogger(name)
