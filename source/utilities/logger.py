"""Provides a class for creating and configuring seeder loggers."""

import os
import logging

from dotenv import load_dotenv

# Load environment before any logger reads LOG_LEVEL
load_dotenv(".env")


class Logger:
    """
    Class for creating named loggers with the seeder's console configuration.
    """

    @staticmethod
    def get_logger(name: str, level=None) -> logging.Logger:
        """Creates and returns a logger with the given name and logging level."""
        if level is None:
            level = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").upper())
            if not isinstance(level, int):
                level = logging.INFO

        logger = logging.getLogger(name)
        logger.setLevel(level)

        if not logger.handlers:
            # Handler (console)
            console_handler = logging.StreamHandler()
            console_handler.setLevel(level)

            # Formatter
            formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            )
            console_handler.setFormatter(formatter)

            # Add handler
            logger.addHandler(console_handler)

        return logger
