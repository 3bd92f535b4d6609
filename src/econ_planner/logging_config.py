"""
Logging configuration for the planner entry points (API server, dashboard).

The library modules only create module-level loggers; handlers are
attached here, once, by whichever entry point runs.
"""

import logging
import sys


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name for terminal readability"""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",
    }

    def format(self, record):
        level_color = self.COLORS.get(record.levelname, self.COLORS["RESET"])
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{level_color}{record.levelname}{self.COLORS['RESET']}"
        return super().format(record)


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Attach a colored console handler to the ``econ_planner`` logger.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR)

    Returns:
        The configured package logger
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("econ_planner")
    logger.setLevel(numeric_level)
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(
        ColoredFormatter(
            "%(asctime)s | %(levelname)s | %(name)s:%(lineno)d | %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    logger.addHandler(console_handler)

    return logger
