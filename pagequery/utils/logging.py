"""
Logging setup for pagequery.

Everything logs below the "pagequery" logger. The console level, the file
level and an optional log file come from the `logging.*` configuration keys.
"""

import logging
import os
import sys
import time
from contextlib import contextmanager
from typing import Dict, Iterator, Optional

ROOT_LOGGER_NAME = "pagequery"

LOG_LEVELS: Dict[str, int] = {
    name: getattr(logging, name) for name in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
}

CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s"


def level_of(name: Optional[str], default: int) -> int:
    """
    Map a level name from the configuration to a logging level.

    Args:
        name: Level name in any case, e.g. "warning"
        default: Level used when the name is empty or unknown

    Returns:
        int: The logging level
    """
    if not name:
        return default
    return LOG_LEVELS.get(str(name).upper(), default)


class LogFormatter(logging.Formatter):
    """Formatter that colours the level name for terminals."""

    RESET = '\033[0m'

    LEVEL_COLORS = {
        'DEBUG': '\033[34m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[1m\033[31m'
    }

    def __init__(self, colored: bool = True, *args, **kwargs):
        """
        Initialize formatter.

        Args:
            colored: Whether to colour the level name; never on Windows
            *args: Passed on to logging.Formatter
            **kwargs: Passed on to logging.Formatter
        """
        super().__init__(*args, **kwargs)
        self.colored = colored and sys.platform != 'win32'

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = self.LEVEL_COLORS.get(record.levelname) if self.colored else None
        if color:
            message = message.replace(record.levelname, f"{color}{record.levelname}{self.RESET}", 1)
        return message


def setup_logging(log_file: Optional[str] = None,
                  console_level: str = "WARNING",
                  file_level: str = "DEBUG",
                  component: Optional[str] = None) -> logging.Logger:
    """
    Attach console and file handlers to a pagequery logger.

    A logger that already has handlers is returned unchanged, so importing
    the package twice does not duplicate output.

    Args:
        log_file: Path of a log file, or None to log to the console only
        console_level: Level name for the console handler
        file_level: Level name for the file handler
        component: Child logger name below "pagequery"

    Returns:
        logging.Logger: The configured logger
    """
    name = f"{ROOT_LOGGER_NAME}.{component}" if component else ROOT_LOGGER_NAME
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    console = level_of(console_level, logging.WARNING)
    to_file = level_of(file_level, logging.DEBUG)
    logger.setLevel(min(console, to_file) if log_file else console)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console)
    console_handler.setFormatter(LogFormatter(colored=True, fmt=CONSOLE_FORMAT, datefmt='%H:%M:%S'))
    logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(to_file)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(file_handler)

    return logger


def setup_logging_from_config(config) -> logging.Logger:
    """Configure the package logger from the `logging.*` configuration keys."""
    return setup_logging(log_file=config.get("logging.file"),
                         console_level=config.get("logging.console_level", "WARNING"),
                         file_level=config.get("logging.file_level", "DEBUG"))


def log_exception(logger: logging.Logger, exception: Exception,
                  message: str = "An exception occurred") -> None:
    """
    Log an exception with its traceback at error level.

    Args:
        logger: Logger to use
        exception: The exception, usually about to be re-raised
        message: Prefix for the log line
    """
    logger.error(f"{message}: {exception}",
                 exc_info=(type(exception), exception, exception.__traceback__))


class PerformanceLogger:
    """Times named operations and logs how long they took."""

    def __init__(self, logger: logging.Logger, component: str):
        """
        Initialize performance logger.

        Args:
            logger: Logger the timings are written to
            component: Prefix for every timing line, e.g. "html"
        """
        self.logger = logger
        self.component = component
        self.start_times: Dict[str, float] = {}

    def start(self, name: str) -> None:
        self.start_times[name] = time.perf_counter()

    def end(self, name: str, level: str = "DEBUG") -> float:
        """
        Stop timing an operation and log the duration.

        Args:
            name: Operation name passed to `start`
            level: Level name for the timing line

        Returns:
            float: Duration in seconds, 0.0 if the operation was never started
        """
        started = self.start_times.pop(name, None)
        if started is None:
            self.logger.warning(f"No start time found for {name}")
            return 0.0

        duration = time.perf_counter() - started
        self.logger.log(level_of(level, logging.DEBUG),
                        f"{self.component} {name} took {duration:.4f} seconds")
        return duration

    @contextmanager
    def measure(self, name: str, level: str = "DEBUG") -> Iterator[None]:
        """Time the body of a `with` block; failures are not timed."""
        self.start(name)
        try:
            yield
        except BaseException:
            self.start_times.pop(name, None)
            raise
        self.end(name, level)
