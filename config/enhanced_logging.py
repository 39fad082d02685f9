"""
Enhanced Logging Utility Module
Provides colored console logging with file path tracking, line numbers,
timestamped log files and the diagnostic side channel used by the Forms tools.
"""

import datetime
import logging
import os
import sys
import tempfile
from pathlib import Path

# ======== Color Configuration ========
COLORS = {
    # Log levels
    "DEBUG": "\033[38;5;39m",  # Blue
    "INFO": "\033[38;5;34m",  # Green
    "WARNING": "\033[38;5;214m",  # Orange
    "ERROR": "\033[38;5;196m",  # Red
    "CRITICAL": "\033[48;5;196;38;5;231m",  # White on Red
    # Components
    "TIMESTAMP": "\033[38;5;246m",  # Dark Gray
    "PATH": "\033[1;38;5;93m",  # Bold Purple
    "FILE": "\033[1;38;5;63m",  # Bold Blue
    "MSG_CONTENT": "\033[38;5;255m",  # White
    "RESET": "\033[0m",
}

DEBUG_LOGGER_NAME = "forms.debug"

_root_logger_initialized = False


def get_log_directory() -> Path:
    """
    Get the log directory from LOG_PATH or fall back to the home directory,
    then the system temp directory.
    """
    log_path = os.getenv("LOG_PATH")
    if log_path:
        return Path(log_path)

    try:
        return Path.home() / "logs" / "fastmcp"
    except RuntimeError:
        # Home directory cannot be resolved (no HOME, no passwd entry)
        return Path(tempfile.gettempdir()) / "fastmcp_logs"


class ColoredLogRecord(logging.LogRecord):
    """LogRecord carrying color codes and the package directory of its source."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.directory = os.path.basename(os.path.dirname(self.pathname))

        for color_name, color_code in COLORS.items():
            setattr(self, f"color_{color_name.lower()}", color_code)

        self.color_level = COLORS.get(self.levelname, COLORS["INFO"])


class ColoredFormatter(logging.Formatter):
    """Formatter that applies colors, stripping them when stderr is not a tty."""

    def __init__(self, fmt=None, datefmt=None, use_colors=True):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors and self._should_use_colors()

    @staticmethod
    def _should_use_colors() -> bool:
        return hasattr(sys.stderr, "isatty") and sys.stderr.isatty()

    def format(self, record):
        # Records created before the factory swap lack the color attributes
        for color_name, color_code in COLORS.items():
            attr_name = f"color_{color_name.lower()}"
            if not hasattr(record, attr_name):
                setattr(record, attr_name, color_code)
        if not hasattr(record, "color_level"):
            record.color_level = COLORS.get(record.levelname, COLORS["INFO"])
        if not hasattr(record, "directory"):
            record.directory = os.path.basename(os.path.dirname(record.pathname))

        result = super().format(record)

        if not self.use_colors:
            for color_code in COLORS.values():
                result = result.replace(color_code, "")

        return result


def setup_logger(level=None):
    """
    Set up enhanced logging with colored output and timestamped log files.
    This function configures the root logger once and returns it.

    Console output goes to stderr so the stdio transport keeps stdout clean.

    Args:
        level: Logging level or level name such as "DEBUG" (defaults to LOG_LEVEL env var or INFO)

    Returns:
        logging.Logger: The root logger instance
    """
    global _root_logger_initialized

    if _root_logger_initialized:
        return logging.getLogger()

    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO")
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logging.setLogRecordFactory(ColoredLogRecord)

    log_dir = get_log_directory()

    try:
        today = datetime.datetime.now().strftime("%Y-%m-%d")
        daily_log_dir = log_dir / today
        daily_log_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.datetime.now().strftime("%H-%M-%S")
        log_file = daily_log_dir / f"app_log_{timestamp}.log"
    except OSError as e:
        print(
            f"Warning: Cannot create log files ({e}). Using console logging only.",
            file=sys.stderr,
        )
        log_file = None

    console_format = (
        "%(color_timestamp)s%(asctime)s%(color_reset)s "
        "%(color_path)s%(directory)s/%(color_reset)s"
        "%(color_file)s%(filename)s:%(lineno)d%(color_reset)s "
        "%(color_level)s[%(levelname).1s]%(color_reset)s "
        "%(color_msg_content)s%(message)s%(color_reset)s"
    )

    file_format = "%(asctime)s %(directory)s/%(filename)s:%(lineno)d [%(levelname).1s] %(message)s"

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(level)
            file_handler.setFormatter(
                ColoredFormatter(file_format, datefmt="%Y-%m-%d %H:%M:%S", use_colors=False)
            )
            root_logger.addHandler(file_handler)
        except OSError:
            print(
                "Warning: Cannot create file handler. Using console logging only.",
                file=sys.stderr,
            )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(ColoredFormatter(console_format, datefmt="%Y-%m-%d %H:%M:%S"))
    root_logger.addHandler(console_handler)

    _root_logger_initialized = True

    root_logger.debug("Enhanced logger initialized")
    return root_logger


def get_logger(name=None):
    """
    Get a named logger instance, setting up the root logger first if needed.

    Args:
        name (str, optional): Name for the logger. Defaults to None.

    Returns:
        logging.Logger: Named logger instance
    """
    if not _root_logger_initialized:
        setup_logger()

    return logging.getLogger(name)


def _null_logger() -> logging.Logger:
    null_logger = logging.getLogger(f"{DEBUG_LOGGER_NAME}.disabled")
    if not any(isinstance(h, logging.NullHandler) for h in null_logger.handlers):
        null_logger.addHandler(logging.NullHandler())
    null_logger.propagate = False
    null_logger.disabled = True
    return null_logger


def get_debug_logger(enabled: bool) -> logging.Logger:
    """
    Return the diagnostic logger used to record tool failures in detail.

    When ``enabled`` is False the returned logger discards everything, so
    callers can log unconditionally.

    Args:
        enabled: Value of the DEBUG setting

    Returns:
        logging.Logger: ``forms.debug`` or a disabled logger
    """
    if not enabled:
        return _null_logger()
    return get_logger(DEBUG_LOGGER_NAME)
