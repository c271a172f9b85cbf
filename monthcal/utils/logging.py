"""Logging configuration and setup utilities."""

import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any, Union

from .exceptions import ConfigurationError

if TYPE_CHECKING:
    from ..config.settings import MonthCalSettings

# Custom log level between INFO(20) and DEBUG(10)
VERBOSE = 15
logging.addLevelName(VERBOSE, "VERBOSE")

LOGGER_NAME = "monthcal"
LOG_LEVEL_NAMES = ["DEBUG", "VERBOSE", "INFO", "WARNING", "ERROR", "CRITICAL"]


def verbose(self: logging.Logger, message: Any, *args: Any, **kwargs: Any) -> None:
    """Log ``message`` at the VERBOSE level.

    Example:
        >>> logger = logging.getLogger(__name__)
        >>> logger.verbose("Rendering %d weeks", week_count)
    """
    if self.isEnabledFor(VERBOSE):
        self._log(VERBOSE, message, args, **kwargs)


# Add verbose method to all Logger instances
logging.Logger.verbose = verbose  # type: ignore[attr-defined]


def get_log_level(level_name: str) -> int:
    """Get numeric log level from string name, including custom VERBOSE level.

    Args:
        level_name: Log level name (DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL),
            case insensitive

    Returns:
        Numeric log level

    Raises:
        ConfigurationError: If the level name is not recognized
    """
    name = level_name.upper()
    if name not in LOG_LEVEL_NAMES:
        raise ConfigurationError(
            f"Unknown log level '{level_name}'. Use one of: {', '.join(LOG_LEVEL_NAMES)}"
        )
    if name == "VERBOSE":
        return VERBOSE
    level: int = getattr(logging, name)
    return level


def detect_color_mode(stream: Any) -> str:
    """Return "truecolor", "basic" or "none" for a log stream.

    Honours NO_COLOR and TERM=dumb; anything that is not a TTY gets no colors.
    """
    isatty = getattr(stream, "isatty", None)
    if isatty is None or not isatty():
        return "none"

    term = os.environ.get("TERM", "").lower()
    if term == "dumb" or "NO_COLOR" in os.environ:
        return "none"
    if os.environ.get("COLORTERM", "").lower() in ("truecolor", "24bit") or "256color" in term:
        return "truecolor"
    return "basic" if "color" in term else "none"


class AutoColoredFormatter(logging.Formatter):
    """Console formatter that colors the level name when stderr supports it."""

    COLORS = {
        "ERROR": {"truecolor": "\033[91m", "basic": "\033[31m", "none": ""},
        "INFO": {"truecolor": "\033[94m", "basic": "\033[34m", "none": ""},
        "VERBOSE": {"truecolor": "\033[92m", "basic": "\033[32m", "none": ""},
        "WARNING": {"truecolor": "\033[93m", "basic": "\033[33m", "none": ""},
        "DEBUG": {"truecolor": "\033[95m", "basic": "\033[35m", "none": ""},
        "CRITICAL": {"truecolor": "\033[91m\033[1m", "basic": "\033[31m\033[1m", "none": ""},
        "RESET": {"truecolor": "\033[0m", "basic": "\033[0m", "none": ""},
    }

    def __init__(self, *args: Any, enable_colors: bool = True, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.color_mode = detect_color_mode(sys.stderr) if enable_colors else "none"

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors if supported."""
        formatted = super().format(record)

        if self.color_mode == "none":
            return formatted

        level_name = record.levelname
        if level_name in self.COLORS:
            start = self.COLORS[level_name][self.color_mode]
            reset = self.COLORS["RESET"][self.color_mode]
            formatted = formatted.replace(level_name, f"{start}{level_name}{reset}", 1)

        return formatted


class TimestampedFileHandler(logging.FileHandler):
    """Handler that creates timestamped log files per execution."""

    def __init__(
        self, log_dir: Union[str, Path], prefix: str = "monthcal", max_files: int = 5
    ) -> None:
        self.log_dir = Path(log_dir)
        self.prefix = prefix
        self.max_files = max_files

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_path = self.log_dir / f"{prefix}_{timestamp}.log"

        try:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            super().__init__(str(log_path), encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(f"Cannot write log files to {self.log_dir}: {e}") from e

        self.cleanup_old_files()

    def cleanup_old_files(self) -> None:
        """Remove log files beyond max_files limit, keeping most recent."""
        log_files = list(self.log_dir.glob(f"{self.prefix}_*.log"))

        if len(log_files) > self.max_files:
            log_files.sort(key=lambda f: f.stat().st_mtime, reverse=True)
            for old_file in log_files[self.max_files :]:
                try:
                    old_file.unlink()
                except OSError:
                    pass  # Another process may have removed it already


def setup_logging(settings: "MonthCalSettings") -> logging.Logger:
    """Configure the ``monthcal`` logger from settings.

    Console output goes to stderr so it never mixes with the calendar on stdout.

    Args:
        settings: Application settings

    Returns:
        The configured ``monthcal`` logger

    Raises:
        ConfigurationError: If a configured log level is not recognized
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)  # Handlers filter

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if settings.logging.console_enabled:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(get_log_level(settings.logging.console_level))
        console_handler.setFormatter(
            AutoColoredFormatter(
                "%(asctime)s - %(levelname)s - %(message)s",
                datefmt="%H:%M:%S",
                enable_colors=settings.logging.console_colors,
            )
        )
        logger.addHandler(console_handler)

    if settings.logging.file_enabled:
        file_handler = TimestampedFileHandler(
            log_dir=settings.log_dir,
            prefix=settings.logging.file_prefix,
            max_files=settings.logging.max_log_files,
        )
        file_handler.setLevel(get_log_level(settings.logging.file_level))

        if settings.logging.include_function_names:
            file_format = (
                "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
            )
        else:
            file_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        file_handler.setFormatter(logging.Formatter(file_format, datefmt="%Y-%m-%d %H:%M:%S"))

        logger.addHandler(file_handler)
        logger.debug(f"Logging to file: {file_handler.baseFilename}")

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    logger.debug(
        f"Logging initialized (console={settings.logging.console_level}, "
        f"file={'on' if settings.logging.file_enabled else 'off'})"
    )
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``monthcal`` namespace.

    Example:
        >>> get_logger("cli").info("Parsed arguments")
    """
    if name == LOGGER_NAME or name.startswith(f"{LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def apply_command_line_overrides(settings: "MonthCalSettings", args: Any) -> "MonthCalSettings":
    """Apply command-line argument overrides to logging settings.

    Priority: Command-line > Environment > YAML > Defaults. Modifies
    ``settings`` in place and returns it.
    """
    if getattr(args, "log_level", None):
        settings.logging.console_level = args.log_level
        settings.logging.file_level = args.log_level

    if getattr(args, "verbose", False):
        settings.logging.console_level = "VERBOSE"
        settings.logging.file_level = "VERBOSE"

    if getattr(args, "quiet", False):
        settings.logging.console_level = "ERROR"

    if getattr(args, "log_dir", None):
        settings.logging.file_directory = str(args.log_dir)
        settings.logging.file_enabled = True

    if getattr(args, "no_file_logging", False):
        settings.logging.file_enabled = False

    if getattr(args, "no_log_colors", False):
        settings.logging.console_colors = False

    return settings
