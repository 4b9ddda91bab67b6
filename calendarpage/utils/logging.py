"""Logging setup for calendarpage.

Adds a VERBOSE level (15) between DEBUG and INFO. The grid navigators log every
accepted keyboard move at VERBOSE, so focus changes can be followed without the
per-predicate DEBUG output of the controller.
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import IO, TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from ..config.settings import CalendarPageSettings

PACKAGE_LOGGER_NAME = "calendarpage"

VERBOSE = 15
logging.addLevelName(VERBOSE, "VERBOSE")

CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUP_COUNT = 5


def verbose(self: logging.Logger, message: Any, *args: Any, **kwargs: Any) -> None:
    """Log ``message`` at VERBOSE level.

    Installed on ``logging.Logger`` when this module is imported.

    Example:
        >>> logging.getLogger("calendarpage.page.navigation").verbose("Month 0 -> 9")
    """
    if self.isEnabledFor(VERBOSE):
        self._log(VERBOSE, message, args, **kwargs)


logging.Logger.verbose = verbose  # type: ignore[attr-defined]


def get_log_level(level_name: str) -> int:
    """Resolve a level name, VERBOSE included, to its numeric value.

    Args:
        level_name: Level name in any case

    Returns:
        Numeric log level

    Raises:
        AttributeError: If the name is not a logging level
    """
    name = level_name.upper()
    if name == "VERBOSE":
        return VERBOSE
    level = getattr(logging, name)
    if not isinstance(level, int):
        raise AttributeError(f"{level_name!r} is not a log level")
    return level


def detect_color_mode(stream: Optional[IO[str]] = None) -> str:
    """Work out how many colors the terminal behind ``stream`` supports.

    Returns:
        ``"truecolor"``, ``"basic"`` or ``"none"``
    """
    stream = stream if stream is not None else sys.stdout
    isatty = getattr(stream, "isatty", None)
    if isatty is None or not isatty():
        return "none"

    term = os.environ.get("TERM", "").lower()
    if term == "dumb":
        return "none"
    if os.environ.get("COLORTERM", "").lower() in ("truecolor", "24bit") or "256color" in term:
        return "truecolor"
    if "color" in term:
        return "basic"
    if os.name == "nt" and "WT_SESSION" in os.environ:
        return "truecolor"
    return "none"


class AutoColoredFormatter(logging.Formatter):
    """Formatter that colors the level name when the terminal supports it."""

    # SGR codes per level: (8-color terminals, bright colors)
    LEVEL_COLORS = {
        "DEBUG": ("35", "95"),
        "VERBOSE": ("32", "92"),
        "INFO": ("34", "94"),
        "WARNING": ("33", "93"),
        "ERROR": ("31", "91"),
        "CRITICAL": ("31;1", "91;1"),
    }
    RESET = "\033[0m"

    def __init__(
        self,
        *args: Any,
        enable_colors: bool = True,
        stream: Optional[IO[str]] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.enable_colors = enable_colors
        self.color_mode = detect_color_mode(stream) if enable_colors else "none"

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)
        codes = self.LEVEL_COLORS.get(record.levelname)
        if self.color_mode == "none" or codes is None:
            return formatted

        code = codes[1] if self.color_mode == "truecolor" else codes[0]
        colored = f"\033[{code}m{record.levelname}{self.RESET}"
        return formatted.replace(record.levelname, colored, 1)


def _console_handler(level: int, enable_colors: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(
        AutoColoredFormatter(
            CONSOLE_FORMAT, datefmt="%H:%M:%S", enable_colors=enable_colors, stream=sys.stderr
        )
    )
    return handler


def _file_handler(
    log_file: str, log_dir: Optional[Path]
) -> logging.handlers.RotatingFileHandler:
    if log_dir:
        log_dir = Path(log_dir).expanduser()
        log_dir.mkdir(parents=True, exist_ok=True)
        log_path = log_dir / log_file
    else:
        log_path = Path(log_file)

    handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUP_COUNT,
        encoding="utf-8",
    )
    # Files always capture everything down to DEBUG
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    log_dir: Optional[Path] = None,
    enable_colors: bool = True,
) -> logging.Logger:
    """Configure the ``calendarpage`` logger.

    Replaces any handlers installed by an earlier call. An unknown level name
    falls back to INFO.

    Args:
        log_level: DEBUG, VERBOSE, INFO, WARNING, ERROR or CRITICAL
        log_file: Log file name; no file handler when omitted
        log_dir: Directory for ``log_file``, created when missing
        enable_colors: Allow ANSI colors on the console

    Returns:
        The configured package logger
    """
    try:
        numeric_level = get_log_level(log_level)
    except AttributeError:
        numeric_level = logging.INFO

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(numeric_level)
    logger.handlers.clear()
    logger.addHandler(_console_handler(numeric_level, enable_colors))

    if log_file:
        file_handler = _file_handler(log_file, log_dir)
        logger.addHandler(file_handler)
        logger.info(f"Logging to file: {file_handler.baseFilename}")

    logger.debug(f"Logging initialized at {log_level} level")
    return logger


def setup_logging_from_settings(settings: "CalendarPageSettings") -> logging.Logger:
    """Configure logging from the ``logging`` section of the settings."""
    log_settings = settings.logging
    return setup_logging(
        log_level=log_settings.level,
        log_file=log_settings.file_name if log_settings.file_enabled else None,
        log_dir=Path(log_settings.file_directory) if log_settings.file_directory else None,
        enable_colors=log_settings.console_colors,
    )


def apply_command_line_overrides(
    settings: "CalendarPageSettings", args: Any
) -> "CalendarPageSettings":
    """Apply logging flags from the command line to the settings.

    Command-line values win over environment, YAML and defaults. The settings
    object is modified in place and returned.

    Args:
        settings: Loaded settings
        args: Parsed argparse namespace

    Returns:
        The same settings object
    """
    log_settings = settings.logging

    if getattr(args, "log_level", None):
        log_settings.level = args.log_level
    if getattr(args, "verbose", False):
        log_settings.level = "VERBOSE"
    if getattr(args, "quiet", False):
        log_settings.level = "ERROR"
    if getattr(args, "log_dir", None):
        log_settings.file_directory = str(args.log_dir)
        log_settings.file_enabled = True
    if getattr(args, "no_log_colors", False):
        log_settings.console_colors = False

    return settings


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under ``calendarpage``.

    Example:
        >>> get_logger("page.navigation").name
        'calendarpage.page.navigation'
    """
    return logging.getLogger(f"{PACKAGE_LOGGER_NAME}.{name}")
