"""
Centralized logging configuration for vaultsource.

Provides:
- Console logging with colored, prefixed output by datasource area
- File logging with timestamps and vault/attachment context for post-mortem analysis
- Easy-to-use logger factory for different components
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

# ANSI color codes for console output
class Colors:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    # Foreground colors
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"
    WHITE = "\033[37m"

    # Bright foreground colors
    BRIGHT_RED = "\033[91m"
    BRIGHT_GREEN = "\033[92m"
    BRIGHT_YELLOW = "\033[93m"
    BRIGHT_BLUE = "\033[94m"
    BRIGHT_MAGENTA = "\033[95m"
    BRIGHT_CYAN = "\033[96m"


# Area-specific colors and prefixes
AREA_CONFIG = {
    "main": {"color": Colors.BRIGHT_CYAN, "prefix": "BCUP.main"},
    "datasource": {"color": Colors.BRIGHT_GREEN, "prefix": "BCUP.datasource"},
    "attachments": {"color": Colors.GREEN, "prefix": "BCUP.attachments"},
    "codec": {"color": Colors.BRIGHT_MAGENTA, "prefix": "BCUP.codec"},
    "credentials": {"color": Colors.BRIGHT_YELLOW, "prefix": "BCUP.credentials"},
    "storage": {"color": Colors.BRIGHT_BLUE, "prefix": "BCUP.storage"},
    "cli": {"color": Colors.CYAN, "prefix": "BCUP.cli"},
}

# Default for unknown areas
DEFAULT_AREA_CONFIG = {"color": Colors.WHITE, "prefix": "BCUP"}


class ColoredConsoleFormatter(logging.Formatter):
    """Custom formatter that adds colors and area prefixes to console output."""

    LEVEL_COLORS = {
        logging.DEBUG: Colors.DIM,
        logging.INFO: Colors.RESET,
        logging.WARNING: Colors.YELLOW,
        logging.ERROR: Colors.RED,
        logging.CRITICAL: Colors.BRIGHT_RED + Colors.BOLD,
    }

    def __init__(self, area: str = "main"):
        super().__init__()
        config = AREA_CONFIG.get(area, DEFAULT_AREA_CONFIG)
        self.area_color = config["color"]
        self.area_prefix = config["prefix"]

    def format(self, record: logging.LogRecord) -> str:
        level_color = self.LEVEL_COLORS.get(record.levelno, Colors.RESET)
        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")

        # Format: [BCUP.area] HH:MM:SS LEVEL: message
        prefix = f"{self.area_color}[{self.area_prefix}]{Colors.RESET}"
        time_str = f"{Colors.DIM}{timestamp}{Colors.RESET}"
        level_str = f"{level_color}{record.levelname:<8}{Colors.RESET}"

        return f"{prefix} {time_str} {level_str} {record.getMessage()}"


class FileFormatter(logging.Formatter):
    """Formatter for file output with full timestamps and structured format."""

    def __init__(self, area: str = "main"):
        super().__init__()
        config = AREA_CONFIG.get(area, DEFAULT_AREA_CONFIG)
        self.area_prefix = config["prefix"]

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]

        # Include vault context if the caller passed it via extra=
        extra = ""
        if hasattr(record, "vault_id"):
            extra += f" vault_id={record.vault_id}"
        if hasattr(record, "attachment_id"):
            extra += f" attachment_id={record.attachment_id}"

        # Format: TIMESTAMP [AREA] LEVEL: message (extra)
        return f"{timestamp} [{self.area_prefix}] {record.levelname}: {record.getMessage()}{extra}"


# Global log directory
_log_dir: Optional[Path] = None
_file_handler: Optional[logging.FileHandler] = None
_console_level: int = logging.INFO
_configured_areas: set[str] = set()


def setup_logging(
    log_dir: str,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Initialize file logging.

    Args:
        log_dir: Directory for log files
        console_level: Minimum level for console output, applied to existing loggers too
        file_level: Minimum level for file output

    Returns:
        Path to the log file
    """
    global _log_dir, _file_handler, _console_level

    _log_dir = Path(log_dir)
    _log_dir.mkdir(parents=True, exist_ok=True)
    _console_level = console_level

    log_filename = datetime.now().strftime("vaultsource_%Y%m%d_%H%M%S.log")
    log_path = _log_dir / log_filename

    if _file_handler is not None:
        _file_handler.close()
    _file_handler = logging.FileHandler(log_path, encoding="utf-8")
    _file_handler.setLevel(file_level)
    _file_handler.setFormatter(FileFormatter("main"))

    # Loggers created before setup get the new console level and the file handler
    for area in list(_configured_areas):
        area_logger = logging.getLogger(f"bcup.{area}")
        for handler in area_logger.handlers:
            if not isinstance(handler, logging.FileHandler):
                handler.setLevel(console_level)
        _attach_file_handler(area_logger, area)

    get_logger("main").info(f"Logging initialized. Log file: {log_path}")

    return log_path


def _attach_file_handler(logger: logging.Logger, area: str) -> None:
    """Add an area-specific file handler sharing the global log file."""
    if _file_handler is None:
        return
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == _file_handler.baseFilename:
            return
    area_file_handler = logging.FileHandler(_file_handler.baseFilename, encoding="utf-8")
    area_file_handler.setLevel(_file_handler.level)
    area_file_handler.setFormatter(FileFormatter(area))
    logger.addHandler(area_file_handler)


def get_logger(area: str = "main") -> logging.Logger:
    """
    Get a logger for a specific area.

    Args:
        area: The area (e.g., "datasource", "attachments", "codec")

    Returns:
        Configured logger instance

    Example:
        logger = get_logger("datasource")
        logger.info("Vault saved")
        # Output: [BCUP.datasource] 14:32:15 INFO     Vault saved
    """
    logger = logging.getLogger(f"bcup.{area}")

    # Only configure if not already done
    if area not in _configured_areas:
        logger.setLevel(logging.DEBUG)

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(_console_level)
        console_handler.setFormatter(ColoredConsoleFormatter(area))
        logger.addHandler(console_handler)

        _attach_file_handler(logger, area)

        # Don't propagate to root to avoid duplicate logs
        logger.propagate = False
        _configured_areas.add(area)

    return logger


def get_log_dir() -> Optional[Path]:
    """Get the current log directory path."""
    return _log_dir
