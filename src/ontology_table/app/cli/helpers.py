"""
CLI helper utilities.

This module provides shared utilities for CLI commands including:
- Logging setup (console on stderr, optional rotating log file)
- Configuration loading
- Console headers and footers
"""

import json
import logging
import os
import sys
import tempfile
from datetime import datetime, timezone
from logging import Handler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional, Tuple

from ...constants import DEFAULT_CONFIG_FILENAME, DisplayConfig, LoggingConfig
from ...core.validators import InputValidator

# Type alias for log levels
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

CONFIG_SECTIONS = ('logging', 'display', 'export')


class ConfigError(ValueError):
    """Raised when a configuration file cannot be loaded or is malformed."""


class JSONFormatter(logging.Formatter):
    """One JSON object per log line; ``extra`` fields are carried along."""

    # Attributes every LogRecord has; anything else came in through ``extra``
    _STANDARD_ATTRS = frozenset(
        vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
    ) | {"message", "asctime", "taskName"}

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).strftime(
                LoggingConfig.JSON_DATE_FORMAT
            ),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}.{record.funcName}:{record.lineno}",
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        for key, value in vars(record).items():
            if key in self._STANDARD_ATTRS or key.startswith("_") or key in payload:
                continue
            payload[key] = value if _is_json_safe(value) else repr(value)

        return json.dumps(payload, ensure_ascii=False)


def _is_json_safe(value: Any) -> bool:
    try:
        json.dumps(value)
    except (TypeError, ValueError):
        return False
    return True


def _ensure_utf8_stdout() -> None:
    """Ensure stdout can handle the ✓/✗ markers on Windows."""
    if sys.platform == 'win32':
        try:
            sys.stdout.reconfigure(encoding='utf-8', errors='replace')
        except (AttributeError, TypeError):
            pass  # Not a real console stream


# Initialize UTF-8 output on module load
_ensure_utf8_stdout()


# Handlers installed by setup_logging() and the settings they were built from
_MANAGED_HANDLERS: List[Handler] = []
_LOGGING_SIGNATURE: Optional[Tuple[Any, ...]] = None
_LAST_LOG_FILE: Optional[str] = None


def get_default_config_path() -> str:
    """Path of ``config.json`` in the current working directory."""
    return str(Path.cwd() / DEFAULT_CONFIG_FILENAME)


def _clear_managed_handlers() -> None:
    """Detach and close the handlers added by setup_logging()."""
    root_logger = logging.getLogger()
    while _MANAGED_HANDLERS:
        handler = _MANAGED_HANDLERS.pop()
        root_logger.removeHandler(handler)
        handler.close()


def _positive_int(value: Any, default: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


def _build_formatter(settings: Dict[str, Any]) -> Tuple[str, logging.Formatter]:
    style = str(settings.get('format', LoggingConfig.DEFAULT_FORMAT_STYLE)).lower()
    if style not in LoggingConfig.SUPPORTED_FORMATS:
        style = LoggingConfig.DEFAULT_FORMAT_STYLE
    if style == 'json':
        return style, JSONFormatter()
    return style, logging.Formatter(
        fmt=settings.get('pattern') or LoggingConfig.LOG_FORMAT,
        datefmt=settings.get('date_format', LoggingConfig.DATE_FORMAT),
    )


def _rotation_settings(settings: Dict[str, Any], file_path: Optional[str]) -> Tuple[bool, int, int]:
    """(enabled, max_bytes, backup_count) from the ``rotation`` block."""
    rotation = settings.get('rotation')
    if not isinstance(rotation, dict):
        rotation = {}
    enabled = rotation.get('enabled')
    if enabled is None:
        enabled = bool(file_path) and LoggingConfig.ROTATION_ENABLED
    max_mb = _positive_int(rotation.get('max_mb'), LoggingConfig.MAX_LOG_FILE_MB)
    backups = _positive_int(rotation.get('backup_count'), LoggingConfig.LOG_BACKUP_COUNT)
    return bool(enabled), max_mb * 1024 * 1024, backups


def _open_log_file(
    file_path: str,
    rotation: Tuple[bool, int, int],
) -> Tuple[Optional[Handler], Optional[str]]:
    """
    Open the log file, falling back to the temp and home directories.

    Returns:
        (handler, path actually used), or (None, None) when no location works
    """
    enabled, max_bytes, backups = rotation
    filename = os.path.basename(file_path) or LoggingConfig.DEFAULT_LOG_FILENAME
    candidates = [
        file_path,
        os.path.join(tempfile.gettempdir(), filename),
        os.path.join(str(Path.home()), filename),
    ]

    for candidate in candidates:
        try:
            parent = os.path.dirname(candidate)
            if parent:
                os.makedirs(parent, exist_ok=True)
            if enabled:
                handler: Handler = RotatingFileHandler(
                    candidate, maxBytes=max_bytes, backupCount=backups, encoding='utf-8'
                )
            else:
                handler = logging.FileHandler(candidate, encoding='utf-8')
        except OSError as exc:
            print(f"  Could not create log at {candidate}: {exc}", file=sys.stderr)
            continue
        if candidate != file_path:
            print(f"Note: Using fallback log file: {candidate}", file=sys.stderr)
        return handler, candidate

    print("Warning: Could not write log file to any location; logging to console only",
          file=sys.stderr)
    return None, None


def setup_logging(
    level: Optional[LogLevel] = None,
    log_file: Optional[str] = None,
    *,
    config: Optional[Dict[str, Any]] = None,
    include_console: bool = True,
) -> Optional[str]:
    """
    Configure the root logger for a CLI run.

    Console output goes to stderr so it never mixes with command output.
    Calling again with the same settings keeps the existing handlers.

    Args:
        level: Log level override; takes precedence over ``config['level']``.
        log_file: Log file override; takes precedence over ``config['file']``.
        config: The ``logging`` section of the configuration file.
        include_console: If False, skip the stderr handler.

    Returns:
        The log file path in use, or None when logging to the console only.
    """
    global _LOGGING_SIGNATURE, _LAST_LOG_FILE

    settings = dict(config or {})
    level_name = str(level or settings.get('level', LoggingConfig.DEFAULT_LOG_LEVEL)).upper()
    log_level = getattr(logging, level_name, logging.WARNING)
    file_path = log_file if log_file is not None else settings.get('file')
    style, formatter = _build_formatter(settings)
    rotation = _rotation_settings(settings, file_path)

    signature = (log_level, file_path, style, include_console, rotation)
    if signature == _LOGGING_SIGNATURE and _MANAGED_HANDLERS:
        return _LAST_LOG_FILE

    handlers: List[Handler] = []
    used_file = None
    if file_path:
        file_handler, used_file = _open_log_file(file_path, rotation)
        if file_handler is not None:
            handlers.append(file_handler)
    if include_console or not handlers:
        handlers.insert(0, logging.StreamHandler(sys.stderr))

    _clear_managed_handlers()
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    logging.captureWarnings(True)
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
        _MANAGED_HANDLERS.append(handler)

    _LOGGING_SIGNATURE = signature
    _LAST_LOG_FILE = used_file
    if used_file:
        logging.getLogger(__name__).info(f"Logging to: {used_file}")
    return used_file


def load_config(config_path: str) -> Dict[str, Any]:
    """
    Load the JSON configuration file.

    Raises:
        ConfigError: If the path is empty, not a ``.json`` file, or does not
            hold a JSON object with object-valued sections.
        FileNotFoundError: If the configuration file doesn't exist.
        PermissionError: If the file cannot be read or is a symlink.
    """
    if not config_path:
        raise ConfigError("config_path cannot be empty")

    try:
        path = InputValidator.validate_config_file_path(config_path)
    except ValueError as e:
        raise ConfigError(str(e)) from e

    try:
        config = json.loads(path.read_text(encoding='utf-8'))
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in configuration file {path} at line {e.lineno}, column {e.colno}: {e.msg}"
        ) from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"File encoding error in {path}: {e}") from e

    if not isinstance(config, dict):
        raise ConfigError(f"Configuration file must contain a JSON object, got {type(config).__name__}")

    for section in CONFIG_SECTIONS:
        if not isinstance(config.get(section, {}), dict):
            raise ConfigError(f"Configuration section '{section}' must be a JSON object")

    return config


def print_header(title: str, width: int = DisplayConfig.CONSOLE_WIDTH) -> None:
    """Print a title between two rules."""
    rule = "=" * width
    print(f"\n{rule}\n{title}\n{rule}")


def print_footer(width: int = DisplayConfig.CONSOLE_WIDTH) -> None:
    print("=" * width + "\n")
