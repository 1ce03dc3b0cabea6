"""
Root logger setup driven by the ``logging`` section of perses.config.json.

Level and format names are matched regardless of letter case, the same
way the bundled schema accepts them, so ``PERSES_LOG_LEVEL=Info`` works.
"""

import json
import logging
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..exceptions.config_exceptions import ConfigurationValidationError


class LogLevel(Enum):
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


class LogFormat(Enum):
    STANDARD = "standard"
    JSON = "json"
    DETAILED = "detailed"


_FORMAT_STRINGS = {
    LogFormat.STANDARD: '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    LogFormat.DETAILED: '%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(funcName)s:%(lineno)d - %(message)s',
}

# Attributes every LogRecord carries; anything else came in through ``extra=``
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message"}


class JSONFormatter(logging.Formatter):
    """One JSON object per line, with ``extra=`` fields merged in."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "line": record.lineno,
            "message": record.getMessage(),
        }
        entry.update(
            (key, value) for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and not key.startswith('_')
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str, ensure_ascii=False, separators=(',', ':'))


class LoggingManager:
    """Replaces the root logger's handlers with console and/or file output."""

    def __init__(
        self,
        log_level: LogLevel = LogLevel.INFO,
        log_format: LogFormat = LogFormat.STANDARD,
        log_file: Optional[Union[str, Path]] = None,
        enable_console: bool = True
    ):
        self.log_level = log_level
        self.log_format = log_format
        self.log_file = Path(log_file) if log_file else None
        self.enable_console = enable_console
        self._setup_root_logger()

    def _formatter(self) -> logging.Formatter:
        if self.log_format is LogFormat.JSON:
            return JSONFormatter()
        return logging.Formatter(_FORMAT_STRINGS[self.log_format])

    def _setup_root_logger(self) -> None:
        root_logger = logging.getLogger()
        root_logger.setLevel(self.log_level.value)
        root_logger.handlers.clear()

        handlers = []
        if self.enable_console:
            handlers.append(logging.StreamHandler())
        if self.log_file:
            handlers.append(logging.FileHandler(self.log_file))

        formatter = self._formatter()
        for handler in handlers:
            handler.setLevel(self.log_level.value)
            handler.setFormatter(formatter)
            root_logger.addHandler(handler)


def configure_logging(config: Optional[Dict[str, Any]] = None) -> LoggingManager:
    """
    Configure logging from a ``logging`` section with optional ``level``,
    ``format``, ``file`` and ``console`` keys.

    Raises:
        ConfigurationValidationError: If the level or format is unknown
    """
    config = config or {}

    level = config.get("level", "INFO")
    try:
        log_level = LogLevel[str(level).upper()]
    except KeyError as e:
        raise ConfigurationValidationError(
            f"Unknown log level: {level!r}",
            validation_errors=[f"logging.level: expected one of {', '.join(lv.name for lv in LogLevel)}"],
            invalid_fields=["logging.level"]
        ) from e

    fmt = config.get("format", LogFormat.STANDARD.value)
    try:
        log_format = LogFormat(str(fmt).lower())
    except ValueError as e:
        raise ConfigurationValidationError(
            f"Unknown log format: {fmt!r}",
            validation_errors=[f"logging.format: expected one of {', '.join(f.value for f in LogFormat)}"],
            invalid_fields=["logging.format"]
        ) from e

    return LoggingManager(
        log_level=log_level,
        log_format=log_format,
        log_file=config.get("file"),
        enable_console=config.get("console", True)
    )
