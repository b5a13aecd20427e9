"""
Logging configuration for the geowkt command line tool.

The library itself only creates module loggers. ``setup_logging`` wires
the root logger for ``geowkt.cli``: log lines go to stderr so that stdout
carries nothing but converted WKT.
"""

import json
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from geowkt.core.config import settings

# LogRecord attributes that are not user supplied context
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__
) | {"message", "asctime"}

CONSOLE_FORMAT = "%(levelname)s - %(asctime)s - %(name)s - %(message)s"
FILE_FORMAT = (
    "%(asctime)s - %(levelname)s - %(name)s - "
    "%(module)s:%(funcName)s:%(lineno)d - %(message)s"
)
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.

    Fields passed through ``extra=``, such as ``duration_ms`` from the
    performance helpers or ``input_line`` from the CLI, are copied into
    the output object.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line_no": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_data[key] = value

        return json.dumps(log_data, default=str)


def get_log_level(level_name: str) -> int:
    """Convert a level name to its logging constant, INFO when unknown."""
    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return level_map.get(level_name.upper(), logging.INFO)


def setup_logging(
    log_level: Optional[str] = None,
    log_file: Optional[Path] = None,
    json_logs: Optional[bool] = None,
    enable_console: bool = True,
) -> None:
    """
    Configure root logging.

    Args:
        log_level: Log level name, defaults to ``settings.log_level``
        log_file: Path to a rotating log file, if file logging is wanted
        json_logs: Use JSON lines for every handler; defaults to True when
            ``settings.environment`` is production
        enable_console: Whether to log to stderr
    """
    if log_level is None:
        log_level = settings.log_level
    if json_logs is None:
        json_logs = settings.environment == "production"

    level = get_log_level(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    def formatter(fmt: str) -> logging.Formatter:
        if json_logs:
            return JSONFormatter()
        return logging.Formatter(fmt, datefmt=DATE_FORMAT)

    if enable_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter(CONSOLE_FORMAT))
        root_logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter(FILE_FORMAT))
        root_logger.addHandler(file_handler)

    root_logger.debug(
        f"Logging initialized: level={log_level}, "
        f"environment={settings.environment}, "
        f"json_logs={json_logs}, "
        f"file={log_file is not None}"
    )
