"""
Centralized logging configuration for the Marketplace API.

Provides a unified logging interface with:
- Structured logging with correlation IDs
- Console (development) and JSON (production, files) formats
- Business and security event logging through metadata
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union

from app.core.config import config
from app.core.context import get_correlation_id


LOG_LEVEL = config.log_level.upper()
LOG_FORMAT = config.log_format.lower()


class StructuredLogger:
    """
    Logger with structured entries and correlation ID support.
    """

    def __init__(self):
        self.service_name = config.service_name
        self.environment = config.environment
        self._setup_logging()

    def _setup_logging(self):
        """Configure Python logging with handlers"""
        root = logging.getLogger()
        root.handlers.clear()
        root.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

        if config.log_to_console:
            console_handler = logging.StreamHandler(sys.stdout)
            if LOG_FORMAT == "json":
                console_handler.setFormatter(JSONFormatter())
            else:
                console_handler.setFormatter(ConsoleFormatter())
            root.addHandler(console_handler)

        if config.log_to_file:
            os.makedirs(os.path.dirname(config.log_file_path) or ".", exist_ok=True)
            file_handler = logging.FileHandler(config.log_file_path)
            file_handler.setFormatter(JSONFormatter())  # Always JSON for files
            root.addHandler(file_handler)

    def _build_log_entry(
        self,
        level: str,
        message: str,
        user_id: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Build structured log entry"""
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": level,
            "service": self.service_name,
            "environment": self.environment,
            "message": message,
            "correlationId": get_correlation_id(),
        }

        if user_id:
            entry["userId"] = user_id

        if metadata:
            entry["metadata"] = metadata

        return entry

    def _log(
        self,
        level: str,
        message: str,
        user_id: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: bool = False,
    ):
        """Internal logging method"""
        log_entry = self._build_log_entry(level, message, user_id, metadata)
        log_method = getattr(logging.getLogger(), level.lower())

        if LOG_FORMAT == "json":
            log_method(json.dumps(log_entry, default=str), exc_info=exc_info)
        else:
            # 'message' would clash with the LogRecord attribute
            extra_data = {k: v for k, v in log_entry.items() if k != "message"}
            log_method(message, extra=extra_data, exc_info=exc_info)

    def debug(self, message: str, user_id: Optional[str] = None, metadata: Optional[Dict[str, Any]] = None):
        """Debug level logging"""
        self._log("DEBUG", message, user_id, metadata)

    def info(self, message: str, user_id: Optional[str] = None, metadata: Optional[Dict[str, Any]] = None):
        """Info level logging"""
        self._log("INFO", message, user_id, metadata)

    def warning(self, message: str, user_id: Optional[str] = None, metadata: Optional[Dict[str, Any]] = None):
        """Warning level logging"""
        self._log("WARNING", message, user_id, metadata)

    def error(
        self,
        message: str,
        user_id: Optional[str] = None,
        error: Optional[Union[str, Exception]] = None,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: bool = False,
    ):
        """Error level logging"""
        if metadata is None:
            metadata = {}

        if error:
            if isinstance(error, Exception):
                metadata["error"] = {
                    "type": type(error).__name__,
                    "message": str(error),
                }
            else:
                metadata["error"] = {"message": str(error)}

        self._log("ERROR", message, user_id, metadata, exc_info=exc_info)

    def critical(
        self,
        message: str,
        user_id: Optional[str] = None,
        error: Optional[Union[str, Exception]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        """Critical level logging"""
        if metadata is None:
            metadata = {}

        if error:
            metadata["error"] = {
                "type": type(error).__name__ if isinstance(error, Exception) else None,
                "message": str(error),
            }

        self._log("CRITICAL", message, user_id, metadata)


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging"""

    RESERVED = {
        "name", "msg", "args", "created", "filename", "funcName", "levelname",
        "levelno", "lineno", "module", "msecs", "message", "pathname", "process",
        "processName", "relativeCreated", "thread", "threadName", "exc_info",
        "exc_text", "stack_info", "taskName",
    }

    def format(self, record):
        if record.getMessage().startswith("{"):
            # Already a serialized entry from StructuredLogger
            return record.getMessage()

        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "service": config.service_name,
            "message": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key not in self.RESERVED:
                log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class ConsoleFormatter(logging.Formatter):
    """Colored console formatter for development"""

    COLORS = {
        "DEBUG": "\033[36m",      # Cyan
        "INFO": "\033[32m",       # Green
        "WARNING": "\033[33m",    # Yellow
        "ERROR": "\033[31m",      # Red
        "CRITICAL": "\033[35m",   # Magenta
        "RESET": "\033[0m",
    }

    def format(self, record):
        color = self.COLORS.get(record.levelname, self.COLORS["RESET"])
        reset = self.COLORS["RESET"]

        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")
        line = f"{color}[{timestamp}] {record.levelname}{reset} - {record.getMessage()}"

        metadata = getattr(record, "metadata", None)
        if metadata:
            line = f"{line} {json.dumps(metadata, default=str)}"

        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"

        return line


# Create and export the logger instance
logger = StructuredLogger()
