"""
Admin Portal Logging Configuration
Structured logging with keyword context for the API and its collaborators
"""
import logging
import sys
import json
import traceback
from datetime import datetime, timezone
from typing import Optional

from .config import get_settings

settings = get_settings()

LOG_LEVEL = settings.log_level.upper()
LOG_FORMAT = settings.log_format.lower()


class StructuredFormatter(logging.Formatter):
    """Formats records as one JSON object per line"""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        context = getattr(record, "context", None)
        if context:
            log_data.update(context)
        return json.dumps(log_data, default=str)


class TextFormatter(logging.Formatter):
    """Formats records as readable text"""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")
        timestamp = datetime.now(timezone.utc).strftime("%H:%M:%S")
        line = f"{color}[{timestamp}] [{record.levelname}] {record.name}{self.RESET} {record.getMessage()}"

        context = getattr(record, "context", None)
        if context:
            pairs = " ".join(f"{k}={v}" for k, v in context.items() if k != "traceback")
            if pairs:
                line += f" \033[90m({pairs}){self.RESET}"
        return line


class StructuredLogger:
    """Thin wrapper that accepts keyword context on every call"""

    def __init__(self, name: str):
        self.name = name
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
        self.logger.propagate = False

        if not self.logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(StructuredFormatter() if LOG_FORMAT == "json" else TextFormatter())
            self.logger.addHandler(handler)

    def _log(self, level: int, message: str, **context):
        self.logger.log(level, message, extra={"context": context})

    def debug(self, message: str, **context):
        self._log(logging.DEBUG, message, **context)

    def info(self, message: str, **context):
        self._log(logging.INFO, message, **context)

    def warning(self, message: str, **context):
        self._log(logging.WARNING, message, **context)

    def error(self, message: str, error: Optional[Exception] = None, **context):
        if error is not None:
            context["error_type"] = type(error).__name__
            context["error_message"] = str(error)
            context["traceback"] = "".join(
                traceback.format_exception(type(error), error, error.__traceback__)
            )
        self._log(logging.ERROR, message, **context)


api_logger = StructuredLogger("admin_portal.api")
auth_logger = StructuredLogger("admin_portal.auth")
db_logger = StructuredLogger("admin_portal.db")
mail_logger = StructuredLogger("admin_portal.mail")
storage_logger = StructuredLogger("admin_portal.storage")


def get_logger(name: str) -> StructuredLogger:
    """Get or create a logger under the admin_portal namespace"""
    return StructuredLogger(f"admin_portal.{name}")
