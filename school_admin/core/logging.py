import json
import logging
import os
import re
import traceback
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import Optional

LOGGER_NAME = "school_admin"

_TOKEN_PATTERN = re.compile(r"eyJ[\w-]*\.[\w-]*\.[\w-]*")


class CustomJsonFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging"""
    def __init__(self, **kwargs):
        super().__init__()
        self.kwargs = kwargs

    def format(self, record):
        json_record = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "message": record.getMessage(),
        }

        if record.exc_info:
            json_record['exception'] = {
                'type': record.exc_info[0].__name__,
                'message': str(record.exc_info[1]),
                'traceback': traceback.format_exception(*record.exc_info)
            }

        for field in self.kwargs.get('extra_fields', ()):
            if hasattr(record, field):
                json_record[field] = getattr(record, field)

        return json.dumps(json_record, default=str)


class LoggerFactory:
    """Factory class for configuring the application logger"""

    @staticmethod
    def configure(name: str, level: str = "INFO", log_dir: Optional[str] = None) -> logging.Logger:
        logger = logging.getLogger(name)
        logger.setLevel(getattr(logging, level))

        # Remove existing handlers if any
        if logger.handlers:
            for handler in list(logger.handlers):
                handler.close()
            logger.handlers.clear()

        console = logging.StreamHandler()
        console.setLevel(getattr(logging, level))
        console.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))
        logger.addHandler(console)

        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
            json_formatter = CustomJsonFormatter(extra_fields=['request_id', 'user_id', 'path'])

            app_handler = RotatingFileHandler(
                os.path.join(log_dir, 'app.log'),
                maxBytes=10 * 1024 * 1024,  # 10MB
                backupCount=5
            )
            app_handler.setLevel(getattr(logging, level))
            app_handler.setFormatter(json_formatter)
            logger.addHandler(app_handler)

            error_handler = RotatingFileHandler(
                os.path.join(log_dir, 'error.log'),
                maxBytes=10 * 1024 * 1024,
                backupCount=5
            )
            error_handler.setLevel(logging.ERROR)
            error_handler.setFormatter(json_formatter)
            logger.addHandler(error_handler)

        return logger


def configure_logging(settings) -> logging.Logger:
    return LoggerFactory.configure(LOGGER_NAME, level=settings.LOG_LEVEL, log_dir=settings.LOG_DIR)


def redact_tokens(message: object) -> str:
    """Remove JWTs from strings before they reach a log record"""
    if not message:
        return str(message)
    return _TOKEN_PATTERN.sub('[REDACTED_TOKEN]', str(message))


logger = logging.getLogger(LOGGER_NAME)
