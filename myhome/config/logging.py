"""
Logging Configuration and Utilities

Structured logging built on structlog with a stdlib backend, plain text
or JSON console output, and masking of sensitive values.
"""

import logging
import sys
from typing import Any, Dict

import structlog
from pythonjsonlogger import jsonlogger

from myhome.config.settings import Settings

SENSITIVE_KEYS = (
    'password', 'token', 'secret', 'key', 'credentials', 'authorization',
)


class SecurityLogProcessor:
    """Process security-related logs"""

    def __call__(self, logger, method_name, event_dict):
        # Mark security events
        if any(keyword in str(event_dict.get('event', '')).lower()
               for keyword in ['auth', 'login', 'password', 'token']):
            event_dict['security_event'] = True

        self._sanitize_event_dict(event_dict)
        return event_dict

    def _sanitize_event_dict(self, event_dict: Dict[str, Any]):
        """Remove or mask sensitive information"""
        for key in list(event_dict.keys()):
            if key == 'event':
                continue
            if any(sensitive in key.lower() for sensitive in SENSITIVE_KEYS):
                event_dict[key] = '[REDACTED]'
            elif isinstance(event_dict[key], dict):
                self._sanitize_event_dict(event_dict[key])


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter for structured logging"""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)

        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['module'] = record.module
        log_record['function'] = record.funcName
        log_record['line'] = record.lineno

        if record.exc_info:
            log_record['exception'] = self.formatException(record.exc_info)


def configure_logging(settings: Settings) -> None:
    """Configure stdlib logging and structlog from application settings."""
    level = getattr(logging, settings.LOG_LEVEL, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    if settings.LOG_FORMAT == "json":
        formatter = CustomJsonFormatter('%(asctime)s %(name)s %(levelname)s %(message)s')
    else:
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    processors = [
        SecurityLogProcessor(),
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]
    if settings.LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.processors.KeyValueRenderer(key_order=['event']))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )

    if settings.LOG_SQL_QUERIES:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)
    else:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger bound to the stdlib logger ``name``."""
    return structlog.get_logger(name)
