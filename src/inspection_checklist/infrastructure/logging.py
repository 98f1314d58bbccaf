"""Structured JSON logging configuration for the inspection checklist service."""

import logging
import json
import sys
import uuid
from datetime import datetime, timezone
from typing import Optional, TextIO
from contextvars import ContextVar


# Correlation ID shared by every log line emitted while handling one request
correlation_id_context: ContextVar[Optional[str]] = ContextVar('correlation_id', default=None)

# Standard LogRecord attributes that are not copied into the "extra" block
_RESERVED_RECORD_KEYS = frozenset({
    'name', 'msg', 'args', 'levelname', 'levelno', 'pathname', 'filename',
    'module', 'lineno', 'funcName', 'created', 'msecs', 'relativeCreated',
    'thread', 'threadName', 'processName', 'process', 'message', 'exc_info',
    'exc_text', 'stack_info', 'correlation_id', 'taskName'
})


class CorrelationIDFilter(logging.Filter):
    """Add correlation ID to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Add correlation ID to the log record."""
        record.correlation_id = correlation_id_context.get() or "unknown"
        return True


class JSONFormatter(logging.Formatter):
    """Render log records as single-line JSON documents."""

    def __init__(self, service_name: str = "inspection-checklist"):
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "service": self.service_name,
            "logger": record.name,
            "message": record.getMessage(),
            "correlation_id": getattr(record, 'correlation_id', 'unknown'),
        }

        if record.module:
            log_entry["module"] = record.module
        if record.funcName and record.funcName != '<module>':
            log_entry["function"] = record.funcName
        if record.lineno:
            log_entry["line"] = record.lineno

        if record.exc_info:
            log_entry["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": self.formatException(record.exc_info)
            }

        extra_fields = {
            key: value for key, value in record.__dict__.items()
            if key not in _RESERVED_RECORD_KEYS
        }
        if extra_fields:
            log_entry["extra"] = extra_fields

        return json.dumps(log_entry, default=str, ensure_ascii=False)


class LoggingConfig:
    """Root logger setup: one JSON handler tagged with the correlation ID."""

    def __init__(self, log_level: str = "INFO", service_name: str = "inspection-checklist", stream: Optional[TextIO] = None):
        self.log_level = getattr(logging, log_level.upper())
        self.service_name = service_name
        self.stream = stream or sys.stdout

    def setup_logging(self) -> None:
        """Configure the root logger."""
        root_logger = logging.getLogger()
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)

        root_logger.setLevel(self.log_level)

        handler = logging.StreamHandler(self.stream)
        handler.setLevel(self.log_level)
        handler.addFilter(CorrelationIDFilter())
        handler.setFormatter(JSONFormatter(service_name=self.service_name))
        root_logger.addHandler(handler)

        # Quiet down noisy third-party loggers
        for name in ('uvicorn.access', 'httpx'):
            logging.getLogger(name).setLevel(logging.WARNING)


def generate_correlation_id() -> str:
    """Generate a new correlation ID."""
    return str(uuid.uuid4())


def set_correlation_id(correlation_id: str) -> None:
    """Set correlation ID for the current context."""
    correlation_id_context.set(correlation_id)


def clear_correlation_id() -> None:
    """Clear correlation ID from current context."""
    correlation_id_context.set(None)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the specified name."""
    return logging.getLogger(name)


# Convenience functions for common logging patterns
def log_with_extra(logger: logging.Logger, level: int, message: str, **extra) -> None:
    """Log a message with extra fields."""
    logger.log(level, message, extra=extra)


def log_request(logger: logging.Logger, method: str, path: str, **extra) -> None:
    """Log an HTTP request."""
    log_with_extra(
        logger,
        logging.INFO,
        f"HTTP Request: {method} {path}",
        request_method=method,
        request_path=path,
        **extra
    )


def log_response(logger: logging.Logger, method: str, path: str, status_code: int, duration_ms: float, **extra) -> None:
    """Log an HTTP response."""
    level = logging.INFO
    if status_code >= 500:
        level = logging.ERROR
    elif status_code >= 400:
        level = logging.WARNING

    log_with_extra(
        logger,
        level,
        f"HTTP Response: {method} {path} -> {status_code} ({duration_ms:.2f}ms)",
        request_method=method,
        request_path=path,
        response_status=status_code,
        response_duration_ms=round(duration_ms, 2),
        **extra
    )


def log_checklist_mutation(logger: logging.Logger, operation: str, category: str, index: int, **extra) -> None:
    """Log a change to a single checklist item."""
    log_with_extra(
        logger,
        logging.DEBUG,
        f"Checklist {operation}: {category}[{index}]",
        checklist_operation=operation,
        checklist_category=category,
        checklist_index=index,
        **extra
    )


def log_inspection_event(logger: logging.Logger, event: str, **extra) -> None:
    """Log an inspection lifecycle event (start, finalize, step transitions)."""
    log_with_extra(
        logger,
        logging.INFO,
        f"Inspection {event}",
        inspection_event=event,
        **extra
    )


def log_business_rule_violation(logger: logging.Logger, rule: str, details: str, **extra) -> None:
    """Log a business rule violation."""
    log_with_extra(
        logger,
        logging.WARNING,
        f"Business rule violation: {rule} - {details}",
        business_rule=rule,
        violation_details=details,
        **extra
    )
