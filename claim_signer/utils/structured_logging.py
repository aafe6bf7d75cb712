"""
Structured JSON logging for signing services.

Enables correlation IDs, structured event fields and credential redaction.
"""

import logging
import uuid
import re
from typing import Optional
from contextvars import ContextVar

from pythonjsonlogger import jsonlogger

# Per-context correlation ID storage
_correlation_id: ContextVar[Optional[str]] = ContextVar('correlation_id', default=None)


class CredentialRedactionFilter(logging.Filter):
    """
    Security filter that redacts signing keys from log records.

    Private keys are 0x followed by exactly 64 hex chars. Digests, r and s
    values have the same shape, so they are only redacted when labelled as
    a key (``private_key=...``, ``key: ...``).

    Usage:
        >>> handler = logging.StreamHandler()
        >>> handler.addFilter(CredentialRedactionFilter())
        >>> logger.addHandler(handler)
    """

    LABELLED_KEY_PATTERN = re.compile(
        r'((?:private_key|privkey|secret|key)["\']?\s*[:=]\s*["\']?)(?:0x)?[0-9a-fA-F]{64}\b',
        re.IGNORECASE
    )

    def filter(self, record: logging.LogRecord) -> bool:
        """
        Redact credentials from log record.

        Returns:
            Always True (record is never dropped, just sanitized)
        """
        if record.msg:
            record.msg = self.redact(str(record.msg))

        if record.args:
            if isinstance(record.args, dict):
                record.args = {k: self.redact(str(v)) for k, v in record.args.items()}
            elif isinstance(record.args, tuple):
                record.args = tuple(self.redact(str(arg)) for arg in record.args)

        extra_fields = getattr(record, "extra_fields", None)
        if extra_fields:
            record.extra_fields = {
                k: self.redact(v) if isinstance(v, str) else v
                for k, v in extra_fields.items()
            }

        if record.exc_text:
            record.exc_text = self.redact(record.exc_text)

        return True

    def redact(self, text: str) -> str:
        """Replace labelled private keys with a placeholder."""
        if not text:
            return text
        return self.LABELLED_KEY_PATTERN.sub(r'\1[REDACTED]', text)


class StructuredFormatter(jsonlogger.JsonFormatter):
    """
    JSON formatter adding correlation ID and structured event fields.
    """

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record["level"] = record.levelname
        log_record["logger"] = record.name

        correlation_id = _correlation_id.get()
        if correlation_id:
            log_record["correlation_id"] = correlation_id

        log_record.pop("extra_fields", None)
        extra_fields = getattr(record, "extra_fields", None)
        if extra_fields:
            log_record.update(extra_fields)


class StructuredLogger:
    """
    Structured logger wrapper.

    Logs an event name plus keyword fields; fields travel on the record as
    ``extra_fields`` and are emitted as JSON keys by StructuredFormatter.
    """

    def __init__(self, name: str):
        """Initialize structured logger."""
        self.logger = logging.getLogger(name)

    def _log(
        self,
        level: int,
        event: str,
        message: Optional[str] = None,
        **fields
    ) -> None:
        log_message = f"{event}: {message}" if message else event

        extra_fields = {"event": event}
        extra_fields.update(fields)

        self.logger.log(level, log_message, extra={'extra_fields': extra_fields})

    def info(self, event: str, message: Optional[str] = None, **fields) -> None:
        """
        Log info event.

        Example:
            >>> logger.info(
            ...     "claim_signed",
            ...     uuid="123456789",
            ...     user_address="0x10E3a183DB48D854870FedA31630BC1EB0ddD52A",
            ...     digest="0x5c0e...",
            ... )
        """
        self._log(logging.INFO, event, message, **fields)

    def warning(self, event: str, message: Optional[str] = None, **fields) -> None:
        """Log warning event."""
        self._log(logging.WARNING, event, message, **fields)


def set_correlation_id(correlation_id: Optional[str] = None) -> str:
    """
    Set correlation ID for current context.

    Args:
        correlation_id: Correlation ID (generates one if None)

    Returns:
        The correlation ID set
    """
    if correlation_id is None:
        correlation_id = f"req_{uuid.uuid4().hex[:12]}"

    _correlation_id.set(correlation_id)
    return correlation_id


def clear_correlation_id() -> None:
    """Clear correlation ID from current context."""
    _correlation_id.set(None)


def get_logger(name: str) -> StructuredLogger:
    """Get structured logger instance."""
    return StructuredLogger(name)
