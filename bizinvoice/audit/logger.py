"""
Audit Logger

Every change to the invoice list is logged, along with rejected
submissions and storage reads that had to be recovered from.

The audit logger:
- Writes one structured log line per event at the event's severity
- Keeps a bounded history of recent events for the activity panel
- Never raises because logging failed
"""

import logging
from collections import deque
from typing import Callable, Optional

import structlog

from bizinvoice.config import get_settings
from bizinvoice.models.audit import AuditEvent, AuditEventBuilder


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


def configure_logging(level: str = "INFO") -> None:
    """Route structlog output through a stdlib handler at the given level."""
    logging.basicConfig(format="%(message)s", level=getattr(logging, level, logging.INFO))


class AuditLogger:
    """Central audit logging service."""

    def __init__(self, history_size: int = 200):
        """
        Initialize audit logger.

        Args:
            history_size: How many recent events to keep in memory.
                          Zero disables the history.
        """
        self._history: deque[AuditEvent] = deque(maxlen=history_size)
        self._logger = structlog.get_logger("bizinvoice.audit")

    @property
    def history(self) -> list[AuditEvent]:
        """Recent events, newest first."""
        return list(reversed(self._history))

    def log(self, event: AuditEvent) -> None:
        """Log an audit event locally and remember it."""
        try:
            log_dict = event.to_log_dict()
            if event.severity.value == "error":
                self._logger.error("audit_event", **log_dict)
            elif event.severity.value == "warning":
                self._logger.warning("audit_event", **log_dict)
            elif event.severity.value == "debug":
                self._logger.debug("audit_event", **log_dict)
            else:
                self._logger.info("audit_event", **log_dict)
        except Exception as e:
            self._report_failure(event.event_type.value, e)

        if self._history.maxlen:
            self._history.append(event)

    def _report_failure(self, event_type: str, error: Exception) -> None:
        try:
            self._logger.error("audit_logging_failed", event_type=event_type, error=str(error))
        except Exception:
            # the logger itself is broken; nothing left to report to
            pass

    def _emit(self, event_type: str, build: Callable[..., AuditEvent], **kwargs) -> None:
        """Build an event and log it. Runs after a mutation, so it never raises."""
        try:
            event = build(**kwargs)
        except Exception as e:
            self._report_failure(event_type, e)
            return
        self.log(event)

    def log_invoice_created(
        self,
        invoice_id: str,
        customer_name: str,
        total: float,
    ) -> None:
        """Log a newly created invoice."""
        self._emit(
            "invoice_created",
            AuditEventBuilder.invoice_created,
            invoice_id=invoice_id,
            customer_name=customer_name,
            total=total,
        )

    def log_invoice_deleted(self, invoice_id: str, removed: bool) -> None:
        """Log a delete request and whether it removed anything."""
        self._emit(
            "invoice_deleted",
            AuditEventBuilder.invoice_deleted,
            invoice_id=invoice_id,
            removed=removed,
        )

    def log_validation_failed(self, issues: list[dict]) -> None:
        """Log a rejected submission."""
        self._emit(
            "validation_failed",
            AuditEventBuilder.validation_failed,
            issues=issues,
        )

    def log_store_read_failed(self, key: str, error_message: str) -> None:
        """Log stored data that could not be read."""
        self._emit(
            "store_read_failed",
            AuditEventBuilder.store_read_failed,
            key=key,
            error_message=error_message,
        )

    def log_store_saved(self, key: str, record_count: int) -> None:
        self._emit(
            "store_saved",
            AuditEventBuilder.store_saved,
            key=key,
            record_count=record_count,
        )


def create_audit_logger(history_size: Optional[int] = None) -> AuditLogger:
    """Create an audit logger sized from settings unless told otherwise."""
    if history_size is None:
        history_size = get_settings().app.audit_history_size
    return AuditLogger(history_size=history_size)
