"""
Audit Models for BizInvoice

Every change to the invoice list, every rejected submission and every
recovered storage failure is recorded as an AuditEvent.

DESIGN DECISION: Audit events are append-only. We never modify them.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Entry workflow
    INVOICE_CREATED = "invoice_created"
    INVOICE_DELETED = "invoice_deleted"
    INVOICE_DELETE_MISSED = "invoice_delete_missed"
    VALIDATION_FAILED = "validation_failed"

    # Persistence
    STORE_READ_FAILED = "store_read_failed"
    STORE_SAVED = "store_saved"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditEvent(BaseModel):
    """A single audit event."""

    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the event occurred (UTC)"
    )

    event_type: AuditEventType
    severity: AuditSeverity = Field(default=AuditSeverity.INFO)

    entity_id: Optional[str] = Field(
        default=None,
        description="Invoice id or storage key this event relates to"
    )
    description: str = Field(
        ...,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(default_factory=dict)

    error_message: Optional[str] = None
    is_user_action: bool = Field(
        default=False,
        description="Was this triggered by a user action?"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_id": self.entity_id,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
            "is_user_action": self.is_user_action,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.invoice_created(invoice_id, "Acme", 30.0)
        audit_logger.log(event)
    """

    @staticmethod
    def invoice_created(
        invoice_id: str,
        customer_name: str,
        total: float,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.INVOICE_CREATED,
            entity_id=invoice_id,
            description="Invoice created",
            details={"customer_name": customer_name, "total": total},
            is_user_action=True,
        )

    @staticmethod
    def invoice_deleted(invoice_id: str, removed: bool) -> AuditEvent:
        if removed:
            return AuditEvent(
                event_type=AuditEventType.INVOICE_DELETED,
                entity_id=invoice_id,
                description="Invoice deleted",
                is_user_action=True,
            )
        return AuditEvent(
            event_type=AuditEventType.INVOICE_DELETE_MISSED,
            severity=AuditSeverity.WARNING,
            entity_id=invoice_id,
            description="Delete requested for an invoice that does not exist",
            is_user_action=True,
        )

    @staticmethod
    def validation_failed(issues: list[dict]) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.VALIDATION_FAILED,
            severity=AuditSeverity.WARNING,
            description=f"Invoice entry rejected with {len(issues)} issue(s)",
            details={"issues": issues},
            is_user_action=True,
        )

    @staticmethod
    def store_read_failed(key: str, error_message: str) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.STORE_READ_FAILED,
            severity=AuditSeverity.WARNING,
            entity_id=key,
            description="Stored invoices could not be read; using an empty list",
            error_message=error_message,
        )

    @staticmethod
    def store_saved(key: str, record_count: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.STORE_SAVED,
            severity=AuditSeverity.DEBUG,
            entity_id=key,
            description="Invoice list saved",
            details={"record_count": record_count},
        )
