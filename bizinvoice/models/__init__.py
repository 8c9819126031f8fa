"""
Data Models Package

This package contains all Pydantic models used in BizInvoice.
"""

from bizinvoice.models.invoice import (
    DashboardSummary,
    InvoiceEntry,
    InvoiceList,
    InvoiceRecord,
    RefreshEvent,
    ValidationIssue,
    new_invoice_id,
    utc_now,
)
from bizinvoice.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Invoice models
    "DashboardSummary",
    "InvoiceEntry",
    "InvoiceList",
    "InvoiceRecord",
    "RefreshEvent",
    "ValidationIssue",
    "new_invoice_id",
    "utc_now",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
