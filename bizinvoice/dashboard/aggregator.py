"""
Dashboard Aggregation

DESIGN DECISION: Dashboard figures are a pure function of the invoice
list. Nothing is cached or maintained incrementally; every refresh
recomputes all four figures from scratch. At personal scale this costs
nothing and can never drift out of sync with the stored list.

"Today" means the current local calendar date, compared by
year/month/day, not the last 24 hours.
"""

from datetime import date, datetime
from typing import Optional, Sequence

from bizinvoice.models.invoice import DashboardSummary, InvoiceRecord


def local_date(timestamp: datetime) -> date:
    """
    Calendar date of a timestamp in local time.

    Timezone-aware timestamps are converted to the local zone first;
    naive ones are taken as already local.
    """
    if timestamp.tzinfo is not None:
        timestamp = timestamp.astimezone()
    return timestamp.date()


def is_today(timestamp: datetime, today: Optional[date] = None) -> bool:
    """Check if a timestamp falls on today's local calendar date."""
    return local_date(timestamp) == (today or date.today())


def summarize(
    records: Sequence[InvoiceRecord],
    today: Optional[date] = None,
) -> DashboardSummary:
    """
    Compute the dashboard figures for an invoice list.

    Args:
        records: The full invoice list
        today: Reference date for today's sales (defaults to the
               local current date)
    """
    today = today or date.today()

    total_revenue = sum(record.total for record in records)
    invoice_count = len(records)
    today_sales = sum(
        record.total for record in records if is_today(record.date, today)
    )
    average_invoice = total_revenue / invoice_count if invoice_count > 0 else 0.0

    return DashboardSummary(
        total_revenue=total_revenue,
        invoice_count=invoice_count,
        today_sales=today_sales,
        average_invoice=average_invoice,
    )
