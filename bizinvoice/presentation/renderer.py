"""
Invoice Table and Dashboard Rendering

Turns a RefreshEvent into display-ready view models and HTML.

DESIGN DECISION: The renderer only sees what a refresh hands it: the
record list in creation order and the dashboard summary. It never
touches the store. Rows come out newest first, numbered from the list
length down to 1, so the oldest invoice is always #1.

IMPORTANT: Customer and product names are user-supplied. Row models
hold them raw; every HTML producer here escapes them.
"""

from typing import Optional, Sequence

from pydantic import BaseModel

from bizinvoice.config import DisplaySettings, get_settings
from bizinvoice.models.invoice import DashboardSummary, InvoiceRecord, RefreshEvent
from bizinvoice.presentation.formatting import (
    escape_text,
    format_currency,
    format_date,
    format_quantity,
)


EMPTY_STATE_MESSAGE = "No invoices yet. Add your first invoice using the form above."

TABLE_HEADERS = ["#", "Date", "Customer", "Product/Service", "Qty", "Price", "Total"]


class InvoiceRow(BaseModel):
    """One table row, formatted for display (text not escaped)."""

    invoice_id: str
    display_index: int
    date: str
    customer_name: str
    product_service: str
    quantity: str
    price: str
    total: str


class DashboardView(BaseModel):
    """Dashboard figures, formatted for display."""

    total_revenue: str
    invoice_count: str
    today_sales: str
    average_invoice: str


class RenderedView(BaseModel):
    rows: list[InvoiceRow]
    dashboard: DashboardView

    @property
    def is_empty(self) -> bool:
        return not self.rows


def build_rows(
    records: Sequence[InvoiceRecord],
    display: Optional[DisplaySettings] = None,
) -> list[InvoiceRow]:
    """Rows for the invoice table, newest first."""
    display = display or get_settings().display
    count = len(records)
    return [
        InvoiceRow(
            invoice_id=record.id,
            display_index=count - position,
            date=format_date(record.date),
            customer_name=record.customer_name,
            product_service=record.product_service,
            quantity=format_quantity(record.quantity),
            price=format_currency(record.price, display),
            total=format_currency(record.total, display),
        )
        for position, record in enumerate(reversed(records))
    ]


def build_dashboard(
    summary: DashboardSummary,
    display: Optional[DisplaySettings] = None,
) -> DashboardView:
    display = display or get_settings().display
    return DashboardView(
        total_revenue=format_currency(summary.total_revenue, display),
        invoice_count=str(summary.invoice_count),
        today_sales=format_currency(summary.today_sales, display),
        average_invoice=format_currency(summary.average_invoice, display),
    )


def render_table_html(rows: Sequence[InvoiceRow]) -> str:
    """
    Render rows as an HTML table.

    An empty row list renders the empty-state message instead.
    """
    if not rows:
        return f'<p class="empty-state">{escape_text(EMPTY_STATE_MESSAGE)}</p>'

    header = "".join(f"<th>{escape_text(label)}</th>" for label in TABLE_HEADERS)
    body = "".join(
        "<tr>"
        f"<td>{row.display_index}</td>"
        f"<td>{escape_text(row.date)}</td>"
        f"<td>{escape_text(row.customer_name)}</td>"
        f"<td>{escape_text(row.product_service)}</td>"
        f"<td>{escape_text(row.quantity)}</td>"
        f"<td>{escape_text(row.price)}</td>"
        f'<td class="total-cell">{escape_text(row.total)}</td>'
        "</tr>"
        for row in rows
    )
    return (
        '<table class="invoices-table">'
        f"<thead><tr>{header}</tr></thead>"
        f"<tbody>{body}</tbody>"
        "</table>"
    )


class InvoiceRenderer:
    """
    Refresh hook that keeps the latest rendered view.

    Register an instance with the workflow; after every refresh,
    `latest` holds the rows and dashboard to draw.
    """

    def __init__(self, display: Optional[DisplaySettings] = None):
        self._display = display or get_settings().display
        self.latest: Optional[RenderedView] = None

    def render(self, event: RefreshEvent) -> RenderedView:
        return RenderedView(
            rows=build_rows(event.records, self._display),
            dashboard=build_dashboard(event.summary, self._display),
        )

    def __call__(self, event: RefreshEvent) -> None:
        self.latest = self.render(event)
