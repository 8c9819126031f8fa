"""Presentation package: formatting and rendering of invoices."""

from bizinvoice.presentation.formatting import (
    escape_text,
    format_currency,
    format_date,
    format_quantity,
)
from bizinvoice.presentation.renderer import (
    EMPTY_STATE_MESSAGE,
    TABLE_HEADERS,
    DashboardView,
    InvoiceRenderer,
    InvoiceRow,
    RenderedView,
    build_dashboard,
    build_rows,
    render_table_html,
)

__all__ = [
    "EMPTY_STATE_MESSAGE",
    "TABLE_HEADERS",
    "DashboardView",
    "InvoiceRenderer",
    "InvoiceRow",
    "RenderedView",
    "build_dashboard",
    "build_rows",
    "escape_text",
    "format_currency",
    "format_date",
    "format_quantity",
    "render_table_html",
]
