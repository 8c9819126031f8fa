"""
Streamlit Frontend for BizInvoice

The page a shop owner keeps open while making sales:
1. Dashboard figures at the top
2. The invoice entry form with a live total
3. Every invoice so far, newest first, with delete

The UI holds no invoice logic. It collects form values, hands them to
the workflow, and draws whatever the last refresh produced.
"""

import streamlit as st

from bizinvoice.orchestrator import InvoiceEntryWorkflow, create_app_components
from bizinvoice.presentation import (
    TABLE_HEADERS,
    InvoiceRenderer,
    RenderedView,
    format_currency,
    render_table_html,
)
from bizinvoice.services.storage import StorageError
from bizinvoice.validation import ValidationError


FORM_FIELDS = ("customer_name", "product_service", "quantity", "price")


# Page configuration
st.set_page_config(
    page_title="BizInvoice",
    page_icon="🧾",
    layout="wide",
)

st.markdown("""
<style>
    .invoices-table {
        width: 100%;
        border-collapse: collapse;
    }
    .invoices-table th, .invoices-table td {
        padding: 8px 12px;
        border-bottom: 1px solid #e0e0e0;
        text-align: left;
    }
    .invoices-table .total-cell {
        font-weight: bold;
    }
    .empty-state {
        padding: 20px;
        color: #6c757d;
        text-align: center;
    }
</style>
""", unsafe_allow_html=True)


@st.cache_resource
def get_components():
    """Get or create application components (cached)."""
    renderer = InvoiceRenderer()
    workflow, store, audit_logger = create_app_components(refresh_hooks=[renderer])
    return workflow, renderer, audit_logger


def _reset_form() -> None:
    for field in FORM_FIELDS:
        st.session_state[field] = ""


def _handle_submit(workflow: InvoiceEntryWorkflow) -> None:
    """Submit button callback; runs before the page is redrawn."""
    try:
        record = workflow.submit(
            customer_name=st.session_state.get("customer_name"),
            product_service=st.session_state.get("product_service"),
            quantity=st.session_state.get("quantity"),
            price=st.session_state.get("price"),
        )
    except ValidationError as e:
        st.session_state.flash = ("error", e.message)
        return
    except StorageError as e:
        st.session_state.flash = ("error", f"Could not save the invoice: {e}")
        return

    st.session_state.flash = (
        "success",
        f"Invoice saved for {record.customer_name}: {format_currency(record.total)}",
    )
    _reset_form()


def _handle_delete(workflow: InvoiceEntryWorkflow, invoice_id: str) -> None:
    if workflow.delete(invoice_id):
        st.session_state.flash = ("success", "Invoice deleted.")
    else:
        st.session_state.flash = ("warning", "That invoice was already gone.")


def main():
    """Main application entry point."""
    workflow, renderer, audit_logger = get_components()

    for field in FORM_FIELDS:
        st.session_state.setdefault(field, "")

    workflow.refresh()
    view = renderer.latest

    st.title("🧾 BizInvoice")
    st.caption("Invoicing & sales tracking")

    render_dashboard(view)
    st.markdown("---")
    render_entry_form(workflow)
    st.markdown("---")
    render_invoices(workflow, view)

    with st.expander("🕘 Recent activity"):
        history = audit_logger.history
        if not history:
            st.write("Nothing yet.")
        for event in history[:20]:
            st.text(f"{event.timestamp:%H:%M:%S}  {event.description}")


def render_dashboard(view: RenderedView):
    """Render the four dashboard figures."""
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Total Revenue", view.dashboard.total_revenue)
    col2.metric("Total Invoices", view.dashboard.invoice_count)
    col3.metric("Today's Sales", view.dashboard.today_sales)
    col4.metric("Average Invoice", view.dashboard.average_invoice)


def render_entry_form(workflow: InvoiceEntryWorkflow):
    """Render the entry form and the message from the last action."""
    st.subheader("New Invoice")

    flash = st.session_state.pop("flash", None)
    if flash:
        kind, message = flash
        getattr(st, kind)(message)

    col1, col2 = st.columns(2)
    with col1:
        st.text_input("Customer Name *", key="customer_name")
        st.text_input("Quantity *", key="quantity", placeholder="1")
    with col2:
        st.text_input("Product/Service *", key="product_service")
        st.text_input("Unit Price *", key="price", placeholder="0.00")

    preview = workflow.preview_total(
        st.session_state.get("quantity"),
        st.session_state.get("price"),
    )
    st.text_input("Total Amount", value=format_currency(preview), disabled=True)

    st.button(
        "➕ Add Invoice",
        type="primary",
        on_click=_handle_submit,
        args=(workflow,),
    )


def render_invoices(workflow: InvoiceEntryWorkflow, view: RenderedView):
    """Render the invoices, newest first, each with its own delete button."""
    st.subheader("Invoices")

    if view.is_empty:
        st.markdown(render_table_html(view.rows), unsafe_allow_html=True)
        return

    widths = [0.5, 1.2, 2, 2, 0.7, 1.2, 1.2, 0.8]
    for col, label in zip(st.columns(widths), TABLE_HEADERS + [""]):
        col.markdown(f"**{label}**" if label else "")

    for row in view.rows:
        cols = st.columns(widths)
        cells = [
            f"#{row.display_index}",
            row.date,
            row.customer_name,
            row.product_service,
            row.quantity,
            row.price,
            row.total,
        ]
        # st.text never interprets markup in user-supplied names
        for col, cell in zip(cols, cells):
            col.text(cell)
        cols[-1].button(
            "🗑️",
            key=f"delete_{row.invoice_id}",
            help="Delete this invoice",
            on_click=_handle_delete,
            args=(workflow, row.invoice_id),
        )

    with st.expander("📋 Printable table"):
        st.markdown(render_table_html(view.rows), unsafe_allow_html=True)


if __name__ == "__main__":
    main()
