"""
Main Orchestrator for BizInvoice

Ties the components together and defines the two user flows:
1. Submit (form input → validate → create record → append → refresh)
2. Delete (invoice id → remove → refresh)

DESIGN DECISION: The workflow owns no state and reaches for no globals.
The store, validator, audit logger, clock and refresh hooks are all
handed to it, so the UI (or a test) decides what it is wired to.

Refresh is an explicit post-condition of every mutation: after a
successful submit or delete, each registered hook receives the freshly
loaded list and the recomputed dashboard figures.
"""

from datetime import datetime
from typing import Any, Callable, Optional

from bizinvoice.audit import AuditLogger, configure_logging, create_audit_logger
from bizinvoice.config import Settings, get_settings
from bizinvoice.dashboard import summarize
from bizinvoice.models.invoice import InvoiceRecord, RefreshEvent, utc_now
from bizinvoice.services.storage import InvoiceStore, LocalFileStorage
from bizinvoice.validation import InvoiceEntryValidator, ValidationError, parse_number


RefreshHook = Callable[[RefreshEvent], None]


class InvoiceEntryWorkflow:
    """
    Orchestrates invoice entry and deletion.

    Flow:
    1. Validate → all rules, before any mutation
    2. Create → total = quantity * price, fresh id, current timestamp
    3. Append → persist to the store
    4. Refresh → notify every hook

    A failed validation stops at step 1: the store is never touched.
    """

    def __init__(
        self,
        store: InvoiceStore,
        validator: Optional[InvoiceEntryValidator] = None,
        audit_logger: Optional[AuditLogger] = None,
        refresh_hooks: Optional[list[RefreshHook]] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._store = store
        self._validator = validator or InvoiceEntryValidator()
        self._audit_logger = audit_logger
        self._refresh_hooks: list[RefreshHook] = list(refresh_hooks or [])
        self._clock = clock or utc_now

    @property
    def store(self) -> InvoiceStore:
        return self._store

    def add_refresh_hook(self, hook: RefreshHook) -> None:
        """Register a collaborator to notify after every change."""
        self._refresh_hooks.append(hook)

    def preview_total(self, quantity: Any, price: Any) -> float:
        """
        Live total for the form, before submission.

        Non-numeric or missing values count as 0. Never touches the store.
        """
        return (parse_number(quantity) or 0.0) * (parse_number(price) or 0.0)

    def submit(
        self,
        customer_name: Any,
        product_service: Any,
        quantity: Any,
        price: Any,
    ) -> InvoiceRecord:
        """
        Validate form input and record a new invoice.

        Returns:
            The created record

        Raises:
            ValidationError: If the input is invalid. Nothing is saved.
        """
        try:
            entry = self._validator.validate(
                customer_name=customer_name,
                product_service=product_service,
                quantity=quantity,
                price=price,
            )
        except ValidationError as e:
            if self._audit_logger:
                self._audit_logger.log_validation_failed(
                    [issue.model_dump() for issue in e.issues]
                )
            raise

        record = InvoiceRecord.create(
            customer_name=entry.customer_name,
            product_service=entry.product_service,
            quantity=entry.quantity,
            price=entry.price,
            date=self._clock(),
        )
        self._store.append(record)

        if self._audit_logger:
            self._audit_logger.log_invoice_created(
                invoice_id=record.id,
                customer_name=record.customer_name,
                total=record.total,
            )

        self.refresh()
        return record

    def delete(self, invoice_id: str) -> bool:
        """
        Delete an invoice by id.

        Unknown ids are not an error; hooks are refreshed either way.

        Returns:
            True if a record was removed
        """
        removed = self._store.remove(invoice_id)

        if self._audit_logger:
            self._audit_logger.log_invoice_deleted(str(invoice_id), removed)

        self.refresh()
        return removed

    def refresh(self) -> RefreshEvent:
        """Load the current list, recompute the dashboard and notify hooks."""
        records = self._store.load()
        event = RefreshEvent(records=records, summary=summarize(records))
        for hook in self._refresh_hooks:
            hook(event)
        return event


def create_app_components(
    settings: Optional[Settings] = None,
    refresh_hooks: Optional[list[RefreshHook]] = None,
) -> tuple[InvoiceEntryWorkflow, InvoiceStore, AuditLogger]:
    """
    Factory function to create all application components.

    Args:
        settings: Settings to build from (defaults to get_settings())
        refresh_hooks: Collaborators to notify after every change

    Returns:
        (workflow, store, audit_logger)
    """
    settings = settings or get_settings()
    app_settings = settings.app
    storage_settings = settings.storage

    configure_logging(app_settings.log_level)
    audit_logger = create_audit_logger(app_settings.audit_history_size)

    store = InvoiceStore(
        backend=LocalFileStorage(storage_settings.directory),
        key=storage_settings.key,
        audit_logger=audit_logger,
    )

    workflow = InvoiceEntryWorkflow(
        store=store,
        audit_logger=audit_logger,
        refresh_hooks=refresh_hooks,
    )

    return workflow, store, audit_logger
