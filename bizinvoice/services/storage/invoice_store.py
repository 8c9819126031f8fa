"""
Invoice Store

Owns the persisted invoice list: one JSON array under one storage key.

DESIGN DECISION: Every mutation is a read-modify-write of the whole
array. At personal scale this is simpler than any incremental scheme,
and it keeps the stored layout trivially inspectable.

IMPORTANT: load() never raises on bad stored data. A blob that is not
JSON, not an array, or holds an invalid record is logged and treated as
an empty list. Use read() when the caller needs to know.
"""

from typing import Optional, Sequence

import structlog
from pydantic import ValidationError as PydanticValidationError

from bizinvoice.audit import AuditLogger
from bizinvoice.models.invoice import InvoiceList, InvoiceRecord
from bizinvoice.services.storage.interface import (
    KeyValueStorageInterface,
    PersistenceReadError,
    check_key,
)


DEFAULT_STORAGE_KEY = "bizinvoice_invoices"


class InvoiceStore:
    """Load, save, append and remove invoice records over one key."""

    def __init__(
        self,
        backend: KeyValueStorageInterface,
        key: str = DEFAULT_STORAGE_KEY,
        audit_logger: Optional[AuditLogger] = None,
    ):
        """
        Initialize the store.

        Args:
            backend: Key-value storage the list is persisted in
            key: Storage key holding the JSON array
            audit_logger: Where recovered read failures and saves are
                          reported. If None, read failures go to the
                          module logger.
        """
        self._backend = backend
        self._key = check_key(key)
        self._audit_logger = audit_logger
        self._logger = structlog.get_logger(__name__)

    @property
    def key(self) -> str:
        return self._key

    def read(self) -> list[InvoiceRecord]:
        """
        Read the persisted list, strictly.

        Returns:
            Records in creation order (oldest first). Empty if
            nothing has been stored yet.

        Raises:
            PersistenceReadError: If the stored data is unreadable
        """
        blob = self._backend.get_item(self._key)
        if not blob:
            return []
        try:
            return InvoiceList.validate_json(blob)
        except PydanticValidationError as e:
            raise PersistenceReadError(
                f"Stored invoices under {self._key!r} are malformed: "
                f"{e.error_count()} error(s), first: {e.errors()[0]['msg']}"
            ) from e

    def load(self) -> list[InvoiceRecord]:
        """Read the persisted list, falling back to empty on any read error."""
        try:
            return self.read()
        except PersistenceReadError as e:
            if self._audit_logger:
                self._audit_logger.log_store_read_failed(self._key, str(e))
            else:
                self._logger.warning(
                    "invoice_store_read_failed",
                    key=self._key,
                    error=str(e),
                )
            return []

    def save(self, records: Sequence[InvoiceRecord]) -> None:
        """Overwrite the persisted list with the given records."""
        blob = InvoiceList.dump_json(list(records), by_alias=True).decode("utf-8")
        self._backend.set_item(self._key, blob)
        if self._audit_logger:
            self._audit_logger.log_store_saved(self._key, len(records))

    def append(self, record: InvoiceRecord) -> None:
        """Add a record to the end of the list."""
        records = self.load()
        records.append(record)
        self.save(records)

    def remove(self, invoice_id: str) -> bool:
        """
        Remove the record with the given id.

        Missing ids are not an error: the list is saved back unchanged.

        Returns:
            True if a record was removed
        """
        records = self.load()
        kept = [record for record in records if record.id != str(invoice_id)]
        self.save(kept)
        return len(kept) != len(records)

    def get(self, invoice_id: str) -> Optional[InvoiceRecord]:
        """Look up a record by id."""
        for record in self.load():
            if record.id == str(invoice_id):
                return record
        return None
