"""Tests for key-value backends and the invoice store."""

import json

import pytest

from bizinvoice.audit import AuditLogger
from bizinvoice.models.audit import AuditEventType
from bizinvoice.models.invoice import InvoiceRecord
from bizinvoice.services.storage import (
    DEFAULT_STORAGE_KEY,
    InMemoryStorage,
    InvoiceStore,
    LocalFileStorage,
    PersistenceReadError,
    StorageError,
)


LEGACY_BLOB = json.dumps([
    {
        "id": "1700000000000",
        "date": "2024-01-02T03:04:05.000Z",
        "customerName": "Acme",
        "productService": "Widget",
        "quantity": 3,
        "price": 10,
        "total": 30,
    },
    {
        "id": "1700000000001",
        "date": "2024-01-03T08:00:00.000Z",
        "customerName": "Globex",
        "productService": "Consulting",
        "quantity": 2,
        "price": 35,
        "total": 70,
    },
])


@pytest.fixture(params=["memory", "file"])
def backend(request, tmp_path):
    """Run store tests against both backends."""
    if request.param == "memory":
        return InMemoryStorage()
    return LocalFileStorage(tmp_path / "store")


def _record(name: str, quantity: float = 1, price: float = 10) -> InvoiceRecord:
    return InvoiceRecord.create(name, "Widget", quantity, price)


class TestBackends:
    """Tests for the key-value backends."""

    def test_missing_key_is_none(self, backend):
        """Test that an unknown key reads as None."""
        assert backend.get_item("nothing_here") is None

    def test_set_then_get(self, backend):
        """Test a basic write and read."""
        backend.set_item("k", "value")
        assert backend.get_item("k") == "value"

    def test_set_overwrites(self, backend):
        """Test that a second write replaces the first."""
        backend.set_item("k", "first")
        backend.set_item("k", "second")
        assert backend.get_item("k") == "second"

    def test_remove_item(self, backend):
        """Test removal, including of a missing key."""
        backend.set_item("k", "value")
        backend.remove_item("k")
        backend.remove_item("k")
        assert backend.get_item("k") is None

    @pytest.mark.parametrize("key", ["", "../escape", "a/b", ".."])
    def test_rejects_unsafe_keys(self, backend, key):
        """Test that keys cannot be empty or escape the directory."""
        with pytest.raises(StorageError):
            backend.set_item(key, "value")

    def test_file_layout(self, tmp_path):
        """Test that each key is kept in <directory>/<key>.json."""
        storage = LocalFileStorage(tmp_path / "nested" / "dir")
        storage.set_item("bizinvoice_invoices", "[]")
        assert (tmp_path / "nested" / "dir" / "bizinvoice_invoices.json").read_text() == "[]"
        assert [p.name for p in (tmp_path / "nested" / "dir").iterdir()] == [
            "bizinvoice_invoices.json"
        ]

    def test_undecodable_file_raises_read_error(self, tmp_path):
        """Test that unreadable bytes surface as PersistenceReadError."""
        storage = LocalFileStorage(tmp_path)
        (tmp_path / "k.json").write_bytes(b"\xff\xfe\xfa")
        with pytest.raises(PersistenceReadError):
            storage.get_item("k")


class TestInvoiceStore:
    """Tests for load/save/append/remove."""

    def test_default_key(self, backend):
        """Test the default storage key."""
        assert InvoiceStore(backend).key == DEFAULT_STORAGE_KEY == "bizinvoice_invoices"

    def test_empty_store_loads_empty(self, backend):
        """Test lazy creation: nothing stored means an empty list."""
        store = InvoiceStore(backend)
        assert store.load() == []
        assert store.read() == []

    def test_empty_string_loads_empty(self, backend):
        """Test that an empty stored value is an empty list."""
        backend.set_item(DEFAULT_STORAGE_KEY, "")
        assert InvoiceStore(backend).load() == []

    def test_append_then_load(self, backend):
        """Test that the appended record is last, with all fields intact."""
        store = InvoiceStore(backend)
        store.append(_record("Acme"))
        record = InvoiceRecord.create("Globex", "Consulting", 2, 35)
        store.append(record)

        loaded = store.load()
        assert len(loaded) == 2
        assert loaded[-1] == record
        assert loaded[-1].total == 70

    def test_save_overwrites(self, backend):
        """Test that save replaces the whole list."""
        store = InvoiceStore(backend)
        store.append(_record("Acme"))
        store.append(_record("Globex"))
        replacement = [_record("Initech")]
        store.save(replacement)
        assert store.load() == replacement

    def test_persisted_layout(self, backend):
        """Test that storage holds a JSON array with camelCase keys."""
        store = InvoiceStore(backend)
        store.append(_record("Acme", quantity=3, price=10))
        data = json.loads(backend.get_item(DEFAULT_STORAGE_KEY))
        assert isinstance(data, list)
        assert set(data[0]) == {
            "id", "date", "customerName", "productService",
            "quantity", "price", "total",
        }
        assert data[0]["total"] == 30

    def test_remove_keeps_others_in_order(self, backend):
        """Test that remove drops only the matching id."""
        store = InvoiceStore(backend)
        records = [_record(name) for name in ("A", "B", "C", "D")]
        store.save(records)

        assert store.remove(records[1].id) is True

        loaded = store.load()
        assert [r.id for r in loaded] == [records[0].id, records[2].id, records[3].id]
        assert loaded == [records[0], records[2], records[3]]

    def test_remove_missing_id_is_noop(self, backend):
        """Test that removing an unknown id changes nothing."""
        store = InvoiceStore(backend)
        records = [_record("A"), _record("B")]
        store.save(records)

        assert store.remove("does-not-exist") is False
        assert store.load() == records

    def test_get(self, backend):
        """Test lookup by id."""
        store = InvoiceStore(backend)
        record = _record("Acme")
        store.append(record)
        assert store.get(record.id) == record
        assert store.get("missing") is None

    def test_reads_legacy_blob(self, backend):
        """Test that an existing stored list is read as-is."""
        backend.set_item(DEFAULT_STORAGE_KEY, LEGACY_BLOB)
        loaded = InvoiceStore(backend).load()
        assert [r.customer_name for r in loaded] == ["Acme", "Globex"]
        assert [r.total for r in loaded] == [30, 70]

    def test_save_load_is_idempotent(self, backend):
        """Test that save(load()) twice leaves the same bytes as once."""
        backend.set_item(DEFAULT_STORAGE_KEY, LEGACY_BLOB)
        store = InvoiceStore(backend)

        store.save(store.load())
        once = backend.get_item(DEFAULT_STORAGE_KEY)
        store.save(store.load())
        twice = backend.get_item(DEFAULT_STORAGE_KEY)

        assert once == twice

    @pytest.mark.parametrize("blob", [
        "not json",
        "{\"id\": \"1\"}",
        "[{\"id\": \"1\"}]",
        "[1, 2, 3]",
        "   ",
    ])
    def test_malformed_blob_fails_soft(self, backend, blob):
        """Test that bad stored data loads as an empty list."""
        backend.set_item(DEFAULT_STORAGE_KEY, blob)
        store = InvoiceStore(backend)
        assert store.load() == []
        with pytest.raises(PersistenceReadError):
            store.read()

    def test_malformed_blob_is_audited(self, backend):
        """Test that a recovered read failure is logged."""
        audit_logger = AuditLogger()
        backend.set_item(DEFAULT_STORAGE_KEY, "not json")
        store = InvoiceStore(backend, audit_logger=audit_logger)

        store.load()

        event_types = [event.event_type for event in audit_logger.history]
        assert AuditEventType.STORE_READ_FAILED in event_types

    def test_append_over_malformed_blob_starts_fresh(self, backend):
        """Test that a corrupt list is replaced on the next write."""
        backend.set_item(DEFAULT_STORAGE_KEY, "not json")
        store = InvoiceStore(backend)
        record = _record("Acme")
        store.append(record)
        assert store.read() == [record]

    def test_custom_key(self, backend):
        """Test that the store only touches its own key."""
        backend.set_item("other", "untouched")
        store = InvoiceStore(backend, key="shop_two")
        store.append(_record("Acme"))
        assert backend.get_item("other") == "untouched"
        assert backend.get_item(DEFAULT_STORAGE_KEY) is None

    def test_invalid_key_rejected(self, backend):
        """Test that an unsafe key is refused at construction."""
        with pytest.raises(StorageError):
            InvoiceStore(backend, key="../x")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
