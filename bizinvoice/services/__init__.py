"""Services package."""

from bizinvoice.services.storage import (
    DEFAULT_STORAGE_KEY,
    InMemoryStorage,
    InvoiceStore,
    KeyValueStorageInterface,
    LocalFileStorage,
    PersistenceReadError,
    StorageError,
)

__all__ = [
    "DEFAULT_STORAGE_KEY",
    "InMemoryStorage",
    "InvoiceStore",
    "KeyValueStorageInterface",
    "LocalFileStorage",
    "PersistenceReadError",
    "StorageError",
]
