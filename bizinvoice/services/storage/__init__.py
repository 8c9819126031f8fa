"""
Storage Services Package

Provides the key-value storage interface, its local file and in-memory
implementations, and the invoice store built on top of them.
"""

from bizinvoice.services.storage.interface import (
    KeyValueStorageInterface,
    PersistenceReadError,
    StorageError,
    check_key,
)
from bizinvoice.services.storage.local_file import LocalFileStorage
from bizinvoice.services.storage.memory import InMemoryStorage
from bizinvoice.services.storage.invoice_store import (
    DEFAULT_STORAGE_KEY,
    InvoiceStore,
)

__all__ = [
    # Interfaces
    "KeyValueStorageInterface",
    "check_key",
    # Exceptions
    "PersistenceReadError",
    "StorageError",
    # Backends
    "InMemoryStorage",
    "LocalFileStorage",
    # Invoice store
    "DEFAULT_STORAGE_KEY",
    "InvoiceStore",
]
