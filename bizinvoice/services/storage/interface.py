"""
Abstract Storage Interface

DESIGN DECISION: The invoice list lives under a single key in a plain
key-value store holding strings, the same shape as browser local storage.
Defining that seam as an interface allows us to:
1. Keep the list in a local JSON file for the app
2. Use in-memory storage for testing
3. Swap in another backend without touching the invoice logic

The interface is intentionally tiny: get, set and remove one string.
"""

import re
from abc import ABC, abstractmethod
from typing import Optional


# Keys double as file names in the local backend
VALID_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")


class KeyValueStorageInterface(ABC):
    """
    Abstract interface for string key-value storage.

    Any backend (local files, memory, a database table)
    must implement these methods.
    """

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """
        Read the value stored under a key.

        Returns:
            The stored string, or None if nothing is stored

        Raises:
            PersistenceReadError: If the stored value cannot be read
        """
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """
        Store a value under a key, replacing any previous value.

        Raises:
            StorageError: If the write fails
        """
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """
        Remove a key. Removing a missing key is a no-op.
        """
        pass


def check_key(key: str) -> str:
    """Reject keys that are empty or could escape a storage directory."""
    if not key or not VALID_KEY.match(key) or key in {".", ".."}:
        raise StorageError(f"Invalid storage key: {key!r}")
    return key


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class PersistenceReadError(StorageError):
    """Persisted data is malformed or could not be read."""
    pass
