"""In-memory key-value storage, for tests and embedding."""

from typing import Optional

from bizinvoice.services.storage.interface import KeyValueStorageInterface, check_key


class InMemoryStorage(KeyValueStorageInterface):
    """Key-value storage held in a plain dict."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(check_key(key))

    def set_item(self, key: str, value: str) -> None:
        self._items[check_key(key)] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(check_key(key), None)
