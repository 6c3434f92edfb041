from __future__ import annotations

from clinix.application.ports.client_storage import ClientStoragePort


class MemoryClientStorage(ClientStoragePort):
    def __init__(self) -> None:
        self._items: dict[str, str] = {}

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)
