from __future__ import annotations

import json
import logging
import threading
from pathlib import Path

from clinix.application.ports.client_storage import ClientStoragePort

logger = logging.getLogger(__name__)


class JsonClientStorage(ClientStoragePort):
    """Key/value items kept in a single JSON file, so they survive a restart."""

    def __init__(self, data_dir: str = "./data/storage", file_name: str = "client_storage.json") -> None:
        self._data_dir = Path(data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)
        self._file_path = self._data_dir / file_name
        self._lock = threading.Lock()

    def get_item(self, key: str) -> str | None:
        with self._lock:
            return self._load_items().get(key)

    def set_item(self, key: str, value: str) -> None:
        with self._lock:
            items = self._load_items()
            items[key] = value
            self._save_items(items)

    def remove_item(self, key: str) -> None:
        with self._lock:
            items = self._load_items()
            if key not in items:
                return
            del items[key]
            self._save_items(items)

    def _load_items(self) -> dict[str, str]:
        """Load items from disk, return empty if missing or corrupted."""
        if not self._file_path.exists():
            return {}

        try:
            with open(self._file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            logger.warning("Client storage unreadable, starting empty", extra={"reason": str(e)})
            return {}

        if not isinstance(data, dict):
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def _save_items(self, items: dict[str, str]) -> None:
        """Save items to disk atomically."""
        temp_path = self._file_path.with_suffix(".json.tmp")

        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump(items, f, indent=2, ensure_ascii=False)
            # Atomic rename
            temp_path.replace(self._file_path)
        except Exception:
            if temp_path.exists():
                temp_path.unlink(missing_ok=True)
            raise
