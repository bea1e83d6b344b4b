"""
String-keyed key/value stores behind the storage helpers.

**Conceptual**: The helpers in frontkit.storage.helpers only need three
operations: get, set and remove a string value by key. KeyValueStore captures
that contract as a Protocol, so any backend (a dict, a JSON file, a Redis
client adapter, a test double that always raises) can be plugged in.

Stores are allowed to raise: disk full, permission denied, corrupt file.
Swallowing those errors is the helpers' job, not the store's.
"""

import json
from pathlib import Path
from typing import Dict, Optional, Protocol, Union

from frontkit.config.settings import StorageSettings, get_settings


class KeyValueStore(Protocol):
    """Synchronous string-keyed store."""

    def get_item(self, key: str) -> Optional[str]:
        """Return the stored string, or None when the key is missing."""
        ...

    def set_item(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        ...

    def remove_item(self, key: str) -> None:
        """Delete key. Missing keys are not an error."""
        ...


class MemoryStore:
    """Process-local store backed by a dict."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self):
        return list(self._items)


class JsonFileStore:
    """
    Persistent store kept as a single JSON object in a file.

    **Format**: {"key": "string value", ...}. The file is created on the
    first write (parent directories included) and rewritten in full on every
    change. A missing file reads as an empty store.

    Args:
        path: Location of the JSON file.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        data = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"Storage file {self.path} does not contain a JSON object")
        return data

    def _save(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        tmp_path.replace(self.path)

    def get_item(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._save(data)

    def remove_item(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._save(data)


# Stands in for the browser's per-origin store when no file is configured
_process_store = MemoryStore()


def default_store(settings: Optional[StorageSettings] = None) -> KeyValueStore:
    """
    Return the configured default store.

    A JsonFileStore when FRONTKIT_STORAGE_PATH is set, otherwise a
    process-wide MemoryStore shared by every caller.
    """
    storage_settings = settings if settings is not None else get_settings().storage
    if storage_settings.storage_path is not None:
        return JsonFileStore(storage_settings.storage_path)
    return _process_store
