"""
Local key-value stores with browser localStorage semantics.

Keys and values are strings. The file-backed store keeps every key in a
single JSON object on disk.
"""
import json
import logging
from pathlib import Path
from typing import Optional, Protocol


logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Minimal string key-value store interface."""

    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class MemoryStore:
    """Dict-backed store, used when nothing is persisted."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._items = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = str(value)

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class JsonFileStore:
    """
    Store persisted as one JSON object file.

    A missing file reads as an empty store. A corrupt file also reads as
    empty and is logged; it is only rewritten on the next set/remove.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read_all(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError, RecursionError) as e:
            logger.warning("Could not read local store %s: %s", self.path, e)
            return {}

        if not isinstance(data, dict):
            logger.warning("Local store %s is not a JSON object, ignoring it", self.path)
            return {}
        return data

    def _write_all(self, data: dict):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    def get_item(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        if value is None or isinstance(value, str):
            return value
        # Hand-edited files may hold the object itself instead of its JSON text
        return json.dumps(value)

    def set_item(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = str(value)
        self._write_all(data)

    def remove_item(self, key: str) -> None:
        data = self._read_all()
        if key in data:
            del data[key]
            self._write_all(data)
