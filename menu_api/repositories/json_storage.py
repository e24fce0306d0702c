"""
JSON-file persistence adapter.

The whole document (an array of menu records) is read on every call and
rewritten on every mutation. A per-file lock serialises read-modify-write
cycles within the process, and writes land in a temporary file that is
renamed over the document.
"""

from __future__ import annotations

import json
import os
import threading
from pathlib import Path
from typing import Any, Mapping

from menu_api.core.errors import NotFoundError, StorageUnavailableError
from menu_api.domain.menu import merge_record, next_timestamp_id, to_record
from menu_api.repositories.base import MenuRepository

_locks: dict[Path, threading.Lock] = {}
_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.Lock:
    key = path.resolve()
    with _locks_guard:
        return _locks.setdefault(key, threading.Lock())


def load(path: Path) -> list[dict]:
    if not path.exists():
        return []
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise StorageUnavailableError(f"Could not read {path}") from exc
    if not isinstance(data, list):
        raise StorageUnavailableError(f"{path} does not contain a JSON array")
    return data


def save(path: Path, items: list[dict]) -> None:
    tmp = path.with_name(path.name + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp.write_text(json.dumps(items, ensure_ascii=False, indent=2), encoding="utf-8")
        os.replace(tmp, path)
    except OSError as exc:
        raise StorageUnavailableError(f"Could not write {path}") from exc


def _index_of(items: list[dict], item_id: int) -> int:
    for index, item in enumerate(items):
        if item.get("id") == item_id:
            return index
    raise NotFoundError()


class JSONRepository(MenuRepository):
    name = "json"

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._lock = _lock_for(self.path)

    def list_items(self) -> list[dict]:
        with self._lock:
            return load(self.path)

    def get_item(self, item_id: int) -> dict:
        with self._lock:
            items = load(self.path)
        return items[_index_of(items, item_id)]

    def create_item(self, fields: Mapping[str, Any]) -> dict:
        with self._lock:
            items = load(self.path)
            record = to_record(next_timestamp_id(item.get("id", 0) for item in items), fields)
            items.append(record)
            save(self.path, items)
        return record

    def update_item(self, item_id: int, changes: Mapping[str, Any]) -> dict:
        with self._lock:
            items = load(self.path)
            index = _index_of(items, item_id)
            items[index] = merge_record(items[index], changes)
            save(self.path, items)
        return items[index]

    def delete_item(self, item_id: int) -> None:
        with self._lock:
            items = load(self.path)
            remaining = [item for item in items if item.get("id") != item_id]
            if len(remaining) == len(items):
                raise NotFoundError()
            save(self.path, remaining)
