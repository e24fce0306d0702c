"""In-process list backend, seeded from a JSON document or an explicit list."""

from __future__ import annotations

import copy
import threading
from pathlib import Path
from typing import Any, Iterable, Mapping

from menu_api.core.errors import NotFoundError
from menu_api.domain.menu import merge_record, next_sequential_id, to_record
from menu_api.repositories.json_storage import load as load_document
from menu_api.repositories.base import MenuRepository


class MemoryRepository(MenuRepository):
    name = "memory"

    def __init__(self, items: Iterable[Mapping[str, Any]] | None = None) -> None:
        self._items: list[dict] = [dict(item) for item in (items or [])]
        self._lock = threading.Lock()

    @classmethod
    def from_file(cls, path: Path) -> "MemoryRepository":
        return cls(load_document(path))

    def _find(self, item_id: int) -> int:
        for index, item in enumerate(self._items):
            if item.get("id") == item_id:
                return index
        raise NotFoundError()

    def list_items(self) -> list[dict]:
        with self._lock:
            return copy.deepcopy(self._items)

    def get_item(self, item_id: int) -> dict:
        with self._lock:
            return dict(self._items[self._find(item_id)])

    def create_item(self, fields: Mapping[str, Any]) -> dict:
        with self._lock:
            record = to_record(next_sequential_id(item.get("id", 0) for item in self._items), fields)
            self._items.append(record)
            return dict(record)

    def update_item(self, item_id: int, changes: Mapping[str, Any]) -> dict:
        with self._lock:
            index = self._find(item_id)
            self._items[index] = merge_record(self._items[index], changes)
            return dict(self._items[index])

    def delete_item(self, item_id: int) -> None:
        with self._lock:
            del self._items[self._find(item_id)]
