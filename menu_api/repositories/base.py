"""Storage interface every backend implements."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping


class MenuRepository(ABC):
    """CRUD over menu records. Records are plain dicts with ``id`` plus the item fields."""

    name = "base"

    @abstractmethod
    def list_items(self) -> list[dict]:
        ...

    @abstractmethod
    def get_item(self, item_id: int) -> dict:
        """Return the record or raise NotFoundError."""

    @abstractmethod
    def create_item(self, fields: Mapping[str, Any]) -> dict:
        """Store a new record and return it with its assigned id."""

    @abstractmethod
    def update_item(self, item_id: int, changes: Mapping[str, Any]) -> dict:
        """Merge ``changes`` over the record and return the result."""

    @abstractmethod
    def delete_item(self, item_id: int) -> None:
        ...
