"""
Persistence adapters.

Three interchangeable backends implement :class:`MenuRepository`: an
in-process list, a JSON document on disk and a SQL table. The backend is
picked once at startup from the settings.
"""

from __future__ import annotations

from menu_api.core.config import STORAGE_BACKENDS, Settings
from menu_api.repositories.base import MenuRepository
from menu_api.repositories.json_storage import JSONRepository
from menu_api.repositories.memory_storage import MemoryRepository
from menu_api.repositories.sql_repository import SQLRepository

__all__ = [
    "MenuRepository",
    "MemoryRepository",
    "JSONRepository",
    "SQLRepository",
    "build_repository",
]


def build_repository(settings: Settings) -> MenuRepository:
    backend = settings.storage_backend
    if backend == "memory":
        return MemoryRepository.from_file(settings.menu_data_file)
    if backend == "json":
        return JSONRepository(settings.menu_data_file)
    if backend == "sql":
        if settings.db_auto_create:
            from menu_api.db.create_tables import create_all

            create_all()
        return SQLRepository()
    raise ValueError(f"Unknown STORAGE_BACKEND {backend!r}; expected one of {', '.join(STORAGE_BACKENDS)}")
