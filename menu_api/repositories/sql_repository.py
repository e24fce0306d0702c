"""Menu data access backed by SQLAlchemy."""
from __future__ import annotations

from typing import Any, Mapping

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from menu_api.core.errors import NotFoundError, StorageUnavailableError
from menu_api.db.models import MenuItem
from menu_api.db.session import get_session
from menu_api.repositories.base import MenuRepository

# record key -> model attribute
_COLUMNS = {
    "title": "title",
    "price": "price",
    "category": "category",
    "img": "img",
    "desc": "description",
}


def entity_to_dict(entity: MenuItem) -> dict:
    record = {"id": entity.id}
    for key, attr in _COLUMNS.items():
        record[key] = getattr(entity, attr)
    return record


def _apply(entity: MenuItem, fields: Mapping[str, Any]) -> None:
    for key, attr in _COLUMNS.items():
        if key in fields:
            setattr(entity, attr, fields[key])


class SQLRepository(MenuRepository):
    """CRUD helpers wrapping the SQLAlchemy session."""

    name = "sql"

    def list_items(self) -> list[dict]:
        try:
            with get_session() as session:
                rows = session.execute(select(MenuItem).order_by(MenuItem.id.asc())).scalars().all()
                return [entity_to_dict(row) for row in rows]
        except SQLAlchemyError as exc:
            raise StorageUnavailableError("Could not list menu items") from exc

    def get_item(self, item_id: int) -> dict:
        try:
            with get_session() as session:
                entity = session.get(MenuItem, item_id)
                if not entity:
                    raise NotFoundError()
                return entity_to_dict(entity)
        except SQLAlchemyError as exc:
            raise StorageUnavailableError(f"Could not load menu item {item_id}") from exc

    def create_item(self, fields: Mapping[str, Any]) -> dict:
        entity = MenuItem()
        _apply(entity, fields)
        try:
            with get_session() as session:
                session.add(entity)
                session.commit()
                session.refresh(entity)
                return entity_to_dict(entity)
        except SQLAlchemyError as exc:
            raise StorageUnavailableError("Could not create menu item") from exc

    def update_item(self, item_id: int, changes: Mapping[str, Any]) -> dict:
        try:
            with get_session() as session:
                entity = session.get(MenuItem, item_id)
                if not entity:
                    raise NotFoundError()
                _apply(entity, changes)
                session.commit()
                session.refresh(entity)
                return entity_to_dict(entity)
        except SQLAlchemyError as exc:
            raise StorageUnavailableError(f"Could not update menu item {item_id}") from exc

    def delete_item(self, item_id: int) -> None:
        try:
            with get_session() as session:
                entity = session.get(MenuItem, item_id)
                if not entity:
                    raise NotFoundError()
                session.delete(entity)
                session.commit()
        except SQLAlchemyError as exc:
            raise StorageUnavailableError(f"Could not delete menu item {item_id}") from exc
