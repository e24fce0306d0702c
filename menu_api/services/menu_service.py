"""Menu use cases (listing, specials, mutations) over a storage backend."""

from __future__ import annotations

import random
from typing import Any

import structlog

from menu_api.domain.menu import build_fields, changed_fields, parse_item_id
from menu_api.domain.specials import SPECIALS_COUNT, pick_specials
from menu_api.repositories.base import MenuRepository

logger = structlog.get_logger(__name__)


class MenuService:
    def __init__(
        self,
        repository: MenuRepository,
        *,
        specials_count: int = SPECIALS_COUNT,
        rng: random.Random | None = None,
    ) -> None:
        self.repository = repository
        self.specials_count = specials_count
        self.rng = rng

    def list_items(self) -> list[dict]:
        return self.repository.list_items()

    def get_item(self, raw_id: Any) -> dict:
        return self.repository.get_item(parse_item_id(raw_id))

    def specials(self) -> list[dict]:
        return pick_specials(self.repository.list_items(), self.specials_count, self.rng)

    def create_item(self, payload: Any) -> dict:
        record = self.repository.create_item(build_fields(payload))
        logger.info("menu_item_created", item_id=record["id"], backend=self.repository.name)
        return record

    def update_item(self, raw_id: Any, payload: Any) -> dict:
        item_id = parse_item_id(raw_id)
        record = self.repository.update_item(item_id, changed_fields(payload))
        logger.info("menu_item_updated", item_id=item_id, backend=self.repository.name)
        return record

    def delete_item(self, raw_id: Any) -> None:
        item_id = parse_item_id(raw_id)
        self.repository.delete_item(item_id)
        logger.info("menu_item_deleted", item_id=item_id, backend=self.repository.name)
