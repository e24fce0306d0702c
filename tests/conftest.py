from __future__ import annotations

import dataclasses
import json
import sys
from pathlib import Path

import pytest

# Keep the menu_api package importable during local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from menu_api.core import config as core_config  # noqa: E402
from menu_api.db import models  # noqa: E402
from menu_api.db import session as db_session  # noqa: E402

SAMPLE_ITEMS = [
    {"id": 1, "title": "Pancakes", "price": 15.99, "category": "breakfast", "img": "p.png", "desc": "fluffy"},
    {"id": 2, "title": "Burger", "price": 13.99, "category": "lunch", "img": "b.png", "desc": "double"},
    {"id": 3, "title": "Milkshake", "price": 6.99, "category": "shakes", "img": "m.png", "desc": "vanilla"},
    {"id": 4, "title": "Omelette", "price": 11.5, "category": "breakfast", "img": "o.png", "desc": "three eggs"},
    {"id": 5, "title": "Steak", "price": 39.99, "category": "dinner", "img": "s.png", "desc": "ribeye"},
    {"id": 6, "title": "Salad", "price": 9.0, "category": "lunch", "img": "sa.png", "desc": "greens"},
]


@pytest.fixture()
def sample_items() -> list[dict]:
    return [dict(item) for item in SAMPLE_ITEMS]


@pytest.fixture()
def menu_file(tmp_path, sample_items) -> Path:
    path = tmp_path / "menu.json"
    path.write_text(json.dumps(sample_items, indent=2), encoding="utf-8")
    return path


@pytest.fixture()
def settings_for(tmp_path, menu_file):
    """Build Settings for a backend without touching the bundled data file."""
    def _build(backend: str, **overrides):
        base = core_config.get_settings()
        return dataclasses.replace(
            base,
            storage_backend=backend,
            menu_data_file=menu_file,
            db_auto_create=False,
            **overrides,
        )

    return _build


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Point DATABASE_URL at a temporary SQLite file and reset settings/engine caches."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    core_config.get_settings.cache_clear()
    db_session.reset_engine()

    engine = db_session.get_engine()
    models.Base.metadata.drop_all(bind=engine)
    models.Base.metadata.create_all(bind=engine)

    yield db_file

    models.Base.metadata.drop_all(bind=engine)
    db_session.reset_engine()
    core_config.get_settings.cache_clear()
