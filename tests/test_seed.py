from __future__ import annotations

import json

from menu_api.core import config as core_config
from menu_api.db import seed as seed_module
from menu_api.repositories.sql_repository import SQLRepository


def test_seed_inserts_records_without_their_ids(temp_db, tmp_path):
    path = tmp_path / "menu.json"
    path.write_text(
        json.dumps(
            [
                {"id": 500, "title": "Waffles", "price": 7.5, "category": "breakfast", "img": "w.png", "desc": "crispy"},
                {"id": 400, "title": "Fries", "price": "3", "category": "sides", "img": "f.png", "desc": "salted"},
            ]
        ),
        encoding="utf-8",
    )

    assert seed_module.seed(path) == 2

    items = SQLRepository().list_items()
    assert [item["title"] for item in items] == ["Waffles", "Fries"]
    assert [item["id"] for item in items] == [1, 2]
    assert items[1]["price"] == 3.0


def test_seed_rerun_duplicates_records(temp_db, menu_file, sample_items):
    seed_module.seed(menu_file)
    seed_module.seed(menu_file)
    assert len(SQLRepository().list_items()) == 2 * len(sample_items)


def test_main_creates_tables_and_exits_zero(tmp_path, monkeypatch, menu_file, sample_items):
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'seed.db'}")
    core_config.get_settings.cache_clear()
    try:
        assert seed_module.main(["--file", str(menu_file), "--create-tables"]) == 0
        assert len(SQLRepository().list_items()) == len(sample_items)
    finally:
        seed_module.reset_engine()
        core_config.get_settings.cache_clear()


def test_main_exits_nonzero_and_releases_engine_on_failure(temp_db, tmp_path, monkeypatch):
    disposed = []
    monkeypatch.setattr(seed_module, "reset_engine", lambda: disposed.append(True))

    assert seed_module.main(["--file", str(tmp_path / "missing.json")]) == 1
    assert disposed == [True]


def test_main_accepts_positional_path(temp_db, menu_file, sample_items, monkeypatch):
    monkeypatch.setattr(seed_module, "reset_engine", lambda: None)
    assert seed_module.main([str(menu_file)]) == 0
    assert len(SQLRepository().list_items()) == len(sample_items)
