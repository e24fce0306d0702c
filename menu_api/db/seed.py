"""One-off seeder: JSON menu document -> SQL table.

Each record is inserted without its ``id`` so the database assigns one.
Running it twice inserts every record twice.
"""
from __future__ import annotations

import argparse
import json
from pathlib import Path

import structlog

from menu_api.core.config import get_settings
from menu_api.core.logging import configure_logging
from menu_api.db.create_tables import create_all
from menu_api.db.session import reset_engine
from menu_api.domain.menu import build_fields
from menu_api.repositories.sql_repository import SQLRepository

logger = structlog.get_logger(__name__)


def _load_json(path: Path) -> list[dict]:
    if not path.exists():
        raise FileNotFoundError(f"Menu file not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"{path} does not contain a JSON array")
    return data


def seed(path: Path, *, create_tables: bool = False) -> int:
    """Insert every record of ``path`` in order; returns how many were inserted."""
    items = _load_json(path)
    if create_tables:
        create_all()
    repo = SQLRepository()
    logger.info("seed_started", count=len(items), source=str(path))
    for item in items:
        repo.create_item(build_fields(item))
    logger.info("seed_finished", count=len(items))
    return len(items)


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Load the JSON menu document into the database")
    ap.add_argument("path", type=Path, nargs="?", help="JSON menu document (same as --file)")
    ap.add_argument("--file", type=Path, default=settings.menu_data_file, help="JSON menu document")
    ap.add_argument("--create-tables", action="store_true", help="create the menu_items table first")
    args = ap.parse_args(argv)

    configure_logging(settings.log_level)
    try:
        seed(args.path or args.file, create_tables=args.create_tables)
    except Exception:
        logger.exception("seed_failed")
        return 1
    finally:
        reset_engine()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
