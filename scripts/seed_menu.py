#!/usr/bin/env python3
"""
Load the JSON menu document into the SQL database.

Usage:
  DATABASE_URL=postgresql+psycopg://... python scripts/seed_menu.py [--file data/menu.json] [--create-tables]
"""
from __future__ import annotations

import sys
from pathlib import Path

# Keep the menu_api package importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from menu_api.db.seed import main  # noqa: E402


if __name__ == "__main__":
    raise SystemExit(main())
