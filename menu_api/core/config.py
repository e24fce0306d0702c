"""
Configuration helpers for the menu API.

Settings are read once from the environment and cached; tests clear the
cache with ``get_settings.cache_clear()`` after changing variables.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

DEFAULT_DATA_FILE = Path(__file__).resolve().parents[1] / "data" / "menu.json"
STORAGE_BACKENDS = ("memory", "json", "sql")


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    storage_backend: str
    menu_data_file: Path
    database_url: str
    db_auto_create: bool
    port: int
    log_level: str
    specials_count: int

    @property
    def is_production(self) -> bool:
        return self.app_env in {"prod", "production"}


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    data_file = (os.getenv("MENU_DATA_FILE") or "").strip()
    return Settings(
        app_env=(os.getenv("APP_ENV") or "development").lower(),
        storage_backend=(os.getenv("STORAGE_BACKEND") or "json").strip().lower(),
        menu_data_file=Path(data_file) if data_file else DEFAULT_DATA_FILE,
        database_url=os.getenv("DATABASE_URL", ""),
        db_auto_create=_bool(os.getenv("DB_AUTO_CREATE"), True),
        port=_int(os.getenv("PORT", "3001"), 3001),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        specials_count=max(0, _int(os.getenv("SPECIALS_COUNT", "4"), 4)),
    )
