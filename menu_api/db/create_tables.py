"""Create the ``menu_items`` table (``python -m menu_api.db.create_tables``)."""
from __future__ import annotations

import structlog
from sqlalchemy.exc import SQLAlchemyError

from menu_api.core.config import get_settings
from menu_api.core.logging import configure_logging

from .session import Base, get_engine, reset_engine
from . import models  # noqa: F401  # registers menu_items on the metadata

logger = structlog.get_logger(__name__)


def create_all() -> None:
    Base.metadata.create_all(bind=get_engine())


def main() -> int:
    configure_logging(get_settings().log_level)
    try:
        create_all()
    except (SQLAlchemyError, RuntimeError):
        logger.exception("create_tables_failed")
        return 1
    finally:
        reset_engine()
    logger.info("tables_created", tables=sorted(Base.metadata.tables))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
