"""Entry point for uvicorn/gunicorn and hosting platforms (``menu_api.app_factory:app``)."""
from menu_api.app import create_app
from menu_api.core.config import get_settings
from menu_api.core.logging import configure_logging

configure_logging(get_settings().log_level)
app = create_app()

__all__ = ["app", "create_app"]
