from __future__ import annotations

import platform

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

router = APIRouter(prefix="", tags=["pages"])

ENDPOINTS = (
    ("get", "GET", "/api/menu", "/api/menu", "Retrieve all menu items."),
    ("get", "GET", "/api/menu/1", "/api/menu/:id", "Retrieve a single menu item by ID (e.g., /api/menu/1)."),
    ("get", "GET", "/api/specials", "/api/specials", "Retrieve 4 random specials."),
    ("post", "POST", "/api/menu", "/api/menu", "Create a new menu item. (Requires JSON body)"),
    ("put", "PUT", "/api/menu/1", "/api/menu/:id", "Update an existing menu item. (Requires JSON body)"),
    ("delete", "DELETE", "/api/menu/1", "/api/menu/:id", "Delete a menu item."),
)


def _templates(request: Request) -> Jinja2Templates:
    tpl = getattr(getattr(request.app, "state", None), "templates", None)
    if tpl:
        return tpl
    raise RuntimeError("Templates not configured")


@router.get("/", response_class=HTMLResponse)
def index(request: Request):
    settings = request.app.state.settings
    context = {
        "endpoints": ENDPOINTS,
        "python_version": platform.python_version(),
        "environment": settings.app_env,
    }
    return _templates(request).TemplateResponse(request, "index.html", context)


@router.get("/health")
def health(request: Request):
    return {"status": "ok", "storage": request.app.state.menu_service.repository.name}
