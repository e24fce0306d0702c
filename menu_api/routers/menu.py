from __future__ import annotations

from typing import Any

import structlog
from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse

from menu_api.core.errors import MenuError
from menu_api.services.menu_service import MenuService

router = APIRouter(prefix="/api", tags=["menu"])
logger = structlog.get_logger(__name__)


def _get_menu_service(request: Request) -> MenuService:
    svc = getattr(getattr(request.app, "state", None), "menu_service", None)
    if not svc:
        raise RuntimeError("MenuService not configured")
    return svc


def _error_response(exc: MenuError, storage_message: str) -> JSONResponse:
    message = exc.message
    if exc.code == "storage_unavailable":
        logger.error("storage_fault", error=message, exc_info=exc)
        message = storage_message
    return JSONResponse({"error": message}, status_code=exc.status_code)


@router.get("/menu")
def list_menu(request: Request):
    try:
        return _get_menu_service(request).list_items()
    except MenuError as exc:
        return _error_response(exc, "Failed to fetch menu")


@router.get("/menu/{item_id}")
def get_menu_item(item_id: str, request: Request):
    try:
        return _get_menu_service(request).get_item(item_id)
    except MenuError as exc:
        return _error_response(exc, "Error fetching item")


@router.get("/specials")
def list_specials(request: Request):
    try:
        return _get_menu_service(request).specials()
    except MenuError as exc:
        return _error_response(exc, "Failed to fetch specials")


@router.post("/menu", status_code=201)
def create_menu_item(request: Request, payload: Any = Body(None)):
    try:
        return _get_menu_service(request).create_item(payload)
    except MenuError as exc:
        return _error_response(exc, "Failed to create item")


@router.put("/menu/{item_id}")
def update_menu_item(item_id: str, request: Request, payload: Any = Body(None)):
    try:
        return _get_menu_service(request).update_item(item_id, payload)
    except MenuError as exc:
        return _error_response(exc, "Failed to update item")


@router.delete("/menu/{item_id}")
def delete_menu_item(item_id: str, request: Request):
    try:
        _get_menu_service(request).delete_item(item_id)
    except MenuError as exc:
        return _error_response(exc, "Failed to delete item")
    return {"message": "Item deleted successfully"}
