"""Error taxonomy shared by repositories, services and routers."""

from __future__ import annotations


class MenuError(Exception):
    """Base error carrying the code and HTTP status the boundary should use."""

    def __init__(self, message: str, code: str = "error", status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code


class NotFoundError(MenuError):
    def __init__(self, message: str = "Item not found"):
        super().__init__(message, "not_found", 404)


class ValidationFailedError(MenuError):
    def __init__(self, message: str):
        super().__init__(message, "validation_failed", 400)


class StorageUnavailableError(MenuError):
    """Raised by backends when the underlying store cannot be read or written."""

    def __init__(self, message: str = "Storage unavailable"):
        super().__init__(message, "storage_unavailable", 500)
