"""Custom exceptions for pdum.resource."""

from __future__ import annotations

from typing import Optional


class ResourceError(Exception):
    """Base class for errors raised by pdum.resource itself."""


class MissingIdentifierError(ResourceError, ValueError):
    """Raised when a project or operation handle is built without an identifier."""

    __slots__ = ()


class OperationError(ResourceError):
    """Raised when a long-running operation finishes with an error status."""

    def __init__(self, name: str, error: Optional[dict] = None):
        error = error or {}
        self.name = name
        self.code = error.get("code")
        self.message = error.get("message", "Unknown error")
        self.details = error.get("details", [])
        super().__init__(f"Operation {name} failed with error code {self.code}: {self.message}")


__all__ = ["MissingIdentifierError", "OperationError", "ResourceError"]
