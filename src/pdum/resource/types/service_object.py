"""Shared base class for handles bound to a Resource client."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from .exceptions import MissingIdentifierError

if TYPE_CHECKING:
    from pdum.resource.client import Resource


class ServiceObject(ABC):
    """Abstract base for CRM-addressable handles.

    A handle holds an immutable identifier, a back-reference to the client that
    issues its requests, and the last-fetched server fields in ``metadata``.
    Constructing a handle never performs I/O.
    """

    _missing_message = "An identifier is required."

    def __init__(self, parent: "Resource", id: str):
        if id is not None and not isinstance(id, str):
            raise TypeError(f"{type(self).__name__} identifier must be a string, got {type(id).__name__}")
        if not id:
            raise MissingIdentifierError(self._missing_message)
        self._parent = parent
        self._id = id
        self.metadata: dict[str, Any] = {}

    @property
    def id(self) -> str:
        return self._id

    @property
    def parent(self) -> "Resource":
        return self._parent

    @abstractmethod
    def full_resource_name(self) -> str:
        """Return the fully qualified resource name (``projects/{id}``, ``operations/{id}``)."""

    def _request(self, method: str, uri: str, **kwargs) -> Any:
        return self._parent.service.request(method, uri, **kwargs)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._id!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ServiceObject):
            return NotImplemented
        return type(self) is type(other) and self._id == other._id and self._parent is other._parent

    def __hash__(self) -> int:
        return hash((type(self), self._id))


__all__ = ["ServiceObject"]
