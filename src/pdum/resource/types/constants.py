"""Shared constants for pdum.resource types."""

from __future__ import annotations

from enum import Enum

BASE_URL = "https://cloudresourcemanager.googleapis.com/v1"

SCOPES: tuple[str, ...] = ("https://www.googleapis.com/auth/cloud-platform",)


class LifecycleState(str, Enum):
    """The state of a project in its lifecycle."""

    # Only used to distinguish unset values.
    LIFECYCLE_STATE_UNSPECIFIED = "LIFECYCLE_STATE_UNSPECIFIED"
    ACTIVE = "ACTIVE"
    # Reversible with projects.undelete.
    DELETE_REQUESTED = "DELETE_REQUESTED"
    # No longer returned by the API.
    DELETE_IN_PROGRESS = "DELETE_IN_PROGRESS"


__all__ = ["BASE_URL", "LifecycleState", "SCOPES"]
