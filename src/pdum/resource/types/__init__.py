"""Public exports for pdum.resource types."""

from __future__ import annotations

from .constants import BASE_URL, SCOPES, LifecycleState
from .exceptions import MissingIdentifierError, OperationError, ResourceError
from .operation import Operation
from .options import CreateProjectOptions, GetProjectsOptions, ProjectParent
from .project import Project
from .service_object import ServiceObject

__all__ = [
    "BASE_URL",
    "SCOPES",
    "CreateProjectOptions",
    "GetProjectsOptions",
    "LifecycleState",
    "MissingIdentifierError",
    "Operation",
    "OperationError",
    "Project",
    "ProjectParent",
    "ResourceError",
    "ServiceObject",
]
