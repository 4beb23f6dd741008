"""Client library for the Google Cloud Resource Manager API"""

from pdum.resource._version import __version__
from pdum.resource.client import Resource
from pdum.resource.types import (
    CreateProjectOptions,
    GetProjectsOptions,
    LifecycleState,
    MissingIdentifierError,
    Operation,
    OperationError,
    Project,
    ResourceError,
)

__all__ = [
    "__version__",
    "CreateProjectOptions",
    "GetProjectsOptions",
    "LifecycleState",
    "MissingIdentifierError",
    "Operation",
    "OperationError",
    "Project",
    "Resource",
    "ResourceError",
]
