"""Option structures accepted by the Resource client.

Keys use the API's wire names so they can be sent as-is.
"""

from __future__ import annotations

from typing import TypedDict


class ProjectParent(TypedDict):
    """Parent of a project, e.g. ``{"type": "organization", "id": "123"}``."""

    type: str
    id: str


class CreateProjectOptions(TypedDict, total=False):
    """Fields of a Project resource sent with ``create_project``.

    ``projectId`` is always overridden by the id passed to ``create_project``.
    """

    projectNumber: str
    projectId: str
    lifecycleState: str
    name: str
    createTime: str
    labels: dict[str, str]
    parent: ProjectParent


class GetProjectsOptions(TypedDict, total=False):
    """Query options for ``get_projects``.

    ``filter``, ``pageToken`` and ``pageSize`` are sent to the server;
    ``autoPaginate``, ``maxApiCalls`` and ``maxResults`` only steer
    client-side pagination and are ignored when ``autoPaginate`` is False.
    """

    autoPaginate: bool
    filter: str
    maxApiCalls: int
    maxResults: int
    pageSize: int
    pageToken: str


__all__ = ["CreateProjectOptions", "GetProjectsOptions", "ProjectParent"]
