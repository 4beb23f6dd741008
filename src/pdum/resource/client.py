"""Cloud Resource Manager client.

The `Resource` client lists and creates projects and hands out references to
projects and long-running operations. Credentials come from Application Default
Credentials (ADC) unless given explicitly, which discovers them from:

1. GOOGLE_APPLICATION_CREDENTIALS environment variable (service account key file)
2. gcloud CLI user credentials (`gcloud auth application-default login`)
3. Compute Engine/Cloud Run/GKE metadata server
"""

from __future__ import annotations

from typing import Generator, Optional

from google.auth.credentials import Credentials

from pdum.resource import _paginator
from pdum.resource._clients import Service, ServiceConfig, authorized_http, resolve_credentials
from pdum.resource._helpers import callbackify, error_body
from pdum.resource.types.constants import BASE_URL, SCOPES
from pdum.resource.types.operation import Operation
from pdum.resource.types.options import CreateProjectOptions, GetProjectsOptions
from pdum.resource.types.project import Project, _project_from_api_response


class Resource:
    """Client for the Cloud Resource Manager v1 API.

    With this client you can:

    - list all projects visible to the credentials,
    - create new projects,
    - get references to projects and long-running operations.

    Every request-issuing method returns its documented result tuple and
    raises on error. Passing ``callback=`` switches to error-first callback
    delivery instead.

    Args:
        project_id: Default project for :meth:`project`. Falls back to the ADC project.
        credentials: Explicit credentials. If None, ``key_filename`` or ADC are used.
        key_filename: Path to a service account key file.
        scopes: OAuth scopes to request.
        auto_retry: Retry rate-limited and intermittent server errors (default True).
        max_retries: Retries attempted before returning the error (default 3).
        api_endpoint: Override for the versioned API root.
        http: Pre-authorized HTTP object; skips credential resolution.

    Example:
        >>> from pdum.resource import Resource
        >>> resource = Resource()
        >>> project = resource.project("grape-spaceship-123")
    """

    def __init__(
        self,
        *,
        project_id: Optional[str] = None,
        credentials: Optional[Credentials] = None,
        key_filename: Optional[str] = None,
        scopes: tuple[str, ...] = SCOPES,
        auto_retry: bool = True,
        max_retries: int = 3,
        api_endpoint: Optional[str] = None,
        http=None,
    ):
        config = ServiceConfig(
            base_url=(api_endpoint or BASE_URL).rstrip("/"),
            scopes=tuple(scopes),
            auto_retry=auto_retry,
            max_retries=max_retries,
        )
        if http is None:
            credentials, default_project_id = resolve_credentials(
                credentials, key_filename=key_filename, scopes=config.scopes
            )
            http = authorized_http(credentials)
            project_id = project_id or default_project_id

        self.project_id = project_id
        self.service = Service(config, http)

    @callbackify(lambda err: (None, error_body(err)))
    def create_project(
        self, id: str, options: Optional[CreateProjectOptions] = None
    ) -> tuple[Project, Operation, dict]:
        """Create a project.

        This only works when authenticated as a user, e.g. with the gcloud SDK.

        Args:
            id: ID of the new project. Always wins over ``options["projectId"]``.
            options: Fields of the Project resource (``name``, ``labels``, ``parent``, ...).
            callback: Optional ``callback(err, project, operation, api_response)``.
                On failure it receives ``(err, None, api_response)``.

        Returns:
            ``(project, operation, api_response)``; ``operation`` tracks creation.

        Raises:
            googleapiclient.errors.HttpError: If the API call fails.

        Example:
            >>> project, operation, _ = resource.create_project("new-project-id", {"name": "New"})
            >>> operation.wait()
        """
        body = {**(options or {}), "projectId": id}
        resp = self.service.request("POST", "/projects", json=body)

        project = self.project(resp.get("projectId") or id)
        operation = self.operation(resp.get("name"))
        operation.metadata = resp
        return project, operation, resp

    def _get_projects_page(self, query: dict) -> tuple[list[Project], Optional[dict], dict]:
        """Fetch one page of projects and compute its continuation query."""
        resp = self.service.request("GET", "/projects", qs=_paginator.strip_controls(query))

        next_query = None
        if resp.get("nextPageToken"):
            next_query = {**query, "pageToken": resp["nextPageToken"]}

        projects = [_project_from_api_response(self, record) for record in resp.get("projects", [])]
        return projects, next_query, resp

    @callbackify(lambda err: (None, None, error_body(err)))
    def get_projects(
        self, options: Optional[GetProjectsOptions] = None
    ) -> tuple[list[Project], Optional[dict], dict]:
        """Get a list of projects.

        By default all pages are fetched and accumulated. Set ``autoPaginate``
        to False to fetch a single page and page through manually with the
        returned continuation query. ``maxApiCalls`` and ``maxResults`` only
        apply while auto-paginating; a single page is returned whole, so use
        ``pageSize`` to bound it.

        Args:
            options: Query options (``filter``, ``pageSize``, ``pageToken``) and
                pagination controls (``autoPaginate``, ``maxApiCalls``, ``maxResults``).
            callback: Optional ``callback(err, projects, next_query, api_response)``.
                On failure it receives ``(err, None, None, api_response)``.

        Returns:
            ``(projects, next_query, api_response)``. ``next_query`` is None when
            no more results exist.

        Raises:
            googleapiclient.errors.HttpError: If an API call fails.

        Example:
            >>> query = {"autoPaginate": False}
            >>> while query:
            ...     projects, query, _ = resource.get_projects(query)
        """
        query = dict(options or {})
        if not _paginator.auto_paginate(query):
            return self._get_projects_page(query)
        return _paginator.collect(self._get_projects_page, query)

    def get_projects_stream(self, options: Optional[GetProjectsOptions] = None) -> Generator[Project, None, None]:
        """Lazily yield projects across pages.

        Pages are fetched as the generator is consumed, so stopping early avoids
        unnecessary API requests. Each call starts a fresh sequence.

        Example:
            >>> for project in resource.get_projects_stream({"filter": "labels.env:prod"}):
            ...     print(project.project_id)
        """
        return _paginator.iter_items(self._get_projects_page, dict(options or {}))

    def operation(self, name: str) -> Operation:
        """Get a reference to an existing operation.

        Raises:
            MissingIdentifierError: If ``name`` is empty.
            TypeError: If ``name`` is not a string.
        """
        return Operation(self, name)

    def project(self, id: Optional[str] = None) -> Project:
        """Get a reference to a project. Use :meth:`create_project` to create one.

        Args:
            id: The project ID (e.g. ``grape-spaceship-123``). Defaults to the
                client's ``project_id``.

        Raises:
            MissingIdentifierError: If no ID is given and the client has no default.
            TypeError: If ``id`` is not a string.
        """
        return Project(self, id or self.project_id)


__all__ = ["Resource"]
