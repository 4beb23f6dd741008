"""Internal helpers to authorize and issue Cloud Resource Manager requests.

These helpers centralize credential resolution and `googleapiclient` request
construction so that every call shares the same serialization, retry and
user-agent options. They are intentionally private; the public API surface
remains in `client.py` and `types/`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import google.auth
import google_auth_httplib2
from google.auth.credentials import Credentials
from google.oauth2 import service_account
from googleapiclient.http import HttpRequest, build_http
from googleapiclient.model import JsonModel

from pdum.resource._version import __version__
from pdum.resource.types.constants import BASE_URL, SCOPES

logger = logging.getLogger(__name__)


@dataclass
class ServiceConfig:
    """Static configuration shared by every request a client issues.

    Attributes
    ----------
    base_url : str
        Versioned API root that request paths are appended to.
    scopes : tuple[str, ...]
        OAuth scopes requested when credentials are resolved.
    auto_retry : bool
        Retry rate-limited and intermittent server errors with exponential backoff.
    max_retries : int
        Retries attempted before the error is returned when ``auto_retry`` is on.
    user_agent : str
        Value sent in the ``user-agent`` header.
    """

    base_url: str = BASE_URL
    scopes: tuple[str, ...] = SCOPES
    auto_retry: bool = True
    max_retries: int = 3
    user_agent: str = f"pdum-resource/{__version__}"

    @property
    def num_retries(self) -> int:
        return self.max_retries if self.auto_retry else 0


def resolve_credentials(
    credentials: Optional[Credentials] = None,
    *,
    key_filename: Optional[str] = None,
    scopes: tuple[str, ...] = SCOPES,
) -> tuple[Credentials, Optional[str]]:
    """Resolve credentials (explicit > key file > ADC) and the default project id."""
    if credentials is not None:
        return credentials, getattr(credentials, "project_id", None)
    if key_filename:
        creds = service_account.Credentials.from_service_account_file(key_filename, scopes=list(scopes))
        return creds, creds.project_id
    return google.auth.default(scopes=list(scopes))


def authorized_http(credentials: Credentials):
    """HTTP object that signs every request with ``credentials``."""
    return google_auth_httplib2.AuthorizedHttp(credentials, http=build_http())


class Service:
    """Issues JSON requests against a fixed API root through an authorized HTTP object."""

    def __init__(self, config: ServiceConfig, http):
        self.config = config
        self.http = http
        self._model = JsonModel(data_wrapper=False)

    def request(
        self,
        method: str,
        uri: str,
        *,
        json: Optional[dict] = None,
        qs: Optional[dict] = None,
    ) -> Any:
        """Issue one request and return the decoded JSON body.

        Args:
            method: HTTP verb.
            uri: Path relative to ``config.base_url`` (e.g. ``"/projects"``).
            json: Request body, serialized as JSON when given.
            qs: Query parameters.

        Returns:
            The decoded response body.

        Raises:
            googleapiclient.errors.HttpError: If the final response is not a 2xx.
        """
        headers = {"user-agent": self.config.user_agent}
        headers, _, query, body = self._model.request(headers, {}, dict(qs or {}), json)
        url = f"{self.config.base_url}{uri}{query}"

        logger.debug("%s %s", method, url)
        request = HttpRequest(
            self.http,
            self._model.response,
            url,
            method=method,
            body=body,
            headers=headers,
        )
        return request.execute(num_retries=self.config.num_retries)


__all__ = ["Service", "ServiceConfig", "authorized_http", "resolve_credentials"]
