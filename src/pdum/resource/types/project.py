"""Project handle implementation."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Optional

import coolname

from pdum.resource._helpers import callbackify, error_body

from .service_object import ServiceObject

if TYPE_CHECKING:
    from pdum.resource.client import Resource

_MIN_ID_LENGTH = 6
_MAX_ID_LENGTH = 30


class Project(ServiceObject):
    """A reference to a single Cloud project.

    Create handles with :meth:`Resource.project`, or receive them from
    :meth:`Resource.create_project` and :meth:`Resource.get_projects`.

    Attributes
    ----------
    project_id : str
        Stable project identifier (e.g., ``"grape-spaceship-123"``). Read-only.
    metadata : dict
        Server fields from the last fetch (``name``, ``createTime``, ``labels``,
        ``lifecycleState``, ``parent``, ...). Overwritten on each fetch.
    """

    _missing_message = "A project ID is required."

    def __init__(self, parent: "Resource", project_id: str):
        super().__init__(parent, project_id)

    @property
    def project_id(self) -> str:
        return self._id

    def full_resource_name(self) -> str:
        return f"projects/{self._id}"

    @callbackify(lambda err: (None, error_body(err)))
    def get_metadata(self) -> tuple[dict, dict]:
        """Fetch this project's metadata, replacing ``metadata``.

        Returns
        -------
        tuple
            ``(metadata, api_response)``.

        Raises
        ------
        googleapiclient.errors.HttpError
            If the API call fails.
        """
        resp = self._request("GET", f"/projects/{self._id}")
        self.metadata = resp
        return self.metadata, resp

    @staticmethod
    def suggest_id(*, prefix: Optional[str] = None, random_digits: int = 5) -> str:
        """Suggest a valid project id using an optional prefix."""
        if not 0 <= random_digits <= 10:
            raise ValueError("random_digits must be between 0 and 10")

        if prefix is None:
            room = _MAX_ID_LENGTH - (random_digits + 1 if random_digits else 0)
            prefix = coolname.generate_slug(2)
            while len(prefix) > room:
                prefix = coolname.generate_slug(2)
        elif not prefix or not prefix[0].isalpha() or not prefix[0].islower():
            raise ValueError("prefix must start with a lowercase letter")

        if random_digits > 0:
            digits = "".join(str(random.randint(0, 9)) for _ in range(random_digits))
            project_id = f"{prefix}-{digits}"
        else:
            project_id = prefix

        if not _MIN_ID_LENGTH <= len(project_id) <= _MAX_ID_LENGTH:
            raise ValueError(
                f"Generated id '{project_id}' is {len(project_id)} characters, "
                f"but project IDs must be {_MIN_ID_LENGTH}-{_MAX_ID_LENGTH} characters long"
            )

        return project_id


def _project_from_api_response(parent: "Resource", project_dict: dict) -> Project:
    """Create a Project from a list/get API record."""
    project = Project(parent, project_dict.get("projectId"))
    project.metadata = project_dict
    return project


__all__ = ["Project", "_project_from_api_response"]
