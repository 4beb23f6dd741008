"""Long-running operation handle."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import backoff

from pdum.resource._helpers import callbackify, error_body

from .exceptions import OperationError
from .service_object import ServiceObject

if TYPE_CHECKING:
    from pdum.resource.client import Resource

logger = logging.getLogger(__name__)


class Operation(ServiceObject):
    """A reference to an asynchronous backend task, such as a project creation.

    Attributes
    ----------
    name : str
        Opaque backend-assigned name (e.g., ``"operations/cp.123"``). Read-only.
    metadata : dict
        Last-known operation payload (``done``, ``error``, ``response``, ...).
    """

    _missing_message = "A name must be specified for an operation."

    def __init__(self, parent: "Resource", name: str):
        super().__init__(parent, name)

    @property
    def name(self) -> str:
        return self._id

    def full_resource_name(self) -> str:
        if "/" in self._id:
            return self._id
        return f"operations/{self._id}"

    @property
    def done(self) -> bool:
        return bool(self.metadata.get("done", False))

    @property
    def error(self) -> Optional[dict]:
        return self.metadata.get("error")

    @callbackify(lambda err: (None, error_body(err)))
    def get_metadata(self) -> tuple[dict, dict]:
        """Fetch the current operation status, replacing ``metadata``.

        Returns
        -------
        tuple
            ``(metadata, api_response)``.
        """
        resp = self._request("GET", f"/{self.full_resource_name()}")
        self.metadata = resp
        return self.metadata, resp

    def _poll(self) -> dict:
        metadata, _ = self.get_metadata()
        return metadata

    def wait(self, *, timeout: float = 600.0, polling_interval: float = 5.0) -> dict[str, Any]:
        """Block until the operation completes.

        Parameters
        ----------
        timeout : float, default 600.0
            Max seconds to keep polling.
        polling_interval : float, default 5.0
            Seconds between polls.

        Returns
        -------
        dict
            The final operation metadata.

        Raises
        ------
        OperationError
            If the operation completes with an error.
        TimeoutError
            If the operation does not complete within ``timeout`` seconds.
        googleapiclient.errors.HttpError
            If a status poll fails.
        """
        if not self.done:
            poll = backoff.on_predicate(
                backoff.constant,
                predicate=lambda metadata: not metadata.get("done", False),
                interval=polling_interval,
                max_time=timeout,
                jitter=None,
                logger=logger,
            )(self._poll)
            poll()

        if not self.done:
            raise TimeoutError(f"Operation timed out after {timeout} seconds. Operation name: {self.name}")
        if self.error is not None:
            raise OperationError(self.name, self.error)
        return self.metadata


__all__ = ["Operation"]
