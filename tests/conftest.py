"""Shared fixtures.

The HTTP layer is replaced by an in-memory fake so that `googleapiclient`
request serialization, retries and error mapping still run for real.
"""

import json
from dataclasses import dataclass
from typing import Optional
from urllib.parse import parse_qsl, urlsplit

import httplib2
import pytest

from pdum.resource import Resource
from pdum.resource.types.constants import BASE_URL


@dataclass
class RecordedRequest:
    method: str
    uri: str
    body: Optional[str]
    headers: dict

    @property
    def path(self) -> str:
        return urlsplit(self.uri).path[len(urlsplit(BASE_URL).path):]

    @property
    def query(self) -> dict:
        return dict(parse_qsl(urlsplit(self.uri).query))

    @property
    def json(self):
        return json.loads(self.body) if self.body else None


class FakeHttp:
    """Stands in for an authorized httplib2 object, replaying queued responses."""

    def __init__(self):
        self.responses = []
        self.requests: list[RecordedRequest] = []

    def queue(self, payload, status: int = 200) -> "FakeHttp":
        self.responses.append((status, payload))
        return self

    def request(self, uri, method="GET", body=None, headers=None, **kwargs):
        self.requests.append(RecordedRequest(method=method, uri=uri, body=body, headers=dict(headers or {})))
        if not self.responses:
            raise AssertionError(f"Unexpected request: {method} {uri}")
        status, payload = self.responses.pop(0)
        resp = httplib2.Response({"status": status, "content-type": "application/json"})
        return resp, json.dumps(payload).encode("utf-8")


def api_error(code: int, message: str, status: str) -> dict:
    return {"error": {"code": code, "message": message, "status": status}}


@pytest.fixture
def http():
    return FakeHttp()


@pytest.fixture
def resource(http):
    return Resource(project_id="default-project", http=http)
