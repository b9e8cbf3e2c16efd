"""Shared fixtures: a scripted in-memory endpoint standing in for the XML-RPC transport."""
from __future__ import annotations

from typing import Any, Sequence

import pytest

from odoo_client import OdooClient

HOST = "http://odoo.test/xmlrpc"
DB = "demo"
USER = "admin"
PASSWORD = "secret"
UID = 7


class FakeEndpoint:
    """Records every call on the server it belongs to and answers from its script."""

    def __init__(self, url: str, transport: Any, server: FakeServer) -> None:
        self.url = url
        self.transport = transport
        self.introspect = True
        self.last_request: str | None = None
        self.last_response: str | None = None
        self.closed = False
        self._server = server

    def call(self, method: str, params: Sequence[Any] = ()) -> Any:
        path = self.url.rsplit("/", 1)[-1]
        self._server.calls.append((path, method, list(params)))
        self.last_request = f"{path}.{method}{list(params)!r}"
        answer = self._server.answer(path, method)
        self.last_response = repr(answer)
        return answer

    def close(self) -> None:
        self.closed = True


class FakeServer:
    """
    EndpointFactory plus the remote side.
    on(path, method, a, b, c) answers a, then b, then c for every later call.
    An exception instance as answer is raised instead of returned.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, list[Any]]] = []
        self.created: list[FakeEndpoint] = []
        self._script: dict[tuple[str, str], list[Any]] = {("common", "login"): [UID]}

    def __call__(self, url: str, transport: Any = None) -> FakeEndpoint:
        endpoint = FakeEndpoint(url, transport, self)
        self.created.append(endpoint)
        return endpoint

    def on(self, path: str, method: str, *answers: Any) -> None:
        self._script[(path, method)] = list(answers)

    def answer(self, path: str, method: str) -> Any:
        answers = self._script.get((path, method), [None])
        answer = answers.pop(0) if len(answers) > 1 else answers[0]
        if isinstance(answer, BaseException):
            raise answer
        return answer

    def calls_to(self, method: str) -> list[list[Any]]:
        return [params for _, m, params in self.calls if m == method]


@pytest.fixture
def server() -> FakeServer:
    return FakeServer()


@pytest.fixture
def client(server: FakeServer) -> OdooClient:
    return OdooClient(HOST, DB, USER, PASSWORD, endpoint_factory=server)
