"""RPC protocols: one endpoint handle per service path; transport and encoding are the handle's business."""
from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable


@runtime_checkable
class RpcEndpoint(Protocol):
    """
    Handle bound to one service URL (host + "/common", "/object", "/report").
    call() raises TransportError on network, protocol or remote failure.
    """

    url: str
    introspect: bool
    last_request: str | None
    last_response: str | None

    def call(self, method: str, params: Sequence[Any] = ()) -> Any:
        ...


@runtime_checkable
class EndpointFactory(Protocol):
    """Builds a handle for a URL. transport is the caller's config object, passed through unmodified."""

    def __call__(self, url: str, transport: Any = None) -> RpcEndpoint:
        ...
