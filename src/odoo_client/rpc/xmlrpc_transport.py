"""
XmlRpcEndpoint — default endpoint handle: XML-RPC payloads over HTTP.
Encoding via xmlrpc.client, HTTP via httpx. Pass a configured httpx.Client
(proxy, timeouts, TLS) as transport to share it between endpoints.
"""
from __future__ import annotations

import logging
import xmlrpc.client
from typing import Any, Sequence
from xml.parsers.expat import ExpatError

import httpx

from odoo_client.errors import RemoteFault, TransportError

logger = logging.getLogger(__name__)

_HEADERS = {"Content-Type": "text/xml; charset=utf-8", "Accept": "text/xml"}


class XmlRpcEndpoint:
    """
    One service URL, e.g. http://localhost:8069/xmlrpc/object.
    Keeps the last raw request and response for debugging.
    """

    def __init__(
        self,
        url: str,
        transport: httpx.Client | None = None,
        *,
        introspect: bool = True,
    ) -> None:
        self.url = url
        self.introspect = introspect
        self.last_request: str | None = None
        self.last_response: str | None = None
        self._owns_client = transport is None
        self._client = transport if transport is not None else httpx.Client()

    def call(self, method: str, params: Sequence[Any] = ()) -> Any:
        """Invoke a remote method; returns the decoded result."""
        try:
            return self._post(method, params)
        except RemoteFault as fault:
            if self.introspect:
                fault.signature = self._lookup_signature(method)
            raise

    def close(self) -> None:
        """Close the HTTP client if this endpoint created it."""
        if self._owns_client:
            self._client.close()

    def _post(self, method: str, params: Sequence[Any]) -> Any:
        try:
            body = xmlrpc.client.dumps(tuple(params), methodname=method, allow_none=True)
        except (TypeError, OverflowError) as e:
            raise TransportError(f"Cannot encode {method} for {self.url}: {e}") from e
        if self._client.is_closed:
            raise TransportError(f"Endpoint {self.url} has been closed")
        self.last_request = body
        try:
            response = self._client.post(self.url, content=body.encode("utf-8"), headers=_HEADERS)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise TransportError(f"{method} on {self.url} failed: {e}") from e
        self.last_response = response.text
        try:
            result, _ = xmlrpc.client.loads(response.content, use_builtin_types=True)
        except xmlrpc.client.Fault as fault:
            raise RemoteFault(fault.faultCode, fault.faultString) from fault
        except (ExpatError, xmlrpc.client.ResponseError) as e:
            raise TransportError(f"Malformed response from {self.url}: {e}") from e
        return result[0] if result else None

    def _lookup_signature(self, method: str) -> Any:
        # Odoo does not implement system.* methods; the lookup fails there and is logged server-side.
        # last_request/last_response keep describing the failed call.
        request, response = self.last_request, self.last_response
        try:
            return self._post("system.methodSignature", [method])
        except TransportError as e:
            logger.debug("Signature lookup for %s on %s failed: %s", method, self.url, e)
            return None
        finally:
            self.last_request, self.last_response = request, response


def xmlrpc_endpoint(url: str, transport: Any = None) -> XmlRpcEndpoint:
    """Default EndpointFactory."""
    return XmlRpcEndpoint(url, transport)
