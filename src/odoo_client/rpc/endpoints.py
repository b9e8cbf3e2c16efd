"""
EndpointCache — lazily creates and memoizes endpoint handles per service path.
Default capacity 1: only the most recently used handle is kept warm.
"""
from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from typing import Any

from odoo_client.errors import PreconditionError
from odoo_client.rpc.protocol import EndpointFactory, RpcEndpoint
from odoo_client.rpc.xmlrpc_transport import xmlrpc_endpoint

logger = logging.getLogger(__name__)


class EndpointCache:
    """
    Path -> handle, LRU-bounded by max_size.
    get("object") reuses the cached handle or builds one for host + "/object";
    get() returns the active (most recently used) handle.
    """

    def __init__(
        self,
        host: str,
        factory: EndpointFactory | None = None,
        transport: Any = None,
        max_size: int = 1,
    ) -> None:
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.host = host.rstrip("/")
        self.max_size = max_size
        self._factory = factory or xmlrpc_endpoint
        self._transport = transport
        self._handles: OrderedDict[str, RpcEndpoint] = OrderedDict()
        self._lock = threading.RLock()

    @property
    def active_path(self) -> str | None:
        with self._lock:
            return next(reversed(self._handles), None)

    @property
    def active(self) -> RpcEndpoint | None:
        with self._lock:
            path = self.active_path
            return self._handles[path] if path is not None else None

    def get(self, path: str | None = None) -> RpcEndpoint:
        """Return the handle for path, creating it on first use."""
        with self._lock:
            if path is None:
                handle = self.active
                if handle is None:
                    raise PreconditionError("No endpoint has been created yet")
                return handle
            if path in self._handles:
                self._handles.move_to_end(path)
                return self._handles[path]
            handle = self._factory(f"{self.host}/{path}", self._transport)
            handle.introspect = False
            self._handles[path] = handle
            logger.debug("Created endpoint %s", handle.url)
            while len(self._handles) > self.max_size:
                old_path, old = self._handles.popitem(last=False)
                logger.debug("Discarding endpoint for %r", old_path)
                _close(old)
            return handle

    def close(self) -> None:
        """Close and forget every cached handle."""
        with self._lock:
            while self._handles:
                _, handle = self._handles.popitem(last=False)
                _close(handle)


def _close(handle: Any) -> None:
    close = getattr(handle, "close", None)
    if callable(close):
        close()
