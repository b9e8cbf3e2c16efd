"""EndpointCache: reuse for consecutive paths, replacement on switch, LRU capacity."""
from __future__ import annotations

import pytest

from conftest import HOST, FakeServer
from odoo_client import EndpointCache, PreconditionError, XmlRpcEndpoint


def test_same_path_returns_same_handle(server: FakeServer) -> None:
    cache = EndpointCache(HOST, factory=server)
    first = cache.get("object")
    assert cache.get("object") is first
    assert cache.get("object") is first
    assert len(server.created) == 1


def test_handle_url_is_host_slash_path(server: FakeServer) -> None:
    cache = EndpointCache(HOST + "/", factory=server)
    assert cache.get("common").url == "http://odoo.test/xmlrpc/common"


def test_switching_path_discards_previous_handle(server: FakeServer) -> None:
    cache = EndpointCache(HOST, factory=server)
    common = cache.get("common")
    obj = cache.get("object")
    assert obj is not common
    assert common.closed is True
    again = cache.get("common")
    assert again is not common
    assert len(server.created) == 3


def test_new_handle_has_introspection_disabled(server: FakeServer) -> None:
    cache = EndpointCache(HOST, factory=server)
    assert cache.get("report").introspect is False


def test_transport_passed_through_unmodified(server: FakeServer) -> None:
    marker = object()
    cache = EndpointCache(HOST, factory=server, transport=marker)
    assert cache.get("common").transport is marker
    assert cache.get("object").transport is marker


def test_get_without_path_returns_active_handle(server: FakeServer) -> None:
    cache = EndpointCache(HOST, factory=server)
    obj = cache.get("object")
    assert cache.get() is obj
    assert cache.active_path == "object"


def test_get_without_path_before_any_handle_raises() -> None:
    cache = EndpointCache(HOST)
    with pytest.raises(PreconditionError):
        cache.get()
    assert cache.active is None


def test_larger_capacity_keeps_interleaved_paths_warm(server: FakeServer) -> None:
    cache = EndpointCache(HOST, factory=server, max_size=3)
    common = cache.get("common")
    obj = cache.get("object")
    report = cache.get("report")
    assert cache.get("common") is common
    assert cache.get("object") is obj
    assert cache.get("report") is report
    assert len(server.created) == 3
    assert cache.active_path == "report"


def test_capacity_evicts_least_recently_used(server: FakeServer) -> None:
    cache = EndpointCache(HOST, factory=server, max_size=2)
    common = cache.get("common")
    obj = cache.get("object")
    cache.get("common")
    cache.get("report")
    assert obj.closed is True
    assert common.closed is False
    assert cache.get("common") is common


def test_invalid_capacity_rejected() -> None:
    with pytest.raises(ValueError):
        EndpointCache(HOST, max_size=0)


def test_close_closes_all_handles(server: FakeServer) -> None:
    cache = EndpointCache(HOST, factory=server, max_size=3)
    handles = [cache.get(p) for p in ("common", "object", "report")]
    cache.close()
    assert all(h.closed for h in handles)
    assert cache.active is None


def test_default_factory_builds_xmlrpc_endpoint() -> None:
    cache = EndpointCache(HOST)
    endpoint = cache.get("common")
    try:
        assert isinstance(endpoint, XmlRpcEndpoint)
        assert endpoint.introspect is False
    finally:
        cache.close()
