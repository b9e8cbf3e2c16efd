"""
OdooClient — client for the XML-RPC API of Odoo (formerly OpenERP), version 6 and up.
Authenticates once, then exposes generic model operations, server metadata and reports.
"""
from __future__ import annotations

from typing import Any, Mapping, Sequence

from odoo_client.core.config import ClientConfig
from odoo_client.core.session import Session
from odoo_client.report import DEFAULT_REPORT_TYPE, fetch_report
from odoo_client.rpc.endpoints import EndpointCache
from odoo_client.rpc.protocol import EndpointFactory

COMMON = "common"
OBJECT = "object"
REPORT = "report"

# get_report(max_attempts=...) default: take the client's max_poll_attempts
CLIENT_DEFAULT: Any = object()


class OdooClient:
    """
    Facade over the common, object and report services.

        client = OdooClient("http://localhost:8069/xmlrpc", "demo", "admin", "admin")
        ids = client.search("res.partner", [["is_company", "=", True]])
        partners = client.read("res.partner", ids, ["name"])

    transport is passed unmodified to every endpoint (for the default endpoint: an httpx.Client).
    eager_login=False defers the login call until the first model operation.
    """

    def __init__(
        self,
        host: str,
        database: str,
        username: str,
        password: str,
        transport: Any = None,
        *,
        eager_login: bool = True,
        endpoint_cache_size: int = 1,
        poll_interval: float = 1.0,
        max_poll_attempts: int | None = None,
        endpoint_factory: EndpointFactory | None = None,
    ) -> None:
        self.host = host
        self.poll_interval = poll_interval
        self.max_poll_attempts = max_poll_attempts
        self._endpoints = EndpointCache(
            host,
            factory=endpoint_factory,
            transport=transport,
            max_size=endpoint_cache_size,
        )
        try:
            self._session = Session(
                self._endpoints,
                database,
                username,
                password,
                eager_login=eager_login,
            )
        except BaseException:
            # failed eager login: the caller never gets a client to close
            self._endpoints.close()
            raise

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        transport: Any = None,
        endpoint_factory: EndpointFactory | None = None,
    ) -> OdooClient:
        return cls(
            config.host,
            config.database,
            config.username,
            config.password,
            transport,
            eager_login=config.eager_login,
            endpoint_cache_size=config.endpoint_cache_size,
            poll_interval=config.poll_interval,
            max_poll_attempts=config.max_poll_attempts,
            endpoint_factory=endpoint_factory,
        )

    @property
    def session(self) -> Session:
        return self._session

    @property
    def endpoints(self) -> EndpointCache:
        return self._endpoints

    @property
    def user_id(self) -> int:
        """User id of the logged-in user (logs in if that has not happened yet)."""
        return self._session.get_user_id()

    def version(self) -> dict[str, Any]:
        """Server version info."""
        return self._endpoints.get(COMMON).call("version", [])

    def timezone(self) -> str:
        """Server timezone."""
        return self._endpoints.get(COMMON).call("timezone_get", self._session.credentials)

    def execute(self, model: str, operation: str, *args: Any) -> Any:
        """Call any model method through object.execute; the result is returned as-is."""
        params = self._session.build_params([model, operation, *args])
        return self._endpoints.get(OBJECT).call("execute", params)

    def search(self, model: str, criteria: Sequence[Any], offset: int = 0, limit: int = 100) -> list[int]:
        """Ids of records matching a domain, e.g. [["name", "ilike", "acme"]]."""
        return self.execute(model, "search", criteria, offset, limit)

    def create(self, model: str, values: Mapping[str, Any]) -> int:
        """Create one record; returns its id."""
        return self.execute(model, "create", values)

    def read(self, model: str, ids: Sequence[int], fields: Sequence[str] = ()) -> list[dict[str, Any]]:
        """Read records. An empty field list fetches all fields."""
        return self.execute(model, "read", ids, list(fields))

    def write(self, model: str, ids: Sequence[int], values: Mapping[str, Any]) -> Any:
        return self.execute(model, "write", ids, values)

    def unlink(self, model: str, ids: Sequence[int]) -> bool:
        return self.execute(model, "unlink", ids)

    def get_report(
        self,
        model: str,
        ids: Sequence[int],
        report_type: str = DEFAULT_REPORT_TYPE,
        *,
        poll_interval: float | None = None,
        max_attempts: Any = CLIENT_DEFAULT,
    ) -> bytes:
        """
        Generate a report for ids[0] and block until the server has rendered it.
        poll_interval and max_attempts default to the client's settings.
        max_attempts=None polls until the report is ready, whatever the client default.
        """
        return fetch_report(
            self._call_report,
            self._session,
            model,
            ids,
            report_type,
            poll_interval=self.poll_interval if poll_interval is None else poll_interval,
            max_attempts=self.max_poll_attempts if max_attempts is CLIENT_DEFAULT else max_attempts,
        )

    def get_last_request(self) -> str | None:
        """Raw body of the last request sent on the active endpoint."""
        return self._endpoints.get().last_request

    def get_last_response(self) -> str | None:
        """Raw body of the last response received on the active endpoint."""
        return self._endpoints.get().last_response

    def close(self) -> None:
        self._endpoints.close()

    def __enter__(self) -> OdooClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _call_report(self, method: str, params: list[Any]) -> Any:
        return self._endpoints.get(REPORT).call(method, params)
