"""Session: credentials, login handshake and the authenticated parameter prefix."""
from __future__ import annotations

import logging
import threading
from typing import Any, Iterable

from odoo_client.errors import AuthenticationError
from odoo_client.rpc.endpoints import EndpointCache

logger = logging.getLogger(__name__)


class Session:
    """
    Holds credentials and the user id returned by common.login.
    The user id is fetched once (eagerly in the constructor, or on first use) and never changes.
    """

    def __init__(
        self,
        endpoints: EndpointCache,
        database: str,
        username: str,
        password: str,
        *,
        eager_login: bool = True,
    ) -> None:
        self.database = database
        self.username = username
        self.password = password
        self._endpoints = endpoints
        self._user_id: int | None = None
        self._lock = threading.Lock()
        if eager_login:
            self.get_user_id()

    @property
    def user_id(self) -> int | None:
        """Cached user id, or None before login."""
        return self._user_id

    @property
    def credentials(self) -> list[Any]:
        """[database, username, password]: raw triple used by login and timezone_get."""
        return [self.database, self.username, self.password]

    def get_user_id(self) -> int:
        """Return the user id, logging in on first call. Raises AuthenticationError if rejected."""
        with self._lock:
            if self._user_id is None:
                self._user_id = self._login()
            return self._user_id

    def build_params(self, extra: Iterable[Any]) -> list[Any]:
        """[database, user_id, password, *extra]; this order is the server's calling convention."""
        return [self.database, self.get_user_id(), self.password, *extra]

    def _login(self) -> int:
        response = self._endpoints.get("common").call("login", self.credentials)
        if isinstance(response, bool) or not isinstance(response, int) or response <= 0:
            raise AuthenticationError(self.database, self.username, response)
        logger.debug("Logged in as %r on %r (uid %s)", self.username, self.database, response)
        return response
