"""Error types raised by the client."""
from __future__ import annotations

from typing import Any


class OdooError(Exception):
    """Base class for all client errors."""


class AuthenticationError(OdooError):
    """Login rejected: the server did not return a user id for the credentials."""

    def __init__(self, database: str, username: str, response: Any = None) -> None:
        self.database = database
        self.username = username
        self.response = response
        super().__init__(f"Login failed for {username!r} on database {database!r}")


class TransportError(OdooError):
    """RPC call failed: network error, malformed response or remote exception."""


class RemoteFault(TransportError):
    """Server answered with an XML-RPC fault."""

    def __init__(self, fault_code: Any, fault_string: str, signature: Any = None) -> None:
        self.fault_code = fault_code
        self.fault_string = fault_string
        self.signature = signature
        super().__init__(f"[{fault_code}] {fault_string}")


class PreconditionError(OdooError):
    """Operation needs an endpoint handle but none has been created yet."""


class ReportTimeoutError(OdooError):
    """Report was not ready after the allowed number of status polls."""

    def __init__(self, report_id: Any, attempts: int) -> None:
        self.report_id = report_id
        self.attempts = attempts
        super().__init__(f"Report {report_id!r} not ready after {attempts} polls")
