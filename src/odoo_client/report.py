"""
Report retrieval: trigger generation on the report service, poll report_get
until the document is ready, decode the base64 payload.
"""
from __future__ import annotations

import base64
import enum
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from odoo_client.core.session import Session
from odoo_client.errors import ReportTimeoutError

logger = logging.getLogger(__name__)

DEFAULT_REPORT_TYPE = "qweb-pdf"


class ReportState(enum.Enum):
    REQUESTED = "requested"
    POLLING = "polling"
    READY = "ready"
    DECODED = "decoded"


@dataclass
class ReportJob:
    """One report generation request; lives for a single fetch_report call."""

    report_id: Any
    state: ReportState = ReportState.REQUESTED
    attempts: int = 0
    payload: str | None = None

    def advance(self, state: ReportState) -> None:
        logger.debug("Report %r: %s -> %s", self.report_id, self.state.value, state.value)
        self.state = state


def fetch_report(
    call: Callable[[str, list[Any]], Any],
    session: Session,
    model: str,
    ids: Sequence[int],
    report_type: str = DEFAULT_REPORT_TYPE,
    *,
    poll_interval: float = 1.0,
    max_attempts: int | None = None,
) -> bytes:
    """
    Run one report job to completion and return the document bytes.
    call(method, params) must target the report service. max_attempts=None polls forever.
    """
    if not ids:
        raise ValueError("ids must contain at least one record id")
    if max_attempts is not None and max_attempts < 1:
        raise ValueError("max_attempts must be at least 1 or None")
    if poll_interval < 0:
        raise ValueError("poll_interval cannot be negative")

    context = {"model": model, "id": ids[0], "report_type": report_type}
    job = ReportJob(call("report", session.build_params([model, ids, context])))
    logger.debug("Requested %s report for %s %s: %r", report_type, model, ids[0], job.report_id)

    job.advance(ReportState.POLLING)
    while True:
        status = call("report_get", session.build_params([job.report_id]))
        job.attempts += 1
        if status.get("state"):
            break
        if max_attempts is not None and job.attempts >= max_attempts:
            raise ReportTimeoutError(job.report_id, job.attempts)
        time.sleep(poll_interval)

    job.advance(ReportState.READY)
    job.payload = status["result"]
    document = base64.b64decode(job.payload)
    job.advance(ReportState.DECODED)
    return document
