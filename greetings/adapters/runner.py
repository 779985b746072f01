"""Pass-runner adapter: the controller-like entrypoint for one greeting pass.

Mental model refresher:
- A scheduler, CLI or worker would call this once per pass.
- Flow:
  source -> application use-case -> status decision -> optional report
- This module turns the hard roster failure into a status dictionary so
  callers can log or exit without catching exceptions themselves.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from ..application.dispatch import BatchResult, dispatch_all
from ..domain.channel import ChannelHandler, EmployeeSource
from ..errors import SourceUnavailable
from ..types import PassResult

logger = logging.getLogger(__name__)

ReportFn = Callable[[BatchResult], object]


def run_greetings_pass(
    source: EmployeeSource,
    *,
    handlers: Sequence[ChannelHandler],
    max_workers: int = 1,
    report: ReportFn | None = None,
) -> PassResult:
    """Run one pass and summarize it.

    Status policy:
    - `source_unavailable` when the roster cannot be fetched; nothing is sent.
    - `all_delivered` when every employee got a greeting.
    - `partially_delivered` when at least one per-item failure was recorded.

    Greetings are already sent when `report` runs, so a failing report is
    logged and returned as `report_error` instead of raised.
    """
    try:
        result = dispatch_all(source, handlers, max_workers=max_workers)
    except SourceUnavailable as exc:
        return {
            "status": "source_unavailable",
            "result": None,
            "error": str(exc),
            "report_error": None,
        }

    report_error = None
    if report is not None:
        try:
            report(result)
        except Exception as exc:
            report_error = str(exc)
            logger.error(
                "[REPORT ERROR] employees=%d failed=%d error=%s",
                len(result),
                len(result.failures),
                exc,
            )

    if result.all_succeeded:
        status = "all_delivered"
        error = None
    else:
        status = "partially_delivered"
        error = f"{len(result.failures)}_of_{len(result)}_deliveries_failed"

    return {
        "status": status,
        "result": result,
        "error": error,
        "report_error": report_error,
    }
