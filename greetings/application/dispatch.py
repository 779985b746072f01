"""Application orchestration for one birthday-greeting pass.

Mental model refresher:
- The application layer coordinates the use-case across domain modules.
- One pass: fetch the roster once, build one envelope per employee, pick
  the first handler that accepts it, send, and record an outcome.
- Per-item failures are data in the `BatchResult`. Only a roster fetch
  failure stops the pass.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterator, Sequence, Union

from ..domain.channel import ChannelHandler, EmployeeSource
from ..domain.entities import Employee, Envelope, build_envelope
from ..errors import (
    DeliveryError,
    NoApplicableChannel,
    SelectionFailure,
    SourceUnavailable,
    TransportFailure,
)

logger = logging.getLogger(__name__)

ItemError = Union[DeliveryError, NoApplicableChannel]


@dataclass(frozen=True)
class Outcome:
    index: int
    employee: Employee
    channel: str | None
    error: ItemError | None = None

    @property
    def success(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class BatchResult:
    """Outcomes of one pass, aligned 1:1 with the fetched roster order."""

    outcomes: tuple[Outcome, ...]

    def __len__(self) -> int:
        return len(self.outcomes)

    def __iter__(self) -> Iterator[Outcome]:
        return iter(self.outcomes)

    def __getitem__(self, index: int) -> Outcome:
        return self.outcomes[index]

    @property
    def all_succeeded(self) -> bool:
        return all(item.success for item in self.outcomes)

    @property
    def successes(self) -> list[Outcome]:
        return [item for item in self.outcomes if item.success]

    @property
    def failures(self) -> list[Outcome]:
        return [item for item in self.outcomes if not item.success]


def select_handler(
    envelope: Envelope, handlers: Sequence[ChannelHandler]
) -> ChannelHandler | None:
    """Return the first handler that accepts `envelope`, or None.

    More than one match is a configuration defect: it is logged and the
    first handler in configuration order wins.
    """
    matching = [handler for handler in handlers if handler.can_handle(envelope)]
    if not matching:
        return None
    if len(matching) > 1:
        logger.warning(
            "[AMBIGUOUS CHANNEL] address_channel=%s matching=%s selected=%s",
            envelope.to.channel,
            ",".join(handler.channel for handler in matching),
            matching[0].channel,
        )
    return matching[0]


def dispatch_all(
    roster: EmployeeSource,
    handlers: Sequence[ChannelHandler],
    *,
    max_workers: int = 1,
) -> BatchResult:
    """Send one greeting per employee and collect every outcome.

    With `max_workers > 1` deliveries run on a thread pool; outcomes are
    still returned in roster order.
    """
    handlers = tuple(handlers)
    if max_workers < 1:
        raise ValueError("max_workers must be >= 1")
    if not handlers:
        logger.warning("[EMPTY CONFIG] no channel handlers configured")

    try:
        employees = list(roster.get_employees())
    except Exception as exc:
        logger.error("[SOURCE UNAVAILABLE] error=%s", exc)
        raise SourceUnavailable(exc) from exc

    logger.info(
        "[PASS START] employees=%d channels=%s max_workers=%d",
        len(employees),
        ",".join(handler.channel for handler in handlers),
        max_workers,
    )

    def dispatch_one(index: int, employee: Employee) -> Outcome:
        return _dispatch_employee(index, employee, handlers)

    if max_workers == 1 or len(employees) <= 1:
        outcomes = [dispatch_one(index, employee) for index, employee in enumerate(employees)]
    else:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            outcomes = list(
                executor.map(dispatch_one, range(len(employees)), employees)
            )

    result = BatchResult(outcomes=tuple(outcomes))
    logger.info(
        "[PASS DONE] employees=%d succeeded=%d failed=%d",
        len(result),
        len(result.successes),
        len(result.failures),
    )
    return result


def _dispatch_employee(
    index: int, employee: Employee, handlers: Sequence[ChannelHandler]
) -> Outcome:
    try:
        envelope = build_envelope(employee)
        handler = select_handler(envelope, handlers)
    except Exception as exc:
        error: ItemError = SelectionFailure(exc)
        _log_failure(index, employee, None, error)
        return Outcome(index=index, employee=employee, channel=None, error=error)

    if handler is None:
        error = NoApplicableChannel(envelope.to.channel)
        _log_failure(index, employee, None, error)
        return Outcome(index=index, employee=employee, channel=None, error=error)

    try:
        handler.send(envelope)
    except DeliveryError as exc:
        error = exc
    except Exception as exc:
        error = TransportFailure(exc)
    else:
        return Outcome(index=index, employee=employee, channel=handler.channel)

    _log_failure(index, employee, handler.channel, error)
    return Outcome(index=index, employee=employee, channel=handler.channel, error=error)


def _log_failure(
    index: int, employee: Employee, channel: str | None, error: ItemError
) -> None:
    logger.warning(
        "[DELIVERY FAILED] index=%d employee=%s channel=%s error_type=%s error=%s",
        index,
        employee.name,
        channel,
        type(error).__name__,
        error,
    )


class BirthdayService:
    """Holds the roster source and handler list for repeated passes."""

    def __init__(
        self,
        employee_source: EmployeeSource,
        handlers: Sequence[ChannelHandler],
        *,
        max_workers: int = 1,
    ) -> None:
        self._employee_source = employee_source
        self._handlers = tuple(handlers)
        self._max_workers = max_workers
        channels = [handler.channel for handler in self._handlers]
        duplicated = sorted({channel for channel in channels if channels.count(channel) > 1})
        if duplicated:
            logger.warning("[AMBIGUOUS CONFIG] duplicated_channels=%s", ",".join(duplicated))

    @property
    def handlers(self) -> tuple[ChannelHandler, ...]:
        return self._handlers

    def send_greetings(self) -> BatchResult:
        return dispatch_all(
            self._employee_source, self._handlers, max_workers=self._max_workers
        )
