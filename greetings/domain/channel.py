"""Channel handler contract and the employee source port.

Mental model refresher:
- A handler owns one delivery channel (email, chat).
- `can_handle` is a pure check used for selection before any delivery.
- `send` performs delivery through an injected sender callable; the
  handler does not know which provider implementation is underneath.
- New channels plug in by subclassing; the dispatch engine never changes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Protocol, runtime_checkable

from ..errors import DeliveryError, TransportFailure, WrongChannel
from .entities import Employee, Envelope


@runtime_checkable
class EmployeeSource(Protocol):
    """Supplies the whole roster in one call."""

    def get_employees(self) -> list[Employee]:
        ...


class ChannelHandler(ABC):
    channel: ClassVar[str]
    address_type: ClassVar[type]

    def can_handle(self, envelope: Envelope) -> bool:
        return isinstance(envelope.to, self.address_type)

    def send(self, envelope: Envelope) -> None:
        """Deliver `envelope` or raise a `DeliveryError`.

        Raises `WrongChannel` when called for an address this handler does
        not serve. Any other exception from the transport is re-raised as
        `TransportFailure`.
        """
        if not self.can_handle(envelope):
            raise WrongChannel(self.channel, envelope.to.channel)
        try:
            self.deliver(envelope)
        except DeliveryError:
            raise
        except Exception as exc:
            raise TransportFailure(exc) from exc

    @abstractmethod
    def deliver(self, envelope: Envelope) -> None:
        """Hand the envelope to the channel transport."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(channel={self.channel!r})"
