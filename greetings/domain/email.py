"""Email channel handler.

Mental model refresher:
- Domain modules hold channel rules: which addresses the channel serves
  and how a message is shaped for it.
- They do not talk to providers directly; the sender is injected.
"""

from __future__ import annotations

from ..types import SendEmailFn
from .channel import ChannelHandler
from .entities import Envelope
from .values import EmailAddress


class EmailHandler(ChannelHandler):
    channel = "email"
    address_type = EmailAddress

    def __init__(self, send_email: SendEmailFn) -> None:
        self._send_email = send_email

    def deliver(self, envelope: Envelope) -> None:
        self._send_email(
            to_email=envelope.to.destination,
            subject=envelope.message.subject.value,
            body=envelope.message.body.value,
        )
