"""Chat channel handler.

Chat has no subject line, so subject and body travel as one message.
"""

from __future__ import annotations

from ..types import SendChatFn
from .channel import ChannelHandler
from .entities import Envelope
from .values import ChatAddress


class ChatHandler(ChannelHandler):
    channel = "chat"
    address_type = ChatAddress

    def __init__(self, send_chat: SendChatFn) -> None:
        self._send_chat = send_chat

    def deliver(self, envelope: Envelope) -> None:
        message = f"{envelope.message.subject}\n{envelope.message.body}"
        self._send_chat(to_handle=envelope.to.destination, message=message)
