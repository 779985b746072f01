"""Domain layer: validated values, entities and channel handlers."""

from .channel import ChannelHandler, EmployeeSource
from .chat import ChatHandler
from .email import EmailHandler
from .entities import GREETING, Employee, Envelope, FullName, Message, build_envelope
from .values import (
    Address,
    BirthDate,
    ChatAddress,
    EmailAddress,
    NonEmptyText,
    ValidatedEmail,
)

__all__ = [
    "Address",
    "BirthDate",
    "ChannelHandler",
    "ChatAddress",
    "ChatHandler",
    "EmailAddress",
    "EmailHandler",
    "Employee",
    "EmployeeSource",
    "Envelope",
    "FullName",
    "GREETING",
    "Message",
    "NonEmptyText",
    "ValidatedEmail",
    "build_envelope",
]
