"""Birthday greetings: pick one channel per employee and deliver a greeting.

Module layout by abstraction layer:
- domain: validated values, entities and channel handlers
- application: one dispatch pass with per-item outcome aggregation
- adapters: roster sources, console senders, pass runner and Kafka reporting
"""

from .adapters.fake_senders import send_chat_via_console, send_email_via_console
from .adapters.kafka_reporting import build_batch_report, publish_batch_report
from .adapters.roster import (
    BirthdaysOn,
    InMemoryEmployeeSource,
    JsonFileEmployeeSource,
    parse_employee_record,
)
from .adapters.runner import run_greetings_pass
from .application.dispatch import (
    BatchResult,
    BirthdayService,
    Outcome,
    dispatch_all,
    select_handler,
)
from .clock import fixed_clock, system_clock
from .config import DispatchSettings
from .domain.channel import ChannelHandler, EmployeeSource
from .domain.chat import ChatHandler
from .domain.email import EmailHandler
from .domain.entities import GREETING, Employee, Envelope, FullName, Message, build_envelope
from .domain.values import (
    Address,
    BirthDate,
    ChatAddress,
    EmailAddress,
    NonEmptyText,
    ValidatedEmail,
)
from .errors import (
    DeliveryError,
    EmptyValue,
    FutureDate,
    GreetingsError,
    InvalidFormat,
    NoApplicableChannel,
    SelectionFailure,
    SourceUnavailable,
    TransportFailure,
    ValidationError,
    WrongChannel,
)

__all__ = [
    "Address",
    "BatchResult",
    "BirthDate",
    "BirthdayService",
    "BirthdaysOn",
    "ChannelHandler",
    "ChatAddress",
    "ChatHandler",
    "DeliveryError",
    "DispatchSettings",
    "EmailAddress",
    "EmailHandler",
    "Employee",
    "EmployeeSource",
    "EmptyValue",
    "Envelope",
    "FullName",
    "FutureDate",
    "GREETING",
    "GreetingsError",
    "InMemoryEmployeeSource",
    "InvalidFormat",
    "JsonFileEmployeeSource",
    "Message",
    "NoApplicableChannel",
    "NonEmptyText",
    "Outcome",
    "SelectionFailure",
    "SourceUnavailable",
    "TransportFailure",
    "ValidatedEmail",
    "ValidationError",
    "WrongChannel",
    "build_batch_report",
    "build_envelope",
    "dispatch_all",
    "fixed_clock",
    "parse_employee_record",
    "publish_batch_report",
    "run_greetings_pass",
    "select_handler",
    "send_chat_via_console",
    "send_email_via_console",
    "system_clock",
]
