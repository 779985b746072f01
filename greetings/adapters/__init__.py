"""Adapter layer: roster sources, sender implementations and reporting."""

from .fake_senders import send_chat_via_console, send_email_via_console
from .kafka_reporting import build_batch_report, publish_batch_report
from .roster import (
    BirthdaysOn,
    InMemoryEmployeeSource,
    JsonFileEmployeeSource,
    parse_employee_record,
)
from .runner import run_greetings_pass

__all__ = [
    "BirthdaysOn",
    "InMemoryEmployeeSource",
    "JsonFileEmployeeSource",
    "build_batch_report",
    "parse_employee_record",
    "publish_batch_report",
    "run_greetings_pass",
    "send_chat_via_console",
    "send_email_via_console",
]
