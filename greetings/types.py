"""Shared type aliases for the greetings package."""

from __future__ import annotations

from datetime import date
from typing import Any, Callable, Mapping

EmployeeRecord = Mapping[str, Any]
ReportDict = dict[str, Any]
PassResult = dict[str, Any]

Clock = Callable[[], date]

SendEmailFn = Callable[..., None]
SendChatFn = Callable[..., None]
