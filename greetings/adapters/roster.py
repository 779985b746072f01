"""Employee source adapters.

Mental model refresher:
- This is an adapter/edge module.
- It translates raw roster records (dicts, JSON files) into validated
  `Employee` values. Validation errors surface here, at the source
  boundary, never inside the dispatch engine.
"""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path
from typing import Any, Iterable, Mapping

from ..domain.channel import EmployeeSource
from ..domain.entities import Employee, FullName
from ..domain.values import Address, BirthDate, ChatAddress, EmailAddress, NonEmptyText
from ..errors import InvalidFormat
from ..types import Clock, EmployeeRecord

_ADDRESS_TYPES: dict[str, type] = {
    EmailAddress.channel: EmailAddress,
    ChatAddress.channel: ChatAddress,
}


def parse_employee_record(record: EmployeeRecord, *, clock: Clock) -> Employee:
    """Map one raw roster record into an `Employee`.

    Expected shape:
        {"first_name": "Jane", "last_name": "Doe", "birth_date": "1990-07-08",
         "address": {"channel": "chat", "to": "jane.handle"}}
    """
    if not isinstance(record, Mapping):
        raise InvalidFormat("employee record must be an object")

    name = FullName(
        first=NonEmptyText(_as_required_str(record.get("first_name"), "first_name")),
        last=NonEmptyText(_as_required_str(record.get("last_name"), "last_name")),
    )
    birth_date = BirthDate(_as_date(record.get("birth_date"), "birth_date"), clock=clock)
    address = _parse_address(record.get("address"))
    return Employee(name=name, address=address, birth_date=birth_date)


def _parse_address(raw: Any) -> Address:
    if not isinstance(raw, Mapping):
        raise InvalidFormat("Missing required field: address")
    channel = _as_required_str(raw.get("channel"), "address.channel")
    address_type = _ADDRESS_TYPES.get(channel)
    if address_type is None:
        raise InvalidFormat(f"Unsupported address channel: {channel!r}")
    return address_type.create(_as_required_str(raw.get("to"), "address.to"))


def _as_required_str(value: Any, field_name: str) -> str:
    if value is None:
        raise InvalidFormat(f"Missing required field: {field_name}")
    if not isinstance(value, str):
        raise InvalidFormat(f"Field {field_name} must be a string, got {type(value).__name__}")
    return value


def _as_date(value: Any, field_name: str) -> date:
    text = _as_required_str(value, field_name)
    try:
        return date.fromisoformat(text)
    except ValueError as exc:
        raise InvalidFormat(f"Invalid date for {field_name}: {text!r}") from exc


class InMemoryEmployeeSource:
    def __init__(self, employees: Iterable[Employee]) -> None:
        self._employees = tuple(employees)

    def get_employees(self) -> list[Employee]:
        return list(self._employees)


class JsonFileEmployeeSource:
    """Reads a JSON list of roster records on every fetch."""

    def __init__(self, path: Path | str, *, clock: Clock) -> None:
        self._path = Path(path)
        self._clock = clock

    def get_employees(self) -> list[Employee]:
        with self._path.open("r", encoding="utf-8") as file_handle:
            records = json.load(file_handle)
        if not isinstance(records, list):
            raise InvalidFormat(f"{self._path} must contain a JSON list of employees")
        return [parse_employee_record(record, clock=self._clock) for record in records]


class BirthdaysOn:
    """Restricts another source to employees whose birthday is `clock()`."""

    def __init__(self, source: EmployeeSource, clock: Clock) -> None:
        self._source = source
        self._clock = clock

    def get_employees(self) -> list[Employee]:
        today = self._clock()
        return [
            employee
            for employee in self._source.get_employees()
            if employee.birth_date.is_birthday_on(today)
        ]
