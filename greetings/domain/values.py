"""Validated value types.

Mental model refresher:
- Each type checks its own rules when it is built, so a value that exists
  is a valid value.
- Values are frozen dataclasses: compared by value, never mutated.
- Nothing here reads an ambient clock; `BirthDate` is handed one.
"""

from __future__ import annotations

import calendar
from dataclasses import InitVar, dataclass
from datetime import date, datetime
from typing import ClassVar, Union

from ..errors import EmptyValue, FutureDate, InvalidFormat
from ..types import Clock


@dataclass(frozen=True)
class NonEmptyText:
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise InvalidFormat(f"expected text, got {type(self.value).__name__}")
        if len(self.value) == 0:
            raise EmptyValue("specified string is empty")

    @classmethod
    def create(cls, raw: str) -> NonEmptyText:
        return cls(raw)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ValidatedEmail:
    """Email destination. Only emptiness is checked for now."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or len(self.value) == 0:
            raise InvalidFormat("specified email is invalid")

    @classmethod
    def create(cls, raw: str) -> ValidatedEmail:
        return cls(raw)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class BirthDate:
    """Calendar date that is never after "today" as reported by `clock`."""

    value: date
    clock: InitVar[Clock]

    def __post_init__(self, clock: Clock) -> None:
        if isinstance(self.value, datetime) or not isinstance(self.value, date):
            raise InvalidFormat(f"expected a date, got {type(self.value).__name__}")
        today = clock()
        if isinstance(today, datetime):
            today = today.date()
        if self.value > today:
            raise FutureDate(f"date cannot be in the future: {self.value.isoformat()}")

    @classmethod
    def create(cls, value: date, *, clock: Clock) -> BirthDate:
        return cls(value, clock=clock)

    def is_birthday_on(self, day: date) -> bool:
        """True when `day` is the anniversary of this date.

        People born on 29 February celebrate on 28 February in non-leap years.
        """
        born = self.value
        if (born.month, born.day) == (day.month, day.day):
            return True
        return (
            (born.month, born.day) == (2, 29)
            and (day.month, day.day) == (2, 28)
            and not calendar.isleap(day.year)
        )

    def __str__(self) -> str:
        return self.value.isoformat()


@dataclass(frozen=True)
class EmailAddress:
    channel: ClassVar[str] = "email"

    email: ValidatedEmail

    def __post_init__(self) -> None:
        if not isinstance(self.email, ValidatedEmail):
            raise InvalidFormat("email address requires a ValidatedEmail")

    @classmethod
    def create(cls, raw: str) -> EmailAddress:
        return cls(ValidatedEmail(raw))

    @property
    def destination(self) -> str:
        return self.email.value


@dataclass(frozen=True)
class ChatAddress:
    channel: ClassVar[str] = "chat"

    handle: NonEmptyText

    def __post_init__(self) -> None:
        if not isinstance(self.handle, NonEmptyText):
            raise InvalidFormat("chat address requires a NonEmptyText handle")

    @classmethod
    def create(cls, raw: str) -> ChatAddress:
        return cls(NonEmptyText(raw))

    @property
    def destination(self) -> str:
        return self.handle.value


Address = Union[EmailAddress, ChatAddress]
