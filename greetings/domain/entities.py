"""Domain entities composed from validated values."""

from __future__ import annotations

from dataclasses import dataclass

from .values import Address, BirthDate, NonEmptyText


@dataclass(frozen=True)
class FullName:
    first: NonEmptyText
    last: NonEmptyText

    def __str__(self) -> str:
        return f"{self.first} {self.last}"


@dataclass(frozen=True)
class Employee:
    name: FullName
    address: Address
    birth_date: BirthDate


@dataclass(frozen=True)
class Message:
    subject: NonEmptyText
    body: NonEmptyText


@dataclass(frozen=True)
class Envelope:
    to: Address
    message: Message


GREETING = Message(
    subject=NonEmptyText("Happy birthday!"),
    body=NonEmptyText("Happy birthday! Wishing you a wonderful day."),
)


def build_envelope(employee: Employee) -> Envelope:
    """Pair the employee's address with the birthday greeting."""
    return Envelope(to=employee.address, message=GREETING)
