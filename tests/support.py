from __future__ import annotations

from datetime import date

from greetings.clock import fixed_clock
from greetings.domain.entities import Employee, FullName
from greetings.domain.values import Address, BirthDate, ChatAddress, EmailAddress, NonEmptyText

TODAY = date(2024, 7, 8)


def make_employee(
    first: str = "Jane",
    last: str = "Doe",
    *,
    address: Address | None = None,
    born: date = date(1990, 7, 8),
) -> Employee:
    return Employee(
        name=FullName(first=NonEmptyText(first), last=NonEmptyText(last)),
        address=address or ChatAddress.create("jane.handle"),
        birth_date=BirthDate(born, clock=fixed_clock(TODAY)),
    )


def jane() -> Employee:
    return make_employee("Jane", "Doe", address=ChatAddress.create("jane.handle"))


def bob() -> Employee:
    return make_employee(
        "Bob", "Smith", address=EmailAddress.create("bob@x.com"), born=date(1985, 1, 1)
    )


class StaticSource:
    def __init__(self, employees: list[Employee]) -> None:
        self.employees = employees
        self.calls = 0

    def get_employees(self) -> list[Employee]:
        self.calls += 1
        return list(self.employees)


class BrokenSource:
    def __init__(self, error: Exception) -> None:
        self.error = error
        self.calls = 0

    def get_employees(self) -> list[Employee]:
        self.calls += 1
        raise self.error
