"""Employee records and the registry that keeps them in order."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import IntEnum
from itertools import combinations
from typing import Iterator, Optional

# Record codes are stored in a single byte and wrap around.
_CODE_MODULUS = 256

_DATE_PATTERN = re.compile(r"\s*([+-]?\d+)/\s*([+-]?\d+)/\s*([+-]?\d+)")


class Status(IntEnum):
    """Employment status of a record."""

    ACTIVE = 1
    INACTIVE = 2


@dataclass(frozen=True)
class Date:
    """A calendar date as typed by the user, without validation."""

    day: int = 0
    month: int = 0
    year: int = 0

    def __str__(self) -> str:
        return f"{self.day}/{self.month}/{self.year}"


def parse_date(text: str) -> Date:
    """Parse a date written as day/month/year."""
    match = _DATE_PATTERN.match(text)
    if match is None:
        raise ValueError(f"invalid date: {text!r}")
    day, month, year = (int(part) for part in match.groups())
    return Date(day, month, year)


@dataclass
class Employee:
    """One employee record."""

    name: str
    email: str
    cpf: str
    function: str
    salary: float
    admission: Date
    dismissal: Date = field(default_factory=Date)
    status: Status = Status.ACTIVE
    code: int = 0

    def inactivate(self, date: Date) -> None:
        """Mark the employee as dismissed on the given date."""
        self.status = Status.INACTIVE
        self.dismissal = date


class Registry:
    """An ordered collection of employees that hands out record codes."""

    def __init__(self) -> None:
        self._employees: list[Employee] = []
        self._count = 0

    def __iter__(self) -> Iterator[Employee]:
        return iter(list(self._employees))

    def __len__(self) -> int:
        return len(self._employees)

    def is_empty(self) -> bool:
        return not self._employees

    def last(self) -> Employee:
        if not self._employees:
            raise LookupError("registry is empty")
        return self._employees[-1]

    def _next_code(self) -> int:
        self._count = (self._count + 1) % _CODE_MODULUS
        return self._count

    def insert_front(self, employee: Employee) -> None:
        employee.code = self._next_code()
        self._employees.insert(0, employee)

    def insert_back(self, employee: Employee) -> None:
        employee.code = self._next_code()
        self._employees.append(employee)

    def remove(self, employee: Employee) -> bool:
        """Remove this exact record; return whether it was present."""
        position = next(
            (index for index, item in enumerate(self._employees) if item is employee),
            None,
        )
        if position is None:
            return False
        del self._employees[position]
        self._count = (self._count - 1) % _CODE_MODULUS
        return True

    def find_by_name(self, name: str) -> Optional[Employee]:
        return next((item for item in self._employees if item.name == name), None)

    def sort_by_name(self) -> None:
        """Order records by name.

        Pairs are compared in a fixed exchange order, which decides where
        records with equal names end up.
        """
        items = self._employees
        for first, second in combinations(range(len(items)), 2):
            if items[first].name > items[second].name:
                items[first], items[second] = items[second], items[first]