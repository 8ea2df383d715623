"""Record types for people, employees and simple geometric values."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class DayOfWeek(IntEnum):
    """Days of the week, numbered from Monday = 1."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @property
    def label(self) -> str:
        return self.name.capitalize()


class Status(IntEnum):
    """Progress of a piece of work."""

    PENDING = 0
    IN_PROGRESS = 1
    COMPLETED = 2
    CANCELLED = 3

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()


def _check_field(name: str, value: int, bits: int) -> None:
    limit = (1 << bits) - 1
    if not 0 <= value <= limit:
        raise ValueError(f"{name} {value} outside 0..{limit}")


@dataclass
class Flags:
    """Compact flags: an active bit, a 3-bit priority and a 4-bit category."""

    is_active: bool = False
    priority: int = 0
    category: int = 0
    reserved: int = 0

    def __post_init__(self) -> None:
        self.is_active = bool(self.is_active)
        _check_field("priority", self.priority, 3)
        _check_field("category", self.category, 4)
        _check_field("reserved", self.reserved, 24)


@dataclass
class Date:
    """A calendar date."""

    day: int
    month: int
    year: int

    def __str__(self) -> str:
        return f"{self.day:02d}/{self.month:02d}/{self.year}"


@dataclass
class Address:
    """A postal address."""

    street: str
    city: str
    state: str
    zip_code: int

    def __str__(self) -> str:
        return f"{self.street}, {self.city}, {self.state} {self.zip_code}"


@dataclass
class Employee:
    """An employee with nested date, address and flag records."""

    employee_id: int
    name: str
    department: str
    salary: float
    hire_date: Date
    office_address: Address
    status: Status = Status.PENDING
    flags: Flags = field(default_factory=Flags)

    def raise_salary(self, percentage: float) -> float:
        """Increase the salary by ``percentage`` percent; return the new salary."""
        self.salary *= 1.0 + percentage / 100.0
        return self.salary


@dataclass(frozen=True)
class Point:
    """A point on the integer grid."""

    x: int
    y: int


@dataclass(frozen=True)
class Complex:
    """A complex number with real and imaginary parts."""

    real: float
    imag: float

    def __str__(self) -> str:
        return f"{self.real:.1f} + {self.imag:.1f}i"