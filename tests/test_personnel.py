import pytest

from classics.personnel import (
    Address,
    Complex,
    Date,
    DayOfWeek,
    Employee,
    Flags,
    Point,
    Status,
)


def _employee(salary=75000.0):
    return Employee(
        employee_id=1001,
        name="Alice Smith",
        department="Engineering",
        salary=salary,
        hire_date=Date(1, 3, 2020),
        office_address=Address("456 Tech Blvd", "San Francisco", "CA", 94102),
        status=Status.IN_PROGRESS,
        flags=Flags(is_active=True, priority=5, category=2),
    )


def test_day_numbering_starts_at_monday():
    assert DayOfWeek.MONDAY == 1
    assert DayOfWeek.SUNDAY == 7
    assert DayOfWeek.FRIDAY.label == "Friday"
    assert DayOfWeek(6).label == "Saturday"


def test_status_labels():
    assert Status(1).label == "In Progress"
    assert Status(3).label == "Cancelled"
    assert Status(0) is Status.PENDING
    with pytest.raises(ValueError):
        Status(4)


def test_date_is_zero_padded():
    assert str(Date(1, 3, 2020)) == "01/03/2020"


def test_address_format():
    addr = Address("456 Tech Blvd", "San Francisco", "CA", 94102)
    assert str(addr) == "456 Tech Blvd, San Francisco, CA 94102"


def test_raise_by_zero_keeps_salary():
    emp = _employee()
    assert emp.raise_salary(0) == 75000.0
    assert emp.salary == 75000.0


def test_raise_by_hundred_percent_doubles():
    emp = _employee(salary=65000.0)
    assert emp.raise_salary(100) == pytest.approx(130000.0)


def test_raise_increases_monotonically():
    emp = _employee()
    before = emp.salary
    after = emp.raise_salary(10)
    assert after > before
    assert emp.salary == after


@pytest.mark.parametrize(
    "kwargs",
    [{"priority": 8}, {"priority": -1}, {"category": 16}, {"reserved": 1 << 24}],
)
def test_flags_reject_out_of_range(kwargs):
    with pytest.raises(ValueError):
        Flags(**kwargs)


def test_flags_accept_limits():
    flags = Flags(is_active=1, priority=7, category=15)
    assert flags.is_active is True
    assert (flags.priority, flags.category) == (7, 15)


def test_point_equality():
    points = [Point(1, 2), Point(3, 4), Point(5, 6)]
    assert points[1] == Point(3, 4)
    assert points[0] != points[2]


def test_complex_format():
    assert str(Complex(3.0, 4.0)) == "3.0 + 4.0i"