"""Tests for SeniorityPolicy."""

from datetime import date

from routebid.domain.entities.employee import Employee
from routebid.domain.policies.seniority import is_more_senior, sort_by_seniority


def _emp(eid: int, hired: date, last: str, first: str = "Alex") -> Employee:
    return Employee(
        id=eid, employee_number=f"E{eid}", first_name=first, last_name=last,
        hire_date=hired, terminal_id=1,
    )


def test_earlier_hire_date_first():
    junior = _emp(1, date(2020, 5, 1), "Abbott")
    senior = _emp(2, date(2001, 5, 1), "Zimmer")
    assert [e.id for e in sort_by_seniority([junior, senior])] == [2, 1]
    assert is_more_senior(senior, junior)


def test_same_hire_date_breaks_tie_by_last_name():
    hired = date(2015, 2, 2)
    emps = [_emp(1, hired, "Young"), _emp(2, hired, "Baker"), _emp(3, hired, "Moss")]
    assert [e.last_name for e in sort_by_seniority(emps)] == ["Baker", "Moss", "Young"]


def test_full_tie_falls_back_to_first_name_then_id():
    hired = date(2015, 2, 2)
    emps = [
        _emp(9, hired, "Lee", "Jo"),
        _emp(4, hired, "Lee", "Jo"),
        _emp(5, hired, "Lee", "Al"),
    ]
    assert [e.id for e in sort_by_seniority(emps)] == [5, 4, 9]


def test_order_independent_of_input_order():
    hired = date(2015, 2, 2)
    emps = [_emp(i, hired, name) for i, name in enumerate(["C", "A", "B", "A"], start=1)]
    forward = [e.id for e in sort_by_seniority(emps)]
    backward = [e.id for e in sort_by_seniority(list(reversed(emps)))]
    assert forward == backward == [2, 4, 3, 1]
