"""SeniorityPolicy — deterministic ordering of employees."""

from __future__ import annotations

from collections.abc import Iterable

from routebid.domain.entities.employee import Employee


def sort_by_seniority(employees: Iterable[Employee]) -> list[Employee]:
    """Most senior first: hire date ASC, last name ASC, first name ASC, id ASC.

    The trailing keys make the order strict, so identical input always
    produces the identical sequence.
    """
    return sorted(employees, key=lambda e: e.seniority_key())


def is_more_senior(a: Employee, b: Employee) -> bool:
    return a.seniority_key() < b.seniority_key()
