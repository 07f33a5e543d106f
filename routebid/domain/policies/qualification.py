"""QualificationPolicy — does an employee meet a route's requirements."""

from routebid.domain.entities.employee import Employee
from routebid.domain.entities.route import Route
from routebid.domain.value_objects.enums import Qualification


def missing_qualifications(employee: Employee, route: Route) -> frozenset[Qualification]:
    return route.requirements - employee.qualifications


def employee_qualifies(employee: Employee, route: Route) -> bool:
    """All route requirements must be present in the employee's flags.

    Rules are additive: a route requiring doubles and chain needs both.
    """
    return route.requirements.issubset(employee.qualifications)
