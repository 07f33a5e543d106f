"""ValidationPolicy — checks an outcome set against the run invariants.

1. Exactly one outcome per employee in the universe.
2. Each route appears in at most one outcome.
3. An assigned employee satisfies every requirement of the route.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from routebid.domain.entities.assignment import (
    Assigned,
    AssignmentOutcome,
    outcome_route_id,
)
from routebid.domain.entities.candidate import CandidateUniverse
from routebid.domain.policies.qualification import missing_qualifications


class ViolationKind(str, Enum):
    MISSING_EMPLOYEE = "missing_employee"
    DUPLICATE_EMPLOYEE = "duplicate_employee"
    UNKNOWN_EMPLOYEE = "unknown_employee"
    ROUTE_CLAIMED_TWICE = "route_claimed_twice"
    UNKNOWN_ROUTE = "unknown_route"
    UNQUALIFIED = "unqualified"
    INVALID_CHOICE_RANK = "invalid_choice_rank"


@dataclass(frozen=True)
class Violation:
    kind: ViolationKind
    message: str
    employee_ids: tuple[int, ...] = ()
    route_id: int | None = None


@dataclass
class ValidationReport:
    violations: list[Violation] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.violations

    @property
    def errors(self) -> list[str]:
        return [v.message for v in self.violations]

    def add(self, kind: ViolationKind, message: str, employee_ids=(), route_id=None) -> None:
        self.violations.append(
            Violation(kind=kind, message=message, employee_ids=tuple(employee_ids), route_id=route_id)
        )


def validate_outcomes(
    universe: CandidateUniverse,
    outcomes: Sequence[AssignmentOutcome],
) -> ValidationReport:
    """Report every invariant violation in ``outcomes``; never raises."""
    report = ValidationReport()
    employees = universe.employees_by_id()

    outcome_counts: dict[int, int] = defaultdict(int)
    route_holders: dict[int, list[int]] = defaultdict(list)

    for outcome in outcomes:
        outcome_counts[outcome.employee_id] += 1
        route_id = outcome_route_id(outcome)
        if route_id is not None:
            route_holders[route_id].append(outcome.employee_id)

    # Invariant 1: completeness / no duplicates
    for employee_id in employees:
        if outcome_counts.get(employee_id, 0) == 0:
            report.add(
                ViolationKind.MISSING_EMPLOYEE,
                f"Employee {employee_id} missing assignment",
                employee_ids=[employee_id],
            )
    for employee_id, count in outcome_counts.items():
        if employee_id not in employees:
            report.add(
                ViolationKind.UNKNOWN_EMPLOYEE,
                f"Employee {employee_id} is not part of selection period {universe.selection_period_id}",
                employee_ids=[employee_id],
            )
        elif count > 1:
            report.add(
                ViolationKind.DUPLICATE_EMPLOYEE,
                f"Employee {employee_id} has {count} assignments",
                employee_ids=[employee_id],
            )

    # Invariant 2: exclusivity
    for route_id, holders in route_holders.items():
        route = universe.routes.get(route_id)
        label = route.run_number if route else str(route_id)
        if route is None:
            report.add(
                ViolationKind.UNKNOWN_ROUTE,
                f"Route {label} is not in scope for selection period {universe.selection_period_id}",
                employee_ids=holders,
                route_id=route_id,
            )
        if len(holders) > 1:
            report.add(
                ViolationKind.ROUTE_CLAIMED_TWICE,
                f"Route {label} assigned to multiple employees: {', '.join(str(e) for e in holders)}",
                employee_ids=holders,
                route_id=route_id,
            )

    # Invariant 3: qualification soundness, plus choice ranks within the period cap
    for outcome in outcomes:
        if isinstance(outcome, Assigned) and not 1 <= outcome.choice_rank <= universe.max_choices:
            report.add(
                ViolationKind.INVALID_CHOICE_RANK,
                f"Employee {outcome.employee_id} received invalid choice rank {outcome.choice_rank}",
                employee_ids=[outcome.employee_id],
                route_id=outcome.route_id,
            )

        route_id = outcome_route_id(outcome)
        if route_id is None:
            continue
        employee = employees.get(outcome.employee_id)
        route = universe.routes.get(route_id)
        if employee is None or route is None:
            continue
        missing = missing_qualifications(employee, route)
        if missing:
            names = ", ".join(sorted(q.value for q in missing))
            report.add(
                ViolationKind.UNQUALIFIED,
                f"Employee {employee.id} lacks {names} required by route {route.run_number}",
                employee_ids=[employee.id],
                route_id=route_id,
            )

    return report
