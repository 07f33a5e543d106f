"""Assignment outcomes — the per-employee result of a run.

An outcome is either ``Assigned`` (route + choice rank) or ``Unassigned``
(float pool, with a reason). ``ManualAssignment`` covers admin overrides,
which carry a route but no choice rank.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Union

from routebid.domain.value_objects.enums import CHOICE_LABELS, UnassignedReason


@dataclass(frozen=True)
class Assigned:
    employee_id: int
    route_id: int
    choice_rank: int

    @property
    def reason(self) -> str:
        return f"Assigned {CHOICE_LABELS.get(self.choice_rank, str(self.choice_rank))} choice route"


@dataclass(frozen=True)
class Unassigned:
    employee_id: int
    reason_code: UnassignedReason

    @property
    def reason(self) -> str:
        return self.reason_code.description


@dataclass(frozen=True)
class ManuallyAssigned:
    employee_id: int
    route_id: int
    note: str | None = None

    @property
    def reason(self) -> str:
        return f"Manually assigned{': ' + self.note if self.note else ''}"


AssignmentOutcome = Union[Assigned, Unassigned, ManuallyAssigned]


def outcome_route_id(outcome: AssignmentOutcome) -> int | None:
    if isinstance(outcome, (Assigned, ManuallyAssigned)):
        return outcome.route_id
    return None


def outcome_choice_rank(outcome: AssignmentOutcome) -> int | None:
    if isinstance(outcome, Assigned):
        return outcome.choice_rank
    return None


@dataclass
class AssignmentRecord:
    """A persisted outcome row for one employee in one selection period."""

    id: int | None
    employee_id: int
    selection_period_id: int
    route_id: int | None
    choice_received: int | None
    reason: str | None = None
    reason_code: str | None = None
    effective_date: date | None = None

    @classmethod
    def from_outcome(
        cls, outcome: AssignmentOutcome, selection_period_id: int, effective_date: date
    ) -> AssignmentRecord:
        return cls(
            id=None,
            employee_id=outcome.employee_id,
            selection_period_id=selection_period_id,
            route_id=outcome_route_id(outcome),
            choice_received=outcome_choice_rank(outcome),
            reason=outcome.reason,
            reason_code=outcome.reason_code.value if isinstance(outcome, Unassigned) else None,
            effective_date=effective_date,
        )
