"""Domain errors raised by the assignment pipeline."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from routebid.domain.policies.validation import ValidationReport


class RouteBidError(Exception):
    """Base class for all routebid domain errors."""


class PeriodNotFoundError(RouteBidError):
    def __init__(self, period_id: int):
        super().__init__(f"Selection period {period_id} not found")
        self.period_id = period_id


class PeriodNotEligibleError(RouteBidError):
    """The period exists but its status does not allow the requested operation."""

    def __init__(self, period_id: int, status: str, detail: str | None = None):
        super().__init__(detail or f"Selection period {period_id} is {status} and cannot be processed")
        self.period_id = period_id
        self.status = status


class RunInProgressError(RouteBidError):
    def __init__(self, period_id: int):
        super().__init__(f"An assignment run for selection period {period_id} is already in progress")
        self.period_id = period_id


class InvalidPreferenceError(RouteBidError):
    """Preference lists that must never reach the engine (duplicates, over the cap)."""

    def __init__(self, problems: list[str]):
        super().__init__("Invalid route preferences: " + "; ".join(problems))
        self.problems = problems


class AssignmentValidationError(RouteBidError):
    def __init__(self, report: ValidationReport):
        super().__init__(
            f"Assignment validation failed with {len(report.violations)} violation(s)"
        )
        self.report = report

    @property
    def errors(self) -> list[str]:
        return self.report.errors


class ManualAssignmentError(RouteBidError):
    """A manual assignment request conflicts with the period's current state."""


class AssignmentNotFoundError(RouteBidError):
    def __init__(self, assignment_id: int):
        super().__init__(f"Assignment {assignment_id} not found")
        self.assignment_id = assignment_id
