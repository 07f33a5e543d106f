"""CommitAssignmentsUseCase — validate, then replace a period's outcome set."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date

from routebid.application.ports.assignment_repo import AssignmentRepository
from routebid.application.ports.employee_repo import EmployeeRepository
from routebid.application.ports.selection_period_repo import SelectionPeriodRepository
from routebid.application.ports.transaction import TransactionManager
from routebid.domain.entities.assignment import (
    AssignmentOutcome,
    AssignmentRecord,
    outcome_route_id,
)
from routebid.domain.entities.candidate import CandidateUniverse
from routebid.domain.errors import AssignmentValidationError
from routebid.domain.policies.validation import validate_outcomes
from routebid.domain.value_objects.enums import PeriodStatus

logger = logging.getLogger(__name__)


class CommitAssignmentsUseCase:
    """Persists one run's outcomes as a single all-or-nothing transaction."""

    def __init__(
        self,
        assignment_repo: AssignmentRepository,
        employee_repo: EmployeeRepository,
        period_repo: SelectionPeriodRepository,
        transaction: TransactionManager,
    ):
        self._assignments = assignment_repo
        self._employees = employee_repo
        self._periods = period_repo
        self._tx = transaction

    async def execute(
        self,
        universe: CandidateUniverse,
        outcomes: Sequence[AssignmentOutcome],
        effective_date: date | None = None,
    ) -> list[AssignmentRecord]:
        """Validate and commit.

        Steps, in one transaction:
        1. delete the period's previous assignments
        2. insert the new outcome set
        3. point every employee's current route at its new outcome
        4. mark the period COMPLETED, which also releases the run lock

        Raises:
            AssignmentValidationError: the outcome set breaks an invariant;
                nothing is written.
        """
        report = validate_outcomes(universe, outcomes)
        if not report.is_valid:
            logger.error(
                "Period %d: refusing to commit, %d violation(s): %s",
                universe.selection_period_id, len(report.violations), report.errors,
            )
            raise AssignmentValidationError(report)

        period_id = universe.selection_period_id
        effective = effective_date or date.today()
        records = [AssignmentRecord.from_outcome(o, period_id, effective) for o in outcomes]

        try:
            saved = await self._assignments.replace_for_period(period_id, records)
            await self._employees.set_current_routes(
                {o.employee_id: outcome_route_id(o) for o in outcomes}
            )
            await self._periods.set_status(period_id, PeriodStatus.COMPLETED)
            await self._tx.commit()
        except BaseException:
            logger.exception("Period %d: commit failed, rolling back", period_id)
            await self._tx.rollback()
            raise

        logger.info("Period %d: committed %d assignments", period_id, len(saved))
        return saved
