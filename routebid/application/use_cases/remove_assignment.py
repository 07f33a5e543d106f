"""RemoveAssignmentUseCase — admin removal of one persisted assignment."""

from __future__ import annotations

import logging

from routebid.application.ports.assignment_repo import AssignmentRepository
from routebid.application.ports.employee_repo import EmployeeRepository
from routebid.application.ports.selection_period_repo import SelectionPeriodRepository
from routebid.application.ports.transaction import TransactionManager
from routebid.domain.entities.assignment import AssignmentRecord
from routebid.domain.errors import (
    AssignmentNotFoundError,
    PeriodNotEligibleError,
    PeriodNotFoundError,
)

logger = logging.getLogger(__name__)


class RemoveAssignmentUseCase:
    def __init__(
        self,
        period_repo: SelectionPeriodRepository,
        employee_repo: EmployeeRepository,
        assignment_repo: AssignmentRepository,
        transaction: TransactionManager,
    ):
        self._periods = period_repo
        self._employees = employee_repo
        self._assignments = assignment_repo
        self._tx = transaction

    async def execute(self, assignment_id: int) -> AssignmentRecord:
        """Delete the assignment and clear the employee's current route.

        Returns the removed record. Refused once the period is COMPLETED.
        """
        record = await self._assignments.get_by_id(assignment_id)
        if record is None:
            raise AssignmentNotFoundError(assignment_id)

        period = await self._periods.get_by_id(record.selection_period_id)
        if period is None:
            raise PeriodNotFoundError(record.selection_period_id)
        if period.is_completed():
            raise PeriodNotEligibleError(
                period.id, period.status.value,
                "Cannot modify assignments for completed periods",
            )

        try:
            await self._assignments.delete(assignment_id)
            await self._employees.set_current_routes({record.employee_id: None})
            await self._tx.commit()
        except Exception:
            await self._tx.rollback()
            raise

        logger.info(
            "Period %d: removed assignment %d of employee %d (%s)",
            record.selection_period_id, assignment_id, record.employee_id,
            f"route {record.route_id}" if record.route_id is not None else "float pool",
        )
        return record
