"""ManualAssignmentUseCase — admin override of one employee's outcome."""

from __future__ import annotations

import logging
from datetime import date

from routebid.application.ports.assignment_repo import AssignmentRepository
from routebid.application.ports.employee_repo import EmployeeRepository
from routebid.application.ports.route_repo import RouteRepository
from routebid.application.ports.selection_period_repo import SelectionPeriodRepository
from routebid.application.ports.transaction import TransactionManager
from routebid.domain.entities.assignment import (
    AssignmentRecord,
    ManuallyAssigned,
    Unassigned,
)
from routebid.domain.errors import (
    ManualAssignmentError,
    PeriodNotEligibleError,
    PeriodNotFoundError,
)
from routebid.domain.policies.qualification import missing_qualifications
from routebid.domain.value_objects.enums import UnassignedReason

logger = logging.getLogger(__name__)


class ManualAssignmentUseCase:
    def __init__(
        self,
        period_repo: SelectionPeriodRepository,
        employee_repo: EmployeeRepository,
        route_repo: RouteRepository,
        assignment_repo: AssignmentRepository,
        transaction: TransactionManager,
    ):
        self._periods = period_repo
        self._employees = employee_repo
        self._routes = route_repo
        self._assignments = assignment_repo
        self._tx = transaction

    async def execute(
        self,
        period_id: int,
        employee_id: int,
        route_id: int | None,
        note: str | None = None,
    ) -> AssignmentRecord:
        """Assign ``route_id`` (or the float pool, when None) to one employee.

        The route must exist, be free in this period, and the employee must
        hold every qualification it requires. Manual assignments carry no
        choice rank.
        """
        period = await self._periods.get_by_id(period_id)
        if period is None:
            raise PeriodNotFoundError(period_id)
        if period.is_completed():
            raise PeriodNotEligibleError(
                period_id, period.status.value,
                "Cannot modify assignments for completed periods",
            )

        employee = await self._employees.get_by_id(employee_id)
        if employee is None:
            raise ManualAssignmentError(f"Employee {employee_id} not found")

        if route_id is None:
            outcome = Unassigned(employee_id=employee_id, reason_code=UnassignedReason.MANUAL)
        else:
            route = await self._routes.get_by_id(route_id)
            if route is None:
                raise ManualAssignmentError(f"Route {route_id} not found")

            holder = await self._assignments.get_by_route(period_id, route_id)
            if holder is not None and holder.employee_id != employee_id:
                raise ManualAssignmentError(
                    f"Route {route.run_number} is already assigned to employee {holder.employee_id}"
                )

            missing = missing_qualifications(employee, route)
            if missing:
                names = ", ".join(sorted(q.value for q in missing))
                raise ManualAssignmentError(
                    f"Employee {employee.employee_number} lacks {names} required by route {route.run_number}"
                )
            outcome = ManuallyAssigned(employee_id=employee_id, route_id=route_id, note=note)

        record = AssignmentRecord.from_outcome(outcome, period_id, date.today())
        try:
            saved = await self._assignments.upsert(record)
            await self._employees.set_current_routes({employee_id: route_id})
            await self._tx.commit()
        except Exception:
            await self._tx.rollback()
            raise

        logger.info(
            "Period %d: manually assigned employee %s to %s",
            period_id, employee.employee_number,
            f"route {route_id}" if route_id is not None else "float pool",
        )
        return saved
