"""SummarizeAssignmentsUseCase — counts over a period's committed assignments."""

from __future__ import annotations

from dataclasses import dataclass

from routebid.application.ports.assignment_repo import AssignmentRepository
from routebid.application.ports.route_repo import RouteRepository
from routebid.application.ports.selection_period_repo import SelectionPeriodRepository
from routebid.domain.entities.selection_period import SelectionPeriod
from routebid.domain.errors import PeriodNotFoundError
from routebid.domain.policies.summary import AssignmentSummary, summarize_records


@dataclass
class PeriodAssignmentSummary:
    period: SelectionPeriod
    summary: AssignmentSummary


class SummarizeAssignmentsUseCase:
    def __init__(
        self,
        period_repo: SelectionPeriodRepository,
        route_repo: RouteRepository,
        assignment_repo: AssignmentRepository,
    ):
        self._periods = period_repo
        self._routes = route_repo
        self._assignments = assignment_repo

    async def execute(self, period_id: int) -> PeriodAssignmentSummary:
        period = await self._periods.get_by_id(period_id)
        if period is None:
            raise PeriodNotFoundError(period_id)

        records = await self._assignments.get_by_period(period_id)
        routes = await self._routes.get_active_by_period(period_id)
        return PeriodAssignmentSummary(
            period=period,
            summary=summarize_records(records, total_routes=len(routes)),
        )
