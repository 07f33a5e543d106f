"""LoadCandidatesUseCase — build the closed universe of one assignment run."""

from __future__ import annotations

import logging

from routebid.application.ports.employee_repo import EmployeeRepository
from routebid.application.ports.route_repo import RouteRepository
from routebid.application.ports.selection_period_repo import SelectionPeriodRepository
from routebid.application.ports.selection_repo import SelectionRepository
from routebid.domain.entities.candidate import Candidate, CandidateUniverse
from routebid.domain.entities.selection import Selection
from routebid.domain.errors import InvalidPreferenceError, PeriodNotFoundError
from routebid.domain.policies.seniority import sort_by_seniority

logger = logging.getLogger(__name__)


class LoadCandidatesUseCase:
    """Read-only: gathers eligible employees, their preferences, and in-scope routes."""

    def __init__(
        self,
        period_repo: SelectionPeriodRepository,
        employee_repo: EmployeeRepository,
        route_repo: RouteRepository,
        selection_repo: SelectionRepository,
    ):
        self._periods = period_repo
        self._employees = employee_repo
        self._routes = route_repo
        self._selections = selection_repo

    async def execute(self, period_id: int) -> CandidateUniverse:
        """Load the candidate universe for a selection period.

        Every eligible employee of the period's terminal is included;
        employees without a submitted selection get an empty preference
        list. Candidates come back most senior first.

        Raises:
            PeriodNotFoundError: unknown period id.
            InvalidPreferenceError: duplicate route ids in a preference list,
                or a choice ranked beyond what the period allows.
        """
        period = await self._periods.get_by_id(period_id)
        if period is None:
            raise PeriodNotFoundError(period_id)

        employees = await self._employees.get_eligible_by_terminal(period.terminal_id)
        selections = {s.employee_id: s for s in await self._selections.get_by_period(period_id)}
        routes = {r.id: r for r in await self._routes.get_active_by_period(period_id)}

        eligible_ids = {e.id for e in employees}
        ignored = sorted(set(selections) - eligible_ids)
        if ignored:
            logger.info(
                "Period %d: ignoring selections of %d ineligible employee(s): %s",
                period_id, len(ignored), ignored,
            )

        problems = _check_preferences(
            [selections[e.id] for e in employees if e.id in selections],
            period.required_selections,
        )
        if problems:
            raise InvalidPreferenceError(problems)

        candidates = tuple(
            Candidate(
                employee=e,
                choices=selections[e.id].choices if e.id in selections else (),
            )
            for e in sort_by_seniority(employees)
        )

        logger.info(
            "Period %d: loaded %d employees (%d without preferences), %d routes",
            period_id,
            len(candidates),
            sum(1 for c in candidates if not c.has_preferences()),
            len(routes),
        )
        return CandidateUniverse(
            selection_period_id=period_id,
            candidates=candidates,
            routes=routes,
            max_choices=period.required_selections,
        )


def _check_preferences(selections: list[Selection], max_choices: int) -> list[str]:
    problems: list[str] = []
    for selection in selections:
        dupes = selection.duplicate_choices()
        if dupes:
            problems.append(
                f"employee {selection.employee_id} lists route(s) {dupes} more than once"
            )
        if selection.highest_rank > max_choices:
            problems.append(
                f"employee {selection.employee_id} has a choice at rank {selection.highest_rank}, "
                f"maximum is {max_choices}"
            )
    return problems
