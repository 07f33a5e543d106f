"""ProcessSelectionPeriodUseCase — full run: lock → load → assign → validate → commit."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field

from routebid.application.ports.selection_period_repo import SelectionPeriodRepository
from routebid.application.ports.transaction import TransactionManager
from routebid.application.use_cases.commit_assignments import CommitAssignmentsUseCase
from routebid.application.use_cases.load_candidates import LoadCandidatesUseCase
from routebid.domain.entities.assignment import AssignmentOutcome
from routebid.domain.errors import (
    AssignmentValidationError,
    PeriodNotEligibleError,
    PeriodNotFoundError,
    RunInProgressError,
)
from routebid.domain.policies.assignment_engine import assign_routes
from routebid.domain.policies.summary import AssignmentSummary, summarize
from routebid.domain.policies.validation import validate_outcomes
from routebid.domain.value_objects.enums import PeriodStatus

logger = logging.getLogger(__name__)


@dataclass
class ProcessingResult:
    """Summary of one selection period's assignment run."""

    selection_period_id: int
    preview: bool
    summary: AssignmentSummary
    outcomes: list[AssignmentOutcome] = field(default_factory=list)


class ProcessSelectionPeriodUseCase:
    """Orchestrates one assignment run for a selection period.

    The period's PROCESSING status is the run lock: it is taken with a
    compare-and-set before loading. A committed run sets COMPLETED in the
    same transaction as its assignments; a preview, a failure or a
    cancellation puts the previous status back.
    """

    def __init__(
        self,
        period_repo: SelectionPeriodRepository,
        loader: LoadCandidatesUseCase,
        committer: CommitAssignmentsUseCase,
        transaction: TransactionManager,
        timeout_seconds: float | None = None,
    ):
        self._periods = period_repo
        self._loader = loader
        self._committer = committer
        self._tx = transaction
        self._timeout = timeout_seconds

    async def execute(self, period_id: int, preview: bool = False) -> ProcessingResult:
        """Run the assignment for ``period_id``.

        In preview mode the outcomes are computed and validated but nothing
        is written, and the period returns to its previous status.

        Raises:
            PeriodNotFoundError: unknown period.
            PeriodNotEligibleError: period is not OPEN or CLOSED.
            RunInProgressError: another run holds the period.
            AssignmentValidationError: outcome set breaks an invariant.
        """
        period = await self._periods.get_by_id(period_id)
        if period is None:
            raise PeriodNotFoundError(period_id)
        if period.status == PeriodStatus.PROCESSING:
            raise RunInProgressError(period_id)
        if not period.is_processable():
            raise PeriodNotEligibleError(period_id, period.status.value)

        prior_status = period.status
        acquired = await self._periods.transition_status(
            period_id, expected=prior_status, new=PeriodStatus.PROCESSING
        )
        if not acquired:
            await self._tx.rollback()
            raise RunInProgressError(period_id)
        await self._tx.commit()
        logger.info("Period %d: %s → PROCESSING (preview=%s)", period_id, prior_status.value, preview)

        # Every exit from here, cancellation included, releases the lock.
        try:
            run = self._run(period_id, preview)
            if self._timeout is not None:
                result = await asyncio.wait_for(run, timeout=self._timeout)
            else:
                result = await run
            if preview:
                await self._periods.set_status(period_id, prior_status)
                await self._tx.commit()
        except BaseException:
            await self._release(period_id, prior_status)
            raise

        final_status = prior_status if preview else PeriodStatus.COMPLETED
        logger.info(
            "Period %d → %s: %d/%d employees assigned, %d in float pool",
            period_id, final_status.value,
            result.summary.assigned_employees, result.summary.total_employees,
            result.summary.float_pool_employees,
        )
        return result

    async def _run(self, period_id: int, preview: bool) -> ProcessingResult:
        universe = await self._loader.execute(period_id)
        outcomes = assign_routes(universe.candidates, universe.routes)

        if preview:
            report = validate_outcomes(universe, outcomes)
            if not report.is_valid:
                raise AssignmentValidationError(report)
        else:
            await self._committer.execute(universe, outcomes)

        return ProcessingResult(
            selection_period_id=period_id,
            preview=preview,
            summary=summarize(outcomes, total_routes=len(universe.routes)),
            outcomes=outcomes,
        )

    async def _release(self, period_id: int, prior_status: PeriodStatus) -> None:
        """Put the period back to its pre-run status so the run can be retried."""
        logger.warning("Period %d: run failed, resetting status to %s", period_id, prior_status.value)
        try:
            await self._tx.rollback()
            await self._periods.set_status(period_id, prior_status)
            await self._tx.commit()
        except Exception:
            logger.exception("Period %d: failed to reset status to %s", period_id, prior_status.value)
