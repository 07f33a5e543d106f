"""Assignment endpoints — process a period, list results, manual override."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from routebid.adapters.persistence.repositories import (
    SqlAssignmentRepository,
    SqlSelectionPeriodRepository,
)
from routebid.application.use_cases.manual_assignment import ManualAssignmentUseCase
from routebid.application.use_cases.process_period import (
    ProcessingResult,
    ProcessSelectionPeriodUseCase,
)
from routebid.application.use_cases.remove_assignment import RemoveAssignmentUseCase
from routebid.application.use_cases.summarize_assignments import SummarizeAssignmentsUseCase
from routebid.domain.entities.assignment import (
    AssignmentRecord,
    outcome_choice_rank,
    outcome_route_id,
)
from routebid.domain.errors import (
    AssignmentNotFoundError,
    AssignmentValidationError,
    InvalidPreferenceError,
    ManualAssignmentError,
    PeriodNotEligibleError,
    PeriodNotFoundError,
    RunInProgressError,
)
from routebid.domain.policies.summary import AssignmentSummary
from routebid.infrastructure.api.dependencies import (
    get_assignment_repo,
    get_manual_assignment_uc,
    get_period_repo,
    get_process_period_uc,
    get_remove_assignment_uc,
    get_summarize_assignments_uc,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/periods", tags=["assignments"])
assignment_router = APIRouter(prefix="/assignments", tags=["assignments"])


# ── Request schemas ─────────────────────────────────────────────────

class ManualAssignmentRequest(BaseModel):
    employee_id: int
    route_id: int | None = None
    reason: str | None = None


# ── Endpoints ───────────────────────────────────────────────────────


@router.post("/{period_id}/process")
async def process_period(
    period_id: int,
    preview: bool = False,
    process_uc: ProcessSelectionPeriodUseCase = Depends(get_process_period_uc),
):
    """Run seniority assignment for a selection period (or preview it)."""
    try:
        result = await process_uc.execute(period_id, preview=preview)
    except PeriodNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except (PeriodNotEligibleError, RunInProgressError) as e:
        raise HTTPException(status_code=409, detail=str(e))
    except InvalidPreferenceError as e:
        raise HTTPException(status_code=422, detail={"error": str(e), "details": e.problems})
    except AssignmentValidationError as e:
        raise HTTPException(
            status_code=422,
            detail={"error": "Assignment validation failed", "details": e.errors},
        )

    return {"status": "ok", **_result_to_dict(result)}


@router.get("/{period_id}/assignments")
async def list_assignments(
    period_id: int,
    period_repo: SqlSelectionPeriodRepository = Depends(get_period_repo),
    assignment_repo: SqlAssignmentRepository = Depends(get_assignment_repo),
):
    """Committed assignments of a period, most senior employee first."""
    period = await period_repo.get_by_id(period_id)
    if period is None:
        raise HTTPException(status_code=404, detail="Selection period not found")

    records = await assignment_repo.get_by_period(period_id)
    return {
        "selection_period_id": period_id,
        "status": period.status.value,
        "total": len(records),
        "assignments": [_record_to_dict(r) for r in records],
    }


@router.post("/{period_id}/assignments/manual", status_code=201)
async def manual_assignment(
    period_id: int,
    body: ManualAssignmentRequest,
    manual_uc: ManualAssignmentUseCase = Depends(get_manual_assignment_uc),
):
    """Assign a route (or the float pool) to one employee by hand."""
    try:
        record = await manual_uc.execute(
            period_id, body.employee_id, body.route_id, note=body.reason
        )
    except PeriodNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except (PeriodNotEligibleError, ManualAssignmentError) as e:
        raise HTTPException(status_code=409, detail=str(e))

    return _record_to_dict(record)


@router.get("/{period_id}/assignments/summary")
async def assignment_summary(
    period_id: int,
    summary_uc: SummarizeAssignmentsUseCase = Depends(get_summarize_assignments_uc),
):
    """Counts over the committed assignments, manual placements included."""
    try:
        result = await summary_uc.execute(period_id)
    except PeriodNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return {
        "period": {
            "id": result.period.id,
            "name": result.period.name,
            "status": result.period.status.value,
        },
        "summary": _summary_to_dict(result.summary),
    }


@assignment_router.delete("/{assignment_id}", status_code=204)
async def remove_assignment(
    assignment_id: int,
    remove_uc: RemoveAssignmentUseCase = Depends(get_remove_assignment_uc),
):
    """Remove one assignment and clear the employee's current route."""
    try:
        await remove_uc.execute(assignment_id)
    except (AssignmentNotFoundError, PeriodNotFoundError) as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PeriodNotEligibleError as e:
        raise HTTPException(status_code=409, detail=str(e))


def _result_to_dict(r: ProcessingResult) -> dict:
    return {
        "selection_period_id": r.selection_period_id,
        "preview": r.preview,
        "summary": _summary_to_dict(r.summary),
        "assignments": [
            {
                "employee_id": o.employee_id,
                "route_id": outcome_route_id(o),
                "choice_received": outcome_choice_rank(o),
                "reason": o.reason,
            }
            for o in r.outcomes
        ],
    }


def _record_to_dict(r: AssignmentRecord) -> dict:
    return {
        "id": r.id,
        "employee_id": r.employee_id,
        "route_id": r.route_id,
        "choice_received": r.choice_received,
        "reason": r.reason,
        "reason_code": r.reason_code,
        "effective_date": str(r.effective_date) if r.effective_date else None,
    }


def _summary_to_dict(s: AssignmentSummary) -> dict:
    return {
        "total_employees": s.total_employees,
        "total_routes": s.total_routes,
        "assigned_routes": s.assigned_routes,
        "assigned_employees": s.assigned_employees,
        "float_pool_employees": s.float_pool_employees,
        "choice_distribution": s.choice_distribution,
    }
