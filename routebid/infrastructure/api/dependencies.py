"""FastAPI dependency injection — wires adapters into use cases."""

from __future__ import annotations

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from routebid.adapters.persistence.database import get_session
from routebid.adapters.persistence.repositories import (
    SqlAssignmentRepository,
    SqlEmployeeRepository,
    SqlRouteRepository,
    SqlSelectionPeriodRepository,
    SqlSelectionRepository,
    SqlTransactionManager,
)
from routebid.application.use_cases.commit_assignments import CommitAssignmentsUseCase
from routebid.application.use_cases.load_candidates import LoadCandidatesUseCase
from routebid.application.use_cases.manual_assignment import ManualAssignmentUseCase
from routebid.application.use_cases.process_period import ProcessSelectionPeriodUseCase
from routebid.application.use_cases.remove_assignment import RemoveAssignmentUseCase
from routebid.application.use_cases.summarize_assignments import SummarizeAssignmentsUseCase
from routebid.config import settings


def build_process_period_uc(session: AsyncSession) -> ProcessSelectionPeriodUseCase:
    """Wire the full pipeline onto one session (also used by the CLI)."""
    tx = SqlTransactionManager(session)
    period_repo = SqlSelectionPeriodRepository(session)
    employee_repo = SqlEmployeeRepository(session)
    loader = LoadCandidatesUseCase(
        period_repo=period_repo,
        employee_repo=employee_repo,
        route_repo=SqlRouteRepository(session),
        selection_repo=SqlSelectionRepository(session),
    )
    committer = CommitAssignmentsUseCase(
        assignment_repo=SqlAssignmentRepository(session),
        employee_repo=employee_repo,
        period_repo=period_repo,
        transaction=tx,
    )
    return ProcessSelectionPeriodUseCase(
        period_repo=period_repo,
        loader=loader,
        committer=committer,
        transaction=tx,
        timeout_seconds=settings.run_timeout_seconds,
    )


def get_assignment_repo(session: AsyncSession = Depends(get_session)) -> SqlAssignmentRepository:
    return SqlAssignmentRepository(session)


def get_period_repo(session: AsyncSession = Depends(get_session)) -> SqlSelectionPeriodRepository:
    return SqlSelectionPeriodRepository(session)


def get_process_period_uc(
    session: AsyncSession = Depends(get_session),
) -> ProcessSelectionPeriodUseCase:
    return build_process_period_uc(session)


def get_manual_assignment_uc(
    session: AsyncSession = Depends(get_session),
) -> ManualAssignmentUseCase:
    return ManualAssignmentUseCase(
        period_repo=SqlSelectionPeriodRepository(session),
        employee_repo=SqlEmployeeRepository(session),
        route_repo=SqlRouteRepository(session),
        assignment_repo=SqlAssignmentRepository(session),
        transaction=SqlTransactionManager(session),
    )


def get_remove_assignment_uc(
    session: AsyncSession = Depends(get_session),
) -> RemoveAssignmentUseCase:
    return RemoveAssignmentUseCase(
        period_repo=SqlSelectionPeriodRepository(session),
        employee_repo=SqlEmployeeRepository(session),
        assignment_repo=SqlAssignmentRepository(session),
        transaction=SqlTransactionManager(session),
    )


def get_summarize_assignments_uc(
    session: AsyncSession = Depends(get_session),
) -> SummarizeAssignmentsUseCase:
    return SummarizeAssignmentsUseCase(
        period_repo=SqlSelectionPeriodRepository(session),
        route_repo=SqlRouteRepository(session),
        assignment_repo=SqlAssignmentRepository(session),
    )
