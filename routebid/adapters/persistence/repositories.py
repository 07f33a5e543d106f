"""SQLAlchemy repository implementations."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from routebid.adapters.persistence.models import (
    AssignmentModel,
    EmployeeModel,
    PeriodRouteModel,
    RouteModel,
    SelectionModel,
    SelectionPeriodModel,
)
from routebid.application.ports.assignment_repo import AssignmentRepository
from routebid.application.ports.employee_repo import EmployeeRepository
from routebid.application.ports.route_repo import RouteRepository
from routebid.application.ports.selection_period_repo import SelectionPeriodRepository
from routebid.application.ports.selection_repo import SelectionRepository
from routebid.application.ports.transaction import TransactionManager
from routebid.domain.entities.assignment import AssignmentRecord
from routebid.domain.entities.employee import Employee
from routebid.domain.entities.route import Route
from routebid.domain.entities.selection import Selection
from routebid.domain.entities.selection_period import SelectionPeriod
from routebid.domain.value_objects.enums import PeriodStatus, Qualification

# ─── Mappers ─────────────────────────────────────────────────────────


def _employee_to_domain(m: EmployeeModel) -> Employee:
    qualifications = set()
    if m.doubles_endorsement:
        qualifications.add(Qualification.DOUBLES_ENDORSEMENT)
    if m.chain_experience:
        qualifications.add(Qualification.CHAIN_EXPERIENCE)
    return Employee(
        id=m.id,
        employee_number=m.employee_number,
        first_name=m.first_name,
        last_name=m.last_name,
        hire_date=m.hire_date,
        terminal_id=m.terminal_id,
        qualifications=frozenset(qualifications),
        is_eligible=m.is_eligible,
        current_route_id=m.current_route_id,
    )


def _route_to_domain(m: RouteModel) -> Route:
    requirements = set()
    if m.requires_doubles_endorsement:
        requirements.add(Qualification.DOUBLES_ENDORSEMENT)
    if m.requires_chain_experience:
        requirements.add(Qualification.CHAIN_EXPERIENCE)
    return Route(
        id=m.id,
        run_number=m.run_number,
        requirements=frozenset(requirements),
        origin=m.origin,
        destination=m.destination,
        is_active=m.is_active,
    )


def _period_to_domain(m: SelectionPeriodModel) -> SelectionPeriod:
    return SelectionPeriod(
        id=m.id,
        name=m.name,
        terminal_id=m.terminal_id,
        status=PeriodStatus(m.status),
        required_selections=m.required_selections,
    )


def _selection_to_domain(m: SelectionModel) -> Selection:
    return Selection.from_choice_columns(
        employee_id=m.employee_id,
        selection_period_id=m.selection_period_id,
        first=m.first_choice_id,
        second=m.second_choice_id,
        third=m.third_choice_id,
    )


def _assignment_to_domain(m: AssignmentModel) -> AssignmentRecord:
    return AssignmentRecord(
        id=m.id,
        employee_id=m.employee_id,
        selection_period_id=m.selection_period_id,
        route_id=m.route_id,
        choice_received=m.choice_received,
        reason=m.reason,
        reason_code=m.reason_code,
        effective_date=m.effective_date,
    )


def _assignment_to_model(r: AssignmentRecord) -> AssignmentModel:
    return AssignmentModel(
        employee_id=r.employee_id,
        selection_period_id=r.selection_period_id,
        route_id=r.route_id,
        choice_received=r.choice_received,
        reason=r.reason,
        reason_code=r.reason_code,
        effective_date=r.effective_date,
    )


# ─── Repositories ────────────────────────────────────────────────────


class SqlTransactionManager(TransactionManager):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def commit(self) -> None:
        await self._s.commit()

    async def rollback(self) -> None:
        await self._s.rollback()


class SqlSelectionPeriodRepository(SelectionPeriodRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def get_by_id(self, period_id: int) -> SelectionPeriod | None:
        result = await self._s.execute(
            select(SelectionPeriodModel)
            .where(SelectionPeriodModel.id == period_id)
            .execution_options(populate_existing=True)
        )
        m = result.scalar_one_or_none()
        return _period_to_domain(m) if m else None

    async def transition_status(
        self, period_id: int, expected: PeriodStatus, new: PeriodStatus
    ) -> bool:
        result = await self._s.execute(
            update(SelectionPeriodModel)
            .where(
                SelectionPeriodModel.id == period_id,
                SelectionPeriodModel.status == expected.value,
            )
            .values(status=new.value)
            .execution_options(synchronize_session=False)
        )
        await self._s.flush()
        return result.rowcount == 1

    async def set_status(self, period_id: int, status: PeriodStatus) -> None:
        await self._s.execute(
            update(SelectionPeriodModel)
            .where(SelectionPeriodModel.id == period_id)
            .values(status=status.value)
            .execution_options(synchronize_session=False)
        )
        await self._s.flush()


class SqlEmployeeRepository(EmployeeRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def get_by_id(self, employee_id: int) -> Employee | None:
        m = await self._s.get(EmployeeModel, employee_id, populate_existing=True)
        return _employee_to_domain(m) if m else None

    async def get_eligible_by_terminal(self, terminal_id: int) -> list[Employee]:
        result = await self._s.execute(
            select(EmployeeModel)
            .where(EmployeeModel.terminal_id == terminal_id, EmployeeModel.is_eligible.is_(True))
            .order_by(EmployeeModel.hire_date, EmployeeModel.last_name, EmployeeModel.id)
        )
        return [_employee_to_domain(m) for m in result.scalars()]

    async def set_current_routes(self, current_routes: Mapping[int, int | None]) -> None:
        for employee_id, route_id in current_routes.items():
            await self._s.execute(
                update(EmployeeModel)
                .where(EmployeeModel.id == employee_id)
                .values(current_route_id=route_id)
                .execution_options(synchronize_session=False)
            )
        await self._s.flush()


class SqlRouteRepository(RouteRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def get_by_id(self, route_id: int) -> Route | None:
        m = await self._s.get(RouteModel, route_id)
        return _route_to_domain(m) if m else None

    async def get_active_by_period(self, period_id: int) -> list[Route]:
        result = await self._s.execute(
            select(RouteModel)
            .join(PeriodRouteModel, PeriodRouteModel.route_id == RouteModel.id)
            .where(
                PeriodRouteModel.selection_period_id == period_id,
                RouteModel.is_active.is_(True),
            )
            .order_by(RouteModel.id)
        )
        return [_route_to_domain(m) for m in result.scalars()]


class SqlSelectionRepository(SelectionRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def get_by_period(self, period_id: int) -> list[Selection]:
        result = await self._s.execute(
            select(SelectionModel)
            .where(SelectionModel.selection_period_id == period_id)
            .order_by(SelectionModel.id)
        )
        return [_selection_to_domain(m) for m in result.scalars()]


class SqlAssignmentRepository(AssignmentRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def replace_for_period(
        self, period_id: int, records: Sequence[AssignmentRecord]
    ) -> list[AssignmentRecord]:
        await self._s.execute(
            delete(AssignmentModel)
            .where(AssignmentModel.selection_period_id == period_id)
            .execution_options(synchronize_session=False)
        )
        models = [_assignment_to_model(r) for r in records]
        self._s.add_all(models)
        await self._s.flush()
        for record, m in zip(records, models):
            record.id = m.id
        return list(records)

    async def get_by_period(self, period_id: int) -> list[AssignmentRecord]:
        result = await self._s.execute(
            select(AssignmentModel)
            .join(EmployeeModel, EmployeeModel.id == AssignmentModel.employee_id)
            .where(AssignmentModel.selection_period_id == period_id)
            .order_by(EmployeeModel.hire_date, EmployeeModel.last_name, EmployeeModel.id)
        )
        return [_assignment_to_domain(m) for m in result.scalars()]

    async def get_by_route(self, period_id: int, route_id: int) -> AssignmentRecord | None:
        result = await self._s.execute(
            select(AssignmentModel).where(
                AssignmentModel.selection_period_id == period_id,
                AssignmentModel.route_id == route_id,
            )
        )
        m = result.scalar_one_or_none()
        return _assignment_to_domain(m) if m else None

    async def get_by_id(self, assignment_id: int) -> AssignmentRecord | None:
        m = await self._s.get(AssignmentModel, assignment_id, populate_existing=True)
        return _assignment_to_domain(m) if m else None

    async def delete(self, assignment_id: int) -> None:
        await self._s.execute(
            delete(AssignmentModel)
            .where(AssignmentModel.id == assignment_id)
            .execution_options(synchronize_session=False)
        )
        await self._s.flush()

    async def upsert(self, record: AssignmentRecord) -> AssignmentRecord:
        result = await self._s.execute(
            select(AssignmentModel).where(
                AssignmentModel.employee_id == record.employee_id,
                AssignmentModel.selection_period_id == record.selection_period_id,
            )
        )
        m = result.scalar_one_or_none()
        if m is None:
            m = _assignment_to_model(record)
            self._s.add(m)
        else:
            m.route_id = record.route_id
            m.choice_received = record.choice_received
            m.reason = record.reason
            m.reason_code = record.reason_code
            m.effective_date = record.effective_date
        await self._s.flush()
        record.id = m.id
        return record
