"""Pytest configuration and shared fixtures."""

from datetime import date

import pytest_asyncio
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from routebid.adapters.persistence.database import Base
from routebid.adapters.persistence.models import (
    EmployeeModel,
    PeriodRouteModel,
    RouteModel,
    SelectionModel,
    SelectionPeriodModel,
    TerminalModel,
)

SEEDED_PERIOD_ID = 1


@pytest_asyncio.fixture
async def session_factory():
    """In-memory SQLite schema, shared across sessions of one test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, expire_on_commit=False)
    await engine.dispose()


@pytest_asyncio.fixture
async def seeded(session_factory):
    """One terminal, three drivers, three routes (103 needs doubles), one CLOSED period.

    Adams (most senior) wants 101 then 102, Baker wants 101 then 103,
    Clark wants 102.
    """
    async with session_factory() as session:
        session.add(TerminalModel(id=1, code="CHI", name="Chicago"))
        session.add_all([
            RouteModel(id=1, run_number="101", origin="Chicago", destination="Milwaukee"),
            RouteModel(id=2, run_number="102", origin="Chicago", destination="Gary"),
            RouteModel(id=3, run_number="103", requires_doubles_endorsement=True),
        ])
        await session.flush()
        session.add_all([
            EmployeeModel(id=1, employee_number="D001", first_name="Ann", last_name="Adams",
                          hire_date=date(2004, 5, 1), terminal_id=1),
            EmployeeModel(id=2, employee_number="D002", first_name="Bob", last_name="Baker",
                          hire_date=date(2009, 9, 9), terminal_id=1),
            EmployeeModel(id=3, employee_number="D003", first_name="Cy", last_name="Clark",
                          hire_date=date(2016, 2, 2), terminal_id=1),
            SelectionPeriodModel(id=SEEDED_PERIOD_ID, name="Fall bid", terminal_id=1,
                                 status="CLOSED", required_selections=3),
        ])
        await session.flush()
        session.add_all([
            PeriodRouteModel(selection_period_id=SEEDED_PERIOD_ID, route_id=rid) for rid in (1, 2, 3)
        ])
        session.add_all([
            SelectionModel(employee_id=1, selection_period_id=SEEDED_PERIOD_ID,
                           first_choice_id=1, second_choice_id=2),
            SelectionModel(employee_id=2, selection_period_id=SEEDED_PERIOD_ID,
                           first_choice_id=1, second_choice_id=3),
            SelectionModel(employee_id=3, selection_period_id=SEEDED_PERIOD_ID,
                           first_choice_id=2),
        ])
        await session.commit()
    return session_factory
