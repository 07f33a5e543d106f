"""SQLAlchemy ORM models — maps to PostgreSQL tables."""

from datetime import date, datetime

from sqlalchemy import (
    Boolean,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from routebid.adapters.persistence.database import Base
from routebid.config import settings


class TerminalModel(Base):
    __tablename__ = "terminals"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(String(20), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)

    employees: Mapped[list["EmployeeModel"]] = relationship(back_populates="terminal")


class RouteModel(Base):
    __tablename__ = "routes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    run_number: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    origin: Mapped[str | None] = mapped_column(String(200), nullable=True)
    destination: Mapped[str | None] = mapped_column(String(200), nullable=True)
    requires_doubles_endorsement: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    requires_chain_experience: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)


class EmployeeModel(Base):
    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    employee_number: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    hire_date: Mapped[date] = mapped_column(Date, nullable=False)
    terminal_id: Mapped[int] = mapped_column(Integer, ForeignKey("terminals.id"), nullable=False)
    doubles_endorsement: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    chain_experience: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_eligible: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    current_route_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("routes.id", ondelete="SET NULL"), nullable=True
    )

    terminal: Mapped["TerminalModel"] = relationship(back_populates="employees")

    __table_args__ = (
        Index("idx_employees_terminal", "terminal_id"),
        Index("idx_employees_seniority", "hire_date", "last_name"),
    )


class SelectionPeriodModel(Base):
    __tablename__ = "selection_periods"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    terminal_id: Mapped[int] = mapped_column(Integer, ForeignKey("terminals.id"), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="UPCOMING")
    required_selections: Mapped[int] = mapped_column(
        Integer, nullable=False, default=lambda: settings.default_required_selections
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )


class PeriodRouteModel(Base):
    __tablename__ = "period_routes"

    selection_period_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("selection_periods.id", ondelete="CASCADE"), primary_key=True
    )
    route_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("routes.id", ondelete="CASCADE"), primary_key=True
    )

    __table_args__ = (Index("idx_period_routes_route", "route_id"),)


class SelectionModel(Base):
    __tablename__ = "selections"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    employee_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("employees.id", ondelete="CASCADE"), nullable=False
    )
    selection_period_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("selection_periods.id", ondelete="CASCADE"), nullable=False
    )
    # Route references are deliberately loose: a route may be deactivated
    # after the selection was submitted.
    first_choice_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    second_choice_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    third_choice_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    submitted_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )

    __table_args__ = (
        UniqueConstraint("employee_id", "selection_period_id", name="uq_selection_employee_period"),
    )


class AssignmentModel(Base):
    __tablename__ = "assignments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    employee_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("employees.id", ondelete="CASCADE"), nullable=False
    )
    selection_period_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("selection_periods.id", ondelete="CASCADE"), nullable=False
    )
    route_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("routes.id"), nullable=True)
    choice_received: Mapped[int | None] = mapped_column(Integer, nullable=True)
    reason: Mapped[str | None] = mapped_column(Text, nullable=True)
    reason_code: Mapped[str | None] = mapped_column(String(30), nullable=True)
    effective_date: Mapped[date] = mapped_column(Date, nullable=False)
    assigned_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )

    __table_args__ = (
        UniqueConstraint("employee_id", "selection_period_id", name="uq_assignment_employee_period"),
        UniqueConstraint("selection_period_id", "route_id", name="uq_assignment_period_route"),
        Index("idx_assignments_period", "selection_period_id"),
    )
