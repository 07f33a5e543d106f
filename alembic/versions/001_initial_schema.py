"""Initial schema — all routebid tables.

Revision ID: 001
Revises: None
Create Date: 2026-10-19
"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Terminals
    op.create_table(
        "terminals",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("code", sa.String(20), unique=True, nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
    )

    # Routes
    op.create_table(
        "routes",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("run_number", sa.String(50), unique=True, nullable=False),
        sa.Column("origin", sa.String(200), nullable=True),
        sa.Column("destination", sa.String(200), nullable=True),
        sa.Column(
            "requires_doubles_endorsement", sa.Boolean, nullable=False, server_default="false"
        ),
        sa.Column(
            "requires_chain_experience", sa.Boolean, nullable=False, server_default="false"
        ),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default="true"),
    )

    # Employees
    op.create_table(
        "employees",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("employee_number", sa.String(50), unique=True, nullable=False),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("hire_date", sa.Date, nullable=False),
        sa.Column(
            "terminal_id", sa.Integer, sa.ForeignKey("terminals.id"), nullable=False
        ),
        sa.Column("doubles_endorsement", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("chain_experience", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("is_eligible", sa.Boolean, nullable=False, server_default="true"),
        sa.Column(
            "current_route_id",
            sa.Integer,
            sa.ForeignKey("routes.id", ondelete="SET NULL"),
            nullable=True,
        ),
    )
    op.create_index("idx_employees_terminal", "employees", ["terminal_id"])
    op.create_index("idx_employees_seniority", "employees", ["hire_date", "last_name"])

    # Selection periods
    op.create_table(
        "selection_periods",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column(
            "terminal_id", sa.Integer, sa.ForeignKey("terminals.id"), nullable=False
        ),
        sa.Column("status", sa.String(20), nullable=False, server_default="UPCOMING"),
        sa.Column("required_selections", sa.Integer, nullable=False, server_default="3"),
        sa.Column(
            "created_at", sa.DateTime, nullable=False, server_default=sa.func.now()
        ),
    )

    # Routes offered in a period
    op.create_table(
        "period_routes",
        sa.Column(
            "selection_period_id",
            sa.Integer,
            sa.ForeignKey("selection_periods.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "route_id",
            sa.Integer,
            sa.ForeignKey("routes.id", ondelete="CASCADE"),
            primary_key=True,
        ),
    )
    op.create_index("idx_period_routes_route", "period_routes", ["route_id"])

    # Selections
    op.create_table(
        "selections",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "employee_id",
            sa.Integer,
            sa.ForeignKey("employees.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "selection_period_id",
            sa.Integer,
            sa.ForeignKey("selection_periods.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("first_choice_id", sa.Integer, nullable=True),
        sa.Column("second_choice_id", sa.Integer, nullable=True),
        sa.Column("third_choice_id", sa.Integer, nullable=True),
        sa.Column(
            "submitted_at", sa.DateTime, nullable=False, server_default=sa.func.now()
        ),
        sa.UniqueConstraint(
            "employee_id", "selection_period_id", name="uq_selection_employee_period"
        ),
    )

    # Assignments
    op.create_table(
        "assignments",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "employee_id",
            sa.Integer,
            sa.ForeignKey("employees.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "selection_period_id",
            sa.Integer,
            sa.ForeignKey("selection_periods.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("route_id", sa.Integer, sa.ForeignKey("routes.id"), nullable=True),
        sa.Column("choice_received", sa.Integer, nullable=True),
        sa.Column("reason", sa.Text, nullable=True),
        sa.Column("reason_code", sa.String(30), nullable=True),
        sa.Column("effective_date", sa.Date, nullable=False),
        sa.Column(
            "assigned_at", sa.DateTime, nullable=False, server_default=sa.func.now()
        ),
        sa.UniqueConstraint(
            "employee_id", "selection_period_id", name="uq_assignment_employee_period"
        ),
        sa.UniqueConstraint(
            "selection_period_id", "route_id", name="uq_assignment_period_route"
        ),
    )
    op.create_index("idx_assignments_period", "assignments", ["selection_period_id"])


def downgrade() -> None:
    op.drop_table("assignments")
    op.drop_table("selections")
    op.drop_table("period_routes")
    op.drop_table("selection_periods")
    op.drop_table("employees")
    op.drop_table("routes")
    op.drop_table("terminals")
