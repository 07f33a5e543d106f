"""Tests for the assignment summary."""

from routebid.domain.entities.assignment import (
    Assigned,
    AssignmentRecord,
    ManuallyAssigned,
    Unassigned,
)
from routebid.domain.policies.summary import summarize, summarize_records
from routebid.domain.value_objects.enums import UnassignedReason


def test_summary_counts():
    outcomes = [
        Assigned(employee_id=1, route_id=10, choice_rank=1),
        Assigned(employee_id=2, route_id=11, choice_rank=1),
        Assigned(employee_id=3, route_id=12, choice_rank=2),
        Assigned(employee_id=4, route_id=13, choice_rank=3),
        Unassigned(employee_id=5, reason_code=UnassignedReason.NO_PREFERENCES),
        Unassigned(employee_id=6, reason_code=UnassignedReason.NOT_QUALIFIED),
    ]
    s = summarize(outcomes, total_routes=6)
    assert s.total_employees == 6
    assert s.total_routes == 6
    assert s.assigned_routes == 4
    assert s.assigned_employees == 4
    assert s.float_pool_employees == 2
    assert s.choice_distribution == {"first": 2, "second": 1, "third": 1, "manual": 0, "float": 2}


def test_empty_summary():
    s = summarize([], total_routes=3)
    assert s.total_employees == 0
    assert s.assigned_routes == 0
    assert s.choice_distribution == {"first": 0, "second": 0, "third": 0, "manual": 0, "float": 0}


def test_record_summary_counts_manual_placements():
    records = [
        AssignmentRecord(id=1, employee_id=1, selection_period_id=1, route_id=10, choice_received=1),
        AssignmentRecord(id=2, employee_id=2, selection_period_id=1, route_id=11, choice_received=None),
        AssignmentRecord(id=3, employee_id=3, selection_period_id=1, route_id=None, choice_received=None),
        AssignmentRecord(id=4, employee_id=4, selection_period_id=1, route_id=12, choice_received=3),
    ]
    s = summarize_records(records, total_routes=5)
    assert s.total_employees == 4
    assert s.assigned_routes == 3
    assert s.float_pool_employees == 1
    assert s.choice_distribution == {"first": 1, "second": 0, "third": 1, "manual": 1, "float": 1}


def test_manual_outcome_counts_as_manual():
    s = summarize([ManuallyAssigned(employee_id=1, route_id=10)], total_routes=1)
    assert s.choice_distribution["manual"] == 1
    assert s.assigned_employees == 1
