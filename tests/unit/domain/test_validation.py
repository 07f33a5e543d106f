"""Tests for outcome-set validation."""

from datetime import date

from routebid.domain.entities.assignment import Assigned, ManuallyAssigned, Unassigned
from routebid.domain.entities.candidate import Candidate, CandidateUniverse
from routebid.domain.entities.employee import Employee
from routebid.domain.entities.route import Route
from routebid.domain.policies.validation import ViolationKind, validate_outcomes
from routebid.domain.value_objects.enums import Qualification, UnassignedReason


def _emp(eid: int, quals=()) -> Employee:
    return Employee(
        id=eid, employee_number=f"E{eid}", first_name="Sam", last_name=f"L{eid}",
        hire_date=date(2010, 1, eid), terminal_id=1, qualifications=frozenset(quals),
    )


def _universe(*employees, routes=(), max_choices=3) -> CandidateUniverse:
    return CandidateUniverse(
        selection_period_id=7,
        candidates=tuple(Candidate(e, ()) for e in employees),
        routes={r.id: r for r in routes},
        max_choices=max_choices,
    )


R1 = Route(id=1, run_number="101")
R2 = Route(id=2, run_number="202", requirements=frozenset({Qualification.CHAIN_EXPERIENCE}))


def _kinds(report):
    return [v.kind for v in report.violations]


def test_valid_outcome_set():
    universe = _universe(_emp(1), _emp(2), routes=[R1])
    report = validate_outcomes(universe, [
        Assigned(employee_id=1, route_id=1, choice_rank=1),
        Unassigned(employee_id=2, reason_code=UnassignedReason.ROUTES_CLAIMED),
    ])
    assert report.is_valid
    assert report.errors == []


def test_missing_employee():
    universe = _universe(_emp(1), _emp(2))
    report = validate_outcomes(universe, [
        Unassigned(employee_id=1, reason_code=UnassignedReason.NO_PREFERENCES),
    ])
    assert _kinds(report) == [ViolationKind.MISSING_EMPLOYEE]
    assert report.errors == ["Employee 2 missing assignment"]


def test_duplicate_employee():
    universe = _universe(_emp(1), routes=[R1])
    report = validate_outcomes(universe, [
        Assigned(employee_id=1, route_id=1, choice_rank=1),
        Unassigned(employee_id=1, reason_code=UnassignedReason.NO_PREFERENCES),
    ])
    assert _kinds(report) == [ViolationKind.DUPLICATE_EMPLOYEE]


def test_unknown_employee():
    universe = _universe(_emp(1))
    report = validate_outcomes(universe, [
        Unassigned(employee_id=1, reason_code=UnassignedReason.NO_PREFERENCES),
        Unassigned(employee_id=9, reason_code=UnassignedReason.NO_PREFERENCES),
    ])
    assert _kinds(report) == [ViolationKind.UNKNOWN_EMPLOYEE]


def test_route_claimed_twice_lists_every_holder():
    universe = _universe(_emp(1), _emp(2), _emp(3), routes=[R1])
    report = validate_outcomes(universe, [
        Assigned(employee_id=1, route_id=1, choice_rank=1),
        Assigned(employee_id=2, route_id=1, choice_rank=2),
        ManuallyAssigned(employee_id=3, route_id=1),
    ])
    assert _kinds(report) == [ViolationKind.ROUTE_CLAIMED_TWICE]
    violation = report.violations[0]
    assert violation.employee_ids == (1, 2, 3)
    assert violation.route_id == 1
    assert "Route 101 assigned to multiple employees: 1, 2, 3" == report.errors[0]


def test_unqualified_assignment():
    universe = _universe(_emp(1), routes=[R2])
    report = validate_outcomes(universe, [Assigned(employee_id=1, route_id=2, choice_rank=1)])
    assert _kinds(report) == [ViolationKind.UNQUALIFIED]
    assert "chain_experience" in report.errors[0]


def test_qualified_assignment_passes():
    universe = _universe(_emp(1, quals=[Qualification.CHAIN_EXPERIENCE]), routes=[R2])
    report = validate_outcomes(universe, [Assigned(employee_id=1, route_id=2, choice_rank=1)])
    assert report.is_valid


def test_route_outside_universe():
    universe = _universe(_emp(1), routes=[R1])
    report = validate_outcomes(universe, [Assigned(employee_id=1, route_id=5, choice_rank=1)])
    assert _kinds(report) == [ViolationKind.UNKNOWN_ROUTE]


def test_invalid_choice_rank():
    universe = _universe(_emp(1), routes=[R1])
    report = validate_outcomes(universe, [Assigned(employee_id=1, route_id=1, choice_rank=4)])
    assert _kinds(report) == [ViolationKind.INVALID_CHOICE_RANK]


def test_choice_rank_beyond_period_cap():
    universe = _universe(_emp(1), routes=[R1], max_choices=2)
    report = validate_outcomes(universe, [Assigned(employee_id=1, route_id=1, choice_rank=3)])
    assert _kinds(report) == [ViolationKind.INVALID_CHOICE_RANK]
    assert report.errors == ["Employee 1 received invalid choice rank 3"]


def test_choice_rank_checked_even_for_unknown_route():
    universe = _universe(_emp(1), routes=[R1])
    report = validate_outcomes(universe, [Assigned(employee_id=1, route_id=9, choice_rank=0)])
    assert set(_kinds(report)) == {ViolationKind.UNKNOWN_ROUTE, ViolationKind.INVALID_CHOICE_RANK}


def test_reports_every_violation_at_once():
    universe = _universe(_emp(1), _emp(2), _emp(3), routes=[R1, R2])
    report = validate_outcomes(universe, [
        Assigned(employee_id=1, route_id=2, choice_rank=1),
        Assigned(employee_id=2, route_id=2, choice_rank=1),
    ])
    kinds = _kinds(report)
    assert ViolationKind.MISSING_EMPLOYEE in kinds
    assert ViolationKind.ROUTE_CLAIMED_TWICE in kinds
    assert kinds.count(ViolationKind.UNQUALIFIED) == 2
    assert not report.is_valid
