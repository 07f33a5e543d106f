"""AssignmentEngine — seniority-first greedy route matching.

Pure: no I/O, no injected collaborators. The set of claimed routes is a
local value owned by the single sequential loop in ``assign_routes``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from routebid.domain.entities.assignment import Assigned, AssignmentOutcome, Unassigned
from routebid.domain.entities.candidate import Candidate
from routebid.domain.entities.route import Route
from routebid.domain.policies.qualification import employee_qualifies
from routebid.domain.value_objects.enums import UnassignedReason

logger = logging.getLogger(__name__)


def assign_routes(
    candidates: Sequence[Candidate],
    routes: Mapping[int, Route],
) -> list[AssignmentOutcome]:
    """Assign routes to candidates in the order given.

    The caller supplies candidates already in seniority order; the order is
    never reshuffled here. Each candidate's outcome depends only on the
    candidates before it.

    Args:
        candidates: seniority-ordered candidates, each with up to three ranked route ids.
        routes: routes in scope for the run, by id.

    Returns:
        One outcome per candidate, in the same order.
    """
    claimed: set[int] = set()
    outcomes: list[AssignmentOutcome] = []

    for candidate in candidates:
        outcome = _assign_one(candidate, routes, claimed)
        if isinstance(outcome, Assigned):
            claimed.add(outcome.route_id)
        outcomes.append(outcome)

    return outcomes


def _assign_one(
    candidate: Candidate,
    routes: Mapping[int, Route],
    claimed: set[int],
) -> AssignmentOutcome:
    employee = candidate.employee

    if not candidate.has_preferences():
        return Unassigned(employee_id=employee.id, reason_code=UnassignedReason.NO_PREFERENCES)

    # Only a route the employee could have driven, lost to a more senior
    # employee, makes the reason ROUTES_CLAIMED.
    any_claimed = False
    for rank, route_id in candidate.ranked_choices():
        route = routes.get(route_id)
        if route is None:
            logger.warning(
                "Route %s not in scope for employee %s (choice %d), skipping",
                route_id, employee.employee_number, rank,
            )
            continue

        qualifies = employee_qualifies(employee, route)
        if route_id in claimed:
            any_claimed = any_claimed or qualifies
            continue
        if not qualifies:
            continue

        return Assigned(employee_id=employee.id, route_id=route_id, choice_rank=rank)

    reason = UnassignedReason.ROUTES_CLAIMED if any_claimed else UnassignedReason.NOT_QUALIFIED
    return Unassigned(employee_id=employee.id, reason_code=reason)
