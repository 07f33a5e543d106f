"""AssignmentSummary — counts reported back to the caller after a run."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from routebid.domain.entities.assignment import (
    AssignmentOutcome,
    AssignmentRecord,
    outcome_choice_rank,
    outcome_route_id,
)


@dataclass(frozen=True)
class AssignmentSummary:
    total_employees: int
    total_routes: int
    assigned_routes: int
    float_pool_employees: int
    choice_distribution: dict[str, int] = field(default_factory=dict)

    @property
    def assigned_employees(self) -> int:
        return self.total_employees - self.float_pool_employees


def summarize(outcomes: Sequence[AssignmentOutcome], total_routes: int) -> AssignmentSummary:
    """Summary of a freshly computed outcome set."""
    return _summarize_pairs(
        [(outcome_route_id(o), outcome_choice_rank(o)) for o in outcomes], total_routes
    )


def summarize_records(records: Sequence[AssignmentRecord], total_routes: int) -> AssignmentSummary:
    """Summary of a period's persisted assignments, manual overrides included.

    A row holding a route but no choice rank was placed by hand.
    """
    return _summarize_pairs([(r.route_id, r.choice_received) for r in records], total_routes)


def _summarize_pairs(
    pairs: Iterable[tuple[int | None, int | None]], total_routes: int
) -> AssignmentSummary:
    pairs = list(pairs)
    ranks = [rank for _, rank in pairs]
    route_ids = [route_id for route_id, _ in pairs if route_id is not None]
    float_pool = len(pairs) - len(route_ids)

    return AssignmentSummary(
        total_employees=len(pairs),
        total_routes=total_routes,
        assigned_routes=len(set(route_ids)),
        float_pool_employees=float_pool,
        choice_distribution={
            "first": ranks.count(1),
            "second": ranks.count(2),
            "third": ranks.count(3),
            "manual": sum(1 for route_id, rank in pairs if route_id is not None and rank is None),
            "float": float_pool,
        },
    )
