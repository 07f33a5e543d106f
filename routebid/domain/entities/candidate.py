"""Candidate universe — the closed input of one assignment run."""

from dataclasses import dataclass, field

from routebid.domain.entities.employee import Employee
from routebid.domain.entities.route import Route


@dataclass(frozen=True)
class Candidate:
    """An eligible employee with route ids by rank; ``None`` marks a skipped rank."""

    employee: Employee
    choices: tuple[int | None, ...] = ()

    @property
    def employee_id(self) -> int:
        return self.employee.id

    def ranked_choices(self) -> list[tuple[int, int]]:
        return [(rank, rid) for rank, rid in enumerate(self.choices, start=1) if rid is not None]

    def has_preferences(self) -> bool:
        return any(rid is not None for rid in self.choices)


@dataclass(frozen=True)
class CandidateUniverse:
    selection_period_id: int
    candidates: tuple[Candidate, ...]  # seniority order
    routes: dict[int, Route] = field(default_factory=dict)
    max_choices: int = 3

    def employees_by_id(self) -> dict[int, Employee]:
        return {c.employee.id: c.employee for c in self.candidates}
