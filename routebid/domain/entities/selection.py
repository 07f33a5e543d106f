"""Selection entity — an employee's ranked route preferences for a period."""

from dataclasses import dataclass, field


@dataclass
class Selection:
    """``choices[i]`` is the route picked at rank ``i + 1``; ``None`` marks a skipped rank."""

    employee_id: int
    selection_period_id: int
    choices: tuple[int | None, ...] = field(default_factory=tuple)

    @classmethod
    def from_choice_columns(
        cls,
        employee_id: int,
        selection_period_id: int,
        first: int | None,
        second: int | None,
        third: int | None,
    ) -> "Selection":
        """Build from the three nullable choice columns, keeping each column's rank."""
        choices = [first, second, third]
        while choices and choices[-1] is None:
            choices.pop()
        return cls(employee_id=employee_id, selection_period_id=selection_period_id, choices=tuple(choices))

    @property
    def highest_rank(self) -> int:
        return len(self.choices)

    def ranked_choices(self) -> list[tuple[int, int]]:
        """(rank, route_id) pairs for the filled ranks only."""
        return [(rank, rid) for rank, rid in enumerate(self.choices, start=1) if rid is not None]

    def duplicate_choices(self) -> list[int]:
        seen: set[int] = set()
        dupes: list[int] = []
        for _, route_id in self.ranked_choices():
            if route_id in seen and route_id not in dupes:
                dupes.append(route_id)
            seen.add(route_id)
        return dupes
