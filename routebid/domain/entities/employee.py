"""Employee entity — a driver competing for routes by seniority."""

from dataclasses import dataclass, field
from datetime import date

from routebid.domain.value_objects.enums import Qualification


@dataclass
class Employee:
    id: int | None
    employee_number: str
    first_name: str
    last_name: str
    hire_date: date
    terminal_id: int
    qualifications: frozenset[Qualification] = field(default_factory=frozenset)
    is_eligible: bool = True
    current_route_id: int | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def has_qualification(self, qualification: Qualification) -> bool:
        return qualification in self.qualifications

    def seniority_key(self) -> tuple:
        """Strict total order: hire date, then last name, then first name, then id."""
        return (self.hire_date, self.last_name, self.first_name, self.id or 0)
