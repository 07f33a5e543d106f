"""Port interface for employee persistence."""

from abc import ABC, abstractmethod
from collections.abc import Mapping

from routebid.domain.entities.employee import Employee


class EmployeeRepository(ABC):
    @abstractmethod
    async def get_by_id(self, employee_id: int) -> Employee | None:
        ...

    @abstractmethod
    async def get_eligible_by_terminal(self, terminal_id: int) -> list[Employee]:
        """Eligible employees of a terminal, in any order."""
        ...

    @abstractmethod
    async def set_current_routes(self, current_routes: Mapping[int, int | None]) -> None:
        """Set (or clear, for None) each employee's current route pointer."""
        ...
