"""Port interface for assignment persistence."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from routebid.domain.entities.assignment import AssignmentRecord


class AssignmentRepository(ABC):
    @abstractmethod
    async def replace_for_period(
        self, period_id: int, records: Sequence[AssignmentRecord]
    ) -> list[AssignmentRecord]:
        """Delete every assignment of the period, then insert ``records``."""
        ...

    @abstractmethod
    async def get_by_period(self, period_id: int) -> list[AssignmentRecord]:
        ...

    @abstractmethod
    async def get_by_route(self, period_id: int, route_id: int) -> AssignmentRecord | None:
        ...

    @abstractmethod
    async def upsert(self, record: AssignmentRecord) -> AssignmentRecord:
        """Insert or replace the single assignment of (employee, period)."""
        ...

    @abstractmethod
    async def get_by_id(self, assignment_id: int) -> AssignmentRecord | None:
        ...

    @abstractmethod
    async def delete(self, assignment_id: int) -> None:
        ...
