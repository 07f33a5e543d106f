"""Port interface for selection period persistence."""

from abc import ABC, abstractmethod

from routebid.domain.entities.selection_period import SelectionPeriod
from routebid.domain.value_objects.enums import PeriodStatus


class SelectionPeriodRepository(ABC):
    @abstractmethod
    async def get_by_id(self, period_id: int) -> SelectionPeriod | None:
        ...

    @abstractmethod
    async def transition_status(
        self, period_id: int, expected: PeriodStatus, new: PeriodStatus
    ) -> bool:
        """Atomically move the period from ``expected`` to ``new``.

        Returns False (and changes nothing) when the stored status is not
        ``expected``. Acts as the per-period run lock.
        """
        ...

    @abstractmethod
    async def set_status(self, period_id: int, status: PeriodStatus) -> None:
        ...
