"""Port interface for submitted route selections."""

from abc import ABC, abstractmethod

from routebid.domain.entities.selection import Selection


class SelectionRepository(ABC):
    @abstractmethod
    async def get_by_period(self, period_id: int) -> list[Selection]:
        ...
