"""Port interface for route persistence."""

from abc import ABC, abstractmethod

from routebid.domain.entities.route import Route


class RouteRepository(ABC):
    @abstractmethod
    async def get_by_id(self, route_id: int) -> Route | None:
        ...

    @abstractmethod
    async def get_active_by_period(self, period_id: int) -> list[Route]:
        """Active routes linked to the selection period."""
        ...
