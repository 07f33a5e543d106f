"""Port interface for the unit-of-work transaction boundary."""

from abc import ABC, abstractmethod


class TransactionManager(ABC):
    @abstractmethod
    async def commit(self) -> None:
        ...

    @abstractmethod
    async def rollback(self) -> None:
        ...
