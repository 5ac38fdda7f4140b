"""Abstract repository interfaces (ports) for Sansad and Mouza master data."""

from abc import ABC, abstractmethod

from app.domain.entities import Mouza, Sansad


class SansadRepository(ABC):
    """Port for Sansad persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, sansad_id: str) -> Sansad | None:
        ...

    @abstractmethod
    async def get_by_number(self, sansad_number: str) -> Sansad | None:
        ...

    @abstractmethod
    async def get_all(self) -> list[Sansad]:
        ...

    @abstractmethod
    async def create(self, sansad: Sansad) -> Sansad:
        ...

    @abstractmethod
    async def update(self, sansad: Sansad) -> Sansad:
        ...

    @abstractmethod
    async def delete(self, sansad_id: str) -> bool:
        """Delete a Sansad. Returns True if deleted, False if not found."""
        ...


class MouzaRepository(ABC):
    """Port for Mouza persistence."""

    @abstractmethod
    async def get_all(self) -> list[Mouza]:
        ...

    @abstractmethod
    async def create(self, mouza: Mouza) -> Mouza:
        ...
