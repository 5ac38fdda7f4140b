"""Abstract repository interface (port) for village information persistence."""

from abc import ABC, abstractmethod

from app.domain.entities import VillageInfo, VillageInfoCategory, VillageSection, YearData


class VillageInfoRepository(ABC):
    """Port for year, village and section persistence.

    Writes raise ``DuplicateEntityError`` on a unique-constraint conflict and
    ``EntityNotFoundError`` when an update targets a row that no longer exists.
    """

    @abstractmethod
    async def get_year(self, label: str) -> YearData | None:
        """Find a reporting year by its label."""
        ...

    @abstractmethod
    async def list_years(self) -> list[YearData]:
        """All reporting years, newest label first."""
        ...

    @abstractmethod
    async def create_year(self, year: YearData) -> YearData:
        """Insert a year. A conflict must leave the surrounding transaction usable."""
        ...

    @abstractmethod
    async def get_village(self, lgd_code: int, year_id: str) -> VillageInfo | None:
        """Find a village by its natural key with every section loaded."""
        ...

    @abstractmethod
    async def create_village(self, village: VillageInfo) -> VillageInfo:
        """Insert a village with all section slots empty."""
        ...

    @abstractmethod
    async def update_village(self, village: VillageInfo) -> VillageInfo:
        """Persist display fields and the draft flag of an existing village."""
        ...

    @abstractmethod
    async def create_section(self, section: VillageSection) -> VillageSection:
        """Insert a new section row for ``section.category``."""
        ...

    @abstractmethod
    async def update_section(self, section: VillageSection) -> VillageSection:
        """Overwrite the payload and draft flag of an existing section."""
        ...

    @abstractmethod
    async def link_section(
        self, village_id: str, category: VillageInfoCategory, section_id: str
    ) -> None:
        """Point the village's slot for ``category`` at ``section_id``."""
        ...
