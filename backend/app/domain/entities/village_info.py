"""Domain entities for village statistical information.

A ``VillageInfo`` is keyed by ``(lgd_code, year)`` and owns up to one
``VillageSection`` per ``VillageInfoCategory``. Sections are never shared
between villages.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any
from uuid import uuid4


class VillageInfoCategory(str, Enum):
    """Closed set of village data sections (tab keys in the portal)."""

    POPULATION = "population"
    EDUCATION = "education"
    INFRASTRUCTURE = "infrastructure"
    HEALTH = "health"
    SANITATION = "sanitation"
    WATER = "water"
    ECONOMIC = "economic"
    EDU_INSTITUTION = "eduInstitution"

    @classmethod
    def parse(cls, raw: str) -> "VillageInfoCategory | None":
        """Return the category for a wire tag, or None when unknown."""
        try:
            return cls(raw)
        except ValueError:
            return None


@dataclass
class YearData:
    """A reporting year, e.g. ``"2023-24"``. Shared by all villages."""

    label: str
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class VillageSection:
    """One category's validated payload, owned by exactly one village."""

    category: VillageInfoCategory
    data: dict[str, Any]
    is_draft: bool = False
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(self, data: dict[str, Any], is_draft: bool) -> None:
        """Replace the payload in place; the id never changes."""
        self.data = data
        self.is_draft = is_draft
        self.updated_at = datetime.now(timezone.utc)


@dataclass
class VillageInfo:
    """Village record for one reporting year with its category sections."""

    lgd_code: int
    jl_no: int
    name: str
    year_id: str
    year: str = ""
    is_draft: bool = False
    id: str = field(default_factory=lambda: str(uuid4()))
    sections: dict[VillageInfoCategory, VillageSection | None] = field(
        default_factory=lambda: {category: None for category in VillageInfoCategory}
    )
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def section(self, category: VillageInfoCategory) -> VillageSection | None:
        return self.sections.get(category)

    def update_core(self, name: str, jl_no: int, is_draft: bool) -> None:
        """Update display fields; the natural key (lgd_code, year) is immutable."""
        self.name = name
        self.jl_no = jl_no
        self.is_draft = is_draft
        self.updated_at = datetime.now(timezone.utc)

    # Attribute-style access for response serialisation
    @property
    def population(self) -> VillageSection | None:
        return self.section(VillageInfoCategory.POPULATION)

    @property
    def education(self) -> VillageSection | None:
        return self.section(VillageInfoCategory.EDUCATION)

    @property
    def infrastructure(self) -> VillageSection | None:
        return self.section(VillageInfoCategory.INFRASTRUCTURE)

    @property
    def health(self) -> VillageSection | None:
        return self.section(VillageInfoCategory.HEALTH)

    @property
    def sanitation(self) -> VillageSection | None:
        return self.section(VillageInfoCategory.SANITATION)

    @property
    def water(self) -> VillageSection | None:
        return self.section(VillageInfoCategory.WATER)

    @property
    def economic(self) -> VillageSection | None:
        return self.section(VillageInfoCategory.ECONOMIC)

    @property
    def edu_institution(self) -> VillageSection | None:
        return self.section(VillageInfoCategory.EDU_INSTITUTION)
