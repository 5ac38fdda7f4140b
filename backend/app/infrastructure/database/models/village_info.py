"""SQLAlchemy ORM models for reporting years, villages and their category sections.

Each category lives in its own table. A village points at each section
through a nullable, unique foreign key, so a section row can be owned by at
most one village.
"""

from dataclasses import dataclass
from datetime import datetime, timezone

from sqlalchemy import (
    JSON,
    Boolean,
    DateTime,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.domain.entities import VillageInfoCategory
from app.infrastructure.database.base import Base


class YearDataModel(Base):
    """ORM model — maps to the 'year_data' table."""

    __tablename__ = "year_data"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    label: Mapped[str] = mapped_column(String(20), nullable=False, unique=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<YearDataModel(id={self.id}, label='{self.label}')>"


class _SectionColumns:
    """Columns shared by every category section table."""

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    data: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    is_draft: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(id={self.id}, draft={self.is_draft})>"


class VillagePopulationModel(_SectionColumns, Base):
    __tablename__ = "village_population"


class VillageEducationModel(_SectionColumns, Base):
    __tablename__ = "village_education"


class VillageInfrastructureModel(_SectionColumns, Base):
    __tablename__ = "village_infrastructure"


class VillageHealthModel(_SectionColumns, Base):
    __tablename__ = "village_health"


class VillageSanitationModel(_SectionColumns, Base):
    __tablename__ = "village_sanitation"


class VillageWaterSupplyModel(_SectionColumns, Base):
    __tablename__ = "village_water_supply"


class VillageEconomicModel(_SectionColumns, Base):
    __tablename__ = "village_economic"


class VillageEduInstitutionModel(_SectionColumns, Base):
    __tablename__ = "village_edu_institutions"


class VillageInfoModel(Base):
    """ORM model — maps to the 'village_infos' table."""

    __tablename__ = "village_infos"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    lgd_code: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    jl_no: Mapped[int] = mapped_column(Integer, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    year_id: Mapped[str] = mapped_column(ForeignKey("year_data.id"), nullable=False, index=True)
    is_draft: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # One optional owned section per category
    population_id: Mapped[str | None] = mapped_column(
        ForeignKey("village_population.id"), nullable=True, unique=True
    )
    education_id: Mapped[str | None] = mapped_column(
        ForeignKey("village_education.id"), nullable=True, unique=True
    )
    infrastructure_id: Mapped[str | None] = mapped_column(
        ForeignKey("village_infrastructure.id"), nullable=True, unique=True
    )
    health_id: Mapped[str | None] = mapped_column(
        ForeignKey("village_health.id"), nullable=True, unique=True
    )
    sanitation_id: Mapped[str | None] = mapped_column(
        ForeignKey("village_sanitation.id"), nullable=True, unique=True
    )
    water_id: Mapped[str | None] = mapped_column(
        ForeignKey("village_water_supply.id"), nullable=True, unique=True
    )
    economic_id: Mapped[str | None] = mapped_column(
        ForeignKey("village_economic.id"), nullable=True, unique=True
    )
    edu_institution_id: Mapped[str | None] = mapped_column(
        ForeignKey("village_edu_institutions.id"), nullable=True, unique=True
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    year: Mapped[YearDataModel] = relationship(lazy="selectin")
    population: Mapped[VillagePopulationModel | None] = relationship(lazy="selectin")
    education: Mapped[VillageEducationModel | None] = relationship(lazy="selectin")
    infrastructure: Mapped[VillageInfrastructureModel | None] = relationship(lazy="selectin")
    health: Mapped[VillageHealthModel | None] = relationship(lazy="selectin")
    sanitation: Mapped[VillageSanitationModel | None] = relationship(lazy="selectin")
    water: Mapped[VillageWaterSupplyModel | None] = relationship(lazy="selectin")
    economic: Mapped[VillageEconomicModel | None] = relationship(lazy="selectin")
    edu_institution: Mapped[VillageEduInstitutionModel | None] = relationship(lazy="selectin")

    __table_args__ = (
        UniqueConstraint("lgd_code", "year_id", name="uq_village_infos_lgd_code_year"),
    )

    def __repr__(self) -> str:
        return f"<VillageInfoModel(id={self.id}, lgd_code={self.lgd_code}, name='{self.name}')>"


@dataclass(frozen=True)
class SectionSlot:
    """Where a category's section lives: its table and the village attribute pointing at it."""

    model: type[_SectionColumns]
    relation: str

    @property
    def foreign_key(self) -> str:
        return f"{self.relation}_id"


SECTION_SLOTS: dict[VillageInfoCategory, SectionSlot] = {
    VillageInfoCategory.POPULATION: SectionSlot(VillagePopulationModel, "population"),
    VillageInfoCategory.EDUCATION: SectionSlot(VillageEducationModel, "education"),
    VillageInfoCategory.INFRASTRUCTURE: SectionSlot(VillageInfrastructureModel, "infrastructure"),
    VillageInfoCategory.HEALTH: SectionSlot(VillageHealthModel, "health"),
    VillageInfoCategory.SANITATION: SectionSlot(VillageSanitationModel, "sanitation"),
    VillageInfoCategory.WATER: SectionSlot(VillageWaterSupplyModel, "water"),
    VillageInfoCategory.ECONOMIC: SectionSlot(VillageEconomicModel, "economic"),
    VillageInfoCategory.EDU_INSTITUTION: SectionSlot(VillageEduInstitutionModel, "edu_institution"),
}
