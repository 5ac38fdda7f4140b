"""Concrete repository implementation for village information backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import VillageInfoRepository
from app.domain.entities import VillageInfo, VillageInfoCategory, VillageSection, YearData
from app.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from app.infrastructure.database.errors import conflicting_fields, is_unique_violation
from app.infrastructure.database.models import (
    SECTION_SLOTS,
    VillageInfoModel,
    YearDataModel,
)


class SQLAlchemyVillageInfoRepository(VillageInfoRepository):
    """Implements the VillageInfoRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    # ── Mapping ──────────────────────────────────────────────────────

    @staticmethod
    def _year_to_entity(model: YearDataModel) -> YearData:
        return YearData(id=model.id, label=model.label, created_at=model.created_at)

    @staticmethod
    def _section_to_entity(category: VillageInfoCategory, model) -> VillageSection:
        return VillageSection(
            id=model.id,
            category=category,
            data=dict(model.data or {}),
            is_draft=model.is_draft,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_entity(self, model: VillageInfoModel) -> VillageInfo:
        """Map ORM model → domain entity. Relationships must already be loaded."""
        sections: dict[VillageInfoCategory, VillageSection | None] = {}
        for category, slot in SECTION_SLOTS.items():
            section_model = getattr(model, slot.relation)
            sections[category] = (
                self._section_to_entity(category, section_model) if section_model else None
            )
        return VillageInfo(
            id=model.id,
            lgd_code=model.lgd_code,
            jl_no=model.jl_no,
            name=model.name,
            year_id=model.year_id,
            year=model.year.label,
            is_draft=model.is_draft,
            sections=sections,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    async def _flush(self, entity_type: str, fallback: list[str]) -> None:
        try:
            await self._session.flush()
        except IntegrityError as exc:
            if is_unique_violation(exc):
                raise DuplicateEntityError(entity_type, conflicting_fields(exc, fallback)) from exc
            raise

    # ── Years ────────────────────────────────────────────────────────

    async def get_year(self, label: str) -> YearData | None:
        result = await self._session.execute(
            select(YearDataModel).where(YearDataModel.label == label)
        )
        model = result.scalar_one_or_none()
        return self._year_to_entity(model) if model else None

    async def list_years(self) -> list[YearData]:
        result = await self._session.execute(
            select(YearDataModel).order_by(YearDataModel.label.desc())
        )
        return [self._year_to_entity(row) for row in result.scalars().all()]

    async def create_year(self, year: YearData) -> YearData:
        model = YearDataModel(id=year.id, label=year.label, created_at=year.created_at)
        # SAVEPOINT so a lost race leaves the outer transaction usable for a re-read
        try:
            async with self._session.begin_nested():
                self._session.add(model)
        except IntegrityError as exc:
            if is_unique_violation(exc):
                raise DuplicateEntityError(
                    "YearData", conflicting_fields(exc, ["label"]), year.label
                ) from exc
            raise
        return self._year_to_entity(model)

    # ── Villages ─────────────────────────────────────────────────────

    async def get_village(self, lgd_code: int, year_id: str) -> VillageInfo | None:
        stmt = (
            select(VillageInfoModel)
            .where(
                VillageInfoModel.lgd_code == lgd_code,
                VillageInfoModel.year_id == year_id,
            )
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def create_village(self, village: VillageInfo) -> VillageInfo:
        model = VillageInfoModel(
            id=village.id,
            lgd_code=village.lgd_code,
            jl_no=village.jl_no,
            name=village.name,
            year_id=village.year_id,
            is_draft=village.is_draft,
            created_at=village.created_at,
            updated_at=village.updated_at,
        )
        self._session.add(model)
        await self._flush("VillageInfo", ["lgd_code", "year_id"])
        # A new village has no sections yet; return the input rather than
        # touching unloaded relationships.
        return village

    async def update_village(self, village: VillageInfo) -> VillageInfo:
        model = await self._session.get(VillageInfoModel, village.id)
        if model is None:
            raise EntityNotFoundError("VillageInfo", village.id)
        model.name = village.name
        model.jl_no = village.jl_no
        model.is_draft = village.is_draft
        model.updated_at = village.updated_at
        await self._flush("VillageInfo", ["lgd_code", "year_id"])
        return village

    # ── Sections ─────────────────────────────────────────────────────

    async def create_section(self, section: VillageSection) -> VillageSection:
        slot = SECTION_SLOTS[section.category]
        model = slot.model(
            id=section.id,
            data=dict(section.data),
            is_draft=section.is_draft,
            created_at=section.created_at,
            updated_at=section.updated_at,
        )
        self._session.add(model)
        await self._flush(slot.model.__tablename__, ["id"])
        return self._section_to_entity(section.category, model)

    async def update_section(self, section: VillageSection) -> VillageSection:
        slot = SECTION_SLOTS[section.category]
        model = await self._session.get(slot.model, section.id)
        if model is None:
            raise EntityNotFoundError(slot.model.__tablename__, section.id)
        model.data = dict(section.data)
        model.is_draft = section.is_draft
        model.updated_at = section.updated_at
        await self._flush(slot.model.__tablename__, ["id"])
        return self._section_to_entity(section.category, model)

    async def link_section(
        self, village_id: str, category: VillageInfoCategory, section_id: str
    ) -> None:
        slot = SECTION_SLOTS[category]
        village_model = await self._session.get(VillageInfoModel, village_id)
        if village_model is None:
            raise EntityNotFoundError("VillageInfo", village_id)
        section_model = await self._session.get(slot.model, section_id)
        if section_model is None:
            raise EntityNotFoundError(slot.model.__tablename__, section_id)
        setattr(village_model, slot.foreign_key, section_model.id)
        await self._flush("VillageInfo", [slot.foreign_key])
