"""Integration tests for the village info upsert against a real SQLite database."""

import pytest
from sqlalchemy import func, select

from app.application.services import VillageInfoService
from app.domain.entities import ErrorCode
from app.infrastructure.database import SQLAlchemyUnitOfWork
from app.infrastructure.database.models import (
    VillagePopulationModel,
    VillageInfoModel,
    YearDataModel,
)
from app.infrastructure.database.repositories import SQLAlchemyVillageInfoRepository

CORE = {"lgd_code": 100234, "jl_no": 7, "name": "Lakeview", "year": "2023-24"}


async def _submit(factory, category, data, core=CORE, is_draft=False, repository_cls=None):
    """Run one submission in its own session, as a request would."""
    repository_cls = repository_cls or SQLAlchemyVillageInfoRepository
    async with factory() as session:
        service = VillageInfoService(repository_cls(session), SQLAlchemyUnitOfWork(session))
        return await service.upsert_village_info(core, category, data, is_draft)


async def _count(factory, model) -> int:
    async with factory() as session:
        return await session.scalar(select(func.count()).select_from(model))


@pytest.mark.asyncio
async def test_submission_persists_year_village_and_section(session_factory):
    result = await _submit(session_factory, "population", {"totalPopulation": 5321, "households": 1203})

    assert result.success is True
    assert result.data.population.data["total_population"] == 5321
    assert result.data.population.data["households"] == 1203
    assert result.data.population.data["male_population"] == 0
    assert await _count(session_factory, YearDataModel) == 1
    assert await _count(session_factory, VillageInfoModel) == 1
    assert await _count(session_factory, VillagePopulationModel) == 1


@pytest.mark.asyncio
async def test_resubmission_updates_section_without_new_rows(session_factory):
    first = await _submit(session_factory, "population", {"totalPopulation": 100})
    second = await _submit(
        session_factory, "population", {"totalPopulation": 120}, core={**CORE, "name": "Lakeview East"}
    )

    assert second.success is True
    assert second.data.id == first.data.id
    assert second.data.name == "Lakeview East"
    assert second.data.population.id == first.data.population.id
    assert second.data.population.data["total_population"] == 120
    assert await _count(session_factory, VillageInfoModel) == 1
    assert await _count(session_factory, VillagePopulationModel) == 1


@pytest.mark.asyncio
async def test_sections_of_different_categories_coexist(session_factory):
    await _submit(session_factory, "population", {"households": 40})
    await _submit(session_factory, "water", {"tubeWells": 6})

    async with session_factory() as session:
        service = VillageInfoService(
            SQLAlchemyVillageInfoRepository(session), SQLAlchemyUnitOfWork(session)
        )
        village = await service.get_village_info(100234, "2023-24")

    assert village.population.data["households"] == 40
    assert village.water.data["tube_wells"] == 6
    assert village.health is None


@pytest.mark.asyncio
async def test_same_lgd_code_in_another_year_is_a_separate_village(session_factory):
    await _submit(session_factory, "population", {})
    await _submit(session_factory, "population", {}, core={**CORE, "year": "2024-25"})

    assert await _count(session_factory, YearDataModel) == 2
    assert await _count(session_factory, VillageInfoModel) == 2


class _FailingSectionRepository(SQLAlchemyVillageInfoRepository):
    async def link_section(self, village_id, category, section_id):
        raise RuntimeError("disk I/O error")


@pytest.mark.asyncio
async def test_failure_mid_transaction_rolls_back_every_write(session_factory):
    result = await _submit(
        session_factory, "population", {}, repository_cls=_FailingSectionRepository
    )

    assert result.success is False
    assert result.code is ErrorCode.UNKNOWN_ERROR
    assert result.errors["details"] == "disk I/O error"
    assert await _count(session_factory, YearDataModel) == 0
    assert await _count(session_factory, VillageInfoModel) == 0
    assert await _count(session_factory, VillagePopulationModel) == 0


class _BlindVillageLookupRepository(SQLAlchemyVillageInfoRepository):
    """Misses the existing village once, forcing an insert that collides."""

    def __init__(self, session):
        super().__init__(session)
        self._missed = False

    async def get_village(self, lgd_code, year_id):
        if not self._missed:
            self._missed = True
            return None
        return await super().get_village(lgd_code, year_id)


@pytest.mark.asyncio
async def test_natural_key_collision_is_reported_as_duplicate(session_factory):
    await _submit(session_factory, "population", {})

    result = await _submit(
        session_factory, "water", {}, repository_cls=_BlindVillageLookupRepository
    )

    assert result.success is False
    assert result.code is ErrorCode.DUPLICATE_ENTRY
    assert result.errors["fields"] == ["lgd_code", "year_id"]
    assert await _count(session_factory, VillageInfoModel) == 1


class _BlindYearLookupRepository(SQLAlchemyVillageInfoRepository):
    """Misses the existing year once, as if another request inserted it meanwhile."""

    def __init__(self, session):
        super().__init__(session)
        self._missed = False

    async def get_year(self, label):
        if not self._missed:
            self._missed = True
            return None
        return await super().get_year(label)


@pytest.mark.asyncio
async def test_lost_year_race_reuses_existing_year(session_factory):
    await _submit(session_factory, "population", {})

    result = await _submit(
        session_factory,
        "population",
        {},
        core={**CORE, "lgd_code": 100235},
        repository_cls=_BlindYearLookupRepository,
    )

    assert result.success is True
    assert await _count(session_factory, YearDataModel) == 1
    assert await _count(session_factory, VillageInfoModel) == 2
