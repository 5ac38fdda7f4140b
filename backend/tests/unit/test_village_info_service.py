"""Unit tests for the VillageInfoService — validation, upsert flow and error mapping."""

import copy
from contextlib import asynccontextmanager

import pytest

from app.application.interfaces import UnitOfWork, VillageInfoRepository
from app.application.services import VillageInfoService
from app.domain.entities import (
    ErrorCode,
    VillageInfo,
    VillageInfoCategory,
    VillageSection,
    YearData,
)
from app.domain.exceptions import DuplicateEntityError, EntityNotFoundError


# ── Fakes ────────────────────────────────────────────────────────────


class FakeVillageInfoRepository(VillageInfoRepository):
    """In-memory fake; hands out copies so only explicit writes change state."""

    def __init__(self):
        self.years: dict[str, YearData] = {}
        self.villages: dict[tuple[int, str], VillageInfo] = {}
        self.sections: dict[str, VillageSection] = {}
        self.links: dict[str, dict[VillageInfoCategory, str]] = {}
        self.failures: dict[str, Exception] = {}
        self.calls: list[str] = []

    def _check(self, name: str) -> None:
        self.calls.append(name)
        if name in self.failures:
            raise self.failures[name]

    def snapshot(self):
        return copy.deepcopy((self.years, self.villages, self.sections, self.links))

    def restore(self, state) -> None:
        self.years, self.villages, self.sections, self.links = state

    async def get_year(self, label: str) -> YearData | None:
        self._check("get_year")
        year = self.years.get(label)
        return copy.deepcopy(year) if year else None

    async def list_years(self) -> list[YearData]:
        return sorted(self.years.values(), key=lambda y: y.label, reverse=True)

    async def create_year(self, year: YearData) -> YearData:
        self._check("create_year")
        if year.label in self.years:
            raise DuplicateEntityError("YearData", ["label"], year.label)
        self.years[year.label] = copy.deepcopy(year)
        return year

    async def get_village(self, lgd_code: int, year_id: str) -> VillageInfo | None:
        self._check("get_village")
        stored = self.villages.get((lgd_code, year_id))
        if stored is None:
            return None
        village = copy.deepcopy(stored)
        links = self.links.get(village.id, {})
        village.sections = {
            category: copy.deepcopy(self.sections[links[category]]) if category in links else None
            for category in VillageInfoCategory
        }
        return village

    async def create_village(self, village: VillageInfo) -> VillageInfo:
        self._check("create_village")
        key = (village.lgd_code, village.year_id)
        if key in self.villages:
            raise DuplicateEntityError("VillageInfo", ["lgd_code", "year_id"])
        self.villages[key] = copy.deepcopy(village)
        return village

    async def update_village(self, village: VillageInfo) -> VillageInfo:
        self._check("update_village")
        for key, stored in self.villages.items():
            if stored.id == village.id:
                self.villages[key] = copy.deepcopy(village)
                return village
        raise EntityNotFoundError("VillageInfo", village.id)

    async def create_section(self, section: VillageSection) -> VillageSection:
        self._check("create_section")
        self.sections[section.id] = copy.deepcopy(section)
        return section

    async def update_section(self, section: VillageSection) -> VillageSection:
        self._check("update_section")
        if section.id not in self.sections:
            raise EntityNotFoundError("VillageSection", section.id)
        self.sections[section.id] = copy.deepcopy(section)
        return section

    async def link_section(self, village_id, category, section_id) -> None:
        self._check("link_section")
        self.links.setdefault(village_id, {})[category] = section_id


class FakeUnitOfWork(UnitOfWork):
    """Restores the fake repository's state when the block raises."""

    def __init__(self, repository: FakeVillageInfoRepository):
        self._repository = repository
        self.opened = 0

    @asynccontextmanager
    async def transaction(self):
        self.opened += 1
        state = self._repository.snapshot()
        try:
            yield
        except Exception:
            self._repository.restore(state)
            raise


CORE = {"lgd_code": 100234, "jl_no": 7, "name": "Lakeview", "year": "2023-24"}


@pytest.fixture
def repository() -> FakeVillageInfoRepository:
    return FakeVillageInfoRepository()


@pytest.fixture
def uow(repository) -> FakeUnitOfWork:
    return FakeUnitOfWork(repository)


@pytest.fixture
def service(repository, uow) -> VillageInfoService:
    return VillageInfoService(repository, uow)


# ── Happy path ───────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_first_submission_creates_year_village_and_section(service, repository):
    result = await service.upsert_village_info(
        CORE, "population", {"totalPopulation": 5321, "households": 1203}, False
    )

    assert result.success is True
    assert result.message == "Village information submitted successfully"
    assert list(repository.years) == ["2023-24"]
    assert len(repository.villages) == 1
    assert len(repository.sections) == 1

    village = result.data
    assert village.lgd_code == 100234
    assert village.year == "2023-24"
    assert village.population is not None
    assert village.population.data["total_population"] == 5321
    assert village.population.data["households"] == 1203
    for category in VillageInfoCategory:
        if category is not VillageInfoCategory.POPULATION:
            assert village.section(category) is None


@pytest.mark.asyncio
async def test_draft_submission_uses_draft_message(service):
    result = await service.upsert_village_info(CORE, "health", {"subCentres": 2}, True)
    assert result.success is True
    assert result.message == "Draft saved successfully"


@pytest.mark.asyncio
async def test_year_is_created_once_for_many_villages(service, repository):
    await service.upsert_village_info(CORE, "population", {}, False)
    await service.upsert_village_info({**CORE, "lgd_code": 100235}, "population", {}, False)

    assert len(repository.years) == 1
    assert len(repository.villages) == 2


@pytest.mark.asyncio
async def test_same_natural_key_updates_single_village(service, repository):
    await service.upsert_village_info(CORE, "population", {}, False)
    result = await service.upsert_village_info(
        {**CORE, "name": "Lakeview East", "jl_no": 8}, "water", {}, False
    )

    assert len(repository.villages) == 1
    assert result.data.name == "Lakeview East"
    assert result.data.jl_no == 8


@pytest.mark.asyncio
async def test_second_write_updates_section_in_place(service, repository):
    first = await service.upsert_village_info(CORE, "population", {"totalPopulation": 100}, False)
    second = await service.upsert_village_info(CORE, "population", {"totalPopulation": 150}, False)

    assert len(repository.sections) == 1
    assert first.data.population.id == second.data.population.id
    assert second.data.population.data["total_population"] == 150
    assert "create_section" in repository.calls
    assert repository.calls.count("create_section") == 1
    assert repository.calls.count("update_section") == 1


@pytest.mark.asyncio
async def test_categories_are_independent(service):
    await service.upsert_village_info(CORE, "population", {"totalPopulation": 900}, False)
    result = await service.upsert_village_info(CORE, "eduInstitution", {"primarySchools": 3}, False)

    village = result.data
    assert village.population.data["total_population"] == 900
    assert village.edu_institution.data["primary_schools"] == 3
    assert village.population.id != village.edu_institution.id


@pytest.mark.asyncio
async def test_draft_flag_propagates_to_village_and_written_section_only(service):
    await service.upsert_village_info(CORE, "education", {"literacyRate": 71.5}, True)
    await service.upsert_village_info(CORE, "population", {}, True)
    result = await service.upsert_village_info(CORE, "population", {}, False)

    village = result.data
    assert village.is_draft is False
    assert village.population.is_draft is False
    assert village.education.is_draft is True


# ── Validation short-circuits ────────────────────────────────────────


@pytest.mark.asyncio
async def test_invalid_core_returns_validation_error_without_writes(service, repository, uow):
    result = await service.upsert_village_info(
        {**CORE, "lgd_code": "not-a-number"}, "population", {}, False
    )

    assert result.success is False
    assert result.code is ErrorCode.VALIDATION_ERROR
    assert result.message == "Core village data validation failed"
    assert "lgd_code" in result.errors["field_errors"]
    assert uow.opened == 0
    assert repository.calls == []


@pytest.mark.asyncio
async def test_unknown_category_is_rejected_before_transaction(service, repository, uow):
    result = await service.upsert_village_info(CORE, "tourism", {}, False)

    assert result.success is False
    assert result.code is ErrorCode.INVALID_CATEGORY
    assert "tourism" in result.message
    assert uow.opened == 0
    assert repository.years == {}


@pytest.mark.asyncio
async def test_invalid_payload_returns_field_errors(service, uow):
    result = await service.upsert_village_info(CORE, "population", {"totalPopulation": -4}, False)

    assert result.success is False
    assert result.code is ErrorCode.VALIDATION_ERROR
    assert result.message == "Validation failed for population data"
    assert "totalPopulation" in result.errors["field_errors"]
    assert uow.opened == 0


@pytest.mark.asyncio
async def test_payload_cross_field_rule_is_reported_as_form_error(service):
    result = await service.upsert_village_info(
        CORE,
        "population",
        {"totalPopulation": 10, "malePopulation": 8, "femalePopulation": 8},
        False,
    )

    assert result.success is False
    assert result.errors["form_errors"]


# ── Error mapping ────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_duplicate_entry_is_mapped_and_rolled_back(service, repository):
    repository.failures["create_village"] = DuplicateEntityError(
        "VillageInfo", ["lgd_code", "year_id"]
    )

    result = await service.upsert_village_info(CORE, "population", {}, False)

    assert result.success is False
    assert result.code is ErrorCode.DUPLICATE_ENTRY
    assert "lgd_code, year_id" in result.message
    assert result.errors["fields"] == ["lgd_code", "year_id"]
    assert repository.years == {}


@pytest.mark.asyncio
async def test_missing_record_during_update_is_mapped(service, repository):
    await service.upsert_village_info(CORE, "population", {}, False)
    repository.failures["update_section"] = EntityNotFoundError("VillageSection", "gone")

    result = await service.upsert_village_info(CORE, "population", {"households": 3}, False)

    assert result.success is False
    assert result.code is ErrorCode.NOT_FOUND
    assert result.message == "Record not found during update."


@pytest.mark.asyncio
async def test_unexpected_error_is_reported_not_raised(service, repository):
    repository.failures["link_section"] = RuntimeError("connection reset by peer")

    result = await service.upsert_village_info(CORE, "water", {}, False)

    assert result.success is False
    assert result.code is ErrorCode.UNKNOWN_ERROR
    assert result.errors["details"] == "connection reset by peer"
    # Year, village and section writes were all undone
    assert repository.years == {}
    assert repository.villages == {}
    assert repository.sections == {}


@pytest.mark.asyncio
async def test_year_created_concurrently_is_reused(service, repository):
    original_get_year = repository.get_year
    reads = {"count": 0}

    async def racing_get_year(label):
        reads["count"] += 1
        if reads["count"] == 1:
            # Another request inserts the year between our read and our insert
            repository.years[label] = YearData(label=label)
            return None
        return await original_get_year(label)

    repository.get_year = racing_get_year

    result = await service.upsert_village_info(CORE, "population", {}, False)

    assert result.success is True
    assert len(repository.years) == 1
    assert result.data.year_id == repository.years["2023-24"].id


@pytest.mark.asyncio
async def test_year_conflict_without_visible_row_is_duplicate_entry(service, repository):
    repository.failures["create_year"] = DuplicateEntityError("YearData", ["label"], "2023-24")

    result = await service.upsert_village_info(CORE, "population", {}, False)

    assert result.success is False
    assert result.code is ErrorCode.DUPLICATE_ENTRY
    assert result.errors["fields"] == ["label"]


# ── Read path ────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_get_village_info_for_unknown_year_does_not_create_it(service, repository):
    assert await service.get_village_info(100234, "1999-00") is None
    assert repository.years == {}


@pytest.mark.asyncio
async def test_get_village_info_returns_all_sections(service):
    await service.upsert_village_info(CORE, "population", {"households": 12}, False)
    await service.upsert_village_info(CORE, "economic", {"shgGroups": 4}, False)

    village = await service.get_village_info(100234, "2023-24")

    assert village is not None
    assert village.population.data["households"] == 12
    assert village.economic.data["shg_groups"] == 4
    assert village.health is None


@pytest.mark.asyncio
async def test_get_village_info_swallows_persistence_errors(service, repository):
    repository.failures["get_year"] = RuntimeError("database unavailable")
    assert await service.get_village_info(100234, "2023-24") is None
