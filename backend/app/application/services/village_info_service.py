"""Application service (use case) for village information tabs.

A submission carries the village core key, one category tag and that
category's payload. The service validates everything up front, then inside
a single transaction:

    1. finds or creates the reporting year,
    2. finds or creates the village for (lgd_code, year) and refreshes its
       display fields,
    3. creates the category section and links it, or updates the linked
       section in place,
    4. re-reads the village with every section loaded.

Every outcome is returned as an ``OperationResult``; nothing is raised to
the caller.
"""

import logging
from typing import Any

from pydantic import ValidationError

from app.application.interfaces import UnitOfWork, VillageInfoRepository
from app.application.schemas.village_info import (
    SECTION_SCHEMAS,
    VillageCore,
    flatten_validation_error,
)
from app.domain.entities import (
    ErrorCode,
    OperationResult,
    VillageInfo,
    VillageInfoCategory,
    VillageSection,
    YearData,
)
from app.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidCategoryError,
)
from app.infrastructure.logging.colored_logger import PipelineLogger, PipelineStage

logger = logging.getLogger(__name__)
plog = PipelineLogger("VillageInfoService")

SUBMITTED_MESSAGE = "Village information submitted successfully"
DRAFT_MESSAGE = "Draft saved successfully"


class VillageInfoService:
    """Coordinates the transactional upsert of a village and one of its sections."""

    def __init__(self, repository: VillageInfoRepository, unit_of_work: UnitOfWork):
        self._repository = repository
        self._uow = unit_of_work

    # ── Write path ───────────────────────────────────────────────────

    async def upsert_village_info(
        self,
        core: dict[str, Any],
        category: str,
        data: dict[str, Any],
        is_draft: bool = False,
    ) -> OperationResult:
        plog.separator(f"Village info: {category}")
        plog.step_start(PipelineStage.VALIDATION, "Validating submission", category=category, is_draft=is_draft)

        try:
            validated_core = VillageCore.model_validate(core)
        except ValidationError as exc:
            plog.step_error(PipelineStage.VALIDATION, "Core village data validation failed", error=exc)
            return OperationResult.failure(
                ErrorCode.VALIDATION_ERROR,
                "Core village data validation failed",
                flatten_validation_error(exc),
            )

        try:
            section_category = self._resolve_category(category)
        except InvalidCategoryError as exc:
            plog.step_error(PipelineStage.VALIDATION, str(exc))
            return OperationResult.failure(
                ErrorCode.INVALID_CATEGORY,
                str(exc),
                {"message": "Invalid category", "details": str(exc), "category": category},
            )

        schema = SECTION_SCHEMAS[section_category]
        try:
            payload = schema.model_validate(data).model_dump(mode="json")
        except ValidationError as exc:
            plog.step_error(PipelineStage.VALIDATION, f"Validation failed for {category} data", error=exc)
            return OperationResult.failure(
                ErrorCode.VALIDATION_ERROR,
                f"Validation failed for {category} data",
                flatten_validation_error(exc),
            )
        plog.step_complete(PipelineStage.VALIDATION, f"Submission for {category} is valid")

        try:
            with plog.timed_step(
                PipelineStage.TRANSACTION,
                "Saving village information",
                lgd_code=validated_core.lgd_code,
                year=validated_core.year,
            ):
                async with self._uow.transaction():
                    village = await self._write(validated_core, section_category, payload, is_draft)
        except DuplicateEntityError as exc:
            return OperationResult.failure(
                ErrorCode.DUPLICATE_ENTRY,
                f"Duplicate entry detected: A record with the same {exc.field} already exists.",
                {
                    "message": "Duplicate entry detected.",
                    "details": f"A record with the same {exc.field} already exists.",
                    "fields": exc.fields,
                },
            )
        except EntityNotFoundError as exc:
            return OperationResult.failure(
                ErrorCode.NOT_FOUND,
                "Record not found during update.",
                {
                    "message": "Record not found",
                    "details": str(exc),
                    "entity": exc.entity_type,
                },
            )
        except Exception as exc:
            logger.exception("Failed to save village information for %s", validated_core.lgd_code)
            return OperationResult.failure(
                ErrorCode.UNKNOWN_ERROR,
                "Failed to save village information due to an unexpected error.",
                {
                    "message": "Failed to save village info",
                    "details": str(exc) or type(exc).__name__,
                },
            )

        plog.step_complete(PipelineStage.COMPLETE, "Village information saved", village_id=village.id)
        return OperationResult.ok(village, DRAFT_MESSAGE if is_draft else SUBMITTED_MESSAGE)

    async def _write(
        self,
        core: VillageCore,
        category: VillageInfoCategory,
        payload: dict[str, Any],
        is_draft: bool,
    ) -> VillageInfo:
        year = await self._find_or_create_year(core.year)

        plog.step_start(PipelineStage.VILLAGE, "Resolving village", lgd_code=core.lgd_code)
        village = await self._repository.get_village(core.lgd_code, year.id)
        if village is None:
            village = await self._repository.create_village(
                VillageInfo(
                    lgd_code=core.lgd_code,
                    jl_no=core.jl_no,
                    name=core.name,
                    year_id=year.id,
                    year=year.label,
                    is_draft=is_draft,
                )
            )
            plog.detail("Village created", id=village.id)
        else:
            village.update_core(name=core.name, jl_no=core.jl_no, is_draft=is_draft)
            village = await self._repository.update_village(village)
            plog.detail("Village core fields updated", id=village.id)

        plog.step_start(PipelineStage.SECTION, f"Writing {category.value} section")
        existing = village.section(category)
        if existing is None:
            section = await self._repository.create_section(
                VillageSection(category=category, data=payload, is_draft=is_draft)
            )
            await self._repository.link_section(village.id, category, section.id)
            plog.detail("Section created and linked", id=section.id)
        else:
            existing.update(data=payload, is_draft=is_draft)
            await self._repository.update_section(existing)
            plog.detail("Section updated in place", id=existing.id)

        refreshed = await self._repository.get_village(core.lgd_code, year.id)
        if refreshed is None:
            raise EntityNotFoundError("VillageInfo", village.id)
        return refreshed

    async def _find_or_create_year(self, label: str) -> YearData:
        plog.step_start(PipelineStage.YEAR, "Resolving year", label=label)
        year = await self._repository.get_year(label)
        if year is not None:
            plog.detail("Year found", id=year.id)
            return year
        try:
            year = await self._repository.create_year(YearData(label=label))
            plog.detail("Year created", id=year.id)
            return year
        except DuplicateEntityError:
            # Another request created it between our read and insert.
            year = await self._repository.get_year(label)
            if year is None:
                raise
            plog.detail("Year created concurrently, reusing", id=year.id)
            return year

    @staticmethod
    def _resolve_category(raw: str) -> VillageInfoCategory:
        category = VillageInfoCategory.parse(raw)
        if category is None or category not in SECTION_SCHEMAS:
            raise InvalidCategoryError(raw)
        return category

    # ── Read path ────────────────────────────────────────────────────

    async def get_village_info(self, lgd_code: int, year: str) -> VillageInfo | None:
        """Village for (lgd_code, year) with all sections, or None.

        Never creates a year. Persistence errors are logged and read as None.
        """
        try:
            year_record = await self._repository.get_year(year)
            if year_record is None:
                logger.info("Year record not found: %s", year)
                return None
            village = await self._repository.get_village(lgd_code, year_record.id)
            logger.debug("Village info found for %s/%s: %s", lgd_code, year, village is not None)
            return village
        except Exception:
            logger.exception("Error fetching village info for %s/%s", lgd_code, year)
            return None

    async def list_years(self) -> list[YearData]:
        return await self._repository.list_years()
