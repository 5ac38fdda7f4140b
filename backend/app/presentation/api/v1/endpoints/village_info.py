"""Village information endpoints — tab submissions and lookups."""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import JSONResponse

from app.application.schemas import (
    ActionFailure,
    ActionSuccess,
    VillageInfoResponse,
    VillageInfoSubmit,
    YearDataResponse,
)
from app.application.services import VillageInfoService
from app.domain.entities import ErrorCode
from app.infrastructure.dependencies import get_village_info_service

router = APIRouter(prefix="/village-info", tags=["Village Information"])

_FAILURE_STATUS: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCode.INVALID_CATEGORY: status.HTTP_400_BAD_REQUEST,
    ErrorCode.DUPLICATE_ENTRY: status.HTTP_409_CONFLICT,
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.UNKNOWN_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@router.post(
    "",
    response_model=ActionSuccess,
    responses={
        400: {"model": ActionFailure},
        404: {"model": ActionFailure},
        409: {"model": ActionFailure},
        422: {"model": ActionFailure},
        500: {"model": ActionFailure},
    },
)
async def submit_village_info(
    submission: VillageInfoSubmit,
    service: VillageInfoService = Depends(get_village_info_service),
):
    """Create or update a village for (lgd_code, year) and save one category tab."""
    result = await service.upsert_village_info(
        submission.core,
        submission.category,
        submission.data,
        is_draft=submission.is_draft,
    )
    if result.success:
        return ActionSuccess(
            data=VillageInfoResponse.model_validate(result.data, from_attributes=True),
            message=result.message,
        )
    failure = ActionFailure(
        errors=result.errors or {},
        message=result.message,
        code=result.code.value,
    )
    return JSONResponse(
        status_code=_FAILURE_STATUS[result.code],
        content=failure.model_dump(mode="json"),
    )


@router.get("/years", response_model=list[YearDataResponse])
async def list_years(
    service: VillageInfoService = Depends(get_village_info_service),
) -> list[YearDataResponse]:
    """Reporting years that already hold village data."""
    years = await service.list_years()
    return [YearDataResponse.model_validate(y, from_attributes=True) for y in years]


@router.get("/{lgd_code}", response_model=VillageInfoResponse)
async def get_village_info(
    lgd_code: int,
    year: str = Query(..., min_length=1, description="Reporting year label, e.g. 2023-24"),
    service: VillageInfoService = Depends(get_village_info_service),
) -> VillageInfoResponse:
    """Retrieve a village with every category section for one year."""
    village = await service.get_village_info(lgd_code, year)
    if village is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No village information for LGD code {lgd_code} in {year}",
        )
    return VillageInfoResponse.model_validate(village, from_attributes=True)
