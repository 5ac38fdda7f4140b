"""Sansad and Mouza master data endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from app.application.schemas import (
    MouzaCreate,
    MouzaResponse,
    SansadCreate,
    SansadResponse,
    SansadUpdate,
)
from app.application.services import VillageMasterService
from app.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from app.infrastructure.dependencies import get_village_master_service

router = APIRouter(tags=["Village Master Data"])


@router.get("/sansads", response_model=list[SansadResponse])
async def list_sansads(
    service: VillageMasterService = Depends(get_village_master_service),
) -> list[SansadResponse]:
    """Retrieve all Sansads ordered by number."""
    sansads = await service.list_sansads()
    return [SansadResponse.model_validate(s, from_attributes=True) for s in sansads]


@router.post("/sansads", response_model=SansadResponse, status_code=status.HTTP_201_CREATED)
async def add_sansad(
    data: SansadCreate,
    service: VillageMasterService = Depends(get_village_master_service),
) -> SansadResponse:
    """Register a new Sansad. The Sansad number must be unique."""
    try:
        sansad = await service.add_sansad(data)
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return SansadResponse.model_validate(sansad, from_attributes=True)


@router.put("/sansads/{sansad_id}", response_model=SansadResponse)
async def update_sansad(
    sansad_id: str,
    data: SansadUpdate,
    service: VillageMasterService = Depends(get_village_master_service),
) -> SansadResponse:
    """Update a Sansad's name or number."""
    try:
        sansad = await service.update_sansad(sansad_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return SansadResponse.model_validate(sansad, from_attributes=True)


@router.delete("/sansads/{sansad_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_sansad(
    sansad_id: str,
    service: VillageMasterService = Depends(get_village_master_service),
) -> None:
    """Delete a Sansad by ID."""
    try:
        await service.delete_sansad(sansad_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/mouzas", response_model=list[MouzaResponse])
async def list_mouzas(
    service: VillageMasterService = Depends(get_village_master_service),
) -> list[MouzaResponse]:
    """Retrieve all Mouzas ordered by name."""
    mouzas = await service.list_mouzas()
    return [MouzaResponse.model_validate(m, from_attributes=True) for m in mouzas]


@router.post("/mouzas", response_model=MouzaResponse, status_code=status.HTTP_201_CREATED)
async def add_mouza(
    data: MouzaCreate,
    service: VillageMasterService = Depends(get_village_master_service),
) -> MouzaResponse:
    """Register a new Mouza."""
    mouza = await service.add_mouza(data)
    return MouzaResponse.model_validate(mouza, from_attributes=True)
