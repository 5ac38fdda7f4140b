"""Application service (use case) for Sansad and Mouza master data."""

from app.application.interfaces import MouzaRepository, SansadRepository
from app.application.schemas.village_master import MouzaCreate, SansadCreate, SansadUpdate
from app.domain.entities import Mouza, Sansad
from app.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from app.infrastructure.logging.colored_logger import PipelineLogger, PipelineStage

plog = PipelineLogger("VillageMasterService")


class VillageMasterService:
    """Orchestrates Sansad and Mouza CRUD. Depends on the repository ports (DI)."""

    def __init__(self, sansad_repository: SansadRepository, mouza_repository: MouzaRepository):
        self._sansads = sansad_repository
        self._mouzas = mouza_repository

    async def get_sansad(self, sansad_id: str) -> Sansad:
        sansad = await self._sansads.get_by_id(sansad_id)
        if sansad is None:
            raise EntityNotFoundError("Sansad", sansad_id)
        return sansad

    async def list_sansads(self) -> list[Sansad]:
        return await self._sansads.get_all()

    async def add_sansad(self, data: SansadCreate) -> Sansad:
        if await self._sansads.get_by_number(data.sansad_number) is not None:
            raise DuplicateEntityError("Sansad", "sansad_number", data.sansad_number)
        sansad = await self._sansads.create(
            Sansad(sansad_name=data.sansad_name, sansad_number=data.sansad_number)
        )
        plog.step_complete(PipelineStage.MASTER_DATA, "Sansad added", number=sansad.sansad_number)
        return sansad

    async def update_sansad(self, sansad_id: str, data: SansadUpdate) -> Sansad:
        sansad = await self.get_sansad(sansad_id)
        if data.sansad_number is not None and data.sansad_number != sansad.sansad_number:
            clash = await self._sansads.get_by_number(data.sansad_number)
            if clash is not None:
                raise DuplicateEntityError("Sansad", "sansad_number", data.sansad_number)
        sansad.update(sansad_name=data.sansad_name, sansad_number=data.sansad_number)
        return await self._sansads.update(sansad)

    async def delete_sansad(self, sansad_id: str) -> bool:
        exists = await self._sansads.get_by_id(sansad_id)
        if exists is None:
            raise EntityNotFoundError("Sansad", sansad_id)
        return await self._sansads.delete(sansad_id)

    async def list_mouzas(self) -> list[Mouza]:
        return await self._mouzas.get_all()

    async def add_mouza(self, data: MouzaCreate) -> Mouza:
        mouza = await self._mouzas.create(Mouza(name=data.name, jl_no=data.jl_no))
        plog.step_complete(PipelineStage.MASTER_DATA, "Mouza added", jl_no=mouza.jl_no)
        return mouza
