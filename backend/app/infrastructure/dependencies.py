"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.services import VillageInfoService, VillageMasterService
from app.infrastructure.database.session import get_db_session
from app.infrastructure.database.repositories import (
    SQLAlchemyMouzaRepository,
    SQLAlchemySansadRepository,
    SQLAlchemyVillageInfoRepository,
)
from app.infrastructure.database.unit_of_work import SQLAlchemyUnitOfWork


async def get_village_info_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[VillageInfoService, None]:
    """Provides a VillageInfoService bound to one request-scoped session."""
    repository = SQLAlchemyVillageInfoRepository(session)
    yield VillageInfoService(repository, SQLAlchemyUnitOfWork(session))


async def get_village_master_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[VillageMasterService, None]:
    """Provides a VillageMasterService with its repositories wired up."""
    yield VillageMasterService(
        sansad_repository=SQLAlchemySansadRepository(session),
        mouza_repository=SQLAlchemyMouzaRepository(session),
    )
