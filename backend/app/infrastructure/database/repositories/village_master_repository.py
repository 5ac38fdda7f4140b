"""Concrete repository implementations for Sansad and Mouza backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import MouzaRepository, SansadRepository
from app.domain.entities import Mouza, Sansad
from app.domain.exceptions import DuplicateEntityError
from app.infrastructure.database.errors import conflicting_fields, is_unique_violation
from app.infrastructure.database.models import MouzaModel, SansadModel


class SQLAlchemySansadRepository(SansadRepository):
    """Implements the SansadRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: SansadModel) -> Sansad:
        """Map ORM model → domain entity."""
        return Sansad(
            id=model.id,
            sansad_name=model.sansad_name,
            sansad_number=model.sansad_number,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    async def _flush(self, sansad: Sansad) -> None:
        try:
            await self._session.flush()
        except IntegrityError as exc:
            if is_unique_violation(exc):
                raise DuplicateEntityError(
                    "Sansad", conflicting_fields(exc, ["sansad_number"]), sansad.sansad_number
                ) from exc
            raise

    async def get_by_id(self, sansad_id: str) -> Sansad | None:
        result = await self._session.get(SansadModel, sansad_id)
        return self._to_entity(result) if result else None

    async def get_by_number(self, sansad_number: str) -> Sansad | None:
        result = await self._session.execute(
            select(SansadModel).where(SansadModel.sansad_number == sansad_number)
        )
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[Sansad]:
        result = await self._session.execute(
            select(SansadModel).order_by(SansadModel.sansad_number)
        )
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, sansad: Sansad) -> Sansad:
        model = SansadModel(
            id=sansad.id,
            sansad_name=sansad.sansad_name,
            sansad_number=sansad.sansad_number,
            created_at=sansad.created_at,
            updated_at=sansad.updated_at,
        )
        self._session.add(model)
        await self._flush(sansad)
        return self._to_entity(model)

    async def update(self, sansad: Sansad) -> Sansad:
        model = await self._session.get(SansadModel, sansad.id)
        if model is None:
            raise ValueError(f"Sansad {sansad.id} not found in database")
        model.sansad_name = sansad.sansad_name
        model.sansad_number = sansad.sansad_number
        model.updated_at = sansad.updated_at
        await self._flush(sansad)
        return self._to_entity(model)

    async def delete(self, sansad_id: str) -> bool:
        model = await self._session.get(SansadModel, sansad_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True


class SQLAlchemyMouzaRepository(MouzaRepository):
    """Implements the MouzaRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: MouzaModel) -> Mouza:
        return Mouza(id=model.id, name=model.name, jl_no=model.jl_no, created_at=model.created_at)

    async def get_all(self) -> list[Mouza]:
        result = await self._session.execute(select(MouzaModel).order_by(MouzaModel.name))
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, mouza: Mouza) -> Mouza:
        model = MouzaModel(
            id=mouza.id,
            name=mouza.name,
            jl_no=mouza.jl_no,
            created_at=mouza.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)
