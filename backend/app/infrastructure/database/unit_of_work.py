"""SQLAlchemy implementation of the UnitOfWork port."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import UnitOfWork


class SQLAlchemyUnitOfWork(UnitOfWork):
    """Wraps a block of work in ``session.begin()``.

    If the session already holds an open transaction the block runs in a
    SAVEPOINT instead, and the outer owner decides when to commit.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        if self._session.in_transaction():
            async with self._session.begin_nested():
                yield
        else:
            async with self._session.begin():
                yield
