"""Shared fixtures — a throwaway SQLite database per test."""

import pytest_asyncio

from app.infrastructure.database import Base, build_engine, build_session_factory


@pytest_asyncio.fixture
async def session_factory(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'gram_panchayat.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield build_session_factory(engine)
    finally:
        await engine.dispose()
