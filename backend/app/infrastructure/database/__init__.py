from .base import Base
from .session import engine, async_session_factory, build_engine, build_session_factory, get_db_session
from .unit_of_work import SQLAlchemyUnitOfWork
from .models import SansadModel, VillageInfoModel, YearDataModel

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "build_engine",
    "build_session_factory",
    "get_db_session",
    "SQLAlchemyUnitOfWork",
    "SansadModel",
    "VillageInfoModel",
    "YearDataModel",
]
