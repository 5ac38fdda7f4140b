from .village_info_repository import SQLAlchemyVillageInfoRepository
from .village_master_repository import SQLAlchemyMouzaRepository, SQLAlchemySansadRepository

__all__ = [
    "SQLAlchemyVillageInfoRepository",
    "SQLAlchemyMouzaRepository",
    "SQLAlchemySansadRepository",
]
