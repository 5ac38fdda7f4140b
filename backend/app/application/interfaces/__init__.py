from .unit_of_work import UnitOfWork
from .village_info_repository import VillageInfoRepository
from .village_master_repository import MouzaRepository, SansadRepository

__all__ = [
    "UnitOfWork",
    "VillageInfoRepository",
    "MouzaRepository",
    "SansadRepository",
]
