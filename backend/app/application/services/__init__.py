from .village_info_service import VillageInfoService
from .village_master_service import VillageMasterService

__all__ = [
    "VillageInfoService",
    "VillageMasterService",
]
