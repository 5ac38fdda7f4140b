from .village_info import VillageInfo, VillageInfoCategory, VillageSection, YearData
from .village_master import Mouza, Sansad
from .operation_result import ErrorCode, OperationResult

__all__ = [
    "VillageInfo",
    "VillageInfoCategory",
    "VillageSection",
    "YearData",
    "Mouza",
    "Sansad",
    "ErrorCode",
    "OperationResult",
]
