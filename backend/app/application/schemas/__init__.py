from .village_info import (
    ActionFailure,
    ActionSuccess,
    SECTION_SCHEMAS,
    VillageCore,
    VillageInfoResponse,
    VillageInfoSubmit,
    VillageSectionResponse,
    YearDataResponse,
    flatten_validation_error,
)
from .village_master import (
    MouzaCreate,
    MouzaResponse,
    SansadCreate,
    SansadResponse,
    SansadUpdate,
)

__all__ = [
    "ActionFailure",
    "ActionSuccess",
    "SECTION_SCHEMAS",
    "VillageCore",
    "VillageInfoResponse",
    "VillageInfoSubmit",
    "VillageSectionResponse",
    "YearDataResponse",
    "flatten_validation_error",
    "MouzaCreate",
    "MouzaResponse",
    "SansadCreate",
    "SansadResponse",
    "SansadUpdate",
]
