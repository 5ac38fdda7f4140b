from .village_info import (
    SECTION_SLOTS,
    SectionSlot,
    VillageEconomicModel,
    VillageEducationModel,
    VillageEduInstitutionModel,
    VillageHealthModel,
    VillageInfoModel,
    VillageInfrastructureModel,
    VillagePopulationModel,
    VillageSanitationModel,
    VillageWaterSupplyModel,
    YearDataModel,
)
from .village_master import MouzaModel, SansadModel

__all__ = [
    "SECTION_SLOTS",
    "SectionSlot",
    "VillageEconomicModel",
    "VillageEducationModel",
    "VillageEduInstitutionModel",
    "VillageHealthModel",
    "VillageInfoModel",
    "VillageInfrastructureModel",
    "VillagePopulationModel",
    "VillageSanitationModel",
    "VillageWaterSupplyModel",
    "YearDataModel",
    "MouzaModel",
    "SansadModel",
]
