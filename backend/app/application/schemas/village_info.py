"""Pydantic DTOs for village information — core key, category payloads, responses.

Every category payload schema accepts the portal's camelCase field names or
the snake_case attribute names, defaults each field so an empty tab is valid,
and rejects negative counts.
"""

from datetime import datetime
from typing import Any, Literal

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    model_validator,
)
from pydantic.alias_generators import to_camel

from app.domain.entities import VillageInfoCategory


# ── Core key ─────────────────────────────────────────────────────────


class VillageCore(BaseModel):
    """Natural key plus display fields of a village record."""

    model_config = ConfigDict(str_strip_whitespace=True)

    lgd_code: int = Field(..., validation_alias=AliasChoices("lgd_code", "lgdcode", "lgdCode"))
    jl_no: int = Field(..., validation_alias=AliasChoices("jl_no", "jlno", "jlNo"))
    name: str = Field(..., min_length=1, max_length=255)
    year: str = Field(..., min_length=1, max_length=20, examples=["2023-24"])


# ── Category payloads ────────────────────────────────────────────────


class _SectionPayload(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PopulationSection(_SectionPayload):
    total_population: int = Field(0, ge=0)
    male_population: int = Field(0, ge=0)
    female_population: int = Field(0, ge=0)
    households: int = Field(0, ge=0)
    sc_population: int = Field(0, ge=0)
    st_population: int = Field(0, ge=0)
    obc_population: int = Field(0, ge=0)
    minority_population: int = Field(0, ge=0)
    child_population: int = Field(0, ge=0)

    @model_validator(mode="after")
    def _check_gender_split(self) -> "PopulationSection":
        if self.total_population and (
            self.male_population + self.female_population > self.total_population
        ):
            raise ValueError(
                "male_population + female_population cannot exceed total_population"
            )
        return self


class EducationSection(_SectionPayload):
    literate_population: int = Field(0, ge=0)
    literate_male: int = Field(0, ge=0)
    literate_female: int = Field(0, ge=0)
    literacy_rate: float = Field(0.0, ge=0, le=100)
    out_of_school_children: int = Field(0, ge=0)
    dropout_children: int = Field(0, ge=0)


class InfrastructureSection(_SectionPayload):
    pucca_road_km: float = Field(0.0, ge=0)
    kutcha_road_km: float = Field(0.0, ge=0)
    electrified_households: int = Field(0, ge=0)
    street_lights: int = Field(0, ge=0)
    community_halls: int = Field(0, ge=0)
    has_post_office: bool = False
    has_bank_branch: bool = False
    has_market: bool = False


class HealthSection(_SectionPayload):
    sub_centres: int = Field(0, ge=0)
    primary_health_centres: int = Field(0, ge=0)
    asha_workers: int = Field(0, ge=0)
    anganwadi_centres: int = Field(0, ge=0)
    institutional_deliveries: int = Field(0, ge=0)
    immunization_coverage: float = Field(0.0, ge=0, le=100)


class SanitationSection(_SectionPayload):
    households_with_toilet: int = Field(0, ge=0)
    community_toilets: int = Field(0, ge=0)
    solid_waste_units: int = Field(0, ge=0)
    drainage_km: float = Field(0.0, ge=0)
    is_odf: bool = False


class WaterSection(_SectionPayload):
    tube_wells: int = Field(0, ge=0)
    piped_water_connections: int = Field(0, ge=0)
    ponds: int = Field(0, ge=0)
    overhead_tanks: int = Field(0, ge=0)
    households_with_tap_water: int = Field(0, ge=0)
    water_quality_tested: bool = False


class EconomicSection(_SectionPayload):
    bpl_households: int = Field(0, ge=0)
    job_card_holders: int = Field(0, ge=0)
    shg_groups: int = Field(0, ge=0)
    shg_members: int = Field(0, ge=0)
    farmers: int = Field(0, ge=0)
    agricultural_labourers: int = Field(0, ge=0)
    average_monthly_income: float = Field(0.0, ge=0)


class EduInstitutionSection(_SectionPayload):
    primary_schools: int = Field(0, ge=0)
    upper_primary_schools: int = Field(0, ge=0)
    secondary_schools: int = Field(0, ge=0)
    higher_secondary_schools: int = Field(0, ge=0)
    colleges: int = Field(0, ge=0)
    madrasahs: int = Field(0, ge=0)
    ssk_msk_centres: int = Field(0, ge=0)


# Adding a category means adding one entry here and one slot in the ORM registry.
SECTION_SCHEMAS: dict[VillageInfoCategory, type[_SectionPayload]] = {
    VillageInfoCategory.POPULATION: PopulationSection,
    VillageInfoCategory.EDUCATION: EducationSection,
    VillageInfoCategory.INFRASTRUCTURE: InfrastructureSection,
    VillageInfoCategory.HEALTH: HealthSection,
    VillageInfoCategory.SANITATION: SanitationSection,
    VillageInfoCategory.WATER: WaterSection,
    VillageInfoCategory.ECONOMIC: EconomicSection,
    VillageInfoCategory.EDU_INSTITUTION: EduInstitutionSection,
}


def flatten_validation_error(error: ValidationError) -> dict[str, Any]:
    """Group pydantic errors by field: ``{"form_errors": [...], "field_errors": {...}}``.

    Model-level errors (empty ``loc``) land in ``form_errors``.
    """
    form_errors: list[str] = []
    field_errors: dict[str, list[str]] = {}
    for item in error.errors():
        loc = item.get("loc") or ()
        message = item.get("msg", "Invalid value")
        if not loc:
            form_errors.append(message)
            continue
        key = ".".join(str(part) for part in loc)
        field_errors.setdefault(key, []).append(message)
    return {"form_errors": form_errors, "field_errors": field_errors}


# ── Requests & responses ─────────────────────────────────────────────


class VillageInfoSubmit(BaseModel):
    """Form submission for a single village information tab.

    ``core`` and ``data`` are validated by the service, not by FastAPI, so
    that every failure comes back in the result shape.
    """

    core: dict[str, Any] = Field(
        ...,
        examples=[{"lgd_code": 100234, "jl_no": 7, "name": "Lakeview", "year": "2023-24"}],
    )
    category: str = Field(..., examples=["population"])
    data: dict[str, Any] = Field(
        default_factory=dict,
        examples=[{"totalPopulation": 5321, "households": 1203}],
    )
    is_draft: bool = False


class VillageSectionResponse(BaseModel):
    id: str
    data: dict[str, Any]
    is_draft: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class VillageInfoResponse(BaseModel):
    """Village record with every category section resolved."""

    id: str
    lgd_code: int
    jl_no: int
    name: str
    year: str
    is_draft: bool
    population: VillageSectionResponse | None = None
    education: VillageSectionResponse | None = None
    infrastructure: VillageSectionResponse | None = None
    health: VillageSectionResponse | None = None
    sanitation: VillageSectionResponse | None = None
    water: VillageSectionResponse | None = None
    economic: VillageSectionResponse | None = None
    edu_institution: VillageSectionResponse | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class YearDataResponse(BaseModel):
    id: str
    label: str

    model_config = {"from_attributes": True}


class ActionSuccess(BaseModel):
    success: Literal[True] = True
    data: VillageInfoResponse
    message: str


class ActionFailure(BaseModel):
    success: Literal[False] = False
    errors: dict[str, Any]
    message: str
    code: str
