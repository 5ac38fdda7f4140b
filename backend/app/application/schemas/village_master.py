"""Pydantic DTOs for Sansad and Mouza master data."""

from datetime import datetime

from pydantic import BaseModel, Field


class SansadCreate(BaseModel):
    """Schema for registering a new Sansad."""

    sansad_name: str = Field(..., min_length=1, max_length=255, examples=["Uttar Para"])
    sansad_number: str = Field(..., min_length=1, max_length=50, examples=["12"])


class SansadUpdate(BaseModel):
    """Schema for updating a Sansad — all fields optional."""

    sansad_name: str | None = Field(None, min_length=1, max_length=255)
    sansad_number: str | None = Field(None, min_length=1, max_length=50)


class SansadResponse(BaseModel):
    id: str
    sansad_name: str
    sansad_number: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class MouzaCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, examples=["Dakshin Gobindapur"])
    jl_no: str = Field(..., min_length=1, max_length=50, examples=["45"])


class MouzaResponse(BaseModel):
    id: str
    name: str
    jl_no: str
    created_at: datetime

    model_config = {"from_attributes": True}
