"""Domain entities for village master data — Sansads and Mouzas."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4


@dataclass
class Sansad:
    """A Gram Panchayat constituency, identified by a unique number."""

    sansad_name: str
    sansad_number: str
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(self, sansad_name: str | None = None, sansad_number: str | None = None) -> None:
        if sansad_name is not None:
            self.sansad_name = sansad_name
        if sansad_number is not None:
            self.sansad_number = sansad_number
        self.updated_at = datetime.now(timezone.utc)


@dataclass
class Mouza:
    """A revenue village (mouza) with its jurisdiction list number."""

    name: str
    jl_no: str
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
