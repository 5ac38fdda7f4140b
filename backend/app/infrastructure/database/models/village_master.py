"""SQLAlchemy ORM models for Sansad and Mouza master data."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.database.base import Base


class SansadModel(Base):
    """ORM model — maps to the 'sansads' table."""

    __tablename__ = "sansads"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    sansad_name: Mapped[str] = mapped_column(String(255), nullable=False)
    sansad_number: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<SansadModel(id={self.id}, number='{self.sansad_number}')>"


class MouzaModel(Base):
    """ORM model — maps to the 'mouzas' table."""

    __tablename__ = "mouzas"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    jl_no: Mapped[str] = mapped_column(String(50), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<MouzaModel(id={self.id}, name='{self.name}', jl_no='{self.jl_no}')>"
