from __future__ import annotations

from typing import Any

from sqlalchemy import JSON, Boolean, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from materials_explorer.infra.db.models.base import Base


class MaterialRow(Base):
    """
    One catalog record.

    Column names follow the catalog export format so a row can be validated by
    the same schema as a JSON record. Nested objects are stored as JSON.
    """

    __tablename__ = "materials"

    material_id: Mapped[str] = mapped_column(String(32), primary_key=True)
    # Catalog order; filter results follow it
    position: Mapped[int] = mapped_column(Integer, nullable=False, unique=True, index=True)

    formula_pretty: Mapped[str] = mapped_column(String(100), nullable=False)
    elements: Mapped[list[str]] = mapped_column(JSON, nullable=False)
    chemsys: Mapped[str] = mapped_column(String(100), nullable=False)

    density: Mapped[float] = mapped_column(Float, nullable=False)
    volume: Mapped[float] = mapped_column(Float, nullable=False)
    nsites: Mapped[int] = mapped_column(Integer, nullable=False)
    symmetry: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)

    universal_anisotropy: Mapped[float] = mapped_column(Float, nullable=False)
    homogeneous_poisson: Mapped[float] = mapped_column(Float, nullable=False)
    elasticity: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
    validation: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)

    band_gap: Mapped[float | None] = mapped_column(Float, nullable=True)
    formation_energy_per_atom: Mapped[float | None] = mapped_column(Float, nullable=True)
    is_stable: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    is_metal: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
