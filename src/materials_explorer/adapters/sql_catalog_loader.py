"""SQL implementation of CatalogLoader."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from materials_explorer.adapters.catalog_schema import parse_records
from materials_explorer.domain.material import MaterialRecord
from materials_explorer.infra.db.models.material import MaterialRow
from materials_explorer.ports.catalog_loader import CatalogLoader

logger = logging.getLogger(__name__)


class SqlCatalogLoader(CatalogLoader):
    """
    Loads the catalog from the `materials` table.

    - Reads every row once, ordered by `position`
    - Validates rows with the same schema as the JSON export
    - Filtering never happens in SQL; the whole catalog is held in memory
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize loader with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def load(self) -> list[MaterialRecord]:
        query = select(MaterialRow).order_by(MaterialRow.position)
        rows = self._session.execute(query).scalars().all()

        records = parse_records([self._to_raw(row) for row in rows])
        logger.info("Catalog table read", extra={"records": len(records)})
        return records

    def _to_raw(self, row: MaterialRow) -> dict[str, Any]:
        """Convert a row to the raw record shape expected by the schema."""
        return {
            "material_id": row.material_id,
            "formula_pretty": row.formula_pretty,
            "elements": row.elements,
            "chemsys": row.chemsys,
            "density": row.density,
            "volume": row.volume,
            "nsites": row.nsites,
            "symmetry": row.symmetry,
            "universal_anisotropy": row.universal_anisotropy,
            "homogeneous_poisson": row.homogeneous_poisson,
            "elasticity": row.elasticity,
            "validation": row.validation,
            "band_gap": row.band_gap,
            "formation_energy_per_atom": row.formation_energy_per_atom,
            "is_stable": row.is_stable,
            "is_metal": row.is_metal,
        }
