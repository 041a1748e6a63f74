#!/usr/bin/env python3
"""
Import a JSON catalog export into the materials table.

Features:
- Validated: the whole file goes through the catalog schema first; nothing is
  written if a single record is malformed
- Idempotent: safe to run multiple times (clears before importing)
- Order-preserving: array order is stored in the `position` column

Usage:
    python scripts/import_catalog.py path/to/materials.json
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from materials_explorer.adapters.catalog_schema import parse_records
from materials_explorer.domain.catalog import CatalogStore
from materials_explorer.domain.errors import LoadError
from materials_explorer.domain.material import chemical_system_of
from materials_explorer.infra.db.models.material import MaterialRow
from materials_explorer.infra.db.session import get_session


def to_row(raw: dict[str, Any], position: int) -> MaterialRow:
    """Build a row from an already validated raw record."""
    return MaterialRow(
        material_id=raw["material_id"],
        position=position,
        formula_pretty=raw["formula_pretty"],
        elements=raw["elements"],
        chemsys=raw.get("chemsys") or chemical_system_of(raw["elements"]),
        density=raw["density"],
        volume=raw["volume"],
        nsites=raw["nsites"],
        symmetry=raw["symmetry"],
        universal_anisotropy=raw["universal_anisotropy"],
        homogeneous_poisson=raw["homogeneous_poisson"],
        elasticity=raw.get("elasticity"),
        validation=raw.get("validation"),
        band_gap=raw.get("band_gap"),
        formation_energy_per_atom=raw.get("formation_energy_per_atom"),
        is_stable=raw.get("is_stable"),
        is_metal=raw.get("is_metal"),
    )


def import_catalog(path: Path) -> int:
    """
    Replace the materials table with the records of a JSON export.

    Returns:
        Number of imported records

    Raises:
        LoadError: If the export fails validation
    """
    payload = json.loads(path.read_text(encoding="utf-8"))
    # Raises before anything is written
    CatalogStore(parse_records(payload))

    with get_session() as session:
        deleted_count = session.query(MaterialRow).delete()
        print(f"Deleted {deleted_count} existing materials")

        session.add_all([to_row(raw, position) for position, raw in enumerate(payload)])
        session.flush()

    return len(payload)


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print(f"Usage: {sys.argv[0]} <catalog.json>", file=sys.stderr)
        sys.exit(2)

    try:
        count = import_catalog(Path(sys.argv[1]))
    except LoadError as e:
        print(f"Catalog rejected: {e.message}", file=sys.stderr)
        for error in e.errors or []:
            print(f"  {error['field']}: {error['message']}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error importing catalog: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Imported {count} materials")
