"""JSON file implementation of CatalogLoader."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from materials_explorer.adapters.catalog_schema import parse_records
from materials_explorer.domain.errors import LoadError
from materials_explorer.domain.material import MaterialRecord
from materials_explorer.ports.catalog_loader import CatalogLoader

logger = logging.getLogger(__name__)


class JsonCatalogLoader(CatalogLoader):
    """
    Loads a pre-computed catalog exported as a JSON array.

    - One object per material, Materials Project field names
    - Array order is the catalog order
    - Unreadable files, non-UTF-8 bytes and malformed JSON surface as LoadError
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    def load(self) -> list[MaterialRecord]:
        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise LoadError(f"Cannot read catalog file: {exc.strerror}", path=str(self._path)) from exc
        except UnicodeDecodeError as exc:
            raise LoadError(
                "Catalog file is not valid UTF-8",
                errors=[{"field": f"byte {exc.start}", "message": exc.reason, "code": "INVALID_ENCODING"}],
                path=str(self._path),
            ) from exc
        except json.JSONDecodeError as exc:
            raise LoadError(
                "Catalog file is not valid JSON",
                errors=[{"field": f"line {exc.lineno}", "message": exc.msg, "code": "INVALID_JSON"}],
                path=str(self._path),
            ) from exc

        records = parse_records(payload)
        logger.info("Catalog file parsed", extra={"path": str(self._path), "records": len(records)})
        return records
