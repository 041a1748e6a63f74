from __future__ import annotations

from materials_explorer.domain.material import MaterialRecord
from materials_explorer.ports.catalog_loader import CatalogLoader


class InMemoryCatalogLoader(CatalogLoader):
    """
    Canonical contract implementation for tests.

    - Returns records in insertion order
    - Records are already domain objects, so there is nothing to validate
    """

    def __init__(self, records: list[MaterialRecord]) -> None:
        self._records = list(records)

    def load(self) -> list[MaterialRecord]:
        return list(self._records)
