from __future__ import annotations

import logging

from materials_explorer.domain.catalog import CatalogStore
from materials_explorer.ports.catalog_loader import CatalogLoader

logger = logging.getLogger(__name__)


class LoadCatalog:
    """
    Loads the catalog once and freezes it into a CatalogStore.

    No partial catalog is ever produced: a LoadError from the loader, or from
    duplicate ids detected by the store, propagates to the caller unchanged.
    """

    def __init__(self, catalog_loader: CatalogLoader) -> None:
        self._loader = catalog_loader

    def execute(self) -> CatalogStore:
        """
        Raises:
            LoadError: If any record is malformed or ids are not unique
        """
        catalog = CatalogStore(self._loader.load())
        logger.info(
            "Catalog loaded",
            extra={"loader": type(self._loader).__name__, "records": len(catalog)},
        )
        return catalog
