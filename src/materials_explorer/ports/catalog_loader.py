from __future__ import annotations

from abc import ABC, abstractmethod

from materials_explorer.domain.material import MaterialRecord


class CatalogLoader(ABC):
    """
    Port for loading the material catalog.

    Contract:
        - Returns every record in catalog order
        - Validates records against the MaterialRecord shape before returning
        - Raises LoadError if any record is malformed; never returns a partial catalog
    """

    @abstractmethod
    def load(self) -> list[MaterialRecord]:
        """
        Load the full catalog.

        Returns:
            Records in catalog order

        Raises:
            LoadError: If the source is unreadable or any record is malformed
        """
        ...
