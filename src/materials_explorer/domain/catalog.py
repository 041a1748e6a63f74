from __future__ import annotations

from collections.abc import Iterable, Iterator

from materials_explorer.domain.errors import LoadError
from materials_explorer.domain.material import MaterialRecord


class CatalogStore:
    """
    Immutable, ordered, in-memory catalog.

    - Loaded once; shared read-only by every session
    - Preserves load order (the order every filter result follows)
    - Rejects duplicate ids at construction
    """

    __slots__ = ("_records", "_by_id")

    def __init__(self, records: Iterable[MaterialRecord]) -> None:
        self._records: tuple[MaterialRecord, ...] = tuple(records)
        self._by_id: dict[str, MaterialRecord] = {}

        errors = []
        for index, record in enumerate(self._records):
            if record.id in self._by_id:
                errors.append(
                    {
                        "field": f"[{index}].material_id",
                        "message": f"Duplicate material id '{record.id}'",
                        "code": "DUPLICATE_ID",
                    }
                )
            self._by_id.setdefault(record.id, record)

        if errors:
            raise LoadError("Catalog contains duplicate material ids", errors=errors)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[MaterialRecord]:
        return iter(self._records)

    def __getitem__(self, index: int) -> MaterialRecord:
        return self._records[index]

    def __contains__(self, material_id: object) -> bool:
        return material_id in self._by_id

    @property
    def records(self) -> tuple[MaterialRecord, ...]:
        return self._records

    def get(self, material_id: str) -> MaterialRecord | None:
        return self._by_id.get(material_id)
