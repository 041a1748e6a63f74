"""Facet predicates.

Every predicate is an independent, side-effect-free record -> bool test, so
they can be reordered, short-circuited or indexed without changing results.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from materials_explorer.domain.facets import ALL, MetalFilter, NumericRange, RangeFacetSpec
from materials_explorer.domain.material import MaterialRecord

RecordTest = Callable[[MaterialRecord], bool]


@dataclass(frozen=True, slots=True)
class Predicate:
    """A named record test, one per active facet."""

    facet: str
    test: RecordTest

    def __call__(self, record: MaterialRecord) -> bool:
        return self.test(record)


def text_predicate(query: str) -> Predicate:
    """
    Case-insensitive match on id, formula and chemical system (substring),
    or on an element symbol (exact). An empty query matches everything.
    """
    needle = query.strip().lower()

    def test(record: MaterialRecord) -> bool:
        if not needle:
            return True
        return (
            needle in record.id.lower()
            or needle in record.display_formula.lower()
            or needle in record.chemical_system.lower()
            or any(element.lower() == needle for element in record.elements)
        )

    return Predicate(facet="query", test=test)


def range_predicate(spec: RangeFacetSpec, committed: NumericRange) -> Predicate:
    """Inclusive range test; a record without the field always passes."""

    def test(record: MaterialRecord) -> bool:
        value = spec.accessor(record)
        if value is None:
            return True
        return committed.contains(value)

    return Predicate(facet=spec.name, test=test)


def categorical_predicate(
    facet: str, accessor: Callable[[MaterialRecord], str | None], selected: str
) -> Predicate:
    def test(record: MaterialRecord) -> bool:
        return selected == ALL or accessor(record) == selected

    return Predicate(facet=facet, test=test)


def toggle_predicate(
    facet: str, accessor: Callable[[MaterialRecord], bool | None], active: bool
) -> Predicate:
    """Inactive toggles pass everything; active ones require the flag to be True."""

    def test(record: MaterialRecord) -> bool:
        return not active or accessor(record) is True

    return Predicate(facet=facet, test=test)


def metal_predicate(selected: MetalFilter) -> Predicate:
    def test(record: MaterialRecord) -> bool:
        if selected is MetalFilter.ANY:
            return True
        if record.is_metal is None:
            return False
        return record.is_metal is (selected is MetalFilter.METAL)

    return Predicate(facet="metal", test=test)


def all_of(predicates: list[Predicate]) -> RecordTest:
    """Logical AND of predicates; the empty conjunction matches everything."""

    def test(record: MaterialRecord) -> bool:
        return all(predicate(record) for predicate in predicates)

    return test
