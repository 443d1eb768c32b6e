"""Selector-keyed lookup over an observed routing table."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping, Sequence

    from facetsync.domain.types import (
        Address,
        ContentFingerprint,
        ObservedModuleRecord,
        Selector,
    )


@dataclass(slots=True, frozen=True)
class IndexEntry:
    """Provenance of one routed selector."""

    fingerprint: ContentFingerprint
    address: Address


@dataclass(slots=True, frozen=True)
class RoutingIndex:
    """Read-only mapping from selector to the module currently serving it.

    Records are kept in their observed order for removal planning.
    """

    entries: Mapping[Selector, IndexEntry] = field(default_factory=dict["Selector", "IndexEntry"])
    records: tuple[ObservedModuleRecord, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def __contains__(self, selector: object) -> bool:
        return selector in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, selector: Selector) -> IndexEntry | None:
        return self.entries.get(selector)

    def fingerprint_for(self, selector: Selector) -> ContentFingerprint | None:
        entry = self.entries.get(selector)
        return entry.fingerprint if entry is not None else None

    def iter_routed(self) -> Iterator[Selector]:
        """Yield every routed selector record by record, in observed order."""

        for record in self.records:
            yield from record.selectors


def build_routing_index(observed: Sequence[ObservedModuleRecord]) -> RoutingIndex:
    """Index ``observed`` by selector in a single pass.

    Assumes each selector is served by at most one record; run
    :func:`facetsync.domain.reconciliation.validation.validate_observed` first
    when that is not guaranteed by the producer.
    """

    entries: dict[Selector, IndexEntry] = {}
    for record in observed:
        entry = IndexEntry(fingerprint=record.fingerprint, address=record.address)
        for selector in record.selectors:
            entries[selector] = entry
    return RoutingIndex(entries=entries, records=tuple(observed))
