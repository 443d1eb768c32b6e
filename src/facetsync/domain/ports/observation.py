"""Port for reading the live routing table of a proxy."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from facetsync.domain.types import Address, ObservedModuleRecord


@runtime_checkable
class ObservationSource(Protocol):
    """Callable port returning the modules currently routed by ``proxy``.

    Implementations must return each selector under exactly one record.
    """

    def __call__(self, proxy: Address) -> tuple[ObservedModuleRecord, ...]: ...


__all__ = ["ObservationSource"]
