"""Port for building the source-of-truth module set."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from facetsync.domain.types import DesiredModuleRecord, Selector


@runtime_checkable
class DesiredStateSource(Protocol):
    """Producer of desired module records and their selector metadata."""

    def __call__(self) -> tuple[DesiredModuleRecord, ...]: ...

    def signatures(self) -> dict[Selector, str]:
        """Map every known selector to its function signature."""
        ...

    def reserved_selectors(self) -> tuple[Selector, ...]:
        """Selectors the proxy implements itself and must never route."""
        ...


__all__ = ["DesiredStateSource"]
