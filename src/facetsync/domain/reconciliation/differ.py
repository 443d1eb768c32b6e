"""Per-module classification of declared selectors against the routing index."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from facetsync.domain.types import DesiredModuleRecord, ModuleName, Selector

    from .index import RoutingIndex


@dataclass(slots=True, frozen=True, kw_only=True)
class ModuleDiff:
    """Selectors one desired module must newly claim or take over."""

    name: ModuleName
    add: tuple[Selector, ...] = ()
    replace: tuple[Selector, ...] = ()

    @property
    def is_unchanged(self) -> bool:
        return not self.add and not self.replace


def diff_module(desired: DesiredModuleRecord, index: RoutingIndex) -> ModuleDiff:
    """Classify every selector of ``desired`` in declaration order.

    Provenance is checked per selector, not per module; a partially migrated
    routing table yields a replace for each stale selector only.
    """

    add: list[Selector] = []
    replace: list[Selector] = []
    for selector in desired.selectors:
        current = index.fingerprint_for(selector)
        if current is None:
            add.append(selector)
        elif current != desired.fingerprint:
            replace.append(selector)
    return ModuleDiff(name=desired.name, add=tuple(add), replace=tuple(replace))
