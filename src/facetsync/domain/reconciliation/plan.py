"""Edit plan value object handed to deployment tooling.

The plan is the contract between:
- reconciliation (pure diff of observed vs desired routing tables)
- annotation/reporting (human-readable output)
- execution (deploy ``deploy_targets``, then apply one atomic cut)

It is produced fresh for every run; ``add`` and ``replace`` are read-only views.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from facetsync.domain.types import ModuleName, Selector


@dataclass(slots=True, frozen=True, kw_only=True)
class EditPlan:
    """Routing-table edits required to reach the desired module set."""

    add: Mapping[ModuleName, tuple[Selector, ...]] = field(
        default_factory=dict["ModuleName", "tuple[Selector, ...]"]
    )
    replace: Mapping[ModuleName, tuple[Selector, ...]] = field(
        default_factory=dict["ModuleName", "tuple[Selector, ...]"]
    )
    remove: tuple[Selector, ...] = ()
    deploy_targets: tuple[ModuleName, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "add", MappingProxyType(dict(self.add)))
        object.__setattr__(self, "replace", MappingProxyType(dict(self.replace)))

    def __hash__(self) -> int:
        return hash(
            (
                frozenset(self.add.items()),
                frozenset(self.replace.items()),
                self.remove,
                self.deploy_targets,
            )
        )

    @property
    def is_empty(self) -> bool:
        return not (self.add or self.replace or self.remove or self.deploy_targets)

    @property
    def selector_count(self) -> int:
        added = sum(len(selectors) for selectors in self.add.values())
        replaced = sum(len(selectors) for selectors in self.replace.values())
        return added + replaced + len(self.remove)

    def to_dict(self) -> dict[str, object]:
        return {
            "add": {name: list(selectors) for name, selectors in self.add.items()},
            "replace": {name: list(selectors) for name, selectors in self.replace.items()},
            "remove": list(self.remove),
            "deploy_targets": list(self.deploy_targets),
        }
