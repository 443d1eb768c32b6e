"""Attach human-readable function signatures to plan selectors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from facetsync.domain.types import ModuleName, Selector

    from .plan import EditPlan

UNKNOWN_SIGNATURE = "unknown"

type SignedSelector = tuple[Selector, str]


@dataclass(slots=True, frozen=True, kw_only=True)
class AnnotatedPlan:
    """An :class:`EditPlan` whose add/replace selectors carry their signatures."""

    add: Mapping[ModuleName, tuple[SignedSelector, ...]] = field(
        default_factory=dict["ModuleName", "tuple[SignedSelector, ...]"]
    )
    replace: Mapping[ModuleName, tuple[SignedSelector, ...]] = field(
        default_factory=dict["ModuleName", "tuple[SignedSelector, ...]"]
    )
    remove: tuple[Selector, ...] = ()
    deploy_targets: tuple[ModuleName, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return {
            "add": _entries_to_dict(self.add),
            "replace": _entries_to_dict(self.replace),
            "remove": list(self.remove),
            "deploy_targets": list(self.deploy_targets),
        }


def annotate_plan(plan: EditPlan, signatures: Mapping[Selector, str]) -> AnnotatedPlan:
    def sign(
        actions: Mapping[ModuleName, tuple[Selector, ...]],
    ) -> dict[ModuleName, tuple[SignedSelector, ...]]:
        return {
            name: tuple(
                (selector, signatures.get(selector, UNKNOWN_SIGNATURE)) for selector in selectors
            )
            for name, selectors in actions.items()
        }

    return AnnotatedPlan(
        add=sign(plan.add),
        replace=sign(plan.replace),
        remove=plan.remove,
        deploy_targets=plan.deploy_targets,
    )


def _entries_to_dict(
    actions: Mapping[ModuleName, tuple[SignedSelector, ...]],
) -> dict[str, list[list[str]]]:
    return {
        name: [[selector, signature] for selector, signature in entries]
        for name, entries in actions.items()
    }
