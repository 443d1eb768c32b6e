"""Translate an edit plan into the proxy's cut instructions.

This is the boundary with execution tooling: once every deploy target has an
address, the cut list can be submitted as one atomic routing-table update.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING

from facetsync.domain.types import ZERO_ADDRESS

if TYPE_CHECKING:
    from collections.abc import Mapping

    from facetsync.domain.types import Address, ModuleName, Selector

    from .plan import EditPlan


class CutAction(IntEnum):
    """Action codes understood by the proxy's cut function."""

    ADD = 0
    REPLACE = 1
    REMOVE = 2


@dataclass(slots=True, frozen=True, kw_only=True)
class ModuleCut:
    address: Address
    action: CutAction
    selectors: tuple[Selector, ...]

    def to_dict(self) -> dict[str, object]:
        return {
            "address": self.address,
            "action": int(self.action),
            "selectors": list(self.selectors),
        }


class PlanError(ValueError):
    """Raised when a plan cannot be turned into cut instructions."""


def build_module_cuts(
    plan: EditPlan,
    addresses: Mapping[ModuleName, Address],
) -> tuple[ModuleCut, ...]:
    """Return ADD cuts, then REPLACE cuts, then a single REMOVE cut.

    ``addresses`` maps every deploy target to its freshly deployed address.
    """

    missing = [name for name in plan.deploy_targets if name not in addresses]
    if missing:
        raise PlanError(f"No deployed address for: {', '.join(missing)}")

    cuts: list[ModuleCut] = [
        ModuleCut(address=addresses[name], action=CutAction.ADD, selectors=selectors)
        for name, selectors in plan.add.items()
    ]
    cuts.extend(
        ModuleCut(address=addresses[name], action=CutAction.REPLACE, selectors=selectors)
        for name, selectors in plan.replace.items()
    )
    if plan.remove:
        # removals must target the zero address
        cuts.append(ModuleCut(address=ZERO_ADDRESS, action=CutAction.REMOVE, selectors=plan.remove))
    return tuple(cuts)
