"""Aggregate per-module diffs into one global edit plan."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .plan import EditPlan

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from facetsync.domain.types import (
        DesiredModuleRecord,
        ModuleName,
        ObservedModuleRecord,
        Selector,
    )

    from .differ import ModuleDiff


def assemble_plan(
    observed: Sequence[ObservedModuleRecord],
    desired: Sequence[DesiredModuleRecord],
    diffs: Iterable[ModuleDiff],
) -> EditPlan:
    """Combine ``diffs`` into an :class:`EditPlan`.

    Diffs are matched to desired records by module name, so they may arrive in
    any order. Output order follows the desired snapshot for ``add``/``replace``
    and the observed snapshot for ``remove``.
    """

    diffs_by_name = {diff.name: diff for diff in diffs}

    add: dict[ModuleName, tuple[Selector, ...]] = {}
    replace: dict[ModuleName, tuple[Selector, ...]] = {}
    for record in desired:
        diff = diffs_by_name.get(record.name)
        if diff is None:
            continue
        if diff.add:
            add[record.name] = diff.add
        if diff.replace:
            replace[record.name] = diff.replace

    return EditPlan(
        add=add,
        replace=replace,
        remove=removed_selectors(observed, desired),
        deploy_targets=deploy_order(add, replace),
    )


def removed_selectors(
    observed: Sequence[ObservedModuleRecord],
    desired: Sequence[DesiredModuleRecord],
) -> tuple[Selector, ...]:
    """Return routed selectors no desired module claims, in observed order."""

    claimed = {selector for record in desired for selector in record.selectors}
    return tuple(
        selector
        for record in observed
        for selector in record.selectors
        if selector not in claimed
    )


def deploy_order(
    add: dict[ModuleName, tuple[Selector, ...]],
    replace: dict[ModuleName, tuple[Selector, ...]],
) -> tuple[ModuleName, ...]:
    """Modules needing fresh code: ``add`` order first, then replace-only names."""

    return tuple(dict.fromkeys((*add, *replace)))
