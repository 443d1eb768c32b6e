"""Entry point of the reconciliation core.

``reconcile`` is a plain function over in-memory snapshots: no I/O, no shared
state, no randomness. Concurrent calls with different inputs never interact.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from .assemble import assemble_plan
from .differ import diff_module
from .index import build_routing_index

if TYPE_CHECKING:
    from collections.abc import Sequence

    from facetsync.domain.types import DesiredModuleRecord, ObservedModuleRecord

    from .plan import EditPlan

log = getLogger(__name__)


def reconcile(
    observed: Sequence[ObservedModuleRecord],
    desired: Sequence[DesiredModuleRecord],
) -> EditPlan:
    """Compute the edits that bring ``observed`` into agreement with ``desired``."""

    index = build_routing_index(observed)
    diffs = [diff_module(record, index) for record in desired]
    plan = assemble_plan(observed, desired, diffs)
    log.debug(
        "Reconciled %s observed / %s desired modules: add=%s, replace=%s, remove=%s, deploy=%s",
        len(observed),
        len(desired),
        sum(len(selectors) for selectors in plan.add.values()),
        sum(len(selectors) for selectors in plan.replace.values()),
        len(plan.remove),
        list(plan.deploy_targets),
    )
    return plan
