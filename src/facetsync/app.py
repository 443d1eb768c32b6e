"""Application orchestration entry points."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from facetsync.adapters.rpc import LoupeObserver
from facetsync.config import get_reconcile_config
from facetsync.domain.reconciliation import (
    AnnotatedPlan,
    EditPlan,
    ValidationResult,
    annotate_plan,
    reconcile,
    validate_snapshots,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from facetsync.domain.ports import DesiredStateSource, ObservationSource
    from facetsync.domain.types import Address, ObservedModuleRecord


log = getLogger(__name__)


@dataclass(slots=True, frozen=True)
class CheckResult:
    """Validation outcome plus the annotated plan when the snapshots are valid."""

    validation: ValidationResult
    plan: AnnotatedPlan | None = None

    @property
    def ok(self) -> bool:
        return self.validation.is_valid


def observe_routing_table(
    *,
    proxy: Address | None = None,
    observed: Sequence[ObservedModuleRecord] | None = None,
    source: ObservationSource | None = None,
) -> tuple[ObservedModuleRecord, ...]:
    """Return ``observed`` as given, or read the routing table of ``proxy``."""

    if observed is not None:
        return tuple(observed)
    if proxy is None:
        raise ValueError("Either an observed snapshot or a proxy address is required")
    effective_source = source or LoupeObserver(scheme=get_reconcile_config().fingerprint_scheme)
    log.info("Reading routing table of %s", proxy)
    return effective_source(proxy)


def diff_routing_table(
    *,
    desired_source: DesiredStateSource,
    proxy: Address | None = None,
    observed: Sequence[ObservedModuleRecord] | None = None,
    observation_source: ObservationSource | None = None,
) -> EditPlan:
    """Compute the edit plan between the live routing table and the desired modules."""

    observed_records = observe_routing_table(
        proxy=proxy, observed=observed, source=observation_source
    )
    desired_records = desired_source()
    log.info(
        "Diffing %s observed modules against %s desired modules",
        len(observed_records),
        len(desired_records),
    )
    plan = reconcile(observed_records, desired_records)
    log.info(
        f"Plan: add={len(plan.add)} modules, replace={len(plan.replace)} modules, "
        f"remove={len(plan.remove)} selectors, deploy={list(plan.deploy_targets)}"
    )
    return plan


def check_routing_table(
    *,
    desired_source: DesiredStateSource,
    proxy: Address | None = None,
    observed: Sequence[ObservedModuleRecord] | None = None,
    observation_source: ObservationSource | None = None,
) -> CheckResult:
    """Validate both snapshots, then reconcile and annotate if they are consistent."""

    observed_records = observe_routing_table(
        proxy=proxy, observed=observed, source=observation_source
    )
    desired_records = desired_source()
    validation = validate_snapshots(
        observed_records,
        desired_records,
        reserved=desired_source.reserved_selectors(),
    )
    if not validation.is_valid:
        log.warning("Snapshot validation found %s issue(s)", len(validation.issues))
        return CheckResult(validation=validation)

    plan = reconcile(observed_records, desired_records)
    return CheckResult(
        validation=validation,
        plan=annotate_plan(plan, desired_source.signatures()),
    )
