"""Reconciliation core for routing proxies.

Flow for one run:
1) index the observed routing table by selector
2) classify each desired module's selectors (unchanged / add / replace)
3) assemble the global plan (removals, deploy ordering)

Validation, annotation and cut building sit beside the core and are never
called by it.
"""

from __future__ import annotations

from .annotate import UNKNOWN_SIGNATURE, AnnotatedPlan, annotate_plan
from .assemble import assemble_plan, deploy_order, removed_selectors
from .cuts import CutAction, ModuleCut, PlanError, build_module_cuts
from .differ import ModuleDiff, diff_module
from .engine import reconcile
from .index import IndexEntry, RoutingIndex, build_routing_index
from .plan import EditPlan
from .validation import (
    IssueKind,
    SnapshotValidationError,
    ValidationIssue,
    ValidationResult,
    validate_desired,
    validate_observed,
    validate_snapshots,
)

__all__ = [
    "UNKNOWN_SIGNATURE",
    "AnnotatedPlan",
    "CutAction",
    "EditPlan",
    "IndexEntry",
    "IssueKind",
    "ModuleCut",
    "ModuleDiff",
    "PlanError",
    "RoutingIndex",
    "SnapshotValidationError",
    "ValidationIssue",
    "ValidationResult",
    "annotate_plan",
    "assemble_plan",
    "build_module_cuts",
    "build_routing_index",
    "deploy_order",
    "diff_module",
    "reconcile",
    "removed_selectors",
    "validate_desired",
    "validate_observed",
    "validate_snapshots",
]
