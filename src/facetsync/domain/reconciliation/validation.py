"""Pre-validation of routing snapshots before reconciliation.

The reconciler assumes two invariants it never checks itself:
- the observed routing table serves each selector from exactly one module
- desired modules claim pairwise disjoint selector sets

This stage reports violations of those invariants (plus duplicate module names
and collisions with selectors the proxy implements itself) as a typed result so
callers can refuse to compute or apply a plan.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

from facetsync.domain.types import normalize_selectors

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from facetsync.domain.types import DesiredModuleRecord, ObservedModuleRecord, Selector

log = getLogger(__name__)


class IssueKind(StrEnum):
    """Categories of snapshot invariant violations."""

    DUPLICATE_OBSERVED_SELECTOR = "duplicate_observed_selector"
    OVERLAPPING_DESIRED_SELECTOR = "overlapping_desired_selector"
    DUPLICATE_MODULE_NAME = "duplicate_module_name"
    RESERVED_SELECTOR_CONFLICT = "reserved_selector_conflict"


@dataclass(slots=True, frozen=True, kw_only=True)
class ValidationIssue:
    kind: IssueKind
    message: str
    selector: Selector | None = None
    owners: tuple[str, ...] = ()


@dataclass(slots=True, frozen=True)
class ValidationResult:
    """Outcome of snapshot validation; empty ``issues`` means valid."""

    issues: tuple[ValidationIssue, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.issues

    def of_kind(self, kind: IssueKind) -> tuple[ValidationIssue, ...]:
        return tuple(issue for issue in self.issues if issue.kind is kind)

    def merged(self, other: ValidationResult) -> ValidationResult:
        return ValidationResult(self.issues + other.issues)

    def raise_for_issues(self) -> None:
        if self.issues:
            raise SnapshotValidationError(self)


class SnapshotValidationError(ValueError):
    """Raised when a snapshot violates a reconciliation precondition."""

    def __init__(self, result: ValidationResult) -> None:
        messages = "; ".join(issue.message for issue in result.issues)
        super().__init__(f"Invalid routing snapshot: {messages}")
        self.result = result


def validate_observed(observed: Sequence[ObservedModuleRecord]) -> ValidationResult:
    """Report selectors the observed routing table lists more than once."""

    owners: dict[Selector, str] = {}
    issues: list[ValidationIssue] = []
    for record in observed:
        for selector in record.selectors:
            first = owners.get(selector)
            if first is None:
                owners[selector] = record.address
                continue
            issues.append(
                ValidationIssue(
                    kind=IssueKind.DUPLICATE_OBSERVED_SELECTOR,
                    selector=selector,
                    owners=(first, record.address),
                    message=f"Selector {selector} served by both {first} and {record.address}",
                )
            )
    return ValidationResult(tuple(issues))


def validate_desired(
    desired: Sequence[DesiredModuleRecord],
    *,
    reserved: Iterable[Selector] = (),
) -> ValidationResult:
    """Report duplicate names, overlapping claims and reserved-selector conflicts."""

    issues: list[ValidationIssue] = []
    seen_names: set[str] = set()
    owners: dict[Selector, str] = {}
    for record in desired:
        if record.name in seen_names:
            issues.append(
                ValidationIssue(
                    kind=IssueKind.DUPLICATE_MODULE_NAME,
                    owners=(record.name,),
                    message=f"Module {record.name} declared more than once",
                )
            )
        seen_names.add(record.name)

        for selector in record.selectors:
            first = owners.get(selector)
            if first is None:
                owners[selector] = record.name
                continue
            issues.append(
                ValidationIssue(
                    kind=IssueKind.OVERLAPPING_DESIRED_SELECTOR,
                    selector=selector,
                    owners=(first, record.name),
                    message=(
                        f"Duplicate selector {selector} found in both {first} and {record.name}"
                    ),
                )
            )

    for selector in dict.fromkeys(normalize_selectors(reserved)):
        owner = owners.get(selector)
        if owner is None:
            continue
        issues.append(
            ValidationIssue(
                kind=IssueKind.RESERVED_SELECTOR_CONFLICT,
                selector=selector,
                owners=(owner,),
                message=f"Selector {selector} is implemented by the proxy and claimed by {owner}",
            )
        )
    return ValidationResult(tuple(issues))


def validate_snapshots(
    observed: Sequence[ObservedModuleRecord],
    desired: Sequence[DesiredModuleRecord],
    *,
    reserved: Iterable[Selector] = (),
) -> ValidationResult:
    """Run every snapshot check and log each issue found."""

    result = validate_observed(observed).merged(validate_desired(desired, reserved=reserved))
    for issue in result.issues:
        log.error(issue.message)
    return result
