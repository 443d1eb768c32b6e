"""JSON snapshot files for offline reconciliation.

Observed snapshots may be a loupe dump (``facetAddress``/``functionSelectors``)
or the normalized record layout; desired snapshots accept ``facet`` for the
module name. ``bytecodeHash`` is accepted for the fingerprint in both.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from facetsync.domain.ports.desired import DesiredStateSource
from facetsync.domain.types import DesiredModuleRecord, ObservedModuleRecord

if TYPE_CHECKING:
    from pathlib import Path

    from facetsync.domain.reconciliation import AnnotatedPlan, EditPlan
    from facetsync.domain.types import Selector


class SnapshotFileError(ValueError):
    """Raised when a snapshot file cannot be read or does not match its schema."""


class SnapshotBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ObservedRecordPayload(SnapshotBaseModel):
    address: str = Field(validation_alias=AliasChoices("address", "facetAddress"))
    selectors: list[str] = Field(validation_alias=AliasChoices("selectors", "functionSelectors"))
    fingerprint: str = Field(validation_alias=AliasChoices("fingerprint", "bytecodeHash"))


class DesiredRecordPayload(SnapshotBaseModel):
    name: str = Field(validation_alias=AliasChoices("name", "facet"))
    selectors: list[str]
    fingerprint: str = Field(validation_alias=AliasChoices("fingerprint", "bytecodeHash"))


_observed_adapter = TypeAdapter(list[ObservedRecordPayload])
_desired_adapter = TypeAdapter(list[DesiredRecordPayload])


def _read_json(path: Path) -> object:
    try:
        with path.open(encoding="utf-8") as handle:
            return json.load(handle)
    except (OSError, json.JSONDecodeError) as exc:
        raise SnapshotFileError(f"Cannot read snapshot {path}: {exc}") from exc


def load_observed_snapshot(path: Path) -> tuple[ObservedModuleRecord, ...]:
    try:
        payloads = _observed_adapter.validate_python(_read_json(path))
        return tuple(
            ObservedModuleRecord(
                address=payload.address,
                selectors=tuple(payload.selectors),
                fingerprint=payload.fingerprint,
            )
            for payload in payloads
        )
    except (ValidationError, ValueError) as exc:
        raise SnapshotFileError(f"Invalid observed snapshot {path}: {exc}") from exc


def load_desired_snapshot(path: Path) -> tuple[DesiredModuleRecord, ...]:
    try:
        payloads = _desired_adapter.validate_python(_read_json(path))
        return tuple(
            DesiredModuleRecord(
                name=payload.name,
                selectors=tuple(payload.selectors),
                fingerprint=payload.fingerprint,
            )
            for payload in payloads
        )
    except (ValidationError, ValueError) as exc:
        raise SnapshotFileError(f"Invalid desired snapshot {path}: {exc}") from exc


def dump_plan(plan: EditPlan | AnnotatedPlan) -> str:
    return json.dumps(plan.to_dict(), indent=2)


@dataclass(slots=True)
class StaticDesiredState:
    """Desired-state source over records loaded ahead of time."""

    records: tuple[DesiredModuleRecord, ...]
    known_signatures: dict[Selector, str] = field(default_factory=dict["Selector", "str"])
    reserved: tuple[Selector, ...] = ()

    @classmethod
    def from_path(cls, path: Path) -> StaticDesiredState:
        return cls(records=load_desired_snapshot(path))

    def __call__(self) -> tuple[DesiredModuleRecord, ...]:
        return self.records

    def signatures(self) -> dict[Selector, str]:
        return dict(self.known_signatures)

    def reserved_selectors(self) -> tuple[Selector, ...]:
        return self.reserved


if TYPE_CHECKING:
    _source_check: DesiredStateSource = StaticDesiredState(records=())
