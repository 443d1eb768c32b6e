from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from facetsync.adapters.snapshot import (
    SnapshotFileError,
    StaticDesiredState,
    dump_plan,
    load_desired_snapshot,
    load_observed_snapshot,
)
from facetsync.domain.reconciliation import EditPlan
from facetsync.domain.types import DesiredModuleRecord, ObservedModuleRecord

if TYPE_CHECKING:
    from pathlib import Path


def _write(path: Path, payload: object) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_load_observed_snapshot_accepts_loupe_spelling(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "observed.json",
        [
            {"address": "0xaa", "selectors": ["0x01"], "fingerprint": "h1"},
            {
                "facetAddress": "0xbb",
                "functionSelectors": ["0xAB"],
                "bytecodeHash": "h2",
            },
        ],
    )

    assert load_observed_snapshot(path) == (
        ObservedModuleRecord(address="0xaa", selectors=("0x01",), fingerprint="h1"),
        ObservedModuleRecord(address="0xbb", selectors=("0xab",), fingerprint="h2"),
    )


def test_load_desired_snapshot_accepts_facet_spelling(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "desired.json",
        [{"facet": "VaultFacet", "selectors": ["0x01", "0x02"], "bytecodeHash": "h1"}],
    )

    source = StaticDesiredState.from_path(path)

    assert source() == (
        DesiredModuleRecord(name="VaultFacet", selectors=("0x01", "0x02"), fingerprint="h1"),
    )
    assert source.signatures() == {}
    assert source.reserved_selectors() == ()


@pytest.mark.parametrize(
    "payload",
    [
        {"name": "A"},
        [{"name": "A", "selectors": ["0x01"]}],
        [{"name": "A", "selectors": ["not-hex"], "fingerprint": "h1"}],
    ],
)
def test_invalid_desired_snapshot_raises(tmp_path: Path, payload: object) -> None:
    path = _write(tmp_path / "desired.json", payload)

    with pytest.raises(SnapshotFileError, match="Invalid desired snapshot"):
        load_desired_snapshot(path)


def test_unreadable_snapshot_raises(tmp_path: Path) -> None:
    path = tmp_path / "observed.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(SnapshotFileError, match="Cannot read"):
        load_observed_snapshot(path)


def test_dump_plan_is_stable_json() -> None:
    plan = EditPlan(add={"B": ("0x02",), "A": ("0x01",)}, deploy_targets=("B", "A"))

    rendered = dump_plan(plan)

    assert rendered == dump_plan(plan)
    assert json.loads(rendered) == {
        "add": {"B": ["0x02"], "A": ["0x01"]},
        "replace": {},
        "remove": [],
        "deploy_targets": ["B", "A"],
    }
    assert rendered.index('"B"') < rendered.index('"A"')
