from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from facetsync.adapters.snapshot import StaticDesiredState
from facetsync.app import check_routing_table, diff_routing_table, observe_routing_table
from facetsync.domain.reconciliation import IssueKind
from facetsync.domain.types import ObservedModuleRecord
from tests.helpers.routing import (
    VAULT_ADDRESS,
    VAULT_SELECTORS,
    desired,
    make_desired,
    make_observed,
    observed,
)


@dataclass
class FakeObserver:
    records: tuple[ObservedModuleRecord, ...]
    calls: list[str] = field(default_factory=list[str])

    def __call__(self, proxy: str) -> tuple[ObservedModuleRecord, ...]:
        self.calls.append(proxy)
        return self.records


def test_observe_requires_proxy_or_snapshot() -> None:
    with pytest.raises(ValueError, match="proxy address"):
        observe_routing_table()


def test_observe_prefers_given_snapshot() -> None:
    source = FakeObserver(records=())
    records = make_observed()

    result = observe_routing_table(proxy="0xproxy", observed=records, source=source)

    assert result == tuple(records)
    assert source.calls == []


def test_diff_reads_proxy_through_source() -> None:
    source = FakeObserver(records=tuple(make_observed()))
    desired_records = [r for r in make_desired() if r.name != "VaultFacet"]

    plan = diff_routing_table(
        desired_source=StaticDesiredState(records=tuple(desired_records)),
        proxy="0xproxy",
        observation_source=source,
    )

    assert source.calls == ["0xproxy"]
    assert plan.add == {}
    assert plan.replace == {}
    assert plan.remove == VAULT_SELECTORS
    assert plan.deploy_targets == ()


def test_check_annotates_valid_plan() -> None:
    source = StaticDesiredState(
        records=(desired("TokenFacet", ("0xa9059cbb",), "0x02"),),
        known_signatures={"0xa9059cbb": "transfer(address,uint256)"},
    )

    result = check_routing_table(
        desired_source=source,
        observed=[observed(VAULT_ADDRESS, ("0xa9059cbb",), "0x01")],
    )

    assert result.ok
    assert result.plan is not None
    assert result.plan.replace == {
        "TokenFacet": (("0xa9059cbb", "transfer(address,uint256)"),),
    }
    assert result.plan.deploy_targets == ("TokenFacet",)


def test_check_refuses_to_plan_invalid_snapshots() -> None:
    source = StaticDesiredState(
        records=(desired("TokenFacet", ("0x8129fc1c",), "0x02"),),
        reserved=("0x8129fc1c",),
    )

    result = check_routing_table(desired_source=source, observed=[])

    assert not result.ok
    assert result.plan is None
    assert [issue.kind for issue in result.validation.issues] == [
        IssueKind.RESERVED_SELECTOR_CONFLICT
    ]
