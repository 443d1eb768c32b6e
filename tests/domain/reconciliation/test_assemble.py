from __future__ import annotations

import pytest

from facetsync.domain.reconciliation import (
    EditPlan,
    ModuleDiff,
    assemble_plan,
    build_routing_index,
    deploy_order,
    diff_module,
    removed_selectors,
)
from tests.helpers.routing import desired, observed


def test_assembler_skips_empty_lists() -> None:
    local = [desired("A", ("0x01",), "h1"), desired("B", ("0x02",), "h2")]
    diffs = [ModuleDiff(name="A"), ModuleDiff(name="B", add=("0x02",))]

    plan = assemble_plan([observed("0xaa", ("0x01",), "h1")], local, diffs)

    assert plan == EditPlan(add={"B": ("0x02",)}, deploy_targets=("B",))


def test_assembler_output_does_not_depend_on_diff_completion_order() -> None:
    remote = [observed("0xaa", ("0x01", "0x02"), "h1")]
    local = [
        desired("A", ("0x01", "0x10"), "h2"),
        desired("B", ("0x11",), "h3"),
        desired("C", ("0x02",), "h4"),
    ]
    index = build_routing_index(remote)
    diffs = [diff_module(record, index) for record in local]

    forward = assemble_plan(remote, local, diffs)
    backward = assemble_plan(remote, local, list(reversed(diffs)))

    assert forward == backward
    assert list(forward.add) == ["A", "B"]
    assert list(forward.replace) == ["A", "C"]
    assert forward.deploy_targets == ("A", "B", "C")


def test_removed_selectors_walk_observed_records_in_order() -> None:
    remote = [
        observed("0xaa", ("0x03", "0x01"), "h1"),
        observed("0xbb", ("0x04",), "h1"),
        observed("0xcc", ("0x02", "0x05"), "h1"),
    ]
    local = [desired("A", ("0x01", "0x05"), "h1")]

    assert removed_selectors(remote, local) == ("0x03", "0x04", "0x02")


def test_deploy_order_deduplicates_add_then_replace() -> None:
    add = {"B": ("0x01",), "A": ("0x02",)}
    replace = {"C": ("0x03",), "A": ("0x04",), "D": ("0x05",)}

    assert deploy_order(add, replace) == ("B", "A", "C", "D")


def test_plan_helpers() -> None:
    plan = EditPlan(
        add={"A": ("0x01", "0x02")},
        replace={"B": ("0x03",)},
        remove=("0x04",),
        deploy_targets=("A", "B"),
    )

    assert not plan.is_empty
    assert plan.selector_count == 4
    assert plan.to_dict() == {
        "add": {"A": ["0x01", "0x02"]},
        "replace": {"B": ["0x03"]},
        "remove": ["0x04"],
        "deploy_targets": ["A", "B"],
    }


def test_assembled_plan_is_hashable_and_read_only() -> None:
    diffs = [ModuleDiff(name="A", add=("0x01",))]
    plan = assemble_plan([], [desired("A", ("0x01",), "h1")], diffs)
    same = EditPlan(add={"A": ("0x01",)}, deploy_targets=("A",))

    assert plan == same
    assert hash(plan) == hash(same)
    assert len({plan, same, EditPlan()}) == 2
    with pytest.raises(TypeError):
        plan.add["B"] = ("0x02",)  # type: ignore[index]
    assert dict(plan.add) == {"A": ("0x01",)}


def test_plan_copies_caller_mappings() -> None:
    add = {"A": ("0x01",)}
    plan = EditPlan(add=add, deploy_targets=("A",))

    add["B"] = ("0x02",)

    assert list(plan.add) == ["A"]
