from __future__ import annotations

from facetsync.domain.reconciliation import UNKNOWN_SIGNATURE, EditPlan, annotate_plan


def test_annotate_pairs_selectors_with_signatures() -> None:
    plan = EditPlan(
        add={"A": ("0x01", "0x02")},
        replace={"B": ("0x03",)},
        remove=("0x04",),
        deploy_targets=("A", "B"),
    )

    annotated = annotate_plan(plan, {"0x01": "deposit(uint256)", "0x03": "withdraw()"})

    assert annotated.add == {"A": (("0x01", "deposit(uint256)"), ("0x02", UNKNOWN_SIGNATURE))}
    assert annotated.replace == {"B": (("0x03", "withdraw()"),)}
    assert annotated.remove == ("0x04",)
    assert annotated.deploy_targets == ("A", "B")
    assert annotated.to_dict()["add"] == {
        "A": [["0x01", "deposit(uint256)"], ["0x02", "unknown"]]
    }


def test_annotate_empty_plan() -> None:
    annotated = annotate_plan(EditPlan(), {})

    assert annotated.to_dict() == {"add": {}, "replace": {}, "remove": [], "deploy_targets": []}
