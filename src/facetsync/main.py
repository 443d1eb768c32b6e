from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from facetsync.adapters.artifacts import BuildInfoDesiredState
from facetsync.adapters.snapshot import StaticDesiredState, dump_plan, load_observed_snapshot
from facetsync.app import check_routing_table, diff_routing_table
from facetsync.config import ConfigurationError, configure_logging, get_reconcile_config

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from facetsync.domain.ports import DesiredStateSource
    from facetsync.domain.reconciliation import AnnotatedPlan, EditPlan
    from facetsync.domain.types import ObservedModuleRecord

log = logging.getLogger(__name__)

EXIT_INVALID_SNAPSHOT = 3


def _add_input_arguments(parser: argparse.ArgumentParser) -> None:
    observed = parser.add_mutually_exclusive_group(required=True)
    observed.add_argument(
        "--observed",
        type=Path,
        help="JSON file with the observed routing table",
    )
    observed.add_argument(
        "--proxy",
        type=str,
        help="Proxy address to observe over JSON-RPC (uses FACETSYNC_RPC_URL)",
    )

    desired = parser.add_mutually_exclusive_group(required=True)
    desired.add_argument(
        "--desired",
        type=Path,
        help="JSON file with the desired module records",
    )
    desired.add_argument(
        "--manifest",
        type=Path,
        help="Module manifest resolved against --build-info files",
    )
    parser.add_argument(
        "--build-info",
        type=Path,
        action="append",
        default=[],
        help="Compiler build-info file (repeatable, required with --manifest)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the plan as JSON on stdout",
    )


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Plan routing-table edits for a module proxy")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    diff = subparsers.add_parser("diff", help="Compute the edit plan")
    _add_input_arguments(diff)

    check = subparsers.add_parser(
        "check",
        help="Validate snapshots and print the annotated edit plan",
    )
    _add_input_arguments(check)

    args = parser.parse_args(list(argv))
    if args.manifest is not None and not args.build_info:
        parser.error("--manifest requires at least one --build-info")
    return args


def _desired_source(args: argparse.Namespace) -> DesiredStateSource:
    if args.desired is not None:
        return StaticDesiredState.from_path(args.desired)
    return BuildInfoDesiredState.from_paths(
        manifest_path=args.manifest,
        build_info_paths=args.build_info,
        scheme=get_reconcile_config().fingerprint_scheme,
    )


def _observed_records(args: argparse.Namespace) -> tuple[ObservedModuleRecord, ...] | None:
    if args.observed is None:
        return None
    return load_observed_snapshot(args.observed)


def _report(plan: EditPlan | AnnotatedPlan, *, as_json: bool) -> None:
    if as_json:
        sys.stdout.write(dump_plan(plan) + "\n")
        return
    summary = plan.to_dict()
    log.info("Add actions: %s", summary["add"])
    log.info("Replace actions: %s", summary["replace"])
    log.info("Remove actions: %s", summary["remove"])
    log.info("Modules to deploy: %s", summary["deploy_targets"])


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    try:
        level = logging.DEBUG if parsed_args.verbose else get_reconcile_config().log_level
    except ConfigurationError:
        configure_logging()
        log.exception("Configuration error")
        sys.exit(2)
    configure_logging(level=level)

    try:
        desired_source = _desired_source(parsed_args)
        observed = _observed_records(parsed_args)
        if parsed_args.command == "diff":
            plan = diff_routing_table(
                desired_source=desired_source,
                proxy=parsed_args.proxy,
                observed=observed,
            )
            _report(plan, as_json=parsed_args.json)
        elif parsed_args.command == "check":
            result = check_routing_table(
                desired_source=desired_source,
                proxy=parsed_args.proxy,
                observed=observed,
            )
            if result.plan is None:
                log.error(
                    "Refusing to plan: %s snapshot issue(s)", len(result.validation.issues)
                )
                sys.exit(EXIT_INVALID_SNAPSHOT)
            _report(result.plan, as_json=parsed_args.json)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error while planning routing-table edits")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
