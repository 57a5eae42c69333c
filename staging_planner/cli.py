"""Command line entry point: build a shipping plan from a plan CSV."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from staging_planner.config import PlanConfig, load_config_path
from staging_planner.errors import EmptyPlanError, PlanConfigError
from staging_planner.plan_builder import PlanBuilder
from staging_planner.reporting import build_entry_rows, build_rejected_rows, plan_to_dict, summary_record

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Validate a shipping plan CSV and summarize its entries")
    parser.add_argument("plan_csv", help="Path to the shipping plan CSV")
    parser.add_argument("--config", help="Path to a plan config YAML")
    parser.add_argument("--expand", action="store_true", default=None, help="Expand packed entries into one entry per case")
    parser.add_argument("--no-sort", dest="sort", action="store_false", default=None, help="Keep sheet order")
    parser.add_argument(
        "--discard-missing-fnsku",
        action="store_true",
        default=None,
        help="Do not report rows rejected only for a blank FNSKU",
    )
    parser.add_argument("--entries-csv", help="Write one row per entry to this CSV")
    parser.add_argument("--rejected-csv", help="Write rejected rows to this CSV")
    parser.add_argument("--json", dest="json_path", help="Write the full plan as JSON")
    parser.add_argument("--verbose", action="store_true", help="Log every rejected row")
    return parser


def _resolve_config(args: argparse.Namespace) -> PlanConfig:
    config = load_config_path(args.config) if args.config else PlanConfig()
    if args.expand is not None:
        config.expand = args.expand
    if args.sort is not None:
        config.sort = args.sort
    if args.discard_missing_fnsku is not None:
        config.discard_missing_fnsku = args.discard_missing_fnsku
    return config


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        config = _resolve_config(args)
        builder = PlanBuilder.from_csv_path(args.plan_csv, **config.builder_options())
        plan = builder.finalize()
    except (OSError, PlanConfigError, EmptyPlanError) as exc:
        logger.error("%s", exc)
        return 1

    if config.sort:
        plan.sort_in_place()
    if config.expand:
        plan.expand()
    if not plan.valid_fnskus():
        logger.warning("FNSKUs not 10 characters long: %s", ", ".join(plan.invalid_fnskus()))

    if args.entries_csv:
        build_entry_rows(plan).to_csv(args.entries_csv, index=False)
    if args.rejected_csv:
        build_rejected_rows(builder.rejected()).to_csv(args.rejected_csv, index=False)
    if args.json_path:
        Path(args.json_path).write_text(json.dumps(plan_to_dict(plan), indent=2), encoding="utf-8")
    print(json.dumps(summary_record(plan), sort_keys=True))
    return 0


if __name__ == "__main__":
    sys.exit(main())
