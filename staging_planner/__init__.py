from staging_planner.builder import build_entry
from staging_planner.config import PlanConfig, load_config
from staging_planner.errors import EmptyPlanError, EntryBuildError, ErrorKind, PlanConfigError, RowReadError
from staging_planner.io import draft_from_row, load_plan_csv
from staging_planner.models import Case, Entry, LooseEntry, PackedEntry, PlanSummary, RecordDraft
from staging_planner.plan import Plan
from staging_planner.plan_builder import PlanBuilder
from staging_planner.reporting import build_entry_rows, build_rejected_rows, plan_to_dict, summary_record

__all__ = [
    "build_entry",
    "PlanConfig",
    "load_config",
    "EmptyPlanError",
    "EntryBuildError",
    "ErrorKind",
    "PlanConfigError",
    "RowReadError",
    "draft_from_row",
    "load_plan_csv",
    "Case",
    "Entry",
    "LooseEntry",
    "PackedEntry",
    "PlanSummary",
    "RecordDraft",
    "Plan",
    "PlanBuilder",
    "build_entry_rows",
    "build_rejected_rows",
    "plan_to_dict",
    "summary_record",
]
