from __future__ import annotations

from dataclasses import asdict
from typing import Iterable

import pandas as pd

from staging_planner.errors import EntryBuildError
from staging_planner.models import Entry
from staging_planner.plan import Plan

ENTRY_COLUMNS = [
    "pack_type",
    "id",
    "fnsku",
    "units",
    "per_case",
    "cases",
    "case_length",
    "case_width",
    "case_height",
    "case_gram_weight",
    "unit_gram_weight",
    "group",
    "total_gram_weight",
]

REJECTED_COLUMNS = ["row_no", "kind", "message"]


def entry_record(entry: Entry) -> dict:
    return {
        "pack_type": "Packed" if entry.is_packed() else "Loose",
        "id": entry.id,
        "fnsku": entry.fnsku,
        "units": entry.units,
        "per_case": entry.per_case,
        "cases": entry.number_of_cases(),
        "case_length": entry.case_length,
        "case_width": entry.case_width,
        "case_height": entry.case_height,
        "case_gram_weight": entry.case_gram_weight,
        "unit_gram_weight": entry.unit_gram_weight,
        "group": entry.group,
        "total_gram_weight": entry.total_gram_weight(),
    }


def build_entry_rows(plan: Plan) -> pd.DataFrame:
    rows = [entry_record(entry) for entry in plan]
    return pd.DataFrame(rows, columns=ENTRY_COLUMNS)


def build_rejected_rows(rejected: Iterable[EntryBuildError]) -> pd.DataFrame:
    rows = [
        {"row_no": error.row_no, "kind": error.kind.name, "message": error.kind.message}
        for error in rejected
    ]
    return pd.DataFrame(rows, columns=REJECTED_COLUMNS)


def summary_record(plan: Plan) -> dict:
    return asdict(plan.summarize())


def plan_to_dict(plan: Plan) -> dict:
    return {
        "summary": summary_record(plan),
        "entries": [entry_record(entry) for entry in plan],
    }
