from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, Mapping, Union

import pandas as pd

from staging_planner.builder import build_entry
from staging_planner.errors import EmptyPlanError, EntryBuildError, ErrorKind, RowReadError
from staging_planner.io import draft_from_row, iter_rows, load_plan_csv, load_plan_csv_path
from staging_planner.models import Entry
from staging_planner.plan import Plan

logger = logging.getLogger(__name__)

Outcome = Union[Entry, EntryBuildError]


class PlanBuilder:
    """Collects one build outcome per row and turns the survivors into a Plan.

    Outcomes stay in input order. With ``discard_missing_fnsku`` set, rows
    rejected only for a blank FNSKU (filler rows at the bottom of the sheet)
    are dropped silently instead of being reported by ``rejected()``.
    """

    def __init__(self, discard_missing_fnsku: bool = False, aliases: Mapping[str, str] | None = None):
        self.discard_missing_fnsku = discard_missing_fnsku
        self.aliases = aliases
        self.outcomes: list[Outcome] = []
        self.discarded = 0

    def push(self, outcome: Outcome) -> None:
        self.outcomes.append(outcome)

    def push_row(self, row: Mapping[str, Any], row_no: int | None = None) -> Outcome:
        if row_no is None:
            row_no = len(self.outcomes) + 1
        draft = draft_from_row(row, self.aliases)
        try:
            outcome: Outcome = build_entry(draft)
        except EntryBuildError as exc:
            outcome = exc.at_row(row_no)
            logger.debug("rejected row %s: %s", row_no, exc.kind.name)
        self.push(outcome)
        return outcome

    @classmethod
    def from_rows(cls, rows: Iterable[Mapping[str, Any]], **options) -> "PlanBuilder":
        builder = cls(**options)
        for row_no, row in enumerate(rows, start=1):
            builder.push_row(row, row_no)
        return builder

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame, **options) -> "PlanBuilder":
        builder = cls(**options)
        unreadable = list(df.attrs.get("bad_lines", []))
        for row_no, row in iter_rows(df):
            while unreadable and unreadable[0][0] is not None and unreadable[0][0] < row_no:
                builder._push_unreadable(*unreadable.pop(0))
            builder.push_row(row, row_no)
        for bad_row_no, bad_line in unreadable:
            builder._push_unreadable(bad_row_no, bad_line)
        return builder

    def _push_unreadable(self, row_no: int | None, fields: list[str]) -> None:
        logger.debug("unreadable row %s: %s", row_no, fields)
        self.push(RowReadError(",".join(fields), row_no))

    @classmethod
    def from_csv(cls, content: str, **options) -> "PlanBuilder":
        return cls.from_dataframe(load_plan_csv(content), **options)

    @classmethod
    def from_csv_path(cls, path: str | Path, **options) -> "PlanBuilder":
        return cls.from_dataframe(load_plan_csv_path(path), **options)

    def entries(self) -> list[Entry]:
        return [outcome for outcome in self.outcomes if not isinstance(outcome, EntryBuildError)]

    def rejected(self) -> list[EntryBuildError]:
        return [outcome for outcome in self.outcomes if isinstance(outcome, EntryBuildError)]

    def apply_discard_policy(self) -> None:
        if not self.discard_missing_fnsku:
            return
        kept = [
            outcome
            for outcome in self.outcomes
            if not (isinstance(outcome, EntryBuildError) and outcome.kind is ErrorKind.MISSING_FNSKU)
        ]
        self.discarded += len(self.outcomes) - len(kept)
        self.outcomes = kept

    def finalize(self) -> Plan:
        """Build the Plan from every successful row.

        Raises EmptyPlanError when no row produced an entry.
        """
        self.apply_discard_policy()
        entries = self.entries()
        logger.info(
            "plan rows: %d accepted, %d rejected, %d discarded",
            len(entries),
            len(self.rejected()),
            self.discarded,
        )
        if not entries:
            raise EmptyPlanError("Plan was built, but it is empty.")
        return Plan(entries)
