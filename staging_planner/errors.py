from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    MISSING_ID = "Row is missing an Id"
    MISSING_FNSKU = "Row is missing an Fnsku"
    MISSING_PACK_TYPE = "Row is missing the PackType"
    MISSING_UNITS = "Row is missing the unit quantity"
    INVALID_PACK_TYPE = "A PackType is included, but cannot be recognized"
    MISSING_CASE_QT = "Row is declared as packed with CaseQt missing"
    NON_DIVISIBLE_CASE_QT = "Row is declared as packed with Units that are not evenly divisible by the CaseQt"
    MISSING_PACKED_WEIGHT = "Row is declared as packed with weight missing"
    MISSING_PACKED_DIMENSIONS = "Row is declared as packed with dimensions missing"
    MISSING_GROUP = "Row is declared as Loose with StagingGroup missing"
    MISSING_UNIT_WEIGHT = "Row is declared as Loose with UnitWeight missing"
    ROW_READ = "Unable to read the row"

    @property
    def message(self) -> str:
        return self.value


class EntryBuildError(ValueError):
    """A single row could not be turned into an entry."""

    def __init__(self, kind: ErrorKind, row_no: int | None = None):
        self.kind = kind
        self.row_no = row_no
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.row_no is None:
            return self.kind.message
        return f"{self.kind.message} (row {self.row_no})"

    def at_row(self, row_no: int) -> "EntryBuildError":
        self.row_no = row_no
        self.args = (self._describe(),)
        return self


class RowReadError(EntryBuildError):
    def __init__(self, raw: str, row_no: int | None = None):
        self.raw = raw
        super().__init__(ErrorKind.ROW_READ, row_no)


class EmptyPlanError(ValueError):
    pass


class PlanConfigError(ValueError):
    pass
