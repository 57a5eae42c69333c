from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Optional, Union


@dataclass
class RecordDraft:
    id: Optional[int] = None
    fnsku: Optional[str] = None
    units: Optional[int] = None
    pack_type: Optional[str] = None
    staging_group: Optional[str] = None
    unit_weight: Optional[Decimal] = None
    case_qt: Optional[int] = None
    case_length: Optional[Decimal] = None
    case_width: Optional[Decimal] = None
    case_height: Optional[Decimal] = None
    case_weight: Optional[Decimal] = None
    total_cases: Optional[int] = None


def _check_identity(entry_id: int, fnsku: str) -> None:
    if entry_id <= 0:
        raise ValueError(f"entry id must be positive, got {entry_id}")
    if not fnsku:
        raise ValueError("entry fnsku must not be empty")


@dataclass(frozen=True)
class Case:
    length: int
    width: int
    height: int
    gram_weight: int

    @classmethod
    def from_dims(cls, dims: list[int], gram_weight: int) -> "Case":
        length, width, height = sorted(dims, reverse=True)
        return cls(length=length, width=width, height=height, gram_weight=gram_weight)


@dataclass(frozen=True)
class PackedEntry:
    """One or more identical cases of a single FNSKU."""

    id: int
    fnsku: str
    units: int
    per_case: int
    case: Case

    def __post_init__(self):
        _check_identity(self.id, self.fnsku)
        if self.per_case <= 0:
            raise ValueError(f"per_case must be positive for {self.fnsku}")
        if self.units % self.per_case != 0:
            raise ValueError(f"{self.units} units of {self.fnsku} do not fill whole cases of {self.per_case}")

    def is_packed(self) -> bool:
        return True

    def is_loose(self) -> bool:
        return False

    def number_of_cases(self) -> int:
        return self.units // self.per_case

    def single_case(self) -> "PackedEntry":
        return replace(self, units=self.per_case)

    def total_gram_weight(self) -> int:
        return self.number_of_cases() * self.case.gram_weight

    @property
    def case_length(self) -> Optional[int]:
        return self.case.length

    @property
    def case_width(self) -> Optional[int]:
        return self.case.width

    @property
    def case_height(self) -> Optional[int]:
        return self.case.height

    @property
    def case_gram_weight(self) -> Optional[int]:
        return self.case.gram_weight

    @property
    def group(self) -> Optional[str]:
        return None

    @property
    def unit_gram_weight(self) -> Optional[int]:
        return None


@dataclass(frozen=True)
class LooseEntry:
    """Individually handled units staged under a group name."""

    id: int
    fnsku: str
    units: int
    gram_weight: int
    group: str

    def __post_init__(self):
        _check_identity(self.id, self.fnsku)

    def is_packed(self) -> bool:
        return False

    def is_loose(self) -> bool:
        return True

    def number_of_cases(self) -> int:
        return 1

    def total_gram_weight(self) -> int:
        return self.units * self.gram_weight

    @property
    def per_case(self) -> Optional[int]:
        return None

    @property
    def case_length(self) -> Optional[int]:
        return None

    @property
    def case_width(self) -> Optional[int]:
        return None

    @property
    def case_height(self) -> Optional[int]:
        return None

    @property
    def case_gram_weight(self) -> Optional[int]:
        return None

    @property
    def unit_gram_weight(self) -> Optional[int]:
        return self.gram_weight


Entry = Union[PackedEntry, LooseEntry]


@dataclass
class PlanSummary:
    skus: int
    entry_count: int
    fnsku_count: int
    valid_fnskus: bool
    packed_count: int
    loose_count: int
    case_count: int
    total_units: int
    total_gram_weight: int
