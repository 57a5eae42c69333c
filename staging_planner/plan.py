from __future__ import annotations

from typing import Iterable, Iterator

from staging_planner.models import Entry, LooseEntry, PackedEntry, PlanSummary

FNSKU_LENGTH = 10


def sort_key(entry: Entry) -> tuple:
    """Ordering used by Plan.sort_in_place.

    Loose entries come before packed ones. Values an entry does not carry
    sort as 0 or "" so both variants share one key shape.
    """
    if isinstance(entry, PackedEntry):
        case = entry.case
        return (True, entry.fnsku, case.length, case.width, case.height, case.gram_weight, "")
    if isinstance(entry, LooseEntry):
        return (False, entry.fnsku, 0, 0, 0, 0, entry.group)
    raise TypeError(f"not a plan entry: {entry!r}")


def expand_entry(entry: Entry) -> list[Entry]:
    if isinstance(entry, PackedEntry):
        return [entry.single_case() for _ in range(entry.number_of_cases())]
    if isinstance(entry, LooseEntry):
        return [entry]
    raise TypeError(f"not a plan entry: {entry!r}")


class Plan:
    """Ordered entries of one shipping plan."""

    def __init__(self, entries: Iterable[Entry] | None = None):
        self.entries: list[Entry] = list(entries or [])

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __repr__(self) -> str:
        return f"Plan(entries={len(self.entries)})"

    def append(self, entry: Entry) -> None:
        self.entries.append(entry)

    def sort_in_place(self) -> None:
        self.entries.sort(key=sort_key)

    def expand(self) -> None:
        """Replace each packed entry with one single-case entry per physical case."""
        self.entries = [piece for entry in self.entries for piece in expand_entry(entry)]

    def is_expanded(self) -> bool:
        return all(entry.number_of_cases() == 1 for entry in self.entries)

    def unique_fnskus(self) -> set[str]:
        return {entry.fnsku for entry in self.entries}

    def fnsku_count(self) -> int:
        return len(self.unique_fnskus())

    def valid_fnskus(self) -> bool:
        return all(len(fnsku) == FNSKU_LENGTH for fnsku in self.unique_fnskus())

    def invalid_fnskus(self) -> list[str]:
        return sorted(fnsku for fnsku in self.unique_fnskus() if len(fnsku) != FNSKU_LENGTH)

    def entry_id_count(self) -> int:
        return len({entry.id for entry in self.entries})

    def packed_count(self) -> int:
        return sum(1 for entry in self.entries if entry.is_packed())

    def loose_count(self) -> int:
        return sum(1 for entry in self.entries if entry.is_loose())

    def case_count(self) -> int:
        return sum(entry.number_of_cases() for entry in self.entries)

    def total_units(self) -> int:
        return sum(entry.units for entry in self.entries)

    def total_gram_weight(self) -> int:
        return sum(entry.total_gram_weight() for entry in self.entries)

    def summarize(self) -> PlanSummary:
        return PlanSummary(
            skus=len(self.entries),
            entry_count=self.entry_id_count(),
            fnsku_count=self.fnsku_count(),
            valid_fnskus=self.valid_fnskus(),
            packed_count=self.packed_count(),
            loose_count=self.loose_count(),
            case_count=self.case_count(),
            total_units=self.total_units(),
            total_gram_weight=self.total_gram_weight(),
        )
