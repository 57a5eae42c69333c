from __future__ import annotations

import csv
import io
from decimal import Decimal
from pathlib import Path
from typing import Any, Iterator, Mapping

import pandas as pd

from staging_planner.models import RecordDraft
from staging_planner.rounding import to_finite_decimal

COLUMN_ALIASES = {
    "info": "id",
    "id": "id",
    "fnsku": "fnsku",
    "quantity": "units",
    "totalquantity": "units",
    "units": "units",
    "packtype": "pack_type",
    "staginggroup": "staging_group",
    "unitweight": "unit_weight",
    "caseqt": "case_qt",
    "caselength": "case_length",
    "casewidth": "case_width",
    "caseheight": "case_height",
    "caseweight": "case_weight",
    "totalcases": "total_cases",
}

INT_FIELDS = {"id", "units", "case_qt", "total_cases"}
DECIMAL_FIELDS = {"unit_weight", "case_length", "case_width", "case_height", "case_weight"}


def _normalize_column_name(name: str) -> str:
    return "".join(ch for ch in str(name).strip() if ch.isalnum()).lower()


def build_alias_table(extra: Mapping[str, str] | None = None) -> dict[str, str]:
    table = dict(COLUMN_ALIASES)
    for alias, target in (extra or {}).items():
        table[_normalize_column_name(alias)] = target
    return table


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def _parse_text(value: Any) -> str | None:
    if _is_blank(value):
        return None
    return str(value).strip()


def _parse_decimal(value: Any) -> Decimal | None:
    if _is_blank(value):
        return None
    return to_finite_decimal(value)


def _parse_int(value: Any) -> int | None:
    number = _parse_decimal(value)
    if number is None or number < 0 or number != number.to_integral_value():
        return None
    return int(number)


def _coerce(field_name: str, value: Any):
    if field_name in INT_FIELDS:
        return _parse_int(value)
    if field_name in DECIMAL_FIELDS:
        return _parse_decimal(value)
    return _parse_text(value)


def draft_from_row(row: Mapping[str, Any], aliases: Mapping[str, str] | None = None) -> RecordDraft:
    """Map one sheet row onto a RecordDraft.

    Unknown headers are ignored. Values that are blank or cannot be coerced
    to the field type are left as None; when two headers resolve to the same
    field the first usable value wins.
    """
    table = aliases if aliases is not None else COLUMN_ALIASES
    values: dict[str, Any] = {}
    for column, raw in row.items():
        target = table.get(_normalize_column_name(column))
        if target is None or values.get(target) is not None:
            continue
        values[target] = _coerce(target, raw)
    return RecordDraft(**values)


def _read_bad_lines(collected: list[list[str]]):
    def _on_bad_line(bad_line: list[str]):
        collected.append(bad_line)
        return None

    return _on_bad_line


def _is_blank_line(fields: list[str]) -> bool:
    return not fields or (len(fields) == 1 and not fields[0].strip())


def _sheet_row_numbers(content: str, width: int) -> tuple[list[int], list[int]]:
    """Split 1-based data row numbers into readable and too-wide rows.

    Blank lines are skipped the same way read_csv skips them.
    """
    readable: list[int] = []
    too_wide: list[int] = []
    header_seen = False
    row_no = 0
    for fields in csv.reader(io.StringIO(content)):
        if _is_blank_line(fields):
            continue
        if not header_seen:
            header_seen = True
            continue
        row_no += 1
        (too_wide if len(fields) > width else readable).append(row_no)
    return readable, too_wide


def load_plan_csv(content: str) -> pd.DataFrame:
    """Read shipping plan CSV text as raw strings.

    Lines with more fields than the header are skipped and kept in
    ``df.attrs["bad_lines"]`` as ``(row_no, fields)`` pairs.
    ``df.attrs["row_numbers"]`` holds the sheet row number of each kept row.
    """
    bad_lines: list[list[str]] = []
    data = pd.read_csv(
        io.StringIO(content),
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=True,
        engine="python",
        on_bad_lines=_read_bad_lines(bad_lines),
    )
    readable, too_wide = _sheet_row_numbers(content, len(data.columns))
    if len(readable) != len(data) or len(too_wide) != len(bad_lines):
        readable = list(range(1, len(data) + 1))
        too_wide = [None] * len(bad_lines)
    data.attrs["row_numbers"] = readable
    data.attrs["bad_lines"] = list(zip(too_wide, bad_lines))
    return data


def load_plan_csv_path(path: str | Path) -> pd.DataFrame:
    return load_plan_csv(Path(path).read_text(encoding="utf-8-sig"))


def iter_rows(df: pd.DataFrame) -> Iterator[tuple[int, dict[str, Any]]]:
    row_numbers = df.attrs.get("row_numbers") or range(1, len(df) + 1)
    yield from zip(row_numbers, df.to_dict(orient="records"))
