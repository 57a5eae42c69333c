from decimal import Decimal
from pathlib import Path

import pandas as pd

from staging_planner.io import build_alias_table, draft_from_row, iter_rows, load_plan_csv, load_plan_csv_path
from staging_planner.models import RecordDraft

PLAN_CSV = Path(__file__).parent / "data" / "sta_plan.csv"


def test_sheet_headers_map_to_draft_fields():
    row = {
        "Info": "12",
        "FNSKU": " X001ABCDEF ",
        "Quantity": "24",
        "Pack Type": "Packed",
        "Staging Group": "",
        "Unit Weight": "",
        "Case QT": "6",
        "Case Length": "14.5",
        "Case Width": "10",
        "Case Height": "8",
        "Case Weight": "12.75",
        "Total Cases": "4",
    }
    draft = draft_from_row(row)
    assert draft == RecordDraft(
        id=12,
        fnsku="X001ABCDEF",
        units=24,
        pack_type="Packed",
        case_qt=6,
        case_length=Decimal("14.5"),
        case_width=Decimal("10"),
        case_height=Decimal("8"),
        case_weight=Decimal("12.75"),
        total_cases=4,
    )


def test_total_quantity_is_an_alias_for_units():
    draft = draft_from_row({"Info": "1", "Total Quantity": "8"})
    assert draft.units == 8


def test_first_usable_alias_wins():
    draft = draft_from_row({"Quantity": "", "Total Quantity": "8"})
    assert draft.units == 8
    draft = draft_from_row({"Quantity": "5", "Total Quantity": "8"})
    assert draft.units == 5


def test_canonical_field_names_are_accepted():
    draft = draft_from_row({"id": 3, "fnsku": "X003ABCDEF", "units": 2, "pack_type": "Loose", "staging_group": "A"})
    assert (draft.id, draft.fnsku, draft.units, draft.pack_type, draft.staging_group) == (3, "X003ABCDEF", 2, "Loose", "A")


def test_uncoercible_values_become_none():
    draft = draft_from_row(
        {
            "Info": "abc",
            "Quantity": "2.5",
            "Case QT": "-1",
            "Unit Weight": "heavy",
            "Case Length": "nan",
            "Case Width": "inf",
            "Total Cases": None,
        }
    )
    assert draft == RecordDraft()


def test_whole_number_strings_with_decimal_point_are_integers():
    draft = draft_from_row({"Info": "7.0", "Quantity": "10.00"})
    assert draft.id == 7
    assert draft.units == 10


def test_pandas_missing_values_are_blank():
    draft = draft_from_row({"Info": float("nan"), "FNSKU": pd.NA, "Quantity": 4})
    assert draft.id is None
    assert draft.fnsku is None
    assert draft.units == 4


def test_unknown_headers_are_ignored():
    draft = draft_from_row({"Notes": "fragile", "FNSKU": "X001ABCDEF"})
    assert draft == RecordDraft(fnsku="X001ABCDEF")


def test_extra_aliases():
    table = build_alias_table({"Staging Lane": "staging_group"})
    draft = draft_from_row({"Staging Lane": "L4"}, table)
    assert draft.staging_group == "L4"


def test_load_plan_csv_keeps_raw_strings():
    df = load_plan_csv_path(PLAN_CSV)
    assert len(df) == 10
    assert df.loc[0, "FNSKU"] == "X001ABCDEF"
    assert df.loc[0, "Staging Group"] == ""
    assert df.attrs["bad_lines"] == []


def test_load_plan_csv_collects_lines_with_extra_fields():
    content = "Info,FNSKU,Quantity\n1,X001ABCDEF,3\n2,X002ABCDEF,4,oops\n3,X003ABCDEF,5\n"
    df = load_plan_csv(content)
    assert list(df["Info"]) == ["1", "3"]
    assert df.attrs["bad_lines"] == [(2, ["2", "X002ABCDEF", "4", "oops"])]
    assert df.attrs["row_numbers"] == [1, 3]


def test_iter_rows_numbers_from_one():
    df = load_plan_csv("Info,FNSKU\n1,A\n2,B\n")
    rows = list(iter_rows(df))
    assert [row_no for row_no, _ in rows] == [1, 2]
    assert rows[1][1] == {"Info": "2", "FNSKU": "B"}


def test_row_numbers_skip_blank_lines():
    content = "\nInfo,FNSKU\n1,A\n\n2,B,extra\n3,C\n"
    df = load_plan_csv(content)
    assert [row_no for row_no, _ in iter_rows(df)] == [1, 3]
    assert df.attrs["bad_lines"] == [(2, ["2", "B", "extra"])]


def test_out_of_range_numbers_become_none():
    draft = draft_from_row({"Info": "1e39", "Quantity": "1e999999", "Case Length": "1e40", "Case Weight": "-1e50"})
    assert draft == RecordDraft()


def test_large_in_range_numbers_are_kept():
    draft = draft_from_row({"Case Length": "1e30", "Case Weight": "99999999999999999999999999999"})
    assert draft.case_length == Decimal("1e30")
    assert draft.case_weight == Decimal("99999999999999999999999999999")
