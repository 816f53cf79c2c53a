# tests/test_tables.py

import json
import logging

import pytest

from seoian.core.errors import TableError
from seoian.tables import (
    load_events,
    load_month_config,
    load_ranges,
    optional_int,
    parse_events_csv,
    positive_int,
    resolve_headers,
    to_bool,
)

from conftest import EVENTS_CSV, build_ranges, range_records


def by_id(defs):
    return {d.id: d for d in defs}


def test_rows_without_id_or_title_are_skipped(events):
    assert sorted(by_id(events)) == ["BD", "GF", "HIDE", "LATE", "MD", "NY"]


def test_defaults_follow_anchor_family(events):
    d = by_id(events)
    assert d["BD"].category == "special"
    assert d["BD"].rank == 1
    assert d["BD"].sequence == 1
    assert d["NY"].category == "standard"
    assert d["NY"].rank == 2
    assert d["NY"].sequence == 9999
    assert d["NY"].show_on_calendar and d["NY"].show_in_inspector
    assert not d["NY"].show_notes_on_calendar


def test_misspelled_gregorian_start_year_header(events):
    md = by_id(events)["MD"]
    assert md.gregorian_start_year == 2000
    assert (md.gy_month, md.nth, md.weekday) == (5, 2, 0)


def test_numeric_fields(events):
    d = by_id(events)
    assert d["GF"].offset_days == -2
    assert d["GF"].anchor_type == "GY_EASTER"
    assert d["LATE"].sy_start_year == 40
    assert d["HIDE"].show_on_calendar is False
    assert d["HIDE"].show_in_inspector is False


def test_alternate_header_spellings_and_whitespace():
    text = (
        " id , title ,anchor_type,gy_month,gy_day,Seq,showOnCalendar\n"
        "x1,Thing,gy_fixed,7,4,3,no\n"
    )
    (d,) = parse_events_csv(text)
    assert d.id == "x1"
    assert d.anchor_type == "GY_FIXED"
    assert (d.gy_month, d.gy_day, d.sequence) == (7, 4, 3)
    assert d.show_on_calendar is False


def test_byte_order_mark_is_ignored():
    defs = parse_events_csv("\ufeff" + EVENTS_CSV)
    assert "BD" in by_id(defs)


def test_resolve_headers_prefers_first_alias():
    cols = resolve_headers(["Gergorian_First_Year", "Gregorian_Start_Year", "ID"])
    assert cols["gregorian_start_year"] == "Gregorian_Start_Year"
    assert cols["id"] == "ID"
    assert "title" not in cols


@pytest.mark.parametrize(
    "raw,default,expected",
    [
        ("TRUE", False, True),
        (" yes ", False, True),
        ("1", False, True),
        ("f", True, False),
        ("No", True, False),
        ("", True, True),
        (None, False, False),
        ("maybe", True, False),
    ],
)
def test_to_bool(raw, default, expected):
    assert to_bool(raw, default) is expected


def test_int_coercion():
    assert positive_int("3") == 3
    assert positive_int("3.0") == 3
    assert positive_int("0") is None
    assert positive_int("x") is None
    assert positive_int(" ") is None
    assert optional_int("0") == 0
    assert optional_int("-7") == -7
    assert optional_int("") is None


def test_skipped_rows_are_logged(caplog):
    caplog.set_level(logging.INFO, logger="seoian.tables")
    parse_events_csv(EVENTS_CSV)
    assert any("1 skipped" in r.getMessage() for r in caplog.records)


def test_load_events_builds_catalog(data_dir):
    cat = load_events(data_dir / "AFdS_Special_Days.csv")
    assert len(cat) == 6
    assert [d.id for d in cat.for_day(1, 1)] == ["BD", "LATE"]
    assert cat.for_day(2, 2) == ()
    assert [d.id for d in cat.gy_defs] == ["GF", "HIDE", "MD", "NY"]


def test_load_ranges(data_dir):
    idx = load_ranges(data_dir / "supermonths_ranges_fallback.json")
    assert idx.years() == list(range(1, 41))
    assert idx.skipped == 0


def test_load_ranges_rejects_non_tables(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(TableError):
        load_ranges(bad)

    obj = tmp_path / "obj.json"
    obj.write_text(json.dumps({"ranges": range_records(build_ranges(1, 1))}), encoding="utf-8")
    with pytest.raises(TableError):
        load_ranges(obj)


def test_load_ranges_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_ranges(tmp_path / "nope.json")


def test_load_month_config(data_dir, tmp_path):
    names = load_month_config(data_dir / "supermonths_config.json")
    assert names[1] == "SuperMonth 01"
    assert len(names) == 13

    messy = tmp_path / "cfg.json"
    messy.write_text(json.dumps([{"monthNo": "2", "monthName": "Two"}, {"monthNo": 3}, "x"]), encoding="utf-8")
    assert load_month_config(messy) == {2: "Two"}


@pytest.mark.parametrize("raw", ["inf", "-inf", "nan", "1e999"])
def test_non_finite_numbers_are_missing(raw):
    assert positive_int(raw) is None
    assert optional_int(raw) is None


def test_non_finite_cells_do_not_abort_the_table():
    text = (
        "ID,Title,Anchor_Type,GY_Month,GY_Day,Rank,Offset_Days\n"
        "A,Alpha,GY_FIXED,1,1,inf,\n"
        "B,Beta,GY_FIXED,nan,2,,\n"
        "C,Gamma,GY_EASTER,,,,1e999\n"
    )
    d = by_id(parse_events_csv(text))
    assert sorted(d) == ["A", "B", "C"]
    assert d["A"].rank == 2
    assert d["B"].gy_month is None
    assert d["C"].offset_days is None
