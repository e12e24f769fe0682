"""Tests for output row building and period resolution."""

from datetime import date

from kadastr_core.summaries import (
    OutputRow,
    build_pass1_rows,
    build_pass2_rows,
    default_month_name,
    materialize,
    pass_totals,
    resolve_period,
)


def test_resolve_period():
    assert resolve_period(True, "Mart") == 12
    assert resolve_period(False, "Yanvar") == 1
    assert resolve_period(False, "Mart") == 3
    assert resolve_period(False, "Dekabr") == 12
    assert resolve_period(False, "") == 12
    assert resolve_period(False, "March") == 12


def test_default_month_name_is_previous_month():
    assert default_month_name(date(2026, 10, 19)) == "Sentabr"
    assert default_month_name(date(2026, 2, 1)) == "Yanvar"
    assert default_month_name(date(2026, 1, 15)) == "Dekabr"


def test_pass1_rows_sorted_and_scaled():
    rows = build_pass1_rows({"41002": 2000000.0, "41001": 123000.0}, period=3)
    assert rows == [
        OutputRow(3, 61500001, 41, 1, 12, 123.0),
        OutputRow(3, 61500002, 41, 1, 12, 2000.0),
    ]


def test_pass1_sort_is_lexicographic():
    rows = build_pass1_rows({"9": 1000.0, "10": 1000.0}, period=12)
    assert [r.okpo for r in rows] == [61500010, 61500009]


def test_pass1_non_numeric_key_gives_zero_codes():
    rows = build_pass1_rows({"abc": 5000.0}, period=12)
    assert rows == [OutputRow(12, 61500000, 0, 1, 12, 5.0)]


def test_pass2_rows_sorted_by_flag_then_key():
    sums2 = {"42|41001": 3000.0, "41|41002": 1000.0, "41|41001": 2000.0, "broken": 1.0}
    rows = build_pass2_rows(sums2, period=1)
    assert rows == [
        OutputRow(1, 61500001, 41, 1, 41, 2.0),
        OutputRow(1, 61500002, 41, 1, 41, 1.0),
        OutputRow(1, 61500001, 41, 1, 42, 3.0),
    ]


def test_materialize_puts_pass1_first():
    rows = materialize({"41001": 1000.0}, {"41|41001": 1000.0}, period=12)
    assert [r.ns for r in rows] == [12, 41]
    assert rows[0].as_list() == [12, 61500001, 41, 1, 12, 1.0]


def test_pass_totals():
    rows = materialize({"41001": 1000.0, "41002": 3000.0}, {"41|41001": 1000.0, "42|41002": 3000.0}, period=12)
    assert pass_totals(rows) == {12: 4.0, 41: 1.0, 42: 3.0}
