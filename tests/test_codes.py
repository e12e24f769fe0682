"""Tests for OKPO / SOATO derivation, enrichment and the ns flag."""

from decimal import Decimal

from kadastr_core.codes import derive_okpo, derive_soato, enrich_record, enrich_records, ns_flag


def test_derive_formulas():
    assert derive_okpo(41001) == 61500001
    assert derive_soato(41001) == 41
    assert derive_okpo(1726269) == 61500269
    assert derive_soato(1726269) == 1726
    assert derive_okpo(0) == 61500000
    assert derive_soato(0) == 0


def test_derived_components_round_trip():
    for e in (0, 7, 999, 1000, 41001, 1726269, 123456789):
        okpo, soato = derive_okpo(e), derive_soato(e)
        assert okpo - 61500000 == e % 1000
        assert soato == e // 1000
        assert soato * 1000 + (okpo - 61500000) == e


def test_negative_truncates_toward_zero():
    assert derive_soato(-41001) == -41
    assert derive_okpo(-41001) == 61500000 - 1


def test_enrich_fills_oked_only_when_absent():
    rec = {"soato_tum": "41001", "name_liter": "Market Toshkent"}
    assert enrich_record(rec) is True
    assert rec["oked"] == 470
    assert rec["okpo"] == 61500001
    assert rec["soato"] == 41

    kept = {"soato_tum": "41002", "name_liter": "Gaz", "oked": "610"}
    assert enrich_record(kept) is False
    assert kept["oked"] == "610"


def test_enrich_skips_classifier_without_name():
    rec = {"soato_tum": 41002, "name_liter": ""}
    enrich_record(rec)
    assert "oked" not in rec
    rec2 = {"soato_tum": Decimal("41003")}
    enrich_record(rec2)
    assert "oked" not in rec2
    assert rec2["soato"] == 41


def test_enrich_overwrites_okpo_and_soato():
    rec = {"soato_tum": "41005", "okpo": 1, "soato": 2, "oked": 350}
    enrich_record(rec)
    assert rec["okpo"] == 61500005
    assert rec["soato"] == 41


def test_missing_soato_tum_gives_zero_codes():
    rec = {"name_liter": "Kafe"}
    enrich_record(rec)
    assert rec["okpo"] == 61500000
    assert rec["soato"] == 0


def test_enrich_records_counts_classified():
    records = [
        {"soato_tum": "1", "name_liter": "Kafe"},
        {"soato_tum": "2", "oked": 350},
        {"soato_tum": "3"},
    ]
    assert enrich_records(records) == 1


def test_ns_flag():
    assert ns_flag({"oked": 350}) == 42
    assert ns_flag({"oked": "360"}) == 42
    assert ns_flag({"oked": Decimal("350")}) == 42
    assert ns_flag({"oked": 350.0}) == 42
    assert ns_flag({"oked": 470}) == 41
    assert ns_flag({}) == 41


def test_ns_flag_does_not_touch_record():
    rec = {"oked": 350}
    ns_flag(rec)
    assert rec == {"oked": 350}
