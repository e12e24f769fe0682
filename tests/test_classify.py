"""Tests for the OKED keyword classifier."""

from kadastr_core.classify import classify_name, translit_lower
from kadastr_core.config import OKED_DEFAULT


def test_translit_lower_folds_four_letters():
    assert translit_lower("ҒАЗ") == "gаз"
    assert translit_lower("ҳқўғ") == "hqog"
    assert translit_lower("Market") == "market"


def test_keywords_case_insensitive():
    assert classify_name("Market Toshkent") == 470
    assert classify_name("KINOTEATR") == 590
    assert classify_name("Stomatologiya klinikasi") == 860
    assert classify_name("Pochta bo'limi") == 630


def test_gaz_wins_by_priority():
    assert classify_name("Gazmontaj") == 350
    assert classify_name("Gaz idorasi") == 350
    # contains both "savdo" and "gaz": gaz is earlier in the table
    assert classify_name("Savdo gaz markazi") == 350
    assert classify_name("Suv va sport") == 360


def test_transliterated_match():
    assert classify_name("Ғишт заводи") == OKED_DEFAULT
    assert classify_name("ҒAZ ta'minoti") == 350
    assert classify_name("Aloқa markazi") == 610
    assert classify_name("Pўchta") == 630
    assert classify_name("Мактаб maktab") == 850


def test_default_code():
    assert classify_name("Uy-joy") == OKED_DEFAULT
    assert classify_name("") == OKED_DEFAULT


def test_idempotent():
    for name in ("Gazmontaj", "Kafe", "abc", "Ғалла"):
        assert classify_name(name) == classify_name(name)
