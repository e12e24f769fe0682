"""
kadastr_core.config
Central configuration/constants.
"""
from __future__ import annotations

# period tables
MONTHS = (
    "Yanvar", "Fevral", "Mart", "Aprel", "May", "Iyun",
    "Iyul", "Avgust", "Sentabr", "Oktabr", "Noyabr", "Dekabr",
)
ANNUAL_PERIOD = 12

# OKED keyword table: first match wins, so order is priority
OKED_KEYWORDS = (
    ("gaz", 350),
    ("suv", 360),
    ("kafe", 470),
    ("market", 470),
    ("savdo", 470),
    ("kino", 590),
    ("aloqa", 610),
    ("pochta", 630),
    ("maktab", 850),
    ("stomatolog", 860),
    ("sport", 930),
)
OKED_DEFAULT = 960

# Cyrillic-Uzbek letters folded before keyword matching
TRANSLIT = {
    "ғ": "g",
    "ҳ": "h",
    "қ": "q",
    "ў": "o",
}

# code derivation
OKPO_BASE = 61_500_000
SOATO_DIVISOR = 1000

# ns flag (second pass)
NS_UTILITY = 42
NS_OTHER = 41
NS_UTILITY_OKED = ("350", "360")

# output constants
SECTION = 1
PASS1_CODE = 12
AMOUNT_SCALE = 1000.0
GROUP_SEPARATOR = "|"

# record field names
FIELD_SOATO_TUM = "soato_tum"
FIELD_NAME = "name_liter"
FIELD_OKED = "oked"
FIELD_OKPO = "okpo"
FIELD_SOATO = "soato"
FIELD_NS = "ns"

# period, registration_number, regional_code, section, classification_or_flag, amount
OUTPUT_HEADERS = ["mes", "okpo", "soato", "razdel", "ns", "g1"]

# CLI defaults
DEFAULT_PATTERNS = "*.csv;*.json"
DEFAULT_KEY_COLUMN = FIELD_SOATO_TUM
DEFAULT_OUTPUT_XLSX = "natija.xlsx"
DEFAULT_SUMMARY_PDF = "run_summary.pdf"
EXCEL_COLUMN_WIDTH = 16
