"""
kadastr_core.codes
Derived codes: OKPO / SOATO from soato_tum, and the ns flag.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, List
from .classify import classify_name
from .config import (
    FIELD_NAME,
    FIELD_OKED,
    FIELD_OKPO,
    FIELD_SOATO,
    FIELD_SOATO_TUM,
    NS_OTHER,
    NS_UTILITY,
    NS_UTILITY_OKED,
    OKPO_BASE,
    SOATO_DIVISOR,
)
from .parsing import to_int, to_string

def _trunc_divmod(n: int, d: int):
    # quotient truncates toward zero, remainder keeps the sign of n
    q = abs(n) // d
    if n < 0:
        q = -q
    return q, n - q * d

def derive_okpo(soato_tum: int) -> int:
    return OKPO_BASE + _trunc_divmod(soato_tum, SOATO_DIVISOR)[1]

def derive_soato(soato_tum: int) -> int:
    return _trunc_divmod(soato_tum, SOATO_DIVISOR)[0]

def enrich_record(record: Dict[str, Any]) -> bool:
    """
    Fills oked from name_liter when the record has none, then always
    overwrites okpo/soato. Returns True if the classifier was used.
    """
    classified = False
    if FIELD_OKED not in record:
        name = to_string(record, FIELD_NAME)
        if name:
            record[FIELD_OKED] = classify_name(name)
            classified = True

    soato_tum = to_int(record, FIELD_SOATO_TUM)
    record[FIELD_OKPO] = derive_okpo(soato_tum)
    record[FIELD_SOATO] = derive_soato(soato_tum)
    return classified

def enrich_records(records: List[Dict[str, Any]]) -> int:
    classified = 0
    for r in records:
        if enrich_record(r):
            classified += 1
    logging.info("Enriched %d records (%d classified by name)", len(records), classified)
    return classified

def ns_flag(record: Dict[str, Any]) -> int:
    return NS_UTILITY if to_string(record, FIELD_OKED) in NS_UTILITY_OKED else NS_OTHER
