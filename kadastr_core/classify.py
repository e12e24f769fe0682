"""
kadastr_core.classify
OKED (activity code) lookup from an object's name.
"""
from __future__ import annotations
from .config import OKED_DEFAULT, OKED_KEYWORDS, TRANSLIT

def translit_lower(text: str) -> str:
    return "".join(TRANSLIT.get(ch, ch) for ch in (text or "").lower())

def classify_name(name: str) -> int:
    """
    First keyword (in table order) found anywhere in the lowercased,
    transliterated name decides the code; no match gives OKED_DEFAULT.
    """
    n = translit_lower(name)
    for keyword, code in OKED_KEYWORDS:
        if keyword in n:
            return code
    return OKED_DEFAULT
