"""
kadastr_core.parsing
Scalar coercion for loosely-typed record fields.
"""
from __future__ import annotations
from decimal import Decimal
from typing import Any, Dict
from .errors import ParseError, ScalarTypeError

def parse_float_flexible(value: Any) -> float:
    """
    Numbers pass through. Strings lose every space and comma (thousands
    separators) before parsing, so "1 234,56" reads as 123456.0.
    """
    if isinstance(value, bool):
        raise ScalarTypeError(f"unsupported {type(value).__name__}")
    if isinstance(value, (int, float, Decimal)):
        return float(value)
    if isinstance(value, str):
        s = value.replace(" ", "").replace(",", "").strip()
        if not s:
            raise ParseError("empty")
        try:
            return float(s)
        except ValueError:
            raise ParseError(f"invalid number: {value!r}") from None
    raise ScalarTypeError(f"unsupported {type(value).__name__}")

def parse_int_text(text: str) -> int:
    """Optional sign plus ASCII digits only; anything else gives 0."""
    s = (text or "").strip()
    digits = s[1:] if s[:1] in ("+", "-") else s
    if not (digits.isascii() and digits.isdigit()):
        return 0
    return int(s)

def format_scalar(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, Decimal) and value.is_finite() and value == value.to_integral_value():
        return str(int(value))
    return str(value)

def to_float(record: Dict[str, Any], key: str) -> float:
    if key not in record:
        return 0.0
    try:
        return parse_float_flexible(record[key])
    except (ParseError, ScalarTypeError):
        return 0.0

def to_int(record: Dict[str, Any], key: str) -> int:
    if key not in record:
        return 0
    v = record[key]
    if isinstance(v, bool):
        return 0
    if isinstance(v, int):
        return v
    if isinstance(v, (float, Decimal)):
        try:
            return int(v)
        except (ValueError, OverflowError, ArithmeticError):
            return 0
    if isinstance(v, str):
        return parse_int_text(v)
    return 0

def to_string(record: Dict[str, Any], key: str) -> str:
    return format_scalar(record.get(key))
