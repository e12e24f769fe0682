"""
kadastr_core.grouping
Grouped sums over one or more key columns.
"""
from __future__ import annotations
from typing import Any, Dict, List, Optional, Sequence, Tuple
from .codes import ns_flag
from .config import AMOUNT_SCALE, FIELD_NS, GROUP_SEPARATOR
from .parsing import to_float, to_string

def group_key(record: Dict[str, Any], keys: Sequence[str]) -> Optional[str]:
    """None when any key component is empty (missing fields included)."""
    parts: List[str] = []
    for k in keys:
        part = to_string(record, k)
        if not part:
            return None
        parts.append(part)
    return GROUP_SEPARATOR.join(parts)

def group_sum(records: List[Dict[str, Any]], keys: Sequence[str], value_field: str) -> Dict[str, float]:
    sums: Dict[str, float] = {}
    for r in records:
        g = group_key(r, keys)
        if g is None:
            continue
        sums[g] = sums.get(g, 0.0) + to_float(r, value_field)
    return sums

def with_ns_flag(records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    out: List[Dict[str, Any]] = []
    for r in records:
        copy = dict(r)
        copy[FIELD_NS] = ns_flag(r)
        out.append(copy)
    return out

def aggregate_passes(
    records: List[Dict[str, Any]],
    key_column: str,
    value_column: str,
) -> Tuple[Dict[str, float], Dict[str, float]]:
    """Pass 1 groups by key_column; pass 2 by (ns, key_column)."""
    sums1 = group_sum(records, [key_column], value_column)
    sums2 = group_sum(with_ns_flag(records), [FIELD_NS, key_column], value_column)
    return sums1, sums2

def scale_amount(total: float) -> float:
    return total / AMOUNT_SCALE
