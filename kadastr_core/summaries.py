"""
kadastr_core.summaries
Output rows built from grouped sums, in report order.
"""
from __future__ import annotations
from datetime import date
from typing import Any, Dict, List, NamedTuple, Optional
from .codes import derive_okpo, derive_soato
from .config import ANNUAL_PERIOD, GROUP_SEPARATOR, MONTHS, PASS1_CODE, SECTION
from .grouping import scale_amount
from .parsing import parse_int_text

class OutputRow(NamedTuple):
    mes: int
    okpo: int
    soato: int
    razdel: int
    ns: int
    g1: float

    def as_list(self) -> List[Any]:
        return list(self)

def resolve_period(annual: bool, month_name: Optional[str] = None) -> int:
    """12 for annual reports, otherwise the 1-based month number."""
    if annual:
        return ANNUAL_PERIOD
    name = (month_name or "").strip()
    for i, m in enumerate(MONTHS):
        if m == name:
            return i + 1
    return ANNUAL_PERIOD

def default_month_name(today: Optional[date] = None) -> str:
    # previous calendar month; January falls back to Dekabr
    today = today or date.today()
    mo = today.month - 1
    if mo <= 0:
        mo = 12
    return MONTHS[mo - 1]

def _row(period: int, soato_tum_text: str, ns: int, total: float) -> OutputRow:
    soato_tum = parse_int_text(soato_tum_text.split(GROUP_SEPARATOR)[0])
    return OutputRow(
        mes=period,
        okpo=derive_okpo(soato_tum),
        soato=derive_soato(soato_tum),
        razdel=SECTION,
        ns=ns,
        g1=scale_amount(total),
    )

def build_pass1_rows(sums1: Dict[str, float], period: int) -> List[OutputRow]:
    return [_row(period, k, PASS1_CODE, sums1[k]) for k in sorted(sums1)]

def build_pass2_rows(sums2: Dict[str, float], period: int) -> List[OutputRow]:
    items = []
    for k, total in sums2.items():
        parts = k.split(GROUP_SEPARATOR, 1)
        if len(parts) != 2:
            continue
        items.append((parts[0], parts[1], total))
    items.sort(key=lambda t: (t[0], t[1]))
    return [_row(period, rest, parse_int_text(ns), total) for ns, rest, total in items]

def materialize(sums1: Dict[str, float], sums2: Dict[str, float], period: int) -> List[OutputRow]:
    return build_pass1_rows(sums1, period) + build_pass2_rows(sums2, period)

def pass_totals(rows: List[OutputRow]) -> Dict[int, float]:
    totals: Dict[int, float] = {}
    for r in rows:
        totals[r.ns] = totals.get(r.ns, 0.0) + r.g1
    return totals
