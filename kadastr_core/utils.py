"""
kadastr_core.utils
Small reusable helpers.
"""
from __future__ import annotations
from datetime import datetime
from zoneinfo import ZoneInfo

LOCAL_TZ = "Asia/Tashkent"

def fmt_amount(n: float) -> str:
    return f"{n:,.3f}"

def now_local() -> datetime:
    try:
        return datetime.now(ZoneInfo(LOCAL_TZ))
    except Exception:
        return datetime.now()

def timestamp_line(prefix: str = "Generated") -> str:
    dt = now_local()
    return f"{prefix}: {dt.strftime('%Y-%m-%d %H:%M:%S')} (Tashkent)"
