"""
kadastr_core.excel_reports
Excel creation (openpyxl).
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Any, List, Sequence
from .config import EXCEL_COLUMN_WIDTH

def require_openpyxl():
    try:
        from openpyxl import Workbook  # noqa
        from openpyxl.styles import Font  # noqa
        from openpyxl.utils import get_column_letter  # noqa
        return Workbook, Font, get_column_letter
    except Exception:
        raise SystemExit("Missing dependency: openpyxl\nInstall with: pip3 install openpyxl\n")

def ensure_xlsx_suffix(path: Path) -> Path:
    p = Path(path)
    if p.suffix.lower() != ".xlsx":
        p = p.with_name(p.name + ".xlsx")
    return p

def write_excel_table(headers: List[str], rows: Sequence[Sequence[Any]], xlsx_path: Path) -> Path:
    """
    One sheet: bold header row, then the rows as given. Columns A..Z get a
    fixed width. A half-written file is removed if saving fails.
    """
    Workbook, Font, get_column_letter = require_openpyxl()
    BOLD = Font(bold=True)
    xlsx_path = ensure_xlsx_suffix(xlsx_path)

    wb = Workbook()
    ws = wb.active
    ws.title = "Natija"

    ws.append(list(headers))
    for c in range(1, len(headers) + 1):
        ws.cell(row=1, column=c).font = BOLD

    for r in rows:
        ws.append(list(r))

    for c in range(1, 27):
        ws.column_dimensions[get_column_letter(c)].width = EXCEL_COLUMN_WIDTH

    try:
        wb.save(xlsx_path)
    except Exception:
        if xlsx_path.exists():
            xlsx_path.unlink()
        raise
    logging.info("Excel saved: %s (%d rows)", xlsx_path, len(rows))
    return xlsx_path
