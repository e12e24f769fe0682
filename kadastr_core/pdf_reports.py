"""
kadastr_core.pdf_reports
Run summary PDF (reportlab).
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import List, Sequence
from .config import MONTHS, PASS1_CODE
from .summaries import OutputRow, pass_totals
from .utils import fmt_amount, timestamp_line

def require_reportlab():
    try:
        from reportlab.lib import colors  # noqa
        from reportlab.lib.pagesizes import A4  # noqa
        from reportlab.lib.styles import getSampleStyleSheet  # noqa
        from reportlab.lib.units import cm  # noqa
        from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle  # noqa
        return colors, A4, getSampleStyleSheet, cm, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle
    except Exception:
        raise SystemExit("Missing dependency: reportlab\nInstall with: pip3 install reportlab\n")

def period_label(period: int, annual: bool) -> str:
    if annual:
        return f"Yillik ({period})"
    return f"{MONTHS[period - 1]} ({period})" if 1 <= period <= len(MONTHS) else str(period)

def _table(rl, data: Sequence[Sequence[str]], widths_cm: Sequence[float], footer_rows: int = 0):
    """Grey header row, right-aligned numbers; the last footer_rows rows are bold."""
    colors, cm, Table, TableStyle = rl["colors"], rl["cm"], rl["Table"], rl["TableStyle"]
    body_end = -1 - footer_rows
    commands = [
        ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
        ("ALIGN", (-1, 1), (-1, -1), "RIGHT"),
    ]
    if len(data) - 1 - footer_rows > 0:
        commands.append(("ROWBACKGROUNDS", (0, 1), (-1, body_end), [colors.whitesmoke, colors.white]))
    if footer_rows:
        commands.append(("FONTNAME", (0, -footer_rows), (-1, -1), "Helvetica-Bold"))
        commands.append(("LINEABOVE", (0, -footer_rows), (-1, -footer_rows), 0.8, colors.black))
    tbl = Table(list(data), colWidths=[w * cm for w in widths_cm], repeatRows=1)
    tbl.setStyle(TableStyle(commands))
    return tbl

def write_pdf_run_summary(result, pdf_path: Path, annual: bool) -> None:
    """
    result is a pipeline.PipelineResult: per-file outcomes plus the amount
    totals for each ns code of the output table.
    """
    colors, A4, getSampleStyleSheet, cm, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle = require_reportlab()
    rl = {"colors": colors, "cm": cm, "Table": Table, "TableStyle": TableStyle}
    styles = getSampleStyleSheet()
    doc = SimpleDocTemplate(str(pdf_path), pagesize=A4,
                            leftMargin=2 * cm, rightMargin=2 * cm, topMargin=1.5 * cm, bottomMargin=1.5 * cm,
                            title="Kadastr Run Summary")

    story = [
        Paragraph("Kadastr Run Summary", styles["Title"]),
        Paragraph(timestamp_line("Generated"), styles["Normal"]),
        Paragraph(f"Period: <b>{period_label(result.period, annual)}</b> &nbsp;&nbsp; "
                  f"Records: <b>{result.record_count}</b>", styles["Normal"]),
        Spacer(1, 0.4 * cm),
        Paragraph("Files", styles["Heading2"]),
    ]

    files_data = [["File", "Status", "Records"]]
    for o in result.outcomes:
        files_data.append([o.path.name, "OK" if o.ok else f"Skipped: {o.error}", str(o.records)])
    story.append(_table(rl, files_data, [6.5, 8.0, 2.5]))
    story.append(Spacer(1, 0.4 * cm))

    rows: List[OutputRow] = result.rows
    totals = pass_totals(rows)
    totals_data = [["ns", "Rows", "Total (g1)"]]
    pass2_total = 0.0
    for ns in sorted(totals):
        count = sum(1 for r in rows if r.ns == ns)
        totals_data.append([str(ns), str(count), fmt_amount(totals[ns])])
        if ns != PASS1_CODE:
            pass2_total += totals[ns]
    totals_data.append(["PASS 1 TOTAL", "", fmt_amount(totals.get(PASS1_CODE, 0.0))])
    totals_data.append(["PASS 2 TOTAL", "", fmt_amount(pass2_total)])

    story.append(Paragraph("Totals by ns", styles["Heading2"]))
    story.append(_table(rl, totals_data, [6.5, 2.5, 5.0], footer_rows=2))

    doc.build(story)
    logging.info("Summary PDF saved: %s", pdf_path)
