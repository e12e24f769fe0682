#!/usr/bin/env python3
"""
kadastr_master.py

Reads every CSV / JSON file matched in a folder, fills in OKED / OKPO / SOATO
codes, sums a value column per district (soato_tum) twice:
  1) by district                      -> ns = 12
  2) by ns flag (42 gas/water, 41 other) and district
and saves the result table (mes, okpo, soato, razdel, ns, g1) to Excel.
Amounts are divided by 1000 (so'm -> ming so'm).

Install:
  pip3 install -e .

Examples:
  python3 kadastr_master.py data/ --key soato_tum --value qiymat_oy3
  python3 kadastr_master.py data/ --key soato_tum --value qiymat_oy3 --month Mart
  python3 kadastr_master.py data/ --key soato_tum --value "kadastr qiymati, ming so`m" --annual --out yillik.xlsx
  python3 kadastr_master.py data/ --patterns "*.json" --jsonl --key soato_tum --value qiymat --summary-pdf run_summary.pdf
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from kadastr_core.config import (
    DEFAULT_KEY_COLUMN,
    DEFAULT_OUTPUT_XLSX,
    DEFAULT_PATTERNS,
    DEFAULT_SUMMARY_PDF,
    MONTHS,
    OUTPUT_HEADERS,
)
from kadastr_core.errors import EmptyInputError, FileError
from kadastr_core.excel_reports import write_excel_table
from kadastr_core.paths import out_dir, out_path
from kadastr_core.pdf_reports import write_pdf_run_summary
from kadastr_core.pipeline import PipelineConfig, run_pipeline
from kadastr_core.summaries import default_month_name

# -----------------------------
# Logging
# -----------------------------
def setup_logging(base_dir: Path) -> Path:
    logs_dir = out_dir("logs", base_dir)
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_path = logs_dir / f"kadastr_master_{stamp}.log"

    root = logging.getLogger()
    root.setLevel(logging.INFO)

    # avoid duplicate handlers if user imports/runs in unusual way
    if not root.handlers:
        fmt = logging.Formatter("%(asctime)s | %(levelname)s | %(message)s")

        fh = logging.FileHandler(str(log_path), encoding="utf-8")
        fh.setLevel(logging.INFO)
        fh.setFormatter(fmt)

        sh = logging.StreamHandler()
        sh.setLevel(logging.INFO)
        sh.setFormatter(fmt)

        root.addHandler(fh)
        root.addHandler(sh)

    logging.info("Logging started: %s", log_path)
    return log_path


# -----------------------------
# CLI
# -----------------------------
def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Kadastr: folder of CSV/JSON -> grouped totals -> Excel.")
    p.add_argument("folder", help="Folder with input files")
    p.add_argument("--patterns", default=DEFAULT_PATTERNS, help="Semicolon-separated file patterns (default: %(default)s)")
    p.add_argument("--jsonl", action="store_true", help="Read .json files as JSON Lines (one object per line)")
    p.add_argument("--key", dest="key_column", default=DEFAULT_KEY_COLUMN, help="Grouping column (default: %(default)s)")
    p.add_argument("--value", dest="value_column", required=True, help="Column to sum, e.g. qiymat_oy3")

    period = p.add_mutually_exclusive_group()
    period.add_argument("--annual", action="store_true", help="Annual report (mes = 12)")
    period.add_argument("--month", choices=list(MONTHS), default=None,
                        help="Report month (default: previous month)")

    p.add_argument("--out", default=DEFAULT_OUTPUT_XLSX, help="Output Excel filename (saved to output/xlsx/)")
    p.add_argument("--summary-pdf", nargs="?", const=DEFAULT_SUMMARY_PDF, default="",
                   help="Also write a run summary PDF (saved to output/pdf/, default name: %(const)s)")
    return p

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(Path.cwd())

    config = PipelineConfig(
        folder=Path(args.folder),
        key_column=args.key_column,
        value_column=args.value_column,
        patterns=args.patterns,
        json_lines=args.jsonl,
        annual=args.annual,
        month_name=args.month or default_month_name(),
    )

    try:
        result = run_pipeline(config)
    except (ValueError, FileError) as e:
        logging.error("%s", e)
        return 2
    except EmptyInputError as e:
        logging.warning("No result: %s", e)
        return 1

    xlsx_path = write_excel_table(OUTPUT_HEADERS, [r.as_list() for r in result.rows], out_path("xlsx", args.out))
    print(f"✅ Result saved: {xlsx_path}")

    if args.summary_pdf:
        pdf_path = out_path("pdf", args.summary_pdf)
        write_pdf_run_summary(result, pdf_path, annual=args.annual)
        print(f"✅ Summary PDF: {pdf_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
