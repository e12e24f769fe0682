"""
kadastr_core.pipeline
Folder -> records -> enrichment -> two grouped passes -> output rows.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple
from .codes import enrich_records
from .config import ANNUAL_PERIOD, DEFAULT_PATTERNS
from .errors import EmptyInputError, FileError
from .grouping import aggregate_passes
from .loaders import find_input_files, load_records
from .summaries import OutputRow, materialize, resolve_period

@dataclass
class PipelineConfig:
    folder: Path
    key_column: str
    value_column: str
    patterns: str = DEFAULT_PATTERNS
    json_lines: bool = False
    annual: bool = False
    month_name: Optional[str] = None

@dataclass
class FileOutcome:
    path: Path
    ok: bool
    records: int = 0
    error: str = ""

    def log_line(self) -> str:
        if self.ok:
            return f"OK: {self.path.name}"
        return f"Skipped: {self.path.name} ({self.error})"

@dataclass
class PipelineResult:
    rows: List[OutputRow]
    outcomes: List[FileOutcome] = field(default_factory=list)
    record_count: int = 0
    period: int = ANNUAL_PERIOD

def validate_config(config: PipelineConfig) -> None:
    if not str(config.folder or "").strip():
        raise ValueError("Folder is not set.")
    if not (config.key_column or "").strip() or not (config.value_column or "").strip():
        raise ValueError("Key/value columns are not set.")

def load_folder(folder: Path, patterns: str, json_lines: bool) -> Tuple[List[Dict[str, Any]], List[FileOutcome]]:
    """
    Reads every matched file in order. A file that fails to load is logged
    and left out; the rest of the batch still runs.
    """
    records: List[Dict[str, Any]] = []
    outcomes: List[FileOutcome] = []
    for fp in find_input_files(folder, patterns):
        try:
            rows = load_records(fp, json_lines=json_lines)
        except FileError as e:
            outcome = FileOutcome(path=fp, ok=False, error=e.reason)
            logging.warning(outcome.log_line())
            outcomes.append(outcome)
            continue
        if rows is None:
            continue
        records.extend(rows)
        outcome = FileOutcome(path=fp, ok=True, records=len(rows))
        logging.info(outcome.log_line())
        outcomes.append(outcome)
    return records, outcomes

def run_pipeline(config: PipelineConfig) -> PipelineResult:
    validate_config(config)
    key_column = config.key_column.strip()
    value_column = config.value_column.strip()

    records, outcomes = load_folder(Path(str(config.folder).strip()), config.patterns, config.json_lines)
    if not records:
        raise EmptyInputError("No files matched or none could be read.")
    logging.info("Loaded %d records from %d file(s)", len(records), sum(1 for o in outcomes if o.ok))

    enrich_records(records)
    sums1, sums2 = aggregate_passes(records, key_column, value_column)
    logging.info("Pass 1: %d groups, pass 2: %d groups", len(sums1), len(sums2))

    period = resolve_period(config.annual, config.month_name)
    rows = materialize(sums1, sums2, period)
    return PipelineResult(rows=rows, outcomes=outcomes, record_count=len(records), period=period)
