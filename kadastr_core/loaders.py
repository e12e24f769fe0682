"""
kadastr_core.loaders
CSV / JSON / JSON Lines reading into plain record dicts.
"""
from __future__ import annotations
import csv
import json
import logging
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, List, Optional
from .errors import FileError

Record = Dict[str, Any]

CSV_EXTENSIONS = (".csv",)
JSON_EXTENSIONS = (".json",)

def load_csv_records(csv_path: Path) -> List[Record]:
    """
    First row is the header. Rows are aligned to it by position: short rows
    simply lack the trailing fields, extra cells are dropped.
    """
    try:
        with open(csv_path, newline="", encoding="utf-8-sig") as f:
            reader = csv.reader(f, strict=True)
            header = next(reader, None)
            if header is None:
                raise FileError(csv_path, "file is empty (no header row)")
            names = [h.strip() for h in header]

            out: List[Record] = []
            for row in reader:
                if not row:
                    continue
                out.append({name: cell for name, cell in zip(names, row)})
    except csv.Error as e:
        raise FileError(csv_path, f"malformed CSV: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise FileError(csv_path, str(e)) from e
    return out

def _decode(text: str) -> Any:
    # floats stay Decimal so long identifiers keep their digits
    return json.loads(text, parse_float=Decimal)

def load_json_records(json_path: Path, json_lines: bool) -> List[Record]:
    if json_lines:
        out: List[Record] = []
        try:
            with open(json_path, encoding="utf-8-sig") as f:
                for line in f:
                    if not line.strip():
                        continue
                    try:
                        obj = _decode(line)
                    except ValueError:
                        continue
                    if isinstance(obj, dict):
                        out.append(obj)
        except (OSError, UnicodeDecodeError) as e:
            raise FileError(json_path, str(e)) from e
        return out

    try:
        text = Path(json_path).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise FileError(json_path, str(e)) from e
    try:
        data = _decode(text)
    except ValueError as e:
        raise FileError(json_path, f"invalid JSON: {e}") from e
    if not isinstance(data, list):
        raise FileError(json_path, f"expected a JSON array, got {type(data).__name__}")
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            raise FileError(json_path, f"array element {i} is not an object")
    return data

def load_records(path: Path, json_lines: bool = False) -> Optional[List[Record]]:
    """Returns None for extensions this loader does not handle."""
    ext = Path(path).suffix.lower()
    if ext in CSV_EXTENSIONS:
        return load_csv_records(path)
    if ext in JSON_EXTENSIONS:
        return load_json_records(path, json_lines)
    return None

def split_patterns(patterns: str) -> List[str]:
    return [p.strip() for p in (patterns or "").split(";") if p.strip()]

def find_input_files(folder: Path, patterns: str) -> List[Path]:
    folder = Path(folder).expanduser()
    if not folder.is_dir():
        raise FileError(folder, "folder not found")

    seen = set()
    files: List[Path] = []
    for pat in split_patterns(patterns):
        # matching stays inside the folder itself
        if "**" in pat:
            logging.warning("Pattern skipped (recursive): %s", pat)
            continue
        if Path(pat).is_absolute():
            logging.warning("Pattern skipped (absolute): %s", pat)
            continue
        try:
            matched = sorted(folder.glob(pat))
        except (ValueError, NotImplementedError) as e:
            logging.warning("Pattern skipped: %s (%s)", pat, e)
            continue
        for p in matched:
            if not p.is_file() or p in seen:
                continue
            seen.add(p)
            files.append(p)
    return files
