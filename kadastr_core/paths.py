"""
kadastr_core.paths
Output folder helpers.
"""
from __future__ import annotations
from pathlib import Path

OUTPUT_DIR = Path("output")
OUT_XLSX_DIR = OUTPUT_DIR / "xlsx"
OUT_PDF_DIR = OUTPUT_DIR / "pdf"
OUT_LOG_DIR = OUTPUT_DIR / "logs"

def out_dir(kind: str, base_dir: Path | None = None) -> Path:
    k = kind.lower()
    if k == "xlsx":
        d = OUT_XLSX_DIR
    elif k == "pdf":
        d = OUT_PDF_DIR
    elif k == "logs":
        d = OUT_LOG_DIR
    else:
        raise ValueError(f"Unknown output kind: {kind}")
    if base_dir is not None:
        d = Path(base_dir) / d
    d.mkdir(parents=True, exist_ok=True)
    return d

def out_path(kind: str, filename: str, base_dir: Path | None = None) -> Path:
    """
    Bare filenames go into output/<kind>/; anything with a directory part
    is used as given (parent folders are created).
    """
    p = Path(filename).expanduser()
    if p.parent != Path("."):
        p.parent.mkdir(parents=True, exist_ok=True)
        return p
    return out_dir(kind, base_dir) / p.name
