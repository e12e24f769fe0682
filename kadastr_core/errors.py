"""
kadastr_core.errors
Error kinds raised by coercion, loading and the pipeline.
"""
from __future__ import annotations
from pathlib import Path
from typing import Union


class ParseError(ValueError):
    """Numeric text that is empty or unparsable after stripping."""


class ScalarTypeError(TypeError):
    """Scalar type that float coercion does not support."""


class FileError(Exception):
    """An input file could not be read or parsed; carries the file path."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path.name}: {reason}")


class EmptyInputError(Exception):
    """No records were loaded from any matched file."""
