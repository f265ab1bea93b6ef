# mesa_LogReader/utils/files.py
from __future__ import annotations
from pathlib import Path

from ..core.errors import FormatError, MissingLogDirectory

def list_entries(root: Path | str) -> list[str]:
    """
    Names of all entries (files and folders) directly inside ``root``.
    Sorted for deterministic ordering.
    """
    root = Path(root)
    if not root.is_dir():
        raise MissingLogDirectory(f"Log directory {root} does not exist or is not a directory.")
    return sorted(p.name for p in root.iterdir())

def read_lines(path: Path | str) -> list[str]:
    """Whole file as a list of lines (no line endings); line n is ``lines[n - 1]``."""
    try:
        return Path(path).read_text(encoding="utf-8").splitlines()
    except UnicodeDecodeError as e:
        raise FormatError(f"{path} is not valid UTF-8 text ({e.reason} at byte {e.start})") from None

def line_at(lines: list[str], line_number: int) -> str | None:
    """1-based line lookup; None past the end of the file."""
    if 1 <= line_number <= len(lines):
        return lines[line_number - 1]
    return None
