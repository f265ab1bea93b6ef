# mesa_LogReader/loaders/index_loader.py
from __future__ import annotations
from pathlib import Path
import numpy as np

from ..core.errors import FormatError
from ..core.snapshot_index import SnapshotIndex
from ..utils.files import read_lines

INDEX_DATA_START_LINE = 2      # line 1 holds the profile count, never read
INDEX_FIELDS = 3               # model number, priority, profile number

def parse_lines(lines: list[str], file_name: str = "<memory>") -> SnapshotIndex:
    if not lines:
        raise FormatError(f"{file_name}: empty profile index")
    rows: list[list[str]] = []
    for line_no, line in enumerate(lines[INDEX_DATA_START_LINE - 1:], start=INDEX_DATA_START_LINE):
        tokens = line.split()
        if not tokens:
            continue
        if len(tokens) != INDEX_FIELDS:
            raise FormatError(
                f"{file_name}: line {line_no} has {len(tokens)} fields, expected {INDEX_FIELDS}"
            )
        rows.append(tokens)
    try:
        arr = np.array(rows, dtype=float) if rows else np.empty((0, INDEX_FIELDS), dtype=float)
    except ValueError as e:
        raise FormatError(f"{file_name}: non-numeric value in index rows ({e})") from None
    return SnapshotIndex.from_columns(arr[:, 0], arr[:, 1], arr[:, 2], file_name=file_name)

def load(path: Path | str) -> SnapshotIndex:
    path = Path(path)
    return parse_lines(read_lines(path), file_name=str(path))
