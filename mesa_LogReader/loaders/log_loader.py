# mesa_LogReader/loaders/log_loader.py
from __future__ import annotations
from pathlib import Path
import logging
import re
import numpy as np
import pandas as pd

from ..core.errors import FormatError
from ..core.model import HeaderScalar
from ..core.prune import prune_backups
from ..core.tabular_log import TabularLog
from ..utils.files import line_at, read_lines

_LOG = logging.getLogger(__name__)

# 1-based line numbers; lines 1, 4 and 5 are never read
HEADER_NAMES_LINE = 2
HEADER_VALUES_LINE = HEADER_NAMES_LINE + 1
BULK_NAMES_LINE = 6
BULK_DATA_START_LINE = BULK_NAMES_LINE + 1

# ---------- header ----------
# leading numeric prefix of a token; quoted strings ("gfortran", "r15140") have none
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"\s*[+-]?\d+")

def parse_header_scalar(token: str) -> HeaderScalar:
    """
    "." in the token -> float, else int. Only the leading numeric part is
    read; a token without one gives 0.0 or 0.
    """
    if "." in token:
        m = _FLOAT_PREFIX.match(token)
        return float(m.group(0)) if m else 0.0
    m = _INT_PREFIX.match(token)
    return int(m.group(0)) if m else 0

def _parse_header(lines: list[str], file_name: str) -> dict[str, HeaderScalar]:
    names = line_at(lines, HEADER_NAMES_LINE).split()
    values = line_at(lines, HEADER_VALUES_LINE).split()
    if len(names) != len(values):
        raise FormatError(
            f"{file_name}: {len(names)} header names on line {HEADER_NAMES_LINE} "
            f"but {len(values)} values on line {HEADER_VALUES_LINE}"
        )
    return {name: parse_header_scalar(tok) for name, tok in zip(names, values)}

# ---------- bulk data ----------
def _parse_bulk(lines: list[str], file_name: str) -> pd.DataFrame:
    names = line_at(lines, BULK_NAMES_LINE).split()
    if len(set(names)) != len(names):
        dupes = sorted({n for n in names if names.count(n) > 1})
        raise FormatError(f"{file_name}: repeated column names {dupes} on line {BULK_NAMES_LINE}")

    rows: list[list[str]] = []
    for line_no, line in enumerate(lines[BULK_DATA_START_LINE - 1:], start=BULK_DATA_START_LINE):
        tokens = line.split()
        if not tokens:
            continue
        if len(tokens) != len(names):
            raise FormatError(
                f"{file_name}: line {line_no} has {len(tokens)} fields, expected {len(names)}"
            )
        rows.append(tokens)

    try:
        arr = np.array(rows, dtype=float) if rows else np.empty((0, len(names)), dtype=float)
    except ValueError as e:
        raise FormatError(f"{file_name}: non-numeric value in data rows ({e})") from None
    return pd.DataFrame(arr, columns=names)

# ---------- public loader ----------
def parse_lines(lines: list[str], file_name: str = "<memory>",
                key_column: str = "model_number", prune: bool = True) -> TabularLog:
    """
    Build a TabularLog from the raw lines of a history or profile file.
    Rows superseded by backups are dropped when ``key_column`` exists and ``prune`` is set.
    """
    if len(lines) < BULK_DATA_START_LINE:
        raise FormatError(
            f"{file_name}: expected at least {BULK_DATA_START_LINE} lines, found {len(lines)}"
        )
    header = _parse_header(lines, file_name)
    df = _parse_bulk(lines, file_name)
    if prune:
        df, removed = prune_backups(df, key_column)
        if removed:
            _LOG.info("removed %d models from %s because of backups", removed, file_name)
    return TabularLog(file_name=file_name, header=header, data=df, key_column=key_column)

def load(path: Path | str, key_column: str = "model_number", prune: bool = True) -> TabularLog:
    path = Path(path)
    return parse_lines(read_lines(path), file_name=str(path), key_column=key_column, prune=prune)
