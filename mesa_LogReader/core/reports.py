# mesa_LogReader/core/reports.py
from __future__ import annotations
from pathlib import Path
from typing import Literal, Sequence
import numpy as np
import pandas as pd
from scipy.io import savemat

from .errors import UnknownColumn
from .log_dir import LogDirectory
from .tabular_log import TabularLog

ReportFormat = Literal["csv", "mat", "both"]

def _history_dataframe(log: TabularLog, columns: Sequence[str] | None) -> pd.DataFrame:
    """Selected bulk columns (all when ``columns`` is empty), key column first when present."""
    if not columns:
        return log.to_dataframe()
    cols = list(columns)
    for c in cols:
        if not log.has_column(c):
            raise UnknownColumn(f"{c} not a recognized data category in {log.file_name}.")
    if log.has_column(log.key_column) and log.key_column not in cols:
        cols = [log.key_column] + cols
    return log.data[cols].copy()

def _index_dataframe(logs: LogDirectory) -> pd.DataFrame:
    rows = []
    for seq, snap in zip(logs.sequence_ids, logs.snapshot_ids):
        fname = logs.snapshot_file_name(int(snap))
        rows.append({
            "sequence_id": int(seq),
            "snapshot_id": int(snap),
            "file_name": fname,
            "on_disk": fname in logs.contents,
        })
    return pd.DataFrame(rows, columns=["sequence_id", "snapshot_id", "file_name", "on_disk"])

def _write_csv(df_out: pd.DataFrame, out_csv: Path, title: str) -> None:
    out_csv.parent.mkdir(parents=True, exist_ok=True)
    df_out.to_csv(out_csv, index=False, encoding="utf-8")
    print(f"[OK] wrote report: {title} → {out_csv}")

def _to_mat_cellstr(seq: list[str]) -> np.ndarray:
    """Make a MATLAB column cell array from a list of strings."""
    seq2 = [("" if s is None else str(s)) for s in seq]
    arr = np.empty((len(seq2), 1), dtype=object)
    arr[:, 0] = seq2
    return arr

def _mat_field_name(name: str) -> str:
    # MATLAB struct fields: letters, digits, underscores; must start with a letter
    s = "".join(ch if ch.isalnum() or ch == "_" else "_" for ch in name)
    return s if s[:1].isalpha() else f"c_{s}"

def _write_mat(df_out: pd.DataFrame, out_mat: Path, varname: str, title: str) -> None:
    """
    Save a MATLAB struct with one field per column.
    Strings become cell arrays (Nx1), numerics and flags become double (Nx1).
    """
    out_mat.parent.mkdir(parents=True, exist_ok=True)
    mat_struct = {}
    for col in df_out.columns:
        s = df_out[col]
        if pd.api.types.is_numeric_dtype(s) or pd.api.types.is_bool_dtype(s):
            mat_struct[_mat_field_name(str(col))] = s.to_numpy(dtype=float).reshape(-1, 1)
        else:
            mat_struct[_mat_field_name(str(col))] = _to_mat_cellstr(s.astype(str).tolist())
    savemat(out_mat, {varname: mat_struct})
    print(f"[OK] wrote report: {title} → {out_mat}")

def _write(df_out: pd.DataFrame, out_base: Path, title: str, fmt: ReportFormat, mat_variable: str) -> None:
    if fmt in ("csv", "both"):
        _write_csv(df_out, out_base.with_suffix(".csv"), title)
    if fmt in ("mat", "both"):
        _write_mat(df_out, out_base.with_suffix(".mat"), mat_variable, title)

def write_history_report(log: TabularLog,
                         out_base: Path,
                         title: str,
                         columns: Sequence[str] | None = None,
                         fmt: ReportFormat = "csv",
                         mat_variable: str = "history") -> pd.DataFrame:
    """
    Write history (or profile) columns in the requested format.
    - out_base is a *base path without extension* (e.g., .../history_report)
    - fmt: "csv" | "mat" | "both"
    """
    df_out = _history_dataframe(log, columns)
    _write(df_out, out_base, title, fmt, mat_variable)
    return df_out

def write_index_report(logs: LogDirectory,
                       out_base: Path,
                       title: str,
                       fmt: ReportFormat = "csv",
                       mat_variable: str = "profiles") -> pd.DataFrame:
    """One row per indexed profile, with whether its file is in the directory."""
    df_out = _index_dataframe(logs)
    _write(df_out, out_base, title, fmt, mat_variable)
    return df_out
