# mesa_LogReader/main.py
from __future__ import annotations
from pathlib import Path
import logging
import sys
import yaml

from .core.errors import LogReaderError
from .core.log_dir import LogDirectory
from .core.model import LogDirConfig
from .core.plotting import save_column_plot, save_history_plots
from .core.reports import write_history_report, write_index_report

_LOG = logging.getLogger(__name__)

def load_config(cfg_path: Path) -> dict:
    with cfg_path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}

def _configure_logging(cfg: dict) -> bool:
    log_cfg = cfg.get("logging", {}) or {}
    verbose = bool(log_cfg.get("verbose", True))
    level = str(log_cfg.get("level", "INFO" if verbose else "WARNING")).upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO),
                        format="%(levelname)s %(name)s: %(message)s")
    return verbose

def _plot_snapshots(logs: LogDirectory, cfg: dict, out_root: Path, verbose: bool) -> None:
    snap_cfg = cfg.get("snapshots", {}) or {}
    x_col = snap_cfg.get("x_column")
    y_col = snap_cfg.get("y_column")
    if not x_col or not y_col:
        return
    requested = snap_cfg.get("sequence_ids") or [None]   # None -> latest profile

    series = []
    for seq in requested:
        try:
            prof = logs.resolve_snapshot(requested_sequence_id=seq)
        except LogReaderError as e:
            print(f"[WARN] skipping profile for model {seq}: {e}")
            continue
        label = f"model {prof.header.get('model_number', seq)}"
        if verbose:
            print(f"  [load] {Path(prof.file_name).name:20} ({label})")
        series.append((prof, label))

    if not series:
        if verbose:
            print("[INFO] No profiles loaded; skipping profile plot.")
        return
    save_column_plot(series, x_col, y_col, out_root / "plots",
                     title=f"{logs.log_path} — profiles: {y_col} vs {x_col}",
                     file_name=f"profiles_{y_col}_vs_{x_col}.png")

def run(cfg: dict) -> int:
    verbose = _configure_logging(cfg)

    # ---------- config ----------
    dir_cfg = LogDirConfig.from_dict(cfg.get("logs"))
    out_root = Path((cfg.get("output", {}) or {}).get("root", "out")).resolve()
    out_root.mkdir(parents=True, exist_ok=True)
    if verbose:
        print(f"[cfg] logs={Path(dir_cfg.log_path).resolve()}")
        print(f"[cfg] output={out_root}")

    # ---------- load ----------
    try:
        logs = LogDirectory.from_config(dir_cfg)
    except LogReaderError as e:
        _LOG.error("%s", e)
        return 1
    if verbose:
        latest = int(logs.sequence_ids.max()) if len(logs.index) else None
        print(f"[logs] history rows={logs.history.num_rows}, profiles={len(logs.index)}, "
              f"latest model with profile={latest}")

    # ---------- reports ----------
    rep_cfg = cfg.get("reports", {}) or {}
    fmt = str(rep_cfg.get("format", "csv")).lower()
    mat_var = str(rep_cfg.get("mat_variable", "history"))
    try:
        write_history_report(logs.history, out_root / "history_report", "history",
                             columns=rep_cfg.get("history_columns"), fmt=fmt, mat_variable=mat_var)
    except LogReaderError as e:
        _LOG.error("%s", e)
        return 1
    write_index_report(logs, out_root / "profiles_report", "profiles index", fmt=fmt)

    # ---------- plots ----------
    plot_cfg = cfg.get("plots", {}) or {}
    if bool(plot_cfg.get("enabled", False)):
        x_col = str(plot_cfg.get("x_column", dir_cfg.key_column))
        y_cols = [str(c) for c in (plot_cfg.get("y_columns") or [])]
        save_history_plots(logs.history, x_col, y_cols, out_root / "plots", title=str(logs.log_path))
        _plot_snapshots(logs, cfg, out_root, verbose)

    if verbose:
        print(f"[summary] finished {logs.log_path}")
    return 0

def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    here = Path(__file__).resolve().parent
    cfg_path = Path(argv[0]) if argv else here / "config.yaml"
    return run(load_config(cfg_path))

if __name__ == "__main__":
    sys.exit(main())
