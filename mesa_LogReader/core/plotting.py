# mesa_LogReader/core/plotting.py
from __future__ import annotations
from pathlib import Path
import re
import matplotlib.pyplot as plt
import numpy as np

from .tabular_log import TabularLog

def _sanitize(name: str) -> str:
    s = re.sub(r"[^A-Za-z0-9._-]+", "_", name).strip("_")
    return s[:120] if len(s) > 120 else s

def save_history_plots(log: TabularLog, x_column: str, y_columns: list[str],
                       out_dir: Path, title: str, legend_ncol: int = 1) -> list[Path]:
    """One PNG per y column, plotted against ``x_column``."""
    written = []
    for y in y_columns:
        out = save_column_plot([(log, _label_for(log))], x_column, y, out_dir,
                               title=f"{title} — {y} vs {x_column}",
                               file_name=f"history_{_sanitize(y)}_vs_{_sanitize(x_column)}.png",
                               legend_ncol=legend_ncol)
        if out is not None:
            written.append(out)
    return written

def _label_for(log: TabularLog) -> str:
    return Path(log.file_name).name

def save_column_plot(series_list: list[tuple[TabularLog, str]],
                     x_column: str,
                     y_column: str,
                     out_dir: Path,
                     title: str,
                     file_name: str,
                     legend_ncol: int = 4) -> Path | None:
    """
    Overlay ``y_column`` vs ``x_column`` of several logs (history or profiles).
    Logs missing either column are skipped; returns None when nothing was plotted.
    """
    prepared: list[tuple[np.ndarray, np.ndarray, str]] = []
    for log, label in series_list:
        if not (log.has_column(x_column) and log.has_column(y_column)):
            continue
        x = log.data[x_column].to_numpy()
        y = log.data[y_column].to_numpy()
        mask = np.isfinite(x) & np.isfinite(y)
        if not mask.any():
            continue
        prepared.append((x[mask], y[mask], label))

    if not prepared:
        print(f"[INFO] {title}: columns '{x_column}'/'{y_column}' missing or empty; skipping plot.")
        return None

    out_dir.mkdir(parents=True, exist_ok=True)
    plt.figure(figsize=(11, 6))
    for x, y, label in prepared:
        plt.plot(x, y, label=label)
    plt.xlabel(x_column)
    plt.ylabel(y_column)
    plt.title(title)
    plt.grid(True, alpha=0.3)
    plt.legend(
        fontsize=8,
        ncol=legend_ncol,
        loc="upper center",
        bbox_to_anchor=(0.5, -0.15),
        frameon=False,
    )
    plt.tight_layout(rect=[0, 0.18, 1, 1])
    out_path = out_dir / file_name
    plt.savefig(out_path, dpi=160)
    plt.close()
    print(f"[OK] {title}: {len(prepared)} series → {out_path}")
    return out_path
