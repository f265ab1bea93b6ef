"""Writers for small synthetic LOGS directories used across the tests."""
from pathlib import Path


def write_log(path: Path, header: dict, columns: list, rows: list) -> None:
    lines = [
        "   ".join(str(i + 1) for i in range(len(header))),
        "   ".join(header),
        "   ".join(str(v) for v in header.values()),
        "",
        "   ".join(str(i + 1) for i in range(len(columns))),
        "   ".join(columns),
    ] + ["   ".join(str(v) for v in row) for row in rows]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


def write_index(path: Path, rows: list) -> None:
    lines = [f"{len(rows)} models."] + [f"{q} {p} {s}" for q, p, s in rows]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


def make_log_dir(root: Path, profiles=(20,)) -> Path:
    """History with a restart (model 5 re-run from 3), profiles indexed for models 1-3."""
    logs = root / "LOGS"
    logs.mkdir()
    write_log(logs / "history.data", {"version_number": 5, "burn_min1": "10.0"},
              ["model_number", "star_age", "log_Teff", "log_L"],
              [[1, 0.1, 3.5, 0.0], [2, 0.2, 3.6, 0.5], [5, 9.9, 9.9, 9.9],
               [3, 0.3, 3.7, 1.0], [4, 0.4, 3.8, 1.5]])
    write_index(logs / "profiles.index", [(3, 1, 30), (1, 2, 10), (2, 1, 20)])
    for snap in profiles:
        model = snap // 10
        write_log(logs / f"profile{snap}.data", {"model_number": model, "star_age": f"{model / 10}"},
                  ["zone", "mass", "logT"],
                  [[1, 1.0, 6.0 + model], [2, 0.5, 6.5 + model], [3, 0.1, 7.0 + model]])
    return logs
