# mesa_LogReader/core/model.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Literal, Union

HeaderScalar = Union[int, float]          # "." in the token -> float, else int
FieldKind = Literal["column", "header", "missing"]

@dataclass(frozen=True)
class FieldLookup:
    name: str
    kind: FieldKind           # where the name was found, columns win over header fields
    value: Any = None         # ndarray for columns, HeaderScalar for header fields

    @property
    def found(self) -> bool:
        return self.kind != "missing"

@dataclass(frozen=True)
class LogDirConfig:
    log_path: str = "."                     # conventionally "LOGS"
    snapshot_prefix: str = "profile"
    snapshot_suffix: str = "data"
    history_file: str = "history.data"
    index_file: str = "profiles.index"
    key_column: str = "model_number"
    prune: bool = True                      # drop rows superseded by backups/retries

    @classmethod
    def from_dict(cls, section: dict | None) -> "LogDirConfig":
        """Build from the ``logs`` section of config.yaml; missing keys keep their defaults."""
        sec = section or {}
        base = cls()
        return cls(
            log_path=str(sec.get("log_path", base.log_path)),
            snapshot_prefix=str(sec.get("snapshot_prefix", base.snapshot_prefix)),
            snapshot_suffix=str(sec.get("snapshot_suffix", base.snapshot_suffix)),
            history_file=str(sec.get("history_file", base.history_file)),
            index_file=str(sec.get("index_file", base.index_file)),
            key_column=str(sec.get("key_column", base.key_column)),
            prune=bool(sec.get("prune", base.prune)),
        )

    def snapshot_file_name(self, snapshot_id: int) -> str:
        return f"{self.snapshot_prefix}{snapshot_id}.{self.snapshot_suffix}"
