# mesa_LogReader/core/log_dir.py
from __future__ import annotations
from pathlib import Path
from typing import Callable, Sequence
import logging
import numpy as np

from .errors import (MissingHistoryFile, MissingIndexFile, MissingKeyColumn, MissingPredicate,
                     MissingSnapshotFile, NoSnapshotForSequence)
from .model import LogDirConfig
from .snapshot_index import SnapshotIndex
from .tabular_log import TabularLog
from ..loaders import index_loader, log_loader
from ..utils.files import list_entries

_LOG = logging.getLogger(__name__)

class LogDirectory:
    """
    History, profile index and profiles of one LOGS directory behind one interface.

    The directory listing, the index and the history are read once here;
    every ``resolve_snapshot`` call parses its profile file again.
    """

    def __init__(self, log_path: Path | str = ".", snapshot_prefix: str = "profile",
                 snapshot_suffix: str = "data", history_file: str = "history.data",
                 index_file: str = "profiles.index", key_column: str = "model_number",
                 prune: bool = True):
        self.config = LogDirConfig(
            log_path=str(log_path),
            snapshot_prefix=snapshot_prefix,
            snapshot_suffix=snapshot_suffix,
            history_file=history_file,
            index_file=index_file,
            key_column=key_column,
            prune=prune,
        )
        self.log_path = Path(log_path)
        self.contents: list[str] = list_entries(self.log_path)
        if self.config.index_file not in self.contents:
            raise MissingIndexFile(f"No profile index file, {self.config.index_file}, in {self.log_path}.")
        if self.config.history_file not in self.contents:
            raise MissingHistoryFile(f"No history file, {self.config.history_file}, in {self.log_path}.")

        self.index: SnapshotIndex = index_loader.load(self.log_path / self.config.index_file)
        self.history: TabularLog = log_loader.load(
            self.log_path / self.config.history_file, key_column=key_column, prune=prune)
        _LOG.info("loaded %s: %d history rows, %d profiles",
                  self.log_path, self.history.num_rows, len(self.index))

    @classmethod
    def from_config(cls, cfg: dict | LogDirConfig | None) -> "LogDirectory":
        """Accepts a LogDirConfig or the ``logs`` section of config.yaml."""
        c = cfg if isinstance(cfg, LogDirConfig) else LogDirConfig.from_dict(cfg)
        return cls(log_path=c.log_path, snapshot_prefix=c.snapshot_prefix,
                   snapshot_suffix=c.snapshot_suffix, history_file=c.history_file,
                   index_file=c.index_file, key_column=c.key_column, prune=c.prune)

    # ---------- index passthrough ----------
    @property
    def sequence_ids(self) -> np.ndarray:
        return self.index.sequence_ids

    @property
    def snapshot_ids(self) -> np.ndarray:
        return self.index.snapshot_ids

    def has_sequence(self, sequence_id) -> bool:
        return self.index.has_sequence(sequence_id)

    def has_snapshot(self, snapshot_id) -> bool:
        return self.index.has_snapshot(snapshot_id)

    def snapshot_for_sequence(self, sequence_id) -> int | None:
        return self.index.snapshot_for_sequence(sequence_id)

    def snapshot_file_name(self, snapshot_id: int) -> str:
        return self.config.snapshot_file_name(snapshot_id)

    # ---------- profiles ----------
    def resolve_snapshot(self, requested_sequence_id=None, requested_snapshot_id=None) -> TabularLog:
        """
        Load one profile.

        Without arguments the profile of the largest model number is used. An
        explicit ``requested_snapshot_id`` wins over a model number and is only
        checked against the directory listing. A model number without a
        profile fails; there is no fallback to the latest profile.
        """
        snapshot_id = int(requested_snapshot_id) if requested_snapshot_id is not None else None
        if requested_sequence_id is None and snapshot_id is None:
            if len(self.index) == 0:
                raise NoSnapshotForSequence(f"{self.config.index_file} lists no profiles.")
            requested_sequence_id = int(self.sequence_ids.max())

        if snapshot_id is None:
            sequence_id = int(requested_sequence_id)
            if self.index.has_sequence(sequence_id):
                snapshot_id = self.index.snapshot_for_sequence(sequence_id)
            if snapshot_id is None:
                raise NoSnapshotForSequence(
                    f"No profile corresponding to model number {sequence_id} in {self.config.index_file}.")

        file_name = self.snapshot_file_name(snapshot_id)
        if file_name not in self.contents:
            raise MissingSnapshotFile(f"No profile file, {file_name}, in {self.log_path}.")
        return log_loader.load(self.log_path / file_name, key_column=self.config.key_column,
                               prune=self.config.prune)

    # ---------- selection ----------
    def select_sequence_ids(self, names: Sequence[str],
                            predicate: Callable[..., bool] | None = None) -> list[int]:
        """
        Model numbers that have a profile and whose history values of ``names`` pass ``predicate``.

            late = logs.select_sequence_ids(["star_age", "log_L"], lambda age, lum: age > 1e5 and lum > 2)
        """
        h = self.history
        names = h.check_columns(names)
        if predicate is None:
            raise MissingPredicate("Must provide a predicate to test values of the given columns.")
        if not h.has_column(h.key_column):
            raise MissingKeyColumn(f"No '{h.key_column}' column found in {h.file_name}.")

        selected: list[int] = []
        # repeated model numbers (prune off) are tested once
        for key in dict.fromkeys(h.data[h.key_column].to_numpy().tolist()):
            if not self.index.has_sequence(key):
                continue
            values = [h.value_at_key(name, key) for name in names]
            if predicate(*values):
                selected.append(int(key))
        if not selected:
            _LOG.warning("No model numbers with profiles met the selection criteria. "
                         "Returning an empty list.")
        return selected
