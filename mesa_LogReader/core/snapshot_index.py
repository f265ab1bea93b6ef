# mesa_LogReader/core/snapshot_index.py
from __future__ import annotations
from dataclasses import dataclass
import numpy as np

@dataclass(frozen=True, eq=False)
class SnapshotIndex:
    """
    Model number <-> profile number mapping read from profiles.index.

    ``sequence_ids`` is ascending; ``snapshot_ids[i]`` belongs to the same
    profile as ``sequence_ids[i]``.
    """
    file_name: str
    sequence_ids: np.ndarray          # model numbers, ascending
    priorities: np.ndarray            # file order, not used for lookups
    snapshot_ids: np.ndarray          # profile numbers, ordered by model number
    forward: dict[int, int]           # model number -> profile number
    inverse: dict[int, int]           # profile number -> model number

    @classmethod
    def from_columns(cls, sequence_col, priority_col, snapshot_col,
                     file_name: str = "<memory>") -> "SnapshotIndex":
        seq = [int(x) for x in np.asarray(sequence_col, dtype=float)]
        snap = [int(x) for x in np.asarray(snapshot_col, dtype=float)]

        forward: dict[int, int] = {}
        for q, s in zip(seq, snap):
            forward[q] = s                        # last row wins
        inverse = {s: q for q, s in forward.items()}

        # profiles shadowed by a later duplicate model number sort by their own row
        order = sorted(range(len(snap)), key=lambda i: inverse.get(snap[i], seq[i]))
        return cls(
            file_name=file_name,
            sequence_ids=np.array(sorted(seq), dtype=np.int64),
            priorities=np.asarray(priority_col, dtype=float),
            snapshot_ids=np.array([snap[i] for i in order], dtype=np.int64),
            forward=forward,
            inverse=inverse,
        )

    def __len__(self) -> int:
        return int(self.sequence_ids.size)

    def has_sequence(self, sequence_id) -> bool:
        return sequence_id in self.forward

    def has_snapshot(self, snapshot_id) -> bool:
        return snapshot_id in self.inverse

    def snapshot_for_sequence(self, sequence_id) -> int | None:
        return self.forward.get(sequence_id)

    def sequence_for_snapshot(self, snapshot_id) -> int | None:
        return self.inverse.get(snapshot_id)
