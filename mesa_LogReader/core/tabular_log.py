# mesa_LogReader/core/tabular_log.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Sequence
import logging
import numpy as np
import pandas as pd

from .errors import KeyValueNotFound, MissingKeyColumn, MissingPredicate, UnknownColumn
from .model import FieldLookup, HeaderScalar

_LOG = logging.getLogger(__name__)

@dataclass(frozen=True, eq=False)
class TabularLog:
    """
    One parsed history or profile file.

    ``header`` holds the scalar header fields (line 2/3 of the file), ``data``
    one float column per bulk name (line 6 on). Build instances through
    ``loaders.log_loader``; rows superseded by backups are already removed
    when the object is created.
    """
    file_name: str
    header: dict[str, HeaderScalar]
    data: pd.DataFrame
    key_column: str = "model_number"
    header_names: list[str] = field(init=False)
    bulk_names: list[str] = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "header_names", list(self.header))
        object.__setattr__(self, "bulk_names", [str(c) for c in self.data.columns])

    # ---------- membership ----------
    def has_header(self, name: str) -> bool:
        return name in self.header

    def has_column(self, name: str) -> bool:
        return name in self.data.columns

    @property
    def num_rows(self) -> int:
        return int(self.data.shape[0])

    def __len__(self) -> int:
        return self.num_rows

    # ---------- lookups ----------
    def _column_copy(self, name: str) -> np.ndarray:
        # read-only copy, callers cannot write through to ``data``
        arr = self.data[name].to_numpy(copy=True)
        arr.flags.writeable = False
        return arr

    def header_value(self, name: str) -> HeaderScalar | None:
        if self.has_header(name):
            return self.header[name]
        _LOG.warning("Couldn't find header %s in %s.", name, self.file_name)
        return None

    def column(self, name: str) -> np.ndarray | None:
        if self.has_column(name):
            return self._column_copy(name)
        _LOG.warning("Couldn't find column %s in %s.", name, self.file_name)
        return None

    def get(self, name: str) -> FieldLookup:
        """Bulk columns first, then header fields; never logs."""
        if self.has_column(name):
            return FieldLookup(name, "column", self._column_copy(name))
        if self.has_header(name):
            return FieldLookup(name, "header", self.header[name])
        return FieldLookup(name, "missing")

    def to_dataframe(self) -> pd.DataFrame:
        return self.data.copy()

    # ---------- keyed access ----------
    def index_of_key(self, key_value) -> int:
        if not self.has_column(self.key_column):
            raise MissingKeyColumn(
                f"No '{self.key_column}' column found in {self.file_name}. "
                f"Cannot match to {self.key_column} {key_value}."
            )
        hits = np.flatnonzero(self.data[self.key_column].to_numpy() == float(key_value))
        if hits.size == 0:
            raise KeyValueNotFound(
                f"No such {self.key_column}: {float(key_value)} in column "
                f"'{self.key_column}' of file {self.file_name}."
            )
        return int(hits[0])

    def value_at_key(self, name: str, key_value) -> float | None:
        """Value of column ``name`` in the row whose key column equals ``key_value`` exactly."""
        if not self.has_column(name):
            _LOG.warning("Couldn't find column %s in %s.", name, self.file_name)
            return None
        return float(self.data[name].iat[self.index_of_key(key_value)])

    # ---------- selection ----------
    def check_columns(self, names: Sequence[str]) -> list[str]:
        names = list(names or [])
        if not names:
            raise UnknownColumn("At least one column name is required for a selection.")
        for name in names:
            if not self.has_column(name):
                raise UnknownColumn(f"{name} not a recognized data category in {self.file_name}.")
        return names

    def filter(self, names: Sequence[str], predicate: Callable[..., bool] | None = None) -> list[int]:
        """
        Row indices (ascending) whose values of ``names`` pass ``predicate``.

        The predicate receives one value per name, in the given order, e.g.
        ``log.filter(["star_age", "log_L"], lambda age, lum: age > 1e5 and lum > 2)``.
        """
        names = self.check_columns(names)
        if predicate is None:
            raise MissingPredicate("Must provide a predicate to test values of the given columns.")
        cols = [self.data[name].to_numpy() for name in names]
        selected = [i for i in range(self.num_rows) if predicate(*(float(c[i]) for c in cols))]
        if not selected:
            _LOG.warning("No rows of %s met the selection criteria. Returning an empty list.",
                         self.file_name)
        return selected
