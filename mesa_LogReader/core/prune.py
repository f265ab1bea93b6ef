# mesa_LogReader/core/prune.py
from __future__ import annotations
import logging
import numpy as np
import pandas as pd

_LOG = logging.getLogger(__name__)

def stale_rows(keys) -> np.ndarray:
    """
    Boolean mask of rows superseded by a later restart.

    Row k is stale when keys[k] >= min(keys[k+1:]) on the *original* keys.
    A reversed running minimum gives every suffix minimum in one pass.
    The last row is never stale.
    """
    v = np.asarray(keys, dtype=float)
    n = v.size
    mask = np.zeros(n, dtype=bool)
    if n < 2:
        return mask
    suffix_min = np.minimum.accumulate(v[::-1])[::-1]   # suffix_min[k] == min(v[k:])
    mask[:-1] = v[:-1] >= suffix_min[1:]
    return mask

def prune_backups(df: pd.DataFrame, key_column: str) -> tuple[pd.DataFrame, int]:
    """Return a copy of ``df`` without stale rows, and how many were dropped."""
    if key_column not in df.columns or df.empty:
        return df, 0
    mask = stale_rows(df[key_column].to_numpy())
    removed = int(mask.sum())
    if removed == 0:
        return df, 0
    _LOG.debug("removing %d rows superseded by backups (key column '%s')", removed, key_column)
    return df.loc[~mask].reset_index(drop=True), removed
