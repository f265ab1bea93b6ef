"""Error types raised by the log readers.

Lookups of unknown header or column names are advisory (a warning is
logged and ``None`` returned); everything below aborts the operation.
"""
from __future__ import annotations


class LogReaderError(Exception):
    """Base class for all fatal reader failures."""


class FormatError(LogReaderError):
    """A history, profile or index file does not have the expected layout."""


class MissingKeyColumn(LogReaderError):
    """A key lookup was requested but the file has no key column."""


class KeyValueNotFound(LogReaderError):
    """No row carries the requested key value."""


class UnknownColumn(LogReaderError):
    """A filter or selection names a column that is not in the file."""


class MissingPredicate(LogReaderError):
    """A filter or selection was called without a predicate."""


class MissingLogDirectory(LogReaderError):
    """The configured log path is not a directory."""


class MissingIndexFile(LogReaderError):
    """The profile index file is not in the log directory."""


class MissingHistoryFile(LogReaderError):
    """The history file is not in the log directory."""


class NoSnapshotForSequence(LogReaderError):
    """No profile is known for the requested model number."""


class MissingSnapshotFile(LogReaderError):
    """The resolved profile file is not in the log directory."""
