"""Exceptions raised by evstats.

Errors propagate from the aggregator unchanged. The reporter and the API
decide how to present them.
"""

from __future__ import annotations


class EvStatsError(Exception):
    """Base class for evstats errors."""

    pass


class DatasetNotFoundError(EvStatsError, FileNotFoundError):
    """Raised when the dataset file does not exist at call time."""

    def __init__(self, path: object):
        self.path = path
        super().__init__(f"Dataset not found at {path}")


class ColumnNotFoundError(EvStatsError, KeyError):
    """Raised when a required column is missing from the dataset header."""

    def __init__(self, column: str):
        self.column = column
        super().__init__(column)

    def __str__(self) -> str:
        return f"{self.column} column not found in dataset"
