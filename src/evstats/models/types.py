"""Pydantic models for evstats results.

Field names are snake_case in Python and in API payloads.
"""

from pydantic import BaseModel


class DatasetPreview(BaseModel):
    """Raw header line and the first few raw data lines."""

    header: str
    rows: list[str]


class DatasetStats(BaseModel):
    """Basic dataset size figures.

    total_rows counts every newline-separated line after the header,
    including a trailing empty line.
    """

    total_rows: int
    file_size: int  # bytes


class MakeCount(BaseModel):
    """Registrations for one manufacturer."""

    make: str
    count: int


class TypeCount(BaseModel):
    """Registrations for one electric vehicle type."""

    type: str
    count: int


class YearlyStats(BaseModel):
    """Summary of registrations for a single model year."""

    total_evs: int
    top_makes: list[MakeCount]
    average_range: int  # miles, positive values only
    ev_types: list[TypeCount]


class ColorBucket(BaseModel):
    """One bucket of the synthetic color distribution."""

    color: str
    count: int
    hex: str
