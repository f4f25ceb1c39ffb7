"""Column schema for the EV registration dataset.

Header names are matched exactly (case-sensitive). A query resolves the
columns it needs into integer offsets once, before touching any row.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from evstats.core.errors import ColumnNotFoundError


class DatasetColumn(str, Enum):
    """Header names the aggregator reads."""

    MAKE = "Make"
    MODEL_YEAR = "Model Year"
    ELECTRIC_RANGE = "Electric Range"
    ELECTRIC_VEHICLE_TYPE = "Electric Vehicle Type"


@dataclass(frozen=True)
class ColumnOffsets:
    """Resolved header offsets for a single query.

    Attributes:
        offsets: Column -> zero-based field index. Optional columns missing
            from the header are absent from this mapping.
    """

    offsets: dict[DatasetColumn, int]

    def get(self, column: DatasetColumn) -> int | None:
        """Return the offset of column, or None if it was not resolved."""
        return self.offsets.get(column)

    @property
    def min_row_length(self) -> int:
        """Smallest field count a row needs to cover every resolved column."""
        if not self.offsets:
            return 0
        return max(self.offsets.values()) + 1

    def covers(self, fields: list[str]) -> bool:
        """Check whether a split row is long enough for this query."""
        return len(fields) >= self.min_row_length


def resolve_columns(
    header: list[str],
    required: tuple[DatasetColumn, ...],
    optional: tuple[DatasetColumn, ...] = (),
) -> ColumnOffsets:
    """Resolve column names against a split header row.

    Args:
        header: Header fields in file order.
        required: Columns that must be present.
        optional: Columns that are tallied only when present.

    Returns:
        ColumnOffsets for the present columns.

    Raises:
        ColumnNotFoundError: If a required column is missing.
    """
    offsets: dict[DatasetColumn, int] = {}

    for column in required:
        if column.value not in header:
            raise ColumnNotFoundError(column.value)
        offsets[column] = header.index(column.value)

    for column in optional:
        if column.value in header:
            offsets[column] = header.index(column.value)

    return ColumnOffsets(offsets=offsets)
