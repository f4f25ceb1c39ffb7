"""EV registration aggregation.

Computes descriptive statistics over the registration CSV: dataset size,
preview, counts by make, available model years, per-year summaries and a
synthetic color distribution.

Every query re-reads the file. Missing files and missing required columns
raise; unparseable numeric fields are skipped.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from pathlib import Path

from evstats.adapter import dataset
from evstats.core.columns import DatasetColumn, resolve_columns
from evstats.models.types import (
    ColorBucket,
    DatasetPreview,
    DatasetStats,
    MakeCount,
    TypeCount,
    YearlyStats,
)

logger = logging.getLogger(__name__)

DEFAULT_DATASET_PATH = Path("data/ev_population_data.csv")
DEFAULT_PREVIEW_LIMIT = 5
DEFAULT_TOP_LIMIT = 10
YEARLY_TOP_MAKES = 10

# Leading integer, as read by parse_int
_INT_PREFIX = re.compile(r"[\s\ufeff]*([+-]?[0-9]+)")


@dataclass(frozen=True)
class ColorShare:
    """Fixed share of a year's total assigned to one color."""

    color: str
    proportion: float
    hex: str


# Synthetic split: the dataset has no color column.
# Shares are applied with floor, so buckets may sum to less than the total.
COLOR_SHARES: tuple[ColorShare, ...] = (
    ColorShare("White", 0.25, "#FFFFFF"),
    ColorShare("Black", 0.20, "#000000"),
    ColorShare("Silver", 0.15, "#C0C0C0"),
    ColorShare("Blue", 0.12, "#0000FF"),
    ColorShare("Red", 0.08, "#FF0000"),
    ColorShare("Green", 0.07, "#008000"),
    ColorShare("Gray", 0.06, "#808080"),
    ColorShare("Other", 0.07, "#800080"),
)


def parse_int(value: str) -> int | None:
    """Parse the leading base-10 integer of a field.

    Leading whitespace (including a byte order mark) and an optional sign
    are accepted. Only ASCII digits count, and parsing stops at the first
    non-digit ("12.7" -> 12, "250 mi" -> 250).

    Args:
        value: Raw field text.

    Returns:
        Parsed integer, or None if the field has no leading digits.
    """
    match = _INT_PREFIX.match(value)
    if match is None:
        return None
    return int(match.group(1))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return math.floor(value + 0.5)


def rank_counts(counts: dict[str, int], limit: int) -> list[tuple[str, int]]:
    """Order (key, count) pairs by count descending, keeping first-seen order for ties.

    Args:
        counts: Insertion-ordered counts.
        limit: Maximum number of pairs to return.

    Returns:
        At most limit pairs.
    """
    # sorted() is stable, so equal counts keep dict insertion order
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return ranked[: max(limit, 0)]


class Aggregator:
    """Read-only queries over an EV registration CSV.

    The aggregator holds only the dataset path. It does not load or
    validate the file until a query runs, and each query reads it again.
    """

    def __init__(self, dataset_path: str | Path = DEFAULT_DATASET_PATH):
        self.dataset_path = Path(dataset_path)

    def __repr__(self) -> str:
        return f"Aggregator(dataset_path={str(self.dataset_path)!r})"

    def preview_data(self, limit: int = DEFAULT_PREVIEW_LIMIT) -> DatasetPreview:
        """Return the raw header and up to limit raw data lines.

        Only the first limit lines after the header are considered; blank
        ones among them are dropped rather than replaced.

        Args:
            limit: Number of lines after the header to consider.

        Returns:
            DatasetPreview with unsplit lines.

        Raises:
            DatasetNotFoundError: If the dataset file is missing.
        """
        content = dataset.read_lines(self.dataset_path)
        window = content.lines[1 : max(limit, 0) + 1]
        rows = [line for line in window if not dataset.is_blank(line)]
        return DatasetPreview(header=content.header, rows=rows)

    def get_dataset_stats(self) -> DatasetStats:
        """Return the row count and byte size of the dataset.

        The row count is the number of newline-separated lines minus the
        header, so a trailing newline adds one empty row.

        Raises:
            DatasetNotFoundError: If the dataset file is missing.
        """
        size = dataset.file_size(self.dataset_path)
        content = dataset.read_lines(self.dataset_path)
        return DatasetStats(total_rows=len(content.lines) - 1, file_size=size)

    def count_evs_by_make(self) -> dict[str, int]:
        """Count registrations per manufacturer.

        Returns:
            Make -> count, in the order makes first appear.

        Raises:
            DatasetNotFoundError: If the dataset file is missing.
            ColumnNotFoundError: If the Make column is missing.
        """
        content = dataset.read_lines(self.dataset_path)
        columns = resolve_columns(content.header_fields, required=(DatasetColumn.MAKE,))
        make_index = columns.get(DatasetColumn.MAKE)

        make_counts: dict[str, int] = {}
        for fields in content.data_rows():
            if not columns.covers(fields):
                continue
            make = fields[make_index].strip()
            if make:
                make_counts[make] = make_counts.get(make, 0) + 1

        logger.debug(f"Counted {len(make_counts)} distinct makes in {self.dataset_path}")
        return make_counts

    def get_top_makes(self, limit: int = DEFAULT_TOP_LIMIT) -> list[MakeCount]:
        """Return the most registered makes, highest count first.

        Args:
            limit: Maximum number of makes to return.

        Raises:
            DatasetNotFoundError: If the dataset file is missing.
            ColumnNotFoundError: If the Make column is missing.
        """
        ranked = rank_counts(self.count_evs_by_make(), limit)
        return [MakeCount(make=make, count=count) for make, count in ranked]

    def get_available_years(self) -> list[int]:
        """Return the distinct model years in ascending order.

        Unparseable year values are ignored.

        Raises:
            DatasetNotFoundError: If the dataset file is missing.
            ColumnNotFoundError: If the Model Year column is missing.
        """
        content = dataset.read_lines(self.dataset_path)
        columns = resolve_columns(content.header_fields, required=(DatasetColumn.MODEL_YEAR,))
        year_index = columns.get(DatasetColumn.MODEL_YEAR)

        years: set[int] = set()
        for fields in content.data_rows():
            if not columns.covers(fields):
                continue
            year = parse_int(fields[year_index])
            if year is not None:
                years.add(year)

        return sorted(years)

    def get_yearly_stats(self, year: int) -> YearlyStats:
        """Summarize registrations for a single model year.

        Make, Electric Range and Electric Vehicle Type are optional; when
        one is missing from the header its part of the result stays empty.
        A row must be long enough to hold every present column to count.

        Args:
            year: Model year to summarize.

        Returns:
            YearlyStats with total, top 10 makes, average positive range
            and vehicle types in first-seen order.

        Raises:
            DatasetNotFoundError: If the dataset file is missing.
            ColumnNotFoundError: If the Model Year column is missing.
        """
        content = dataset.read_lines(self.dataset_path)
        columns = resolve_columns(
            content.header_fields,
            required=(DatasetColumn.MODEL_YEAR,),
            optional=(
                DatasetColumn.MAKE,
                DatasetColumn.ELECTRIC_RANGE,
                DatasetColumn.ELECTRIC_VEHICLE_TYPE,
            ),
        )
        year_index = columns.get(DatasetColumn.MODEL_YEAR)
        make_index = columns.get(DatasetColumn.MAKE)
        range_index = columns.get(DatasetColumn.ELECTRIC_RANGE)
        type_index = columns.get(DatasetColumn.ELECTRIC_VEHICLE_TYPE)

        total_evs = 0
        make_counts: dict[str, int] = {}
        type_counts: dict[str, int] = {}
        range_total = 0
        range_count = 0
        short_rows = 0

        for fields in content.data_rows():
            if not columns.covers(fields):
                short_rows += 1
                continue
            if parse_int(fields[year_index]) != year:
                continue

            total_evs += 1

            if make_index is not None:
                make = fields[make_index].strip()
                if make:
                    make_counts[make] = make_counts.get(make, 0) + 1

            if range_index is not None:
                electric_range = parse_int(fields[range_index])
                if electric_range is not None and electric_range > 0:
                    range_total += electric_range
                    range_count += 1

            if type_index is not None:
                ev_type = fields[type_index].strip()
                if ev_type:
                    type_counts[ev_type] = type_counts.get(ev_type, 0) + 1

        if short_rows:
            logger.debug(f"Skipped {short_rows} short rows while summarizing {year}")

        average_range = round_half_up(range_total / range_count) if range_count else 0

        return YearlyStats(
            total_evs=total_evs,
            top_makes=[
                MakeCount(make=make, count=count)
                for make, count in rank_counts(make_counts, YEARLY_TOP_MAKES)
            ],
            average_range=average_range,
            ev_types=[TypeCount(type=ev_type, count=count) for ev_type, count in type_counts.items()],
        )

    def get_color_distribution(self, year: int) -> list[ColorBucket]:
        """Return a synthetic color breakdown for a model year.

        The dataset carries no color column. Each bucket is a fixed share
        of the year's total, rounded down.

        Args:
            year: Model year to distribute.

        Raises:
            DatasetNotFoundError: If the dataset file is missing.
            ColumnNotFoundError: If the Model Year column is missing.
        """
        total_evs = self.get_yearly_stats(year).total_evs
        return [
            ColorBucket(
                color=share.color,
                count=math.floor(total_evs * share.proportion),
                hex=share.hex,
            )
            for share in COLOR_SHARES
        ]
