"""Tests for column schema resolution."""

import pytest

from evstats.core.columns import ColumnOffsets, DatasetColumn, resolve_columns
from evstats.core.errors import ColumnNotFoundError

HEADER = ["VIN", "Model Year", "Make", "Electric Range"]


class TestResolveColumns:
    """Tests for resolve_columns."""

    def test_required_column_offset(self):
        """Required columns resolve to their header position."""
        columns = resolve_columns(HEADER, required=(DatasetColumn.MAKE,))
        assert columns.get(DatasetColumn.MAKE) == 2

    def test_missing_required_raises(self):
        """Missing required column raises ColumnNotFoundError naming it."""
        with pytest.raises(ColumnNotFoundError) as exc_info:
            resolve_columns(HEADER, required=(DatasetColumn.ELECTRIC_VEHICLE_TYPE,))
        assert exc_info.value.column == "Electric Vehicle Type"
        assert "Electric Vehicle Type column not found" in str(exc_info.value)

    def test_missing_optional_is_unresolved(self):
        """Missing optional column resolves to None."""
        columns = resolve_columns(
            HEADER,
            required=(DatasetColumn.MODEL_YEAR,),
            optional=(DatasetColumn.ELECTRIC_VEHICLE_TYPE,),
        )
        assert columns.get(DatasetColumn.ELECTRIC_VEHICLE_TYPE) is None

    def test_lookup_is_case_sensitive(self):
        """Header names must match exactly."""
        with pytest.raises(ColumnNotFoundError):
            resolve_columns(["make", "model year"], required=(DatasetColumn.MAKE,))

    def test_first_duplicate_wins(self):
        """Duplicate header names resolve to the first occurrence."""
        columns = resolve_columns(["Make", "Make"], required=(DatasetColumn.MAKE,))
        assert columns.get(DatasetColumn.MAKE) == 0


class TestColumnOffsets:
    """Tests for row coverage checks."""

    def test_min_row_length_is_max_offset_plus_one(self):
        """Rows need one more field than the highest offset."""
        columns = ColumnOffsets(offsets={DatasetColumn.MAKE: 0, DatasetColumn.ELECTRIC_RANGE: 3})
        assert columns.min_row_length == 4
        assert columns.covers(["a", "b", "c", "d"])
        assert not columns.covers(["a", "b", "c"])

    def test_empty_offsets_cover_everything(self):
        """No resolved columns means any row qualifies."""
        assert ColumnOffsets(offsets={}).covers([])
