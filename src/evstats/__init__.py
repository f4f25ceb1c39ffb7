"""evstats: descriptive statistics over electric-vehicle registration data."""

from evstats.aggregation.aggregator import Aggregator
from evstats.core.errors import ColumnNotFoundError, DatasetNotFoundError, EvStatsError

__all__ = [
    "Aggregator",
    "ColumnNotFoundError",
    "DatasetNotFoundError",
    "EvStatsError",
]

__version__ = "0.1.0"
