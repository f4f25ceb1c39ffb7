"""Aggregation module for EV registration statistics.

- Reads the dataset through adapter.dataset
- Produces counts, rankings and per-year summaries
- Forbidden: writing files, caching results between calls
"""

from evstats.aggregation.aggregator import COLOR_SHARES, Aggregator, parse_int

__all__ = ["COLOR_SHARES", "Aggregator", "parse_int"]
