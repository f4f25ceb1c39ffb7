"""Model year API endpoints.

GET /api/years - Available model years
GET /api/years/{year} - Summary for one year
GET /api/years/{year}/colors - Simulated color distribution
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from evstats.aggregation.aggregator import Aggregator
from evstats.api.app import get_aggregator
from evstats.models.types import ColorBucket, YearlyStats

router = APIRouter()


@router.get("/years", response_model=list[int])
def available_years(aggregator: Aggregator = Depends(get_aggregator)) -> list[int]:
    """Get distinct model years in ascending order."""
    return aggregator.get_available_years()


@router.get("/years/{year}", response_model=YearlyStats)
def yearly_stats(year: int, aggregator: Aggregator = Depends(get_aggregator)) -> YearlyStats:
    """Get the summary for a model year.

    A year with no registrations returns zero totals, not 404.
    """
    return aggregator.get_yearly_stats(year)


@router.get("/years/{year}/colors", response_model=list[ColorBucket])
def color_distribution(
    year: int,
    aggregator: Aggregator = Depends(get_aggregator),
) -> list[ColorBucket]:
    """Get the simulated color distribution for a model year."""
    return aggregator.get_color_distribution(year)
