"""Makes API endpoints.

GET /api/makes - Registration count per make
GET /api/makes/top - Makes ranked by count
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from evstats.aggregation.aggregator import DEFAULT_TOP_LIMIT, Aggregator
from evstats.api.app import get_aggregator
from evstats.models.types import MakeCount

router = APIRouter()


@router.get("/makes", response_model=dict[str, int])
def count_by_make(aggregator: Aggregator = Depends(get_aggregator)) -> dict[str, int]:
    """Get registrations per make, in first-seen order."""
    return aggregator.count_evs_by_make()


@router.get("/makes/top", response_model=list[MakeCount])
def top_makes(
    limit: int = Query(DEFAULT_TOP_LIMIT, ge=0),
    aggregator: Aggregator = Depends(get_aggregator),
) -> list[MakeCount]:
    """Get the top makes by registration count.

    Args:
        limit: Maximum number of makes.
        aggregator: Aggregator (injected).
    """
    return aggregator.get_top_makes(limit)
