"""Dataset API endpoints.

GET /api/dataset/stats - Row count and file size
GET /api/dataset/preview - Raw header and first lines
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from evstats.aggregation.aggregator import DEFAULT_PREVIEW_LIMIT, Aggregator
from evstats.api.app import get_aggregator
from evstats.models.types import DatasetPreview, DatasetStats

router = APIRouter()


@router.get("/dataset/stats", response_model=DatasetStats)
def get_dataset_stats(aggregator: Aggregator = Depends(get_aggregator)) -> DatasetStats:
    """Get dataset row count and size in bytes."""
    return aggregator.get_dataset_stats()


@router.get("/dataset/preview", response_model=DatasetPreview)
def preview_dataset(
    limit: int = Query(DEFAULT_PREVIEW_LIMIT, ge=0),
    aggregator: Aggregator = Depends(get_aggregator),
) -> DatasetPreview:
    """Get the raw header and up to limit raw lines.

    Args:
        limit: Lines after the header to consider.
        aggregator: Aggregator (injected).
    """
    return aggregator.preview_data(limit)
