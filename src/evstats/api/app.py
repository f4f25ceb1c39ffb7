"""FastAPI application factory.

Serves the aggregator's read-only queries over HTTP.
"""

from __future__ import annotations

import os
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from evstats.aggregation.aggregator import DEFAULT_DATASET_PATH, Aggregator
from evstats.core.errors import ColumnNotFoundError, DatasetNotFoundError

DATASET_PATH_ENV = "EVSTATS_DATASET_PATH"


def resolve_dataset_path(dataset_path: Path | None = None) -> Path:
    """Pick the dataset path: argument, then environment, then default."""
    if dataset_path is not None:
        return Path(dataset_path)
    return Path(os.environ.get(DATASET_PATH_ENV, str(DEFAULT_DATASET_PATH)))


def get_aggregator(request: Request) -> Aggregator:
    """Dependency to get the aggregator bound to the app's dataset.

    Returns:
        Aggregator over the configured dataset path.
    """
    return Aggregator(request.app.state.dataset_path)


def create_app(dataset_path: Path | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        dataset_path: Optional path to the dataset CSV.

    Returns:
        Configured FastAPI application.
    """
    app = FastAPI(
        title="EV Stats API",
        description="Descriptive statistics for EV registrations",
        version="0.1.0",
    )
    app.state.dataset_path = resolve_dataset_path(dataset_path)

    # Add CORS middleware for UI access
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ],
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.exception_handler(DatasetNotFoundError)
    async def dataset_not_found(request: Request, exc: DatasetNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": "Dataset not found"})

    @app.exception_handler(ColumnNotFoundError)
    async def column_not_found(request: Request, exc: ColumnNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    # Include routes
    from evstats.api.routes import dataset, makes, years

    app.include_router(dataset.router, prefix="/api")
    app.include_router(makes.router, prefix="/api")
    app.include_router(years.router, prefix="/api")

    # Health check endpoint
    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


# Default app instance
app = create_app()
