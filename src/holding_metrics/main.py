"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from holding_metrics.config.settings import get_settings
from holding_metrics.config.logging_config import setup_logging
from holding_metrics.repositories.sqlalchemy.database import init_db
from holding_metrics.api.routers import series_router, metrics_router
from holding_metrics.core.exceptions import (
    AppError,
    PriceUnavailableError,
    SeriesLoadError,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    setup_logging()
    init_db()
    yield


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Time-windowed performance metrics for a single-asset holding",
    version=settings.app_version,
    lifespan=lifespan,
)

app.include_router(series_router)
app.include_router(metrics_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for caller input errors."""
    return JSONResponse(
        status_code=400,
        content={"error": exc.code, "message": exc.message},
    )


@app.exception_handler(PriceUnavailableError)
@app.exception_handler(SeriesLoadError)
async def unavailable_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Handler for missing upstream data."""
    return JSONResponse(
        status_code=503,
        content={"error": exc.code, "message": exc.message},
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }
