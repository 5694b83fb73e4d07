"""Ops router — liveness and job counters."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from fastapi import APIRouter, Depends

from upgradeworker.api.deps import get_stats
from upgradeworker.api.schemas.ops import HealthResponse, MetricsResponse, WorkerMetrics
from upgradeworker.api.stats import WorkerStats

SERVICE_NAME = "upgrade-worker"

router = APIRouter()


def _service_version() -> str:
    try:
        return version("upgradeworker")
    except PackageNotFoundError:
        return "unknown"


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="healthy", service=SERVICE_NAME, version=_service_version())


@router.get("/metrics", response_model=MetricsResponse)
async def metrics(stats: WorkerStats = Depends(get_stats)) -> MetricsResponse:
    snap = stats.snapshot()
    return MetricsResponse(
        worker=WorkerMetrics(
            status="running",
            uptime=f"{snap['uptime_seconds']}s",
            processed_jobs=snap["processed_jobs"],
            failed_jobs=snap["failed_jobs"],
        )
    )
