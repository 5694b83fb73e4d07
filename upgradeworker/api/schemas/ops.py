"""Health and metrics schemas."""

from __future__ import annotations

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str


class WorkerMetrics(BaseModel):
    status: str
    uptime: str
    processed_jobs: int
    failed_jobs: int


class MetricsResponse(BaseModel):
    worker: WorkerMetrics
