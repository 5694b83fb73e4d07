"""Upgrade worker REST API — FastAPI application factory."""

from __future__ import annotations

import structlog
from fastapi import FastAPI

from upgradeworker.api.deps import init_worker
from upgradeworker.api.errors import register_error_handlers
from upgradeworker.api.middleware.request_id import RequestIDMiddleware
from upgradeworker.api.routers import ops, upgrade
from upgradeworker.core.config import WorkerConfig
from upgradeworker.core.logging import setup_logging
from upgradeworker.engines.upgrade_evaluator.vulnerability import VulnerabilityOracle

log = structlog.get_logger("upgradeworker.api")


def create_app(
    config: WorkerConfig | None = None,
    oracle: VulnerabilityOracle | None = None,
) -> FastAPI:
    """Build and return the FastAPI application.

    *oracle* replaces the placeholder vulnerability check; pass a real
    feed-backed implementation in production.
    """
    config = config or WorkerConfig.from_env()
    setup_logging(config.log_level)
    init_worker(config, oracle)

    app = FastAPI(title="Upgrade Worker")
    register_error_handlers(app)
    app.add_middleware(RequestIDMiddleware)

    app.include_router(ops.router, tags=["ops"])
    app.include_router(upgrade.router, prefix="/upgrade", tags=["upgrade"])

    log.info(
        "worker.configured",
        max_execution_time=config.max_execution_time,
        memory_limit=config.memory_limit,
        sandbox_enabled=config.sandbox_enabled,
        log_level=config.log_level,
    )
    return app
