"""Upgrade router — evaluate a proposed dependency upgrade."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from upgradeworker.api.deps import get_evaluator, get_stats
from upgradeworker.api.schemas.upgrade import (
    ErrorBody,
    UpgradeRequestBody,
    UpgradeResponseBody,
)
from upgradeworker.api.stats import WorkerStats
from upgradeworker.engines.upgrade_evaluator.evaluator import UpgradeEvaluator
from upgradeworker.errors import UpgradeError

router = APIRouter()


# Plain def: a substituted oracle may block, so FastAPI runs this in its threadpool.
@router.post(
    "",
    response_model=UpgradeResponseBody,
    responses={400: {"model": ErrorBody}, 502: {"model": ErrorBody}, 500: {"model": ErrorBody}},
)
def process_upgrade(
    body: UpgradeRequestBody,
    evaluator: UpgradeEvaluator = Depends(get_evaluator),
    stats: WorkerStats = Depends(get_stats),
) -> UpgradeResponseBody:
    try:
        response = evaluator.evaluate(body.to_request())
    except UpgradeError:
        stats.record_failure()
        raise
    stats.record_success()
    return UpgradeResponseBody.from_response(response)
