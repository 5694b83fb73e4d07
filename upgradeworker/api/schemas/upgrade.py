"""Upgrade request/response schemas."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from upgradeworker.engines.upgrade_evaluator.models import (
    ChangeType,
    PerformanceImpact,
    RiskLevel,
    UpgradeRequest,
    UpgradeResponse,
)


class UpgradeRequestBody(BaseModel):
    repository: str
    ecosystem: str
    package_name: str
    current_version: str
    target_version: str
    metadata: dict[str, Any] = Field(default_factory=dict)

    def to_request(self) -> UpgradeRequest:
        return UpgradeRequest(
            repository=self.repository,
            ecosystem=self.ecosystem,
            package_name=self.package_name,
            current_version=self.current_version,
            target_version=self.target_version,
            metadata=self.metadata,
        )


class ChangeItem(BaseModel):
    file_path: str
    change_type: ChangeType
    content: str
    metadata: dict[str, Any]


class RiskAssessmentItem(BaseModel):
    risk_level: RiskLevel
    breaking_changes: bool
    security_issues: list[str]
    performance_impact: PerformanceImpact


class UpgradeResponseBody(BaseModel):
    success: bool
    message: str
    changes: list[ChangeItem]
    compatibility_score: float
    risk_assessment: RiskAssessmentItem

    @classmethod
    def from_response(cls, response: UpgradeResponse) -> UpgradeResponseBody:
        return cls.model_validate(response.to_dict())


class ErrorBody(BaseModel):
    error: str
    error_type: str
