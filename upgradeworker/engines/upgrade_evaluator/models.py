"""Data models for the upgrade evaluation engine."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from upgradeworker.errors import ValidationError


class ChangeType(str, enum.Enum):
    ADD = "Add"
    MODIFY = "Modify"
    DELETE = "Delete"


class RiskLevel(str, enum.Enum):
    """Upgrade severity, totally ordered: Low < Medium < High < Critical."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"

    @property
    def rank(self) -> int:
        return _RISK_ORDER.index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.rank >= other.rank


_RISK_ORDER = (RiskLevel.LOW, RiskLevel.MEDIUM, RiskLevel.HIGH, RiskLevel.CRITICAL)


class PerformanceImpact(str, enum.Enum):
    NONE = "None"
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


def _frozen_metadata(metadata: Any) -> Mapping[str, Any]:
    if not isinstance(metadata, Mapping):
        raise ValidationError(f"Metadata must be an object, got {type(metadata).__name__}")
    return MappingProxyType(dict(metadata))


@dataclass(frozen=True)
class UpgradeRequest:
    """A proposed ``package_name`` upgrade from ``current_version`` to ``target_version``.

    ``metadata`` is opaque to the engine: it is carried along and never read.
    It is copied into a read-only view, so later edits to the caller's dict
    do not leak into the request.
    """

    repository: str
    ecosystem: str
    package_name: str
    current_version: str
    target_version: str
    metadata: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "metadata", _frozen_metadata(self.metadata))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> UpgradeRequest:
        """Build a request from decoded JSON. Field types are checked later by validation."""
        if not isinstance(data, Mapping):
            raise ValidationError(f"Request must be a JSON object, got {type(data).__name__}")
        return cls(
            repository=data.get("repository", ""),
            ecosystem=data.get("ecosystem", ""),
            package_name=data.get("package_name", ""),
            current_version=data.get("current_version", ""),
            target_version=data.get("target_version", ""),
            metadata=data.get("metadata") or {},
        )


@dataclass(frozen=True)
class Change:
    """One proposed file mutation. ``content`` is the full replacement text."""

    file_path: str
    change_type: ChangeType
    content: str
    metadata: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "metadata", _frozen_metadata(self.metadata))

    def to_dict(self) -> dict[str, Any]:
        return {
            "file_path": self.file_path,
            "change_type": self.change_type.value,
            "content": self.content,
            "metadata": dict(self.metadata),
        }


@dataclass
class RiskAssessment:
    risk_level: RiskLevel = RiskLevel.LOW
    breaking_changes: bool = False
    security_issues: list[str] = field(default_factory=list)
    performance_impact: PerformanceImpact = PerformanceImpact.NONE

    def raise_to(self, level: RiskLevel) -> None:
        """Raise ``risk_level`` to *level*; never lowers it."""
        if level > self.risk_level:
            self.risk_level = level

    def to_dict(self) -> dict[str, Any]:
        return {
            "risk_level": self.risk_level.value,
            "breaking_changes": self.breaking_changes,
            "security_issues": list(self.security_issues),
            "performance_impact": self.performance_impact.value,
        }


@dataclass
class UpgradeResponse:
    """Verdict for a successfully evaluated upgrade."""

    success: bool
    message: str
    changes: list[Change]
    compatibility_score: float
    risk_assessment: RiskAssessment

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "message": self.message,
            "changes": [c.to_dict() for c in self.changes],
            "compatibility_score": self.compatibility_score,
            "risk_assessment": self.risk_assessment.to_dict(),
        }
