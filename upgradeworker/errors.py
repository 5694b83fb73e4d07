"""Typed errors raised by the upgrade evaluation pipeline."""

from __future__ import annotations

import enum


class ErrorType(str, enum.Enum):
    """Failure category carried by every :class:`UpgradeError`."""

    VALIDATION = "Validation"
    COMPATIBILITY = "Compatibility"
    SECURITY = "Security"
    PERFORMANCE = "Performance"
    NETWORK = "Network"
    INTERNAL = "Internal"


class UpgradeError(Exception):
    """Terminal failure of a single evaluation."""

    def __init__(self, message: str, error_type: ErrorType = ErrorType.INTERNAL) -> None:
        self.message = message
        self.error_type = error_type
        super().__init__(message)

    def to_dict(self) -> dict[str, str]:
        return {"error": self.message, "error_type": self.error_type.value}


class ValidationError(UpgradeError):
    """Malformed or missing request field (-> HTTP 400)."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorType.VALIDATION)


class NetworkError(UpgradeError):
    """Collaborator I/O failed or timed out (-> HTTP 502)."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorType.NETWORK)
