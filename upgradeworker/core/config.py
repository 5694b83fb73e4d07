"""Worker configuration — advisory limits for the hosting environment.

None of these values are enforced by the evaluation pipeline itself; they
are declared so an enclosing sandbox or supervisor can apply them.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

_ENV_PREFIX = "UPGRADEWORKER_"
_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _env_int(key: str, default: int) -> int:
    raw = os.environ.get(key)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{key} must be positive, got {value}")
    return value


def _env_bool(key: str, default: bool) -> bool:
    raw = os.environ.get(key)
    if raw is None:
        return default
    lowered = raw.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"{key} must be a boolean, got {raw!r}")


@dataclass(frozen=True)
class WorkerConfig:
    max_execution_time: int = 300  # seconds
    memory_limit: int = 1024 * 1024 * 1024  # 1 GiB
    sandbox_enabled: bool = True
    log_level: str = "info"

    @classmethod
    def from_env(cls) -> WorkerConfig:
        """Build a config from ``UPGRADEWORKER_*`` variables, falling back to defaults."""
        defaults = cls()
        return cls(
            max_execution_time=_env_int(
                f"{_ENV_PREFIX}MAX_EXECUTION_TIME", defaults.max_execution_time
            ),
            memory_limit=_env_int(f"{_ENV_PREFIX}MEMORY_LIMIT", defaults.memory_limit),
            sandbox_enabled=_env_bool(f"{_ENV_PREFIX}SANDBOX_ENABLED", defaults.sandbox_enabled),
            log_level=os.environ.get(f"{_ENV_PREFIX}LOG_LEVEL", defaults.log_level).lower(),
        )
