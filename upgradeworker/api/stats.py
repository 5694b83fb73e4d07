"""Process-local job counters for the metrics endpoint."""

from __future__ import annotations

import threading
import time


class WorkerStats:
    """Counts upgrade jobs handled by this process.

    A job is every POST to the upgrade endpoint, including bodies rejected
    by schema validation before they reach the evaluator.

    Lives in the transport layer; the evaluation pipeline itself stays
    stateless. Sync routes run in a threadpool, hence the lock.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._started = time.monotonic()
        self._processed = 0
        self._failed = 0

    def record_success(self) -> None:
        with self._lock:
            self._processed += 1

    def record_failure(self) -> None:
        with self._lock:
            self._processed += 1
            self._failed += 1

    def snapshot(self) -> dict[str, int]:
        with self._lock:
            return {
                "uptime_seconds": int(time.monotonic() - self._started),
                "processed_jobs": self._processed,
                "failed_jobs": self._failed,
            }
