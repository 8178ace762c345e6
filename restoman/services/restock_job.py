"""Scheduled restock job runner."""

from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FuturesTimeoutError
from typing import Any

from sqlalchemy.orm import Session, sessionmaker

from restoman.services.restock_service import restock_due_items

logger = logging.getLogger(__name__)

JobResult = dict[str, Any]


class RestockJobRunner:
    """Runs one restock cycle per call, at most one cycle at a time.

    The cycle executes on a worker thread so the caller can stop waiting
    after ``timeout_seconds``; the single-flight lock stays held until the
    worker finishes, so a timed-out cycle still blocks the next one.
    """

    def __init__(self, session_factory: sessionmaker[Session], timeout_seconds: float = 30.0) -> None:
        self._session_factory = session_factory
        self._timeout_seconds = timeout_seconds
        self._lock = threading.Lock()
        self._executor: ThreadPoolExecutor | None = None

    @property
    def is_running(self) -> bool:
        return self._lock.locked()

    def __call__(self) -> JobResult:
        if not self._lock.acquire(blocking=False):
            logger.warning("[RESTOCK] Skipping cycle: previous cycle still running.")
            return {"success": False, "message": "Restock already in progress"}

        try:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="restock")
            future = self._executor.submit(self._run_cycle)
        except BaseException:
            self._lock.release()
            raise

        try:
            return future.result(timeout=self._timeout_seconds)
        except FuturesTimeoutError:
            logger.error("[RESTOCK] Cycle exceeded %.1fs timeout.", self._timeout_seconds)
            return {"success": False, "message": "Restock timed out"}

    def _run_cycle(self) -> JobResult:
        try:
            with self._session_factory() as db:
                counts = restock_due_items(db)
        except Exception as exc:
            logger.exception("[RESTOCK] Error in automatic restock")
            return {"success": False, "message": str(exc) or exc.__class__.__name__}
        finally:
            self._lock.release()

        return {
            "success": True,
            "message": "Auto-restock check completed",
            "restocked": counts.total,
            "results": {"dishes": counts.dishes, "variants": counts.variants},
        }

    def shutdown(self) -> None:
        """Release the worker pool; the next call starts a fresh one."""
        executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=False)
