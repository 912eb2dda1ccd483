"""Scan coordinator — walker thread, bounded worker pool, aggregation.

Pipeline::

    walk() ──► paths (Queue, bounded) ──► N workers ──► results (Queue, bounded) ──► aggregate

Both queues are bounded, so a slow stage blocks the one feeding it and
peak memory follows the queue size rather than the tree size. The caller's
thread is the single consumer of the results queue; workers never share
any other mutable state.
"""

from __future__ import annotations

import logging
import os
import queue
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Tuple, Union

from secretsweep.config.schema import severity_at_or_above
from secretsweep.findings.models import Finding, ScanSession
from secretsweep.scanner.engine import DetectionEngine, ScanError
from secretsweep.scanner.filters import ExtensionFilter
from secretsweep.scanner.walker import walk

logger = logging.getLogger(__name__)

DEFAULT_WORKERS = 10
DEFAULT_QUEUE_SIZE = 100

# Lowest severity kept unless all severities are requested.
REPORT_THRESHOLD = "high"

# End-of-stream marker on the path queue; one per worker.
_END_OF_PATHS = object()


@dataclass(frozen=True)
class _WorkerDone:
    worker_id: int
    files: int
    errors: int


_ResultItem = Union[Finding, _WorkerDone]


class ScanCoordinator:
    """Fan paths out to a fixed pool of analyzer threads and merge the results."""

    def __init__(
        self,
        engine: DetectionEngine,
        *,
        workers: int = DEFAULT_WORKERS,
        queue_size: int = DEFAULT_QUEUE_SIZE,
    ) -> None:
        if workers < 1:
            raise ValueError("workers must be at least 1")
        if queue_size < 1:
            raise ValueError("queue_size must be at least 1")
        self.engine = engine
        self.workers = workers
        self.queue_size = queue_size

    # ---- stages ----

    def _produce(
        self,
        root: str,
        file_filter: ExtensionFilter,
        paths: "queue.Queue[object]",
        cancel: threading.Event,
    ) -> int:
        """Walker stage. Returns the number of walk entries skipped on error."""
        skipped = 0

        def _on_error(_path: str, _exc: OSError) -> None:
            nonlocal skipped
            skipped += 1

        try:
            for path in walk(root, file_filter, cancel=cancel, on_error=_on_error):
                paths.put(path)
        finally:
            # Always release the workers, even if the walk blew up.
            for _ in range(self.workers):
                paths.put(_END_OF_PATHS)
        return skipped

    def _work(
        self,
        worker_id: int,
        paths: "queue.Queue[object]",
        results: "queue.Queue[_ResultItem]",
        abort: threading.Event,
    ) -> None:
        files = 0
        errors = 0
        try:
            while True:
                item = paths.get()
                if item is _END_OF_PATHS:
                    break
                if abort.is_set():
                    # Consume the rest of the stream without analyzing it.
                    continue
                path = str(item)
                files += 1
                logger.debug("worker %d analyzing %s", worker_id, path)
                try:
                    analysis = self.engine.scan_file(path)
                except Exception:
                    # Never let one file take the pool down; no content in the record.
                    logger.error("worker %d: internal error analyzing %s", worker_id, path)
                    errors += 1
                    continue
                if analysis.failed:
                    errors += 1
                for finding in analysis.findings:
                    results.put(finding)
        finally:
            results.put(_WorkerDone(worker_id, files, errors))

    # ---- entry point ----

    def run(
        self,
        root: str,
        file_filter: ExtensionFilter,
        include_all_severities: bool = False,
        cancel: Optional[threading.Event] = None,
    ) -> ScanSession:
        """Scan *root* and return the aggregated session.

        With *include_all_severities* false only ``high`` findings are kept.
        Setting *cancel* stops the walker; files already queued still finish.
        """
        root = os.path.abspath(root)
        if not os.path.isdir(root):
            raise ScanError(f"Scan root is not a directory: {root}")

        cancel = cancel or threading.Event()
        session = ScanSession(root=root, started_at=datetime.now())
        abort = threading.Event()
        paths: "queue.Queue[object]" = queue.Queue(maxsize=self.queue_size)
        results: "queue.Queue[_ResultItem]" = queue.Queue(maxsize=self.queue_size)

        logger.info("scanning %s with %d workers", root, self.workers)

        with ThreadPoolExecutor(
            max_workers=self.workers + 1, thread_name_prefix="secretsweep"
        ) as pool:
            producer: Future[int] = pool.submit(
                self._produce, root, file_filter, paths, cancel
            )
            for worker_id in range(self.workers):
                pool.submit(self._work, worker_id, paths, results, abort)

            findings, files, errors = self._aggregate(
                results, include_all_severities, cancel, abort
            )

        try:
            session.entries_skipped = producer.result()
        except Exception as exc:
            logger.error("walker failed under %s: %s", root, type(exc).__name__)
            raise ScanError(f"Directory walk failed under {root}") from exc

        session.findings = findings
        session.files_scanned = files
        session.files_errored = errors
        session.cancelled = cancel.is_set()
        session.finished_at = datetime.now()

        logger.info(
            "scan finished: %d files, %d findings, %d unreadable, %d entries skipped",
            files,
            len(findings),
            errors,
            session.entries_skipped,
        )
        return session

    def _aggregate(
        self,
        results: "queue.Queue[_ResultItem]",
        include_all_severities: bool,
        cancel: threading.Event,
        abort: threading.Event,
    ) -> Tuple[List[Finding], int, int]:
        """Drain *results* until every worker has reported done.

        A first Ctrl-C cancels the walk and keeps draining so in-flight
        files finish. A second one aborts the workers, drains whatever
        they still emit, then propagates.
        """
        findings: List[Finding] = []
        files = 0
        errors = 0
        pending = self.workers
        try:
            while pending:
                try:
                    item = results.get()
                except KeyboardInterrupt:
                    if cancel.is_set():
                        raise
                    cancel.set()
                    logger.warning("interrupted: stopping the walk, finishing queued files")
                    continue
                if isinstance(item, _WorkerDone):
                    pending -= 1
                    files += item.files
                    errors += item.errors
                    continue
                if include_all_severities or severity_at_or_above(
                    item.severity, REPORT_THRESHOLD
                ):
                    findings.append(item)
        except BaseException:
            # Workers blocked on a full results queue would stall the pool's join.
            cancel.set()
            abort.set()
            logger.warning("aborting scan: discarding results of queued files")
            self._drain(results, pending)
            raise
        return findings, files, errors

    @staticmethod
    def _drain(results: "queue.Queue[_ResultItem]", pending: int) -> None:
        """Discard results until *pending* workers have reported done."""
        while pending:
            try:
                item = results.get()
            except KeyboardInterrupt:
                # Workers are already aborting; keep releasing them.
                continue
            if isinstance(item, _WorkerDone):
                pending -= 1


def run_scan(
    root: str,
    file_filter: ExtensionFilter,
    include_all_severities: bool,
    engine: DetectionEngine,
    *,
    workers: int = DEFAULT_WORKERS,
    cancel: Optional[threading.Event] = None,
) -> Tuple[List[Finding], int]:
    """Convenience wrapper returning ``(findings, files_scanned)``."""
    session = ScanCoordinator(engine, workers=workers).run(
        root, file_filter, include_all_severities, cancel
    )
    return session.findings, session.files_scanned
