"""Background runner that streams analysis results to the interactive thread.

A run executes the orchestrator on a daemon worker thread and forwards every
message through a single queue. The consumer drains it with ``poll()``, which
never blocks and returns at most one message per call. Only one run may be in
progress at a time; there is no cancellation.
"""

import queue
import threading
import uuid
from collections.abc import Callable, Iterable, Iterator

from excel_analyzer.models import ReportSettings
from excel_analyzer.services.orchestrator import (
    AnalysisComplete,
    AnalysisMessage,
    analyze_files,
)
from excel_analyzer.utils.logging import LogContext, get_logger

logger = get_logger(__name__)

AnalyzeFunc = Callable[[list[str], ReportSettings], Iterator[AnalysisMessage]]


class AnalysisRunner:
    """Single-worker runner with an overlap guard and a non-blocking poll."""

    def __init__(self, analyze: AnalyzeFunc | None = None) -> None:
        """Initialize the runner.

        Args:
            analyze: Function producing the message stream for a run
                (defaults to ``analyze_files``).
        """
        self._analyze: AnalyzeFunc = analyze or analyze_files
        self._queue: queue.Queue[AnalysisMessage] = queue.Queue()
        self._lock = threading.Lock()
        self._running = False
        self._worker: threading.Thread | None = None

    @property
    def is_running(self) -> bool:
        """Whether a run has started and its sentinel has not been polled yet."""
        with self._lock:
            return self._running

    def start(self, file_paths: Iterable[str], settings: ReportSettings) -> bool:
        """Start a run unless one is already in progress.

        Args:
            file_paths: Paths to analyze, in submission order.
            settings: Snapshot of the report settings.

        Returns:
            True if a worker was started, False if a run is in progress.
        """
        with self._lock:
            if self._running:
                logger.info("Analysis already in progress; ignoring start request")
                return False
            self._running = True

        paths = list(file_paths)
        run_id = uuid.uuid4().hex[:8]
        self._worker = threading.Thread(
            target=self._run,
            args=(paths, settings, run_id),
            daemon=True,
            name=f"AnalysisWorker-{run_id}",
        )
        self._worker.start()
        logger.info("Analysis started", run_id=run_id, files=len(paths))
        return True

    def poll(self) -> AnalysisMessage | None:
        """Return the next message without blocking, or None if none is ready."""
        try:
            message = self._queue.get_nowait()
        except queue.Empty:
            return None

        if isinstance(message, AnalysisComplete):
            with self._lock:
                self._running = False
        return message

    def wait(self, timeout: float | None = None) -> bool:
        """Join the current worker thread.

        Returns:
            True if no worker is alive after waiting.
        """
        worker = self._worker
        if worker is None:
            return True
        worker.join(timeout)
        return not worker.is_alive()

    def _run(self, paths: list[str], settings: ReportSettings, run_id: str) -> None:
        with LogContext(run_id=run_id):
            completed = False
            try:
                for message in self._analyze(paths, settings):
                    if isinstance(message, AnalysisComplete):
                        completed = True
                    self._queue.put(message)
            except Exception:
                logger.exception("Analysis worker failed")
            finally:
                if not completed:
                    self._queue.put(AnalysisComplete(total_files=len(paths)))
