"""
Periodic background refresh with a single-flight guard.
"""

import logging
import threading

logger = logging.getLogger(__name__)


class RefreshScheduler:
    """Run ``job`` now and then every ``interval`` seconds on a daemon thread.

    A tick that arrives while the previous run is still in flight is skipped,
    so results are always applied in the order the runs started.
    """

    def __init__(self, job, interval: float, name: str = "refresh"):
        self.job = job
        self.interval = interval
        self.name = name
        self._running = threading.Lock()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    def tick(self) -> bool:
        """Run the job unless a previous run is in flight. Returns whether it ran."""
        if not self._running.acquire(blocking=False):
            logger.warning("%s still in flight, skipping tick", self.name)
            return False
        try:
            self.job()
        except Exception as e:
            logger.error("Background %s failed: %s", self.name, e)
        finally:
            self._running.release()
        return True

    def _loop(self):
        while not self._stop.is_set():
            # Worker per tick; the loop never blocks on the job.
            threading.Thread(target=self.tick, daemon=True).start()
            logger.debug("Next %s in %ss", self.name, self.interval)
            self._stop.wait(self.interval)

    def start(self) -> None:
        if self._thread is not None and self._thread.is_alive():
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._loop, name=self.name, daemon=True)
        self._thread.start()
        logger.info("Started %s every %ss", self.name, self.interval)

    def stop(self) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout=1)
            self._thread = None
