"""Periodic refresh of the live display."""

import threading
from typing import Callable, Optional

from worldclock.config import settings
from worldclock.utils.logger import setup_logger

logger = setup_logger(__name__)


class _Ticker(threading.Thread):
    """Background thread calling ``fire`` every ``interval`` seconds until cancelled."""

    def __init__(self, interval: float, fire: Callable[["_Ticker"], None]):
        super().__init__(name="worldclock-refresh", daemon=True)
        self.interval = interval
        self.fire = fire
        self.cancelled = threading.Event()

    def run(self):
        while not self.cancelled.wait(self.interval):
            self.fire(self)


class RefreshScheduler:
    """Single periodic render trigger.

    ``tick`` runs with ``lock`` held, and so does every start/stop, so a
    stopped scheduler can never fire afterwards.
    """

    def __init__(
        self,
        tick: Callable[[], None],
        is_live: Callable[[], bool],
        interval: float = None,
        lock: Optional[threading.RLock] = None,
    ):
        """
        Initialize refresh scheduler.

        Args:
            tick: Render callback; must not do network I/O
            is_live: Whether the display surface is still attached
            interval: Seconds between ticks
            lock: Lock shared with state mutations
        """
        self.tick = tick
        self.is_live = is_live
        self.interval = interval or settings.refresh_interval_seconds
        self._lock = lock or threading.RLock()
        self._ticker: Optional[_Ticker] = None

    @property
    def armed(self) -> int:
        """Number of armed triggers (0 or 1)."""
        with self._lock:
            return 0 if self._ticker is None else 1

    def start(self) -> None:
        """Cancel any running trigger, fire once now and arm a new one."""
        with self._lock:
            self._cancel()
            ticker = _Ticker(self.interval, self._fire)
            self._ticker = ticker
            logger.debug(f"Refresh scheduler started ({self.interval}s)")
            self._fire(ticker)
            if self._ticker is ticker:
                ticker.start()

    def stop(self) -> None:
        """Cancel the active trigger, if any."""
        with self._lock:
            if self._ticker is not None:
                logger.debug("Refresh scheduler stopped")
            self._cancel()

    def _cancel(self) -> None:
        if self._ticker is not None:
            self._ticker.cancelled.set()
            self._ticker = None

    def _fire(self, ticker: _Ticker) -> None:
        with self._lock:
            if ticker.cancelled.is_set() or ticker is not self._ticker:
                return
            if not self.is_live():
                logger.info("Display surface is gone, disarming refresh")
                self._cancel()
                return
            try:
                self.tick()
            except Exception as e:
                logger.exception(f"Refresh tick failed: {e}")
