"""The user's ordered list of cities."""

import threading
from typing import Callable, Iterable, List, Optional, Tuple

from worldclock.data.models import CityEntry
from worldclock.utils.logger import setup_logger

logger = setup_logger(__name__)

Listener = Callable[[Tuple[CityEntry, ...]], None]


class CityListStore:
    """Ordered city selection, most recently added first.

    Listeners get the new snapshot after every mutation, while the lock is
    still held.
    """

    def __init__(
        self,
        cities: Iterable[CityEntry] = (),
        lock: Optional[threading.RLock] = None,
    ):
        self._cities: List[CityEntry] = list(cities)
        self._lock = lock or threading.RLock()
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> None:
        """Register a callback run after each add/remove."""
        self._listeners.append(listener)

    def add(self, entry: CityEntry) -> None:
        """Prepend entry; duplicates are kept."""
        with self._lock:
            self._cities.insert(0, entry)
            logger.info(f"Added {entry.location} ({entry.timezone})")
            self._notify()

    def remove(self, entry: CityEntry) -> None:
        """Remove every element equal to entry."""
        with self._lock:
            before = len(self._cities)
            self._cities = [c for c in self._cities if c != entry]
            logger.info(f"Removed {before - len(self._cities)} x {entry.location}")
            self._notify()

    def snapshot(self) -> Tuple[CityEntry, ...]:
        """Read-only copy of the current list."""
        with self._lock:
            return tuple(self._cities)

    def __len__(self) -> int:
        with self._lock:
            return len(self._cities)

    def _notify(self) -> None:
        snapshot = tuple(self._cities)
        for listener in self._listeners:
            listener(snapshot)
