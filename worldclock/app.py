"""World clock application: wires catalog, city list, clock and display."""

import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Optional

from worldclock.clock.engine import ClockEngine, ClockState, Mode, local_timezone
from worldclock.clock.scheduler import RefreshScheduler
from worldclock.config import settings
from worldclock.data.catalog import CatalogBuilder
from worldclock.data.city_list import CityListStore
from worldclock.data.models import Catalog, CityEntry
from worldclock.display.renderer import render
from worldclock.display.selector import select_entry
from worldclock.display.surface import TerminalSurface
from worldclock.errors import CatalogError
from worldclock.storage.city_list_file import CityListFile
from worldclock.utils.cache import CatalogCache
from worldclock.utils.logger import setup_logger

logger = setup_logger(__name__)

Selector = Callable[[Catalog, str], Optional[CityEntry]]


class WorldClockApp:
    """Owns the clock state objects and serializes every mutation and render."""

    def __init__(
        self,
        surface: TerminalSurface = None,
        builder: CatalogBuilder = None,
        cache: CatalogCache = None,
        storage: CityListFile = None,
        engine: ClockEngine = None,
        selector: Selector = None,
        display_timezone=None,
        interval: float = None,
    ):
        """
        Initialize application.

        Args:
            surface: Display surface (default: terminal on stdout)
            builder: Catalog builder
            cache: Catalog cache
            storage: City list persistence
            engine: Clock engine
            selector: Picks one entry from the catalog
            display_timezone: Zone for the header (default: system local)
            interval: Refresh period in seconds
        """
        self.lock = threading.RLock()
        self.surface = surface or TerminalSurface()
        self.builder = builder or CatalogBuilder()
        self.cache = cache or CatalogCache()
        self.storage = storage or CityListFile()
        self.engine = engine or ClockEngine()
        self.selector = selector or select_entry
        self.display_timezone = (
            display_timezone or settings.display_timezone or local_timezone()
        )

        self.store = CityListStore(self.storage.load(), lock=self.lock)
        self.store.subscribe(self.storage.save)
        self.store.subscribe(lambda _: self.render_now())

        self.scheduler = RefreshScheduler(
            tick=self.render_now,
            is_live=self.surface.is_live,
            interval=interval,
            lock=self.lock,
        )
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="catalog")

    def catalog(self) -> Optional[Catalog]:
        """
        Cached catalog, building it on first use.

        Returns:
            Catalog, or None if it could not be built
        """
        catalog = self.cache.get()
        if catalog is not None:
            return catalog
        return self.reload_catalog()

    def reload_catalog(self) -> Optional[Catalog]:
        """
        Build a fresh catalog and cache it.

        A failed build leaves any previously cached catalog in place.

        Returns:
            New catalog, or None if it could not be built
        """
        # Keep refreshes from redrawing over the notice
        self.scheduler.stop()
        self.surface.notify("Fetching city catalog...")
        error = None
        try:
            catalog = self._executor.submit(self.builder.build).result()
            self.cache.set(catalog)
        except CatalogError as e:
            logger.error(f"Catalog unavailable: {e}")
            catalog, error = None, e
        finally:
            self._resume()

        if error is not None:
            self.surface.notify(f"City catalog unavailable: {error}")
        return catalog

    def add_city(self, query: str = "") -> Optional[CityEntry]:
        """Pick a city from the catalog and add it to the list."""
        catalog = self.catalog()
        if catalog is None:
            return None

        # Keep refreshes from redrawing over the prompt
        self.scheduler.stop()
        try:
            entry = self.selector(catalog, query)
            if entry is not None:
                self.store.add(entry)
        finally:
            self._resume()
        return entry

    def remove_at(self, line: int) -> Optional[CityEntry]:
        """Remove the city shown on a display line."""
        with self.lock:
            entry = self.surface.entry_at(line)
            if entry is not None:
                self.store.remove(entry)
            return entry

    def refresh(self) -> ClockState:
        """Back to live time and restart periodic refresh."""
        with self.lock:
            state = self.engine.reset_to_live()
            self.scheduler.start()
            return state

    def shift(self, delta_seconds: int) -> ClockState:
        """Shift the displayed time; periodic refresh stops while shifted."""
        with self.lock:
            self.scheduler.stop()
            state = self.engine.shift_by(delta_seconds)
            self._resume()
            return state

    def render_now(self) -> None:
        """Render current state to the surface."""
        with self.lock:
            if not self.surface.is_live():
                return
            cities = self.store.snapshot()
            text = render(
                cities,
                self.engine.display_instant(),
                self.engine.now(),
                timezone=self.display_timezone,
                fallback_flag=self.builder.fallback_flag,
            )
            self.surface.show(text, cities)

    def close(self) -> None:
        """Stop refreshing and detach the surface."""
        with self.lock:
            self.scheduler.stop()
            self.surface.close()
        self._executor.shutdown(wait=False)

    def _resume(self) -> None:
        with self.lock:
            if self.engine.now().mode is Mode.LIVE:
                self.scheduler.start()
            else:
                self.render_now()
