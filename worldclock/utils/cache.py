"""In-memory holder for the last built catalog."""

from typing import Optional
from cachetools import Cache

from worldclock.config import settings
from worldclock.data.models import Catalog
from worldclock.utils.logger import setup_logger

logger = setup_logger(__name__)


class CatalogCache:
    """Catalog cache keyed by dataset URL.

    Entries never expire: a catalog stays until ``invalidate`` is called or
    the process exits, even if the remote dataset changes meanwhile.
    """

    def __init__(self, source: str = None):
        """Initialize catalog cache."""
        self.source = source or settings.dataset_url
        self.cache = Cache(maxsize=1)

    def get(self) -> Optional[Catalog]:
        """Get the cached catalog, or None."""
        return self.cache.get(self.source)

    def set(self, catalog: Catalog) -> None:
        """Store catalog, replacing any previous one."""
        self.cache[self.source] = catalog
        logger.debug(f"Cached catalog with {len(catalog)} entries")

    def invalidate(self) -> None:
        """Drop the cached catalog."""
        self.cache.clear()
        logger.info("Catalog cache invalidated")
