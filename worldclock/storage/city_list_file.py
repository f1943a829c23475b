"""JSON file persistence for the city list."""

import json
import os
import tempfile
from dataclasses import asdict
from pathlib import Path
from typing import Iterable, List

from worldclock.config import settings
from worldclock.data.models import CityEntry
from worldclock.errors import PersistenceLoadFailed, PersistenceWriteFailed
from worldclock.utils.logger import setup_logger

logger = setup_logger(__name__)


class CityListFile:
    """Reads and writes the saved city list.

    Failures never propagate: a broken file loads as an empty list and a
    failed write leaves the in-memory list untouched.
    """

    def __init__(self, path: str = None):
        """Initialize city list file."""
        self.path = Path(os.path.expanduser(path or settings.cities_file))

    def load(self) -> List[CityEntry]:
        """Load saved cities, or an empty list if none/corrupt."""
        if not self.path.exists():
            return []

        try:
            return self._read()
        except PersistenceLoadFailed as e:
            logger.warning(f"Ignoring saved cities: {e}")
            return []

    def save(self, cities: Iterable[CityEntry]) -> None:
        """Write the full list, replacing the previous file."""
        try:
            self._write([asdict(city) for city in cities])
        except PersistenceWriteFailed as e:
            logger.warning(f"Could not save cities: {e}")

    def _read(self) -> List[CityEntry]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                records = json.load(f)
            if not isinstance(records, list):
                raise TypeError(f"expected a list, got {type(records).__name__}")
            return [CityEntry(**record) for record in records]
        except (OSError, ValueError, TypeError) as e:
            raise PersistenceLoadFailed(f"{self.path}: {e}") from e

    def _write(self, records: List[dict]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(records, f, ensure_ascii=False, indent=2)
                os.replace(tmp_name, self.path)
            except BaseException:
                os.unlink(tmp_name)
                raise
        except OSError as e:
            raise PersistenceWriteFailed(f"{self.path}: {e}") from e
