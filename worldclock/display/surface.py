"""Terminal display surface."""

import sys
import threading
from typing import Optional, Sequence, TextIO, Tuple

from worldclock.data.models import CityEntry
from worldclock.display.renderer import entry_at_line

CLEAR_SCREEN = "\x1b[2J\x1b[H"


class TerminalSurface:
    """Writes rendered layouts to a text stream.

    Remembers the cities of the last layout so a line number can be mapped
    back to its entry.
    """

    def __init__(self, stream: TextIO = None, clear: bool = True):
        self.stream = stream or sys.stdout
        self.clear = clear
        self._live = threading.Event()
        self._live.set()
        self._rows: Tuple[CityEntry, ...] = ()

    def show(self, text: str, rows: Sequence[CityEntry]) -> None:
        """Replace the display with text."""
        self._rows = tuple(rows)
        if self.clear:
            self.stream.write(CLEAR_SCREEN)
        self.stream.write(text + "\n")
        self.stream.flush()

    def notify(self, message: str) -> None:
        """Write a one-line message below the display."""
        self.stream.write(message + "\n")
        self.stream.flush()

    def entry_at(self, line: int) -> Optional[CityEntry]:
        """Entry shown on a zero-based line of the last layout."""
        return entry_at_line(self._rows, line)

    def is_live(self) -> bool:
        return self._live.is_set()

    def close(self) -> None:
        self._live.clear()
