"""Clock engine: live vs. shifted display time."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable

import pandas as pd
from tzlocal import get_localzone_name

from worldclock.config import settings
from worldclock.utils.logger import setup_logger

logger = setup_logger(__name__)


class Mode(Enum):
    """Display mode."""

    LIVE = "live"
    OFFSET = "offset"


@dataclass(frozen=True)
class ClockState:
    """Mode plus offset; ``mode is LIVE`` exactly when ``offset_seconds == 0``."""

    mode: Mode = Mode.LIVE
    offset_seconds: int = 0


def utc_now() -> pd.Timestamp:
    """Current instant as a UTC timestamp."""
    return pd.Timestamp.now(tz="UTC")


def local_timezone() -> str:
    """IANA name of the system's local timezone."""
    return get_localzone_name() or "UTC"


def normalize_timestamp(dt, timezone="UTC") -> pd.Timestamp:
    """
    Normalize a timestamp into the given timezone.

    Args:
        dt: Datetime, string or Timestamp; naive values are taken as UTC
        timezone: Zone name or tzinfo

    Returns:
        Timezone-aware pandas Timestamp
    """
    ts = pd.Timestamp(dt)

    if ts.tzinfo is None:
        ts = ts.tz_localize("UTC")

    return ts.tz_convert(timezone)


class ClockEngine:
    """Tracks the clock state and computes the instant to display."""

    def __init__(
        self,
        clock: Callable[[], pd.Timestamp] = utc_now,
        rounding: str = None,
    ):
        """
        Initialize clock engine.

        Args:
            clock: Source of the current instant
            rounding: pandas frequency the shifted instant is floored to
        """
        self.clock = clock
        self.rounding = rounding or settings.offset_rounding
        self._state = ClockState()

    def now(self) -> ClockState:
        """Current clock state."""
        return self._state

    def shift_by(self, delta_seconds: int) -> ClockState:
        """Move the display time by delta_seconds.

        A shift that brings the offset back to zero returns to live mode.
        """
        offset = self._state.offset_seconds + int(delta_seconds)
        if offset == 0:
            self._state = ClockState()
        else:
            self._state = replace(self._state, mode=Mode.OFFSET, offset_seconds=offset)
        logger.debug(f"Clock shifted by {delta_seconds}s to {self._state}")
        return self._state

    def reset_to_live(self) -> ClockState:
        """Return to live mode with no offset."""
        self._state = ClockState()
        return self._state

    def display_instant(self) -> pd.Timestamp:
        """Instant to render: now plus offset, floored when shifted."""
        state = self._state
        instant = normalize_timestamp(self.clock()) + pd.Timedelta(
            seconds=state.offset_seconds
        )
        if state.mode is Mode.OFFSET:
            instant = instant.floor(self.rounding)
        return instant
