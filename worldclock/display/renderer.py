"""Text layout of the world clock."""

from typing import Optional, Sequence

import pandas as pd

from worldclock.clock.engine import ClockState, Mode, normalize_timestamp
from worldclock.data.flags import DEFAULT_FALLBACK_FLAG, flag_for
from worldclock.data.models import CityEntry

HEADER_FORMAT = "%H:%M %A %d %B"
TIME_FORMAT = "%H:%M"
DATE_FORMAT = "%a %d %b"
UNKNOWN_TIME = "--:--"

FOOTER = "a: add  d N: delete  r: refresh  R: reload cities  +/-: 15 min  >/<: 1 hour  q: quit"

# Layout: header, [blank, city rows..., blank,] footer
ROWS_START = 2


def _local(instant: pd.Timestamp, timezone) -> Optional[pd.Timestamp]:
    try:
        return normalize_timestamp(instant, timezone)
    except (KeyError, ValueError):
        # Unknown zone id from the dataset
        return None


def render_header(instant: pd.Timestamp, state: ClockState, timezone="UTC") -> str:
    """Display time, annotated when shifted away from now."""
    header = normalize_timestamp(instant, timezone).strftime(HEADER_FORMAT)
    if state.mode is Mode.OFFSET:
        if state.offset_seconds > 0:
            header += " (future)"
        elif state.offset_seconds < 0:
            header += " (past)"
    return header


def render_row(
    entry: CityEntry, instant: pd.Timestamp, width: int, fallback_flag: str
) -> str:
    """One city: local time, flag, right-justified location, local date."""
    local = _local(instant, entry.timezone)
    time_text = local.strftime(TIME_FORMAT) if local is not None else UNKNOWN_TIME
    date_text = local.strftime(DATE_FORMAT) if local is not None else entry.timezone
    flag = flag_for(entry.country, fallback_flag)
    return f"{time_text} {flag} {entry.location.rjust(width)} {date_text}"


def render(
    cities: Sequence[CityEntry],
    instant: pd.Timestamp,
    state: ClockState,
    timezone="UTC",
    fallback_flag: str = DEFAULT_FALLBACK_FLAG,
) -> str:
    """
    Lay out the clock for the given cities.

    Args:
        cities: Ordered cities to show
        instant: Display instant
        state: Clock state, used for the header annotation
        timezone: Zone the header is shown in
        fallback_flag: Glyph for countries without a known flag

    Returns:
        Newline-joined text
    """
    lines = [render_header(instant, state, timezone)]

    if cities:
        width = max(len(entry.location) for entry in cities)
        lines.append("")
        lines.extend(
            render_row(entry, instant, width, fallback_flag) for entry in cities
        )
        lines.append("")

    lines.append(FOOTER)
    return "\n".join(lines)


def entry_at_line(cities: Sequence[CityEntry], line: int) -> Optional[CityEntry]:
    """City rendered on the given zero-based line, if any."""
    index = line - ROWS_START
    if 0 <= index < len(cities):
        return cities[index]
    return None
