"""Tests for the text renderer."""

import pandas as pd

from worldclock.clock import engine
from worldclock.clock.engine import ClockState, Mode, local_timezone
from worldclock.data.models import CityEntry
from worldclock.display.renderer import FOOTER, ROWS_START, entry_at_line, render


LIVE = ClockState(Mode.LIVE, 0)


class TestRender:
    """Tests for layout rendering."""

    def test_empty_list(self, fixed_instant):
        """Test an empty list renders only header and footer."""
        text = render([], fixed_instant, LIVE, timezone="UTC")

        assert text.splitlines() == ["12:07 Monday 15 January", FOOTER]

    def test_idempotent(self, shibuya, new_york, fixed_instant):
        """Test identical inputs give identical output."""
        first = render([shibuya, new_york], fixed_instant, LIVE, timezone="UTC")
        second = render([shibuya, new_york], fixed_instant, LIVE, timezone="UTC")

        assert first == second

    def test_rows(self, shibuya, new_york, fixed_instant):
        """Test local time, flag, aligned label and date per city."""
        lines = render([shibuya, new_york], fixed_instant, LIVE, timezone="UTC").splitlines()

        assert lines[0] == "12:07 Monday 15 January"
        assert lines[1] == ""
        assert lines[ROWS_START] == "21:07 🇯🇵       Shibuya Mon 15 Jan"
        assert lines[ROWS_START + 1] == "07:07 🇺🇸 New York City Mon 15 Jan"
        assert lines[-1] == FOOTER

    def test_header_timezone(self, fixed_instant):
        """Test header follows the display timezone."""
        text = render([], fixed_instant, LIVE, timezone="Pacific/Auckland")

        assert text.splitlines()[0] == "01:07 Tuesday 16 January"

    def test_future_annotation(self, fixed_instant):
        """Test positive offsets are marked as future."""
        text = render([], fixed_instant, ClockState(Mode.OFFSET, 900), timezone="UTC")

        assert text.splitlines()[0].endswith(" (future)")

    def test_past_annotation(self, fixed_instant):
        """Test negative offsets are marked as past."""
        text = render([], fixed_instant, ClockState(Mode.OFFSET, -60), timezone="UTC")

        assert text.splitlines()[0].endswith(" (past)")

    def test_live_has_no_annotation(self, fixed_instant):
        """Test live mode header has no suffix."""
        header = render([], fixed_instant, LIVE, timezone="UTC").splitlines()[0]

        assert "(" not in header

    def test_state_name_when_city_missing(self, fixed_instant):
        """Test entries without a city name show the state."""
        entry = CityEntry("Japan", "Okinawa", "", "Asia/Tokyo", 26.2, 127.7)

        lines = render([entry], fixed_instant, LIVE, timezone="UTC").splitlines()

        assert lines[ROWS_START] == "21:07 🇯🇵 Okinawa Mon 15 Jan"

    def test_fallback_flag(self, fixed_instant):
        """Test unmapped countries show the fallback glyph."""
        entry = CityEntry("Atlantis", "Deep", "Poseidonia", "UTC", 0.0, 0.0)

        lines = render([entry], fixed_instant, LIVE, timezone="UTC", fallback_flag="?")

        assert lines.splitlines()[ROWS_START] == "12:07 ? Poseidonia Mon 15 Jan"

    def test_unknown_timezone(self, fixed_instant):
        """Test a bad zone id renders placeholders instead of failing."""
        entry = CityEntry("Japan", "Tokyo", "Nowhere", "Not/AZone", 0.0, 0.0)

        row = render([entry], fixed_instant, LIVE, timezone="UTC").splitlines()[ROWS_START]

        assert row.startswith("--:--")
        assert row.endswith("Not/AZone")

    def test_width_recomputed(self, shibuya, new_york, fixed_instant):
        """Test alignment follows the current list only."""
        both = render([shibuya, new_york], fixed_instant, LIVE, timezone="UTC")
        one = render([shibuya], fixed_instant, LIVE, timezone="UTC")

        assert "       Shibuya" in both
        assert one.splitlines()[ROWS_START] == "21:07 🇯🇵 Shibuya Mon 15 Jan"

    def test_shifted_instant(self, shibuya):
        """Test rows use the instant given, not the wall clock."""
        instant = pd.Timestamp("2024-06-30 15:00", tz="UTC")

        row = render([shibuya], instant, ClockState(Mode.OFFSET, 3600), timezone="UTC").splitlines()[ROWS_START]

        assert row == "00:00 🇯🇵 Shibuya Mon 01 Jul"


class TestEntryAtLine:
    """Tests for mapping display lines back to cities."""

    def test_rows(self, shibuya, new_york):
        """Test row lines map to their entries."""
        cities = [shibuya, new_york]

        assert entry_at_line(cities, ROWS_START) == shibuya
        assert entry_at_line(cities, ROWS_START + 1) == new_york

    def test_outside_rows(self, shibuya):
        """Test header, footer and out-of-range lines map to nothing."""
        assert entry_at_line([shibuya], 0) is None
        assert entry_at_line([shibuya], ROWS_START + 1) is None
        assert entry_at_line([shibuya], -5) is None


class TestLocalTimezone:
    """Tests for the default header zone."""

    def test_is_named_zone(self, monkeypatch):
        """Test the local zone is resolved by name."""
        monkeypatch.setattr(engine, "get_localzone_name", lambda: "Europe/Berlin")

        assert local_timezone() == "Europe/Berlin"

    def test_header_follows_dst(self, monkeypatch):
        """Test winter and summer instants get their own local offset."""
        monkeypatch.setattr(engine, "get_localzone_name", lambda: "Europe/Berlin")
        timezone = local_timezone()

        winter = render([], pd.Timestamp("2024-01-15 12:00", tz="UTC"), LIVE, timezone=timezone)
        summer = render([], pd.Timestamp("2024-07-15 12:00", tz="UTC"), LIVE, timezone=timezone)

        assert winter.splitlines()[0] == "13:00 Monday 15 January"
        assert summer.splitlines()[0] == "14:00 Monday 15 July"

    def test_unknown_falls_back_to_utc(self, monkeypatch):
        """Test an undetectable local zone shows UTC."""
        monkeypatch.setattr(engine, "get_localzone_name", lambda: None)

        assert local_timezone() == "UTC"
