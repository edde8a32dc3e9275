"""
Unit tests for timeslot generation.
"""

import re

import pytest

from booking.timeslots import generate_time_slots, get_time_slots

HHMM = re.compile(r"^\d{2}:\d{2}$")


class TestGenerateTimeSlots:
    """Test the booking grid generator."""

    def test_default_grid(self):
        """Test the default 11:00-22:00 grid every 30 minutes."""
        slots = generate_time_slots()

        assert slots[0] == "11:00"
        assert slots[1] == "11:30"
        assert slots[-1] == "22:00"
        assert len(slots) == 23

    @pytest.mark.parametrize(
        "open_time,close_time,step",
        [
            ("11:00", "22:00", 30),
            ("09:15", "17:40", 25),
            ("00:00", "23:59", 45),
            ("18:00", "18:59", 60),
        ],
    )
    def test_sequence_properties(self, open_time, close_time, step):
        """Test slots are well-formed, increasing and bounded."""
        slots = generate_time_slots(open_time, close_time, step)

        assert slots[0] == open_time
        assert all(HHMM.match(s) for s in slots)
        assert slots == sorted(set(slots))
        assert all(s <= close_time for s in slots)

    def test_close_off_grid_is_excluded(self):
        """Test that the last slot stops before an off-grid closing time."""
        assert generate_time_slots("11:00", "12:45", 30) == ["11:00", "11:30", "12:00", "12:30"]

    def test_close_equal_to_open(self):
        """Test a single slot when open and close coincide."""
        assert generate_time_slots("18:00", "18:00", 30) == ["18:00"]

    def test_close_before_open(self):
        """Test an empty grid when closing precedes opening."""
        assert generate_time_slots("22:00", "11:00", 30) == []

    def test_is_deterministic(self):
        """Test same inputs give the same sequence."""
        assert generate_time_slots("10:00", "14:00", 15) == generate_time_slots(
            "10:00", "14:00", 15
        )

    def test_non_positive_step_rejected(self):
        """Test a zero step is refused instead of looping forever."""
        with pytest.raises(ValueError, match="step_minutes"):
            generate_time_slots("11:00", "22:00", 0)

    def test_malformed_bound_rejected(self):
        """Test an unparseable bound."""
        with pytest.raises(ValueError, match="Invalid time string"):
            generate_time_slots("11am", "22:00", 30)


class TestGetTimeSlots:
    """Test the configured grid."""

    def test_uses_settings(self, default_settings):
        """Test the configured grid matches the default one."""
        assert list(get_time_slots()) == generate_time_slots("11:00", "22:00", 30)

    def test_follows_changed_settings(self, default_settings, monkeypatch):
        """Test a different configuration yields a different grid."""
        monkeypatch.setattr(default_settings, "closing_time", "12:00")
        assert get_time_slots() == ("11:00", "11:30", "12:00")

    def test_returned_grid_is_shared(self):
        """Test the grid is computed once and reused."""
        assert get_time_slots() is get_time_slots()
