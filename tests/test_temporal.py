"""Tests for temporal resolution of reminder requests."""

from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

import pytest
import pytz

from kai_reminders.services.temporal import (
    TemporalResolver,
    extract_day_part,
    extract_explicit_time,
    resolve_time,
)

# Monday
NOW = datetime(2024, 1, 1, 10, 0)


class TestExplicitTime:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("at 3 PM", (15, 0)),
            ("at 3pm", (15, 0)),
            ("9:30am", (9, 30)),
            ("7 p.m.", (19, 0)),
            ("12 AM", (0, 0)),
            ("12 PM", (12, 0)),
            ("12:45 am", (0, 45)),
            ("at 15:00", (15, 0)),
            ("07:05", (7, 5)),
        ],
    )
    def test_recognized(self, text, expected):
        assert extract_explicit_time(text) == expected

    @pytest.mark.parametrize(
        "text",
        [
            "in 2 hours",
            "at 3",
            "13 pm",
            "25:00",
            "I have 2 amps",
            "practice 3 times",
        ],
    )
    def test_not_a_clock_time(self, text):
        assert extract_explicit_time(text) is None

    def test_skips_invalid_and_uses_next(self):
        assert extract_explicit_time("13 pm or maybe 4 pm") == (16, 0)


class TestDayPart:
    @pytest.mark.parametrize(
        "text,name,clock",
        [
            ("in the morning", "morning", (8, 0)),
            ("this afternoon", "afternoon", (14, 0)),
            ("Evening session", "evening", (18, 0)),
            ("at night", "night", (20, 0)),
            ("tonight", "night", (20, 0)),
        ],
    )
    def test_day_parts(self, text, name, clock):
        assert extract_day_part(text) == (name, clock)

    def test_no_day_part(self):
        assert extract_day_part("nightly drills") is None
        assert extract_day_part("practice serves") is None


class TestTemporalResolver:
    def setup_method(self):
        self.resolver = TemporalResolver()

    def test_default_time_rolls_to_tomorrow(self):
        result = self.resolver.resolve("remind me to stretch", NOW)
        assert result.scheduled_for == datetime(2024, 1, 2, 9, 0)
        assert result.time_of_day == "09:00"
        assert result.matched is False
        assert "roll_forward" in result.rules

    def test_default_time_later_today(self):
        now = datetime(2024, 1, 1, 7, 0)
        result = self.resolver.resolve("remind me to stretch", now)
        assert result.scheduled_for == datetime(2024, 1, 1, 9, 0)

    def test_tomorrow_with_time(self):
        result = self.resolver.resolve("tomorrow at 3 PM", NOW)
        assert result.scheduled_for == datetime(2024, 1, 2, 15, 0)
        assert result.time_of_day == "15:00"
        assert result.matched is True
        assert result.rules == ["tomorrow", "explicit_time"]

    def test_next_week(self):
        result = self.resolver.resolve("next week", NOW)
        assert result.scheduled_for == datetime(2024, 1, 8, 9, 0)

    def test_in_days(self):
        result = self.resolver.resolve("in 3 days", NOW)
        assert result.scheduled_for == datetime(2024, 1, 4, 9, 0)

    def test_in_hours_is_followed_by_clock_rule(self):
        # The clock family always runs, so "in 2 hours" keeps the shifted date
        # but takes the 09:00 default time, then rolls past now.
        result = self.resolver.resolve("in 2 hours", NOW)
        assert result.rules == ["in_hours", "roll_forward"]
        assert result.scheduled_for == datetime(2024, 1, 2, 9, 0)
        assert result.matched is True

    def test_in_hours_crossing_midnight(self):
        now = datetime(2024, 1, 1, 23, 0)
        result = self.resolver.resolve("in 3 hours at 6 pm", now)
        assert result.scheduled_for == datetime(2024, 1, 2, 18, 0)

    def test_weekday_later_this_week(self):
        result = self.resolver.resolve("on Friday", NOW)
        assert result.scheduled_for == datetime(2024, 1, 5, 9, 0)

    def test_same_weekday_goes_to_next_week(self):
        result = self.resolver.resolve("every Monday at 11 am", NOW)
        assert result.scheduled_for == datetime(2024, 1, 8, 11, 0)

    def test_weekday_plural(self):
        result = self.resolver.resolve("on tuesdays", NOW)
        assert result.scheduled_for == datetime(2024, 1, 2, 9, 0)

    def test_multiple_weekdays_first_in_scan_order(self):
        wednesday = datetime(2024, 1, 3, 10, 0)
        result = self.resolver.resolve("Wednesday and Monday", wednesday)
        # Sunday-to-Saturday scan finds Monday before Wednesday
        assert result.scheduled_for == datetime(2024, 1, 8, 9, 0)

    def test_weekday_and_next_week_stack(self):
        result = self.resolver.resolve("Friday next week", NOW)
        assert result.scheduled_for == datetime(2024, 1, 12, 9, 0)
        assert result.rules == ["weekday", "next_week"]

    def test_explicit_time_beats_day_part(self):
        result = self.resolver.resolve("tomorrow morning at 3pm", NOW)
        assert result.scheduled_for == datetime(2024, 1, 2, 15, 0)
        assert result.time_of_day == "15:00"
        assert "morning" not in result.rules

    def test_day_part_sets_time(self):
        result = self.resolver.resolve("this evening", NOW)
        assert result.scheduled_for == datetime(2024, 1, 1, 18, 0)
        assert result.time_of_day == "18:00"

    def test_past_day_part_rolls_forward(self):
        result = self.resolver.resolve("in the morning", NOW)
        assert result.scheduled_for == datetime(2024, 1, 2, 8, 0)

    def test_exact_now_rolls_forward(self):
        now = datetime(2024, 1, 1, 15, 0)
        result = self.resolver.resolve("at 3 PM", now)
        assert result.scheduled_for == datetime(2024, 1, 2, 15, 0)

    def test_seconds_are_cleared(self):
        now = datetime(2024, 1, 1, 10, 0, 42, 123456)
        result = self.resolver.resolve("tomorrow at 8:15 am", now)
        assert result.scheduled_for == datetime(2024, 1, 2, 8, 15)

    def test_huge_offsets_are_ignored(self):
        result = self.resolver.resolve("in 123456 days", NOW)
        assert result.scheduled_for == datetime(2024, 1, 2, 9, 0)
        assert result.matched is False


class TestTimezones:
    def setup_method(self):
        self.resolver = TemporalResolver()

    def test_pytz_keeps_wall_clock_across_dst(self):
        tz = pytz.timezone("America/Los_Angeles")
        # Daylight saving starts on 2024-03-10
        now = tz.localize(datetime(2024, 3, 9, 10, 0))
        result = self.resolver.resolve("tomorrow at 9am", now)

        assert result.scheduled_for.hour == 9
        assert result.scheduled_for.date() == datetime(2024, 3, 10).date()
        assert result.scheduled_for.utcoffset() == timedelta(hours=-7)
        assert result.scheduled_for > now

    def test_zoneinfo(self):
        tz = ZoneInfo("Europe/London")
        now = datetime(2024, 1, 1, 10, 0, tzinfo=tz)
        result = self.resolver.resolve("tomorrow at 3 PM", now)
        assert result.scheduled_for == datetime(2024, 1, 2, 15, 0, tzinfo=tz)

    def test_aware_roll_forward(self):
        now = pytz.UTC.localize(datetime(2024, 1, 1, 10, 0))
        result = self.resolver.resolve("at 8 am", now)
        assert result.scheduled_for == pytz.UTC.localize(datetime(2024, 1, 2, 8, 0))


def test_resolve_time_wrapper():
    result = resolve_time("tomorrow at 3 PM", NOW)
    assert result.scheduled_for == datetime(2024, 1, 2, 15, 0)
