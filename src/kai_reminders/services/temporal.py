"""Temporal resolution for reminder requests.

Turns the date and time phrases of a message ("tomorrow", "every Monday",
"in 3 days", "3 PM", "evening") into one concrete future instant plus a
canonical "HH:MM" time of day.

Resolution runs in three stages over a working wall-clock value seeded from
the caller-supplied ``now``:

1. Date-shift rules, applied cumulatively in ``DATE_SHIFT_RULES`` order.
2. Exactly one clock rule: explicit time, else day-part, else 09:00.
3. If the result is not strictly after ``now`` it moves forward one day.

Arithmetic is done on naive wall-clock time and re-attached to ``now``'s
timezone afterwards, so "tomorrow at 9" stays 09:00 across DST changes.
"""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timedelta, tzinfo

logger = logging.getLogger(__name__)

DEFAULT_TIME = (9, 0)

# Scanned Sunday to Saturday, first hit wins. Values are datetime.weekday().
WEEKDAYS: tuple[tuple[str, int], ...] = (
    ("sunday", 6),
    ("monday", 0),
    ("tuesday", 1),
    ("wednesday", 2),
    ("thursday", 3),
    ("friday", 4),
    ("saturday", 5),
)

WEEKDAY_PATTERNS: tuple[tuple[re.Pattern[str], int], ...] = tuple(
    (re.compile(rf"\b{name}s?\b", re.IGNORECASE), weekday) for name, weekday in WEEKDAYS
)

TOMORROW_PATTERN = re.compile(r"\btomorrow\b", re.IGNORECASE)
NEXT_WEEK_PATTERN = re.compile(r"\bnext\s+week\b", re.IGNORECASE)
IN_HOURS_PATTERN = re.compile(r"\bin\s+(\d{1,4})\s+hours?\b", re.IGNORECASE)
IN_DAYS_PATTERN = re.compile(r"\bin\s+(\d{1,4})\s+days?\b", re.IGNORECASE)

# "3 PM", "9:30am", "7 p.m."
MERIDIEM_TIME_PATTERN = re.compile(r"\b(\d{1,2})(?::(\d{2}))?\s*([ap])\.?\s?m\b\.?", re.IGNORECASE)
# "15:00", "07:45"
CLOCK_TIME_PATTERN = re.compile(r"\b([01]?\d|2[0-3]):([0-5]\d)\b")

# Ordered like the product copy reads the day; only the first hit is used.
DAY_PARTS: tuple[tuple[str, re.Pattern[str], tuple[int, int]], ...] = (
    ("morning", re.compile(r"\bmorning\b", re.IGNORECASE), (8, 0)),
    ("afternoon", re.compile(r"\bafternoon\b", re.IGNORECASE), (14, 0)),
    ("evening", re.compile(r"\bevening\b", re.IGNORECASE), (18, 0)),
    ("night", re.compile(r"\b(?:to)?night\b", re.IGNORECASE), (20, 0)),
)


@dataclass
class ResolvedTime:
    """Outcome of temporal resolution."""

    scheduled_for: datetime
    time_of_day: str
    matched: bool  # True if any phrase in the text drove the result
    rules: list[str] = field(default_factory=list)


def _shift_to_weekday(text: str, current: datetime) -> datetime | None:
    for pattern, weekday in WEEKDAY_PATTERNS:
        if pattern.search(text):
            days_ahead = weekday - current.weekday()
            if days_ahead <= 0:
                days_ahead += 7
            return current + timedelta(days=days_ahead)
    return None


def _shift_tomorrow(text: str, current: datetime) -> datetime | None:
    if TOMORROW_PATTERN.search(text):
        return current + timedelta(days=1)
    return None


def _shift_next_week(text: str, current: datetime) -> datetime | None:
    if NEXT_WEEK_PATTERN.search(text):
        return current + timedelta(days=7)
    return None


def _shift_in_hours(text: str, current: datetime) -> datetime | None:
    match = IN_HOURS_PATTERN.search(text)
    if match:
        return current + timedelta(hours=int(match.group(1)))
    return None


def _shift_in_days(text: str, current: datetime) -> datetime | None:
    match = IN_DAYS_PATTERN.search(text)
    if match:
        return current + timedelta(days=int(match.group(1)))
    return None


# Weekday names come first: "every Monday next week" anchors on Monday and
# the relative phrases then stack on top of it. Later rules see the value the
# earlier ones produced; nothing here enforces mutual exclusion.
DATE_SHIFT_RULES: tuple[tuple[str, Callable[[str, datetime], datetime | None]], ...] = (
    ("weekday", _shift_to_weekday),
    ("tomorrow", _shift_tomorrow),
    ("next_week", _shift_next_week),
    ("in_hours", _shift_in_hours),
    ("in_days", _shift_in_days),
)


def extract_explicit_time(text: str) -> tuple[int, int] | None:
    """Return (hour, minute) in 24-hour form for the first valid clock time."""
    for match in MERIDIEM_TIME_PATTERN.finditer(text):
        hour = int(match.group(1))
        minute = int(match.group(2)) if match.group(2) else 0
        if not 1 <= hour <= 12 or minute > 59:
            continue
        meridiem = match.group(3).lower()
        if meridiem == "p" and hour < 12:
            hour += 12
        elif meridiem == "a" and hour == 12:
            hour = 0
        return hour, minute

    match = CLOCK_TIME_PATTERN.search(text)
    if match:
        return int(match.group(1)), int(match.group(2))

    return None


def extract_day_part(text: str) -> tuple[str, tuple[int, int]] | None:
    for name, pattern, clock in DAY_PARTS:
        if pattern.search(text):
            return name, clock
    return None


def _attach_timezone(value: datetime, tz: tzinfo | None) -> datetime:
    if tz is None:
        return value
    # pytz zones need localize() to pick the right DST offset
    localize = getattr(tz, "localize", None)
    if localize is not None:
        return localize(value)
    return value.replace(tzinfo=tz)


class TemporalResolver:
    """Resolves date/time phrases against an explicit reference time."""

    def resolve(self, text: str, now: datetime) -> ResolvedTime:
        local = now.replace(tzinfo=None)
        rules: list[str] = []

        for name, rule in DATE_SHIFT_RULES:
            shifted = rule(text, local)
            if shifted is not None:
                local = shifted
                rules.append(name)

        explicit = extract_explicit_time(text)
        if explicit is not None:
            hour, minute = explicit
            rules.append("explicit_time")
        else:
            day_part = extract_day_part(text)
            if day_part is not None:
                name, (hour, minute) = day_part
                rules.append(name)
            else:
                hour, minute = DEFAULT_TIME

        matched = bool(rules)

        local = local.replace(hour=hour, minute=minute, second=0, microsecond=0)
        scheduled_for = _attach_timezone(local, now.tzinfo)
        if scheduled_for <= now:
            scheduled_for = _attach_timezone(local + timedelta(days=1), now.tzinfo)
            rules.append("roll_forward")

        logger.debug("Resolved %r to %s via %s", text, scheduled_for.isoformat(), rules)

        return ResolvedTime(
            scheduled_for=scheduled_for,
            time_of_day=f"{hour:02d}:{minute:02d}",
            matched=matched,
            rules=rules,
        )


def resolve_time(text: str, now: datetime) -> ResolvedTime:
    """Convenience wrapper around ``TemporalResolver.resolve``."""
    return TemporalResolver().resolve(text, now)
