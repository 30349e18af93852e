"""Recurrence classification for reminder requests."""

import re

from kai_reminders.schemas import NotificationFrequency
from kai_reminders.services.temporal import WEEKDAY_PATTERNS

# Explicit cues, strongest first: "daily" beats "weekly" beats "twice".
FREQUENCY_PATTERNS: tuple[tuple[re.Pattern[str], NotificationFrequency], ...] = (
    (re.compile(r"\b(?:every\s+day|daily)\b", re.IGNORECASE), NotificationFrequency.DAILY),
    (
        re.compile(r"\b(?:every\s+week|weekly|once\s+a\s+week)\b", re.IGNORECASE),
        NotificationFrequency.WEEKLY,
    ),
    (re.compile(r"\b(?:twice|multiple\s+times)\b", re.IGNORECASE), NotificationFrequency.MULTIPLE),
)


def has_frequency_cue(text: str) -> bool:
    """Whether an explicit frequency phrase is present (weekday names excluded)."""
    return any(pattern.search(text) for pattern, _ in FREQUENCY_PATTERNS)


def classify_frequency(text: str) -> NotificationFrequency:
    for pattern, frequency in FREQUENCY_PATTERNS:
        if pattern.search(text):
            return frequency

    # A bare weekday name reads as a weekly cadence, not a one-off date
    if any(pattern.search(text) for pattern, _ in WEEKDAY_PATTERNS):
        return NotificationFrequency.WEEKLY

    return NotificationFrequency.CUSTOM
