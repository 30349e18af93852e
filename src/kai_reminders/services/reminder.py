from dataclasses import dataclass
from datetime import datetime
from typing import Any

from kai_reminders.schemas import NotificationCategory, NotificationFrequency


@dataclass
class ParsedReminder:
    is_reminder: bool
    title: str
    category: NotificationCategory
    scheduled_for: datetime
    frequency: NotificationFrequency
    confidence: float
    description: str | None = None
    time_of_day: str | None = None  # "HH:MM", 24-hour

    def __post_init__(self) -> None:
        # Stray strings fail here instead of leaking downstream
        self.category = NotificationCategory(self.category)
        self.frequency = NotificationFrequency(self.frequency)

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_reminder": self.is_reminder,
            "title": self.title,
            "description": self.description,
            "category": self.category.value,
            "scheduled_for": self.scheduled_for.isoformat(),
            "frequency": self.frequency.value,
            "time_of_day": self.time_of_day,
            "confidence": self.confidence,
        }
