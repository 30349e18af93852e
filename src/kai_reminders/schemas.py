import uuid
from datetime import UTC, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class NotificationCategory(str, Enum):
    GOALS = "GOALS"
    VIDEO_ANALYSIS = "VIDEO_ANALYSIS"
    TOURNAMENTS = "TOURNAMENTS"
    MEDIA = "MEDIA"
    COACH_KAI = "COACH_KAI"
    MENTAL_TRAINING = "MENTAL_TRAINING"
    SOCIAL = "SOCIAL"
    TRAINING_REMINDER = "TRAINING_REMINDER"
    MATCH_REMINDER = "MATCH_REMINDER"
    GENERAL = "GENERAL"
    ACCOUNT = "ACCOUNT"
    ACHIEVEMENTS = "ACHIEVEMENTS"


class NotificationFrequency(str, Enum):
    CUSTOM = "CUSTOM"  # one-time
    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MULTIPLE = "MULTIPLE"


class NotificationStatus(str, Enum):
    PENDING = "PENDING"
    SENT = "SENT"
    FAILED = "FAILED"
    CANCELLED = "CANCELLED"


class DeliveryMethod(str, Enum):
    APP = "APP"
    EMAIL = "EMAIL"
    SMS = "SMS"
    PUSH = "PUSH"


NOTIFICATION_TYPE = "REMINDER"
ASSISTANT_SOURCE = "assistant"


def generate_id() -> str:
    return str(uuid.uuid4())


class ScheduledNotification(BaseModel):
    id: str = Field(default_factory=generate_id)
    user_id: str
    category: NotificationCategory
    type: str = NOTIFICATION_TYPE
    title: str = Field(min_length=1)
    message: str
    scheduled_for: datetime
    status: NotificationStatus = NotificationStatus.PENDING
    delivery_method: DeliveryMethod = DeliveryMethod.APP
    source: str = ASSISTANT_SOURCE
    data: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @property
    def frequency(self) -> NotificationFrequency:
        return NotificationFrequency(self.data.get("frequency", NotificationFrequency.CUSTOM))


class ReminderToolArguments(BaseModel):
    """Arguments of the ``create_reminder`` function-calling tool."""

    model_config = ConfigDict(extra="forbid")

    title: str = Field(min_length=1)
    scheduledFor: datetime
    frequency: NotificationFrequency = NotificationFrequency.CUSTOM
    category: NotificationCategory = NotificationCategory.GOALS
