"""Assistant reminder tool.

Connects the rule-based parser to the coaching assistant: applies the
confidence policy, saves confident reminders as scheduled notifications,
and phrases the reply the assistant sends back.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from kai_reminders.config import settings
from kai_reminders.schemas import (
    ASSISTANT_SOURCE,
    NOTIFICATION_TYPE,
    DeliveryMethod,
    NotificationCategory,
    NotificationFrequency,
    NotificationStatus,
    ReminderToolArguments,
    ScheduledNotification,
)
from kai_reminders.sentry import capture_exception
from kai_reminders.services.messages import (
    FAILURE_MESSAGE,
    NOT_A_REMINDER_MESSAGE,
    build_clarification_message,
    build_confirmation_message,
)
from kai_reminders.services.parser import ReminderParser
from kai_reminders.services.reminder import ParsedReminder
from kai_reminders.services.store import ReminderStore, ReminderStoreError

logger = logging.getLogger(__name__)

# OpenAI function-calling format. Enums come from the closed model enums so
# everything the parser can produce is expressible here.
REMINDER_TOOL_DEFINITION: dict[str, Any] = {
    "type": "function",
    "function": {
        "name": "create_reminder",
        "description": (
            "Create a reminder for the user based on their natural language request. "
            "Use this when the user asks to be reminded about something, wants to set "
            "a notification, or schedule an alert."
        ),
        "parameters": {
            "type": "object",
            "properties": {
                "title": {
                    "type": "string",
                    "description": "Short title of what to remind the user about",
                },
                "scheduledFor": {
                    "type": "string",
                    "description": "ISO 8601 formatted date/time when the reminder should trigger",
                },
                "frequency": {
                    "type": "string",
                    "enum": [f.value for f in NotificationFrequency],
                    "description": "How often the reminder should repeat",
                },
                "category": {
                    "type": "string",
                    "enum": [c.value for c in NotificationCategory],
                    "description": "Category of the reminder based on the content",
                },
            },
            "required": ["title", "scheduledFor"],
        },
    },
}


def to_tool_arguments(parsed: ParsedReminder) -> dict[str, Any]:
    """Express a parsed reminder as ``create_reminder`` arguments."""
    return {
        "title": parsed.title,
        "scheduledFor": parsed.scheduled_for.isoformat(),
        "frequency": parsed.frequency.value,
        "category": parsed.category.value,
    }


def from_tool_arguments(arguments: dict[str, Any]) -> ReminderToolArguments:
    """Validate arguments received from the LLM tool call.

    Raises:
        pydantic.ValidationError: On missing fields or values outside the enums
    """
    return ReminderToolArguments.model_validate(arguments)


@dataclass
class ReminderToolOutput:
    success: bool
    confirmation_message: str
    reminder_id: str | None = None
    reminder: ParsedReminder | None = None
    error: str | None = None


@dataclass
class ReminderStats:
    active: int
    completed: int
    recent: list[ScheduledNotification] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.active + self.completed


class ReminderTool:
    """Creates and manages reminders on behalf of the assistant."""

    RECENT_LIMIT = 3

    def __init__(
        self,
        store: ReminderStore | None = None,
        parser: ReminderParser | None = None,
        threshold: float | None = None,
        delivery_method: DeliveryMethod | str | None = None,
    ):
        self.store = store or ReminderStore()
        self.parser = parser or ReminderParser()
        self.threshold = settings.confidence_threshold if threshold is None else threshold
        self.delivery_method = DeliveryMethod(delivery_method or settings.delivery_method)

    def create_from_message(
        self,
        user_id: str,
        message: str,
        now: datetime,
        conversation_id: str | None = None,
    ) -> ReminderToolOutput:
        """Parse a chat message and save it as a reminder when confident enough."""
        parsed = self.parser.parse(message, now)

        if parsed is None:
            return ReminderToolOutput(
                success=False,
                confirmation_message=NOT_A_REMINDER_MESSAGE,
                error="No reminder detected",
            )

        if parsed.confidence < self.threshold:
            logger.info(
                f"Reminder confidence {parsed.confidence} below {self.threshold}, asking user"
            )
            return ReminderToolOutput(
                success=False,
                reminder=parsed,
                confirmation_message=build_clarification_message(parsed, now),
            )

        record = ScheduledNotification(
            user_id=user_id,
            category=parsed.category,
            type=NOTIFICATION_TYPE,
            title=parsed.title,
            message=parsed.description or parsed.title,
            scheduled_for=parsed.scheduled_for,
            status=NotificationStatus.PENDING,
            delivery_method=self.delivery_method,
            source=ASSISTANT_SOURCE,
            data={
                "frequency": parsed.frequency.value,
                "time_of_day": parsed.time_of_day,
                "created_from": ASSISTANT_SOURCE,
                "conversation_id": conversation_id,
                "original_message": message,
            },
        )

        try:
            self.store.create(record)
        except ReminderStoreError as e:
            logger.exception(f"Error creating assistant reminder: {e}")
            capture_exception(e, user_id=user_id)
            return ReminderToolOutput(
                success=False,
                reminder=parsed,
                confirmation_message=FAILURE_MESSAGE,
                error=str(e),
            )

        return ReminderToolOutput(
            success=True,
            reminder_id=record.id,
            reminder=parsed,
            confirmation_message=build_confirmation_message(parsed, now),
        )

    def cancel_reminder(self, user_id: str, reminder_id: str) -> bool:
        try:
            return self.store.cancel(user_id, reminder_id)
        except ReminderStoreError as e:
            logger.exception(f"Error cancelling reminder {reminder_id}: {e}")
            capture_exception(e, user_id=user_id)
            return False

    def update_reminder(self, user_id: str, reminder_id: str, **updates: Any) -> bool:
        """Update title, scheduled_for and/or frequency of an owned reminder.

        Raises:
            ValueError: If an unsupported field or invalid value is given
        """
        try:
            return self.store.update(user_id, reminder_id, updates)
        except ReminderStoreError as e:
            logger.exception(f"Error updating reminder {reminder_id}: {e}")
            capture_exception(e, user_id=user_id)
            return False

    def get_user_reminder_stats(self, user_id: str) -> ReminderStats | None:
        """Summarize the user's assistant-created reminders."""
        try:
            active = self.store.list_for_user(
                user_id, status=NotificationStatus.PENDING, source=ASSISTANT_SOURCE
            )
            completed = self.store.count(
                user_id, status=NotificationStatus.SENT, source=ASSISTANT_SOURCE
            )
            recent = self.store.list_for_user(user_id, source=ASSISTANT_SOURCE)
        except ReminderStoreError as e:
            logger.exception(f"Error fetching reminder stats: {e}")
            capture_exception(e, user_id=user_id)
            return None

        return ReminderStats(
            active=len(active),
            completed=completed,
            recent=recent[: self.RECENT_LIMIT],
        )
