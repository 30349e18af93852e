"""User-facing confirmation and clarification copy for reminders."""

import math
from datetime import datetime

from kai_reminders.schemas import NotificationCategory, NotificationFrequency
from kai_reminders.services.reminder import ParsedReminder

NOT_A_REMINDER_MESSAGE = (
    "I couldn't detect a valid reminder request. Could you try rephrasing it?"
)
FAILURE_MESSAGE = "Oops! I had trouble setting up that reminder. Want to try again?"

CLARIFICATION_EXAMPLES = (
    '"Remind me tomorrow at 3 PM to practice serves"',
    '"Daily reminder at 8 AM to review goals"',
    '"Remind me every Monday about tournaments"',
)

CATEGORY_EMOJI: dict[NotificationCategory, str] = {
    NotificationCategory.GOALS: "🎯",
    NotificationCategory.VIDEO_ANALYSIS: "📹",
    NotificationCategory.TOURNAMENTS: "🏆",
    NotificationCategory.MEDIA: "📺",
    NotificationCategory.COACH_KAI: "💬",
    NotificationCategory.MENTAL_TRAINING: "🧠",
    NotificationCategory.SOCIAL: "🤝",
    NotificationCategory.ACCOUNT: "👤",
    NotificationCategory.ACHIEVEMENTS: "⭐",
}
DEFAULT_EMOJI = "🔔"


def category_emoji(category: NotificationCategory) -> str:
    return CATEGORY_EMOJI.get(category, DEFAULT_EMOJI)


def category_label(category: NotificationCategory) -> str:
    """Human label, e.g. VIDEO_ANALYSIS -> "video analysis"."""
    return category.value.replace("_", " ").lower()


def format_time(value: datetime) -> str:
    """Format as 12-hour clock time, e.g. "3:00 PM"."""
    return value.strftime("%I:%M %p").lstrip("0")


def format_date_time(value: datetime, now: datetime) -> str:
    """Describe ``value`` relative to ``now``: today, tomorrow, weekday or date."""
    if value.tzinfo is not None and now.tzinfo is not None:
        value = value.astimezone(now.tzinfo)

    days_apart = (value.date() - now.date()).days
    if days_apart == 0:
        return f"today at {format_time(value)}"
    if days_apart == 1:
        return f"tomorrow at {format_time(value)}"

    days_diff = math.ceil((value - now).total_seconds() / 86400)
    if days_diff <= 7:
        return f"on {value:%A} at {format_time(value)}"
    return f"on {value:%b} {value.day} at {format_time(value)}"


def format_frequency(frequency: NotificationFrequency, scheduled_for: datetime | None = None) -> str:
    if frequency == NotificationFrequency.DAILY:
        return "every day"
    if frequency == NotificationFrequency.WEEKLY:
        if scheduled_for is not None:
            return f"every {scheduled_for:%A}"
        return "every week"
    if frequency == NotificationFrequency.MULTIPLE:
        return "multiple times"
    return "once"


def build_confirmation_message(parsed: ParsedReminder, now: datetime) -> str:
    emoji = category_emoji(parsed.category)
    message = f'✅ {emoji} Got it! I\'ll remind you to "{parsed.title}"'

    if parsed.frequency != NotificationFrequency.CUSTOM:
        frequency = format_frequency(parsed.frequency, parsed.scheduled_for)
        message += f" {frequency} at {format_time(parsed.scheduled_for)}."
    else:
        message += f" {format_date_time(parsed.scheduled_for, now)}."

    message += "\n\n🔔 You can manage this reminder in your Notification Settings."
    return message


def build_clarification_message(parsed: ParsedReminder, now: datetime) -> str:
    """Restate what was understood and ask the user to confirm or rephrase."""
    emoji = category_emoji(parsed.category)
    lines = [
        f'{emoji} I think you want a {category_label(parsed.category)} reminder to "{parsed.title}" '
        f"{format_date_time(parsed.scheduled_for, now)}. Is that right?",
        "",
        "If not, could you be more specific? For example:",
    ]
    lines.extend(f"• {example}" for example in CLARIFICATION_EXAMPLES)
    return "\n".join(lines)
