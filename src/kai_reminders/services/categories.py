"""Keyword-based category classification for reminders."""

from kai_reminders.schemas import NotificationCategory

DEFAULT_CATEGORY = NotificationCategory.GOALS

# Checked top to bottom, first keyword hit wins. Goals lead because most
# reminders are about the player's own practice plan; video work is checked
# before media so "upload a video" routes to analysis rather than watching;
# the conversational and wellbeing buckets are last because their keywords
# ("chat", "focus", "partner") show up incidentally in other requests.
CATEGORY_PRIORITY: tuple[tuple[NotificationCategory, tuple[str, ...]], ...] = (
    (NotificationCategory.GOALS, ("goal", "objective", "target", "achievement")),
    (NotificationCategory.VIDEO_ANALYSIS, ("video", "analysis", "analyze", "upload", "record")),
    (NotificationCategory.TOURNAMENTS, ("tournament", "competition", "match", "game")),
    (NotificationCategory.MEDIA, ("watch", "stream", "podcast")),
    (NotificationCategory.COACH_KAI, ("ask coach", "chat", "question", "advice")),
    (NotificationCategory.MENTAL_TRAINING, ("mental", "meditat", "breathing", "visualiz")),
    (NotificationCategory.SOCIAL, ("partner", "friend", "community")),
)


def classify_category(text: str) -> NotificationCategory:
    lowered = text.lower()
    for category, keywords in CATEGORY_PRIORITY:
        if any(keyword in lowered for keyword in keywords):
            return category
    return DEFAULT_CATEGORY
