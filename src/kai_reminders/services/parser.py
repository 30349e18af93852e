import logging
from datetime import datetime

from kai_reminders.config import settings
from kai_reminders.services.categories import classify_category
from kai_reminders.services.confidence import ConfidenceScorer
from kai_reminders.services.intent import has_reminder_intent
from kai_reminders.services.recurrence import classify_frequency
from kai_reminders.services.reminder import ParsedReminder
from kai_reminders.services.temporal import TemporalResolver
from kai_reminders.services.title import extract_description, extract_title

logger = logging.getLogger(__name__)


class ReminderParser:
    """Rule-based parser for natural language reminder requests.

    ``now`` is always passed in by the caller; the parser never reads the
    clock, so the same text and reference time give the same result.
    """

    def __init__(
        self,
        resolver: TemporalResolver | None = None,
        scorer: ConfidenceScorer | None = None,
    ):
        self.resolver = resolver or TemporalResolver()
        self.scorer = scorer or ConfidenceScorer(threshold=settings.confidence_threshold)

    def parse(self, text: str, now: datetime) -> ParsedReminder | None:
        if not has_reminder_intent(text):
            logger.debug("No reminder intent in %r", text)
            return None

        resolved = self.resolver.resolve(text, now)
        confidence = self.scorer.score(text, time_matched=resolved.matched)

        reminder = ParsedReminder(
            is_reminder=True,
            title=extract_title(text),
            description=extract_description(text),
            category=classify_category(text),
            scheduled_for=resolved.scheduled_for,
            frequency=classify_frequency(text),
            time_of_day=resolved.time_of_day,
            confidence=confidence.score,
        )
        logger.debug("Parsed reminder %r: %s", reminder.title, confidence.explanation)
        return reminder


_parser: ReminderParser | None = None


def get_reminder_parser() -> ReminderParser:
    global _parser
    if _parser is None:
        _parser = ReminderParser()
    return _parser


def parse(text: str, now: datetime) -> ParsedReminder | None:
    """Parse ``text`` into a reminder, or return None if it is not a reminder request."""
    return get_reminder_parser().parse(text, now)
