"""Confidence scoring for parsed reminders.

Scores fall in [0.0, 1.0]. The caller compares the score against its
threshold: at or above it the reminder is saved automatically, below it the
assistant asks the user to confirm first.
"""

from dataclasses import dataclass

from kai_reminders.services.intent import has_strong_intent
from kai_reminders.services.recurrence import has_frequency_cue


@dataclass
class ConfidenceBreakdown:
    """Detailed breakdown of confidence score components."""

    base_score: float = 0.5
    intent_bonus: float = 0.0  # +0.2 for an unambiguous reminder phrase
    time_bonus: float = 0.0  # +0.2 when a date/time phrase was understood
    frequency_bonus: float = 0.0  # +0.1 for an explicit repeat cue

    @property
    def total(self) -> float:
        """Calculate total confidence score (0.0-1.0)."""
        raw = self.base_score + self.intent_bonus + self.time_bonus + self.frequency_bonus
        return round(max(0.0, min(1.0, raw)), 2)

    def to_dict(self) -> dict:
        return {
            "base_score": self.base_score,
            "intent_bonus": self.intent_bonus,
            "time_bonus": self.time_bonus,
            "frequency_bonus": self.frequency_bonus,
            "total": self.total,
        }


@dataclass
class ConfidenceResult:
    """Result of confidence scoring."""

    score: float
    is_actionable: bool  # True if score >= threshold
    breakdown: ConfidenceBreakdown
    explanation: str

    @property
    def needs_clarification(self) -> bool:
        return not self.is_actionable


class ConfidenceScorer:
    """Scores how sure the parser is about a reminder interpretation."""

    DEFAULT_THRESHOLD = 0.6

    INTENT_BONUS = 0.2
    TIME_BONUS = 0.2
    FREQUENCY_BONUS = 0.1

    def __init__(self, threshold: float = DEFAULT_THRESHOLD):
        self.threshold = threshold

    def score(self, text: str, time_matched: bool = False) -> ConfidenceResult:
        """Calculate the confidence score for a reminder request.

        Args:
            text: The user's message
            time_matched: Whether the temporal resolver understood a date/time phrase

        Returns:
            ConfidenceResult with score, actionability, and breakdown
        """
        breakdown = ConfidenceBreakdown()

        if has_strong_intent(text):
            breakdown.intent_bonus = self.INTENT_BONUS

        if time_matched:
            breakdown.time_bonus = self.TIME_BONUS

        if has_frequency_cue(text):
            breakdown.frequency_bonus = self.FREQUENCY_BONUS

        score = breakdown.total
        is_actionable = score >= self.threshold

        return ConfidenceResult(
            score=score,
            is_actionable=is_actionable,
            breakdown=breakdown,
            explanation=self._generate_explanation(breakdown, score, is_actionable),
        )

    def _generate_explanation(
        self, breakdown: ConfidenceBreakdown, score: float, is_actionable: bool
    ) -> str:
        parts = []

        if breakdown.intent_bonus > 0:
            parts.append("clear reminder request")
        if breakdown.time_bonus > 0:
            parts.append("time specified")
        if breakdown.frequency_bonus > 0:
            parts.append("repeat schedule specified")

        factors = ", ".join(parts) if parts else "baseline assessment"
        percent = round(score * 100)

        if is_actionable:
            return f"Confidence {percent}% ({factors}) - saving automatically"
        return f"Confidence {percent}% ({factors}) - asking for confirmation"


def calculate_confidence(
    text: str,
    time_matched: bool = False,
    threshold: float = ConfidenceScorer.DEFAULT_THRESHOLD,
) -> ConfidenceResult:
    """Convenience function to calculate a confidence score."""
    return ConfidenceScorer(threshold=threshold).score(text, time_matched)
