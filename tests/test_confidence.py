"""Tests for the confidence scoring service."""

import pytest

from kai_reminders.services.confidence import (
    ConfidenceBreakdown,
    ConfidenceScorer,
    calculate_confidence,
)


class TestConfidenceScorer:
    """Test suite for ConfidenceScorer."""

    def setup_method(self):
        self.scorer = ConfidenceScorer()

    def test_base_score_only(self):
        result = self.scorer.score("Schedule a reminder to stretch")
        assert result.score == pytest.approx(0.5)
        assert result.is_actionable is False
        assert result.needs_clarification is True

    def test_strong_intent_bonus(self):
        result = self.scorer.score("Remind me to stretch")
        assert result.breakdown.intent_bonus == pytest.approx(0.2)
        assert result.score == pytest.approx(0.7)
        assert result.is_actionable is True

    def test_time_bonus(self):
        result = self.scorer.score("Remind me to stretch tomorrow", time_matched=True)
        assert result.breakdown.time_bonus == pytest.approx(0.2)
        assert result.score == pytest.approx(0.9)

    def test_frequency_bonus(self):
        result = self.scorer.score("Daily motivation please")
        assert result.breakdown.frequency_bonus == pytest.approx(0.1)
        assert result.breakdown.intent_bonus == 0
        assert result.score == pytest.approx(0.6)

    def test_all_bonuses_clamped_to_one(self):
        result = self.scorer.score("Set a daily reminder at 8 AM", time_matched=True)
        assert result.score == 1.0

    def test_weekday_is_not_a_frequency_bonus(self):
        result = self.scorer.score("Alert me on Monday", time_matched=True)
        assert result.breakdown.frequency_bonus == 0
        assert result.score == pytest.approx(0.7)

    def test_custom_threshold(self):
        scorer = ConfidenceScorer(threshold=0.8)
        assert scorer.score("Remind me to stretch").is_actionable is False
        assert scorer.score("Remind me to stretch", time_matched=True).is_actionable is True

    def test_explanation_actionable(self):
        result = self.scorer.score("Remind me to stretch", time_matched=True)
        assert "90%" in result.explanation
        assert "clear reminder request" in result.explanation
        assert "time specified" in result.explanation
        assert "saving automatically" in result.explanation

    def test_explanation_needs_confirmation(self):
        result = self.scorer.score("Schedule a reminder")
        assert "baseline assessment" in result.explanation
        assert "asking for confirmation" in result.explanation


class TestConfidenceBreakdown:
    def test_total_never_exceeds_one(self):
        breakdown = ConfidenceBreakdown(intent_bonus=0.5, time_bonus=0.5, frequency_bonus=0.5)
        assert breakdown.total == 1.0

    def test_total_never_below_zero(self):
        breakdown = ConfidenceBreakdown(base_score=-1.0)
        assert breakdown.total == 0.0

    def test_to_dict(self):
        breakdown = ConfidenceBreakdown(intent_bonus=0.2, time_bonus=0.2)
        data = breakdown.to_dict()
        assert data["base_score"] == 0.5
        assert data["total"] == pytest.approx(0.9)


def test_calculate_confidence():
    result = calculate_confidence("Remind me to stretch", time_matched=True, threshold=0.95)
    assert result.score == pytest.approx(0.9)
    assert result.is_actionable is False
