"""Tests for the intent gate, category and recurrence classifiers."""

import pytest

from kai_reminders.schemas import NotificationCategory, NotificationFrequency
from kai_reminders.services.categories import CATEGORY_PRIORITY, classify_category
from kai_reminders.services.intent import (
    REMINDER_PATTERNS,
    STRONG_INTENT_PATTERNS,
    has_reminder_intent,
    has_strong_intent,
)
from kai_reminders.services.recurrence import classify_frequency, has_frequency_cue


class TestIntentGate:
    @pytest.mark.parametrize(
        "text",
        [
            "Remind me to practice serves",
            "remind ME tomorrow",
            "Set a reminder for my lesson",
            "set an weekly reminder",
            "Set a daily reminder at 8 AM to review my goals",
            "Notify me when the stream starts",
            "You can notify me at noon",
            "Send me a notification at 6",
            "Send me a daily reminder",
            "I want to be reminded about hydration",
            "Can you remind me to call my partner?",
            "Please schedule a reminder",
            "Alert me before the tournament",
            "Add a reminder about the clinic",
            "Daily motivation at 7 AM please",
            "weekly notification about my stats",
        ],
    )
    def test_reminder_requests(self, text):
        assert has_reminder_intent(text) is True

    @pytest.mark.parametrize(
        "text",
        [
            "What's the weather like tomorrow?",
            "How do I improve my serve?",
            "Tell me about practice drills",
            "I remember the tournament last year",
            "Show me my reminders",
            "The alert message was confusing",
            "",
        ],
    )
    def test_not_reminder_requests(self, text):
        assert has_reminder_intent(text) is False

    def test_strong_patterns_are_the_head_of_the_table(self):
        assert STRONG_INTENT_PATTERNS == REMINDER_PATTERNS[:3]

    def test_strong_intent(self):
        assert has_strong_intent("Remind me to stretch") is True
        assert has_strong_intent("Set a reminder to stretch") is True
        assert has_strong_intent("Notify me about the draw") is True

    def test_weak_intent(self):
        assert has_strong_intent("Schedule a reminder to stretch") is False
        assert has_strong_intent("Alert me later") is False
        assert has_strong_intent("Daily motivation please") is False


class TestCategoryClassifier:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Remind me to review my goals", NotificationCategory.GOALS),
            ("Remind me to upload a video", NotificationCategory.VIDEO_ANALYSIS),
            ("Remind me to analyze my footwork", NotificationCategory.VIDEO_ANALYSIS),
            ("Remind me about the tournament", NotificationCategory.TOURNAMENTS),
            ("Remind me about my match", NotificationCategory.TOURNAMENTS),
            ("Remind me to watch the finals", NotificationCategory.MEDIA),
            ("Remind me about the new podcast", NotificationCategory.MEDIA),
            ("Remind me to ask coach about dinks", NotificationCategory.COACH_KAI),
            ("Remind me to do my breathing exercise", NotificationCategory.MENTAL_TRAINING),
            ("Remind me to text my doubles partner", NotificationCategory.SOCIAL),
        ],
    )
    def test_keywords(self, text, expected):
        assert classify_category(text) == expected

    def test_case_insensitive(self):
        assert classify_category("REMIND ME ABOUT THE TOURNAMENT") == NotificationCategory.TOURNAMENTS

    def test_default_is_goals(self):
        assert classify_category("Remind me to stretch") == NotificationCategory.GOALS

    def test_priority_goals_over_tournaments(self):
        assert classify_category("Set a tournament goal") == NotificationCategory.GOALS

    def test_priority_video_over_media(self):
        # "video" is a video-analysis keyword even when watching is involved
        assert classify_category("Watch my match video") == NotificationCategory.VIDEO_ANALYSIS

    def test_priority_tournaments_over_media(self):
        assert classify_category("Stream the tournament") == NotificationCategory.TOURNAMENTS

    def test_priority_table_order(self):
        order = [category for category, _ in CATEGORY_PRIORITY]
        assert order[:5] == [
            NotificationCategory.GOALS,
            NotificationCategory.VIDEO_ANALYSIS,
            NotificationCategory.TOURNAMENTS,
            NotificationCategory.MEDIA,
            NotificationCategory.COACH_KAI,
        ]


class TestRecurrenceClassifier:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Remind me every day to stretch", NotificationFrequency.DAILY),
            ("Daily motivation please", NotificationFrequency.DAILY),
            ("Remind me every week to restring", NotificationFrequency.WEEKLY),
            ("Weekly reminder to check rankings", NotificationFrequency.WEEKLY),
            ("Remind me once a week to clean my paddle", NotificationFrequency.WEEKLY),
            ("Remind me twice to hydrate", NotificationFrequency.MULTIPLE),
            ("Remind me multiple times to warm up", NotificationFrequency.MULTIPLE),
            ("Remind me on Friday to register", NotificationFrequency.WEEKLY),
            ("Remind me tomorrow to register", NotificationFrequency.CUSTOM),
            ("Remind me to register", NotificationFrequency.CUSTOM),
        ],
    )
    def test_frequency(self, text, expected):
        assert classify_frequency(text) == expected

    def test_daily_beats_weekly(self):
        assert classify_frequency("daily and weekly") == NotificationFrequency.DAILY

    def test_explicit_beats_weekday(self):
        assert classify_frequency("twice on Monday") == NotificationFrequency.MULTIPLE

    def test_weekday_is_not_an_explicit_cue(self):
        assert has_frequency_cue("Remind me on Monday") is False
        assert has_frequency_cue("Remind me every day") is True

    def test_everyday_words_do_not_match(self):
        assert classify_frequency("Remind me about the weekday league") == NotificationFrequency.CUSTOM
