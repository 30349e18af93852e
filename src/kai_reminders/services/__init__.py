"""Reminder services.

Parsing, scoring, persistence and assistant-facing helpers for natural
language reminders. Imports are lazy so the parser can be used without
loading the store or Sentry.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any

_EXPORTS: dict[str, tuple[str, str]] = {
    # Parser
    "ParsedReminder": ("kai_reminders.services.reminder", "ParsedReminder"),
    "ReminderParser": ("kai_reminders.services.parser", "ReminderParser"),
    "get_reminder_parser": ("kai_reminders.services.parser", "get_reminder_parser"),
    "parse": ("kai_reminders.services.parser", "parse"),
    # Rule families
    "has_reminder_intent": ("kai_reminders.services.intent", "has_reminder_intent"),
    "classify_category": ("kai_reminders.services.categories", "classify_category"),
    "classify_frequency": ("kai_reminders.services.recurrence", "classify_frequency"),
    "ResolvedTime": ("kai_reminders.services.temporal", "ResolvedTime"),
    "TemporalResolver": ("kai_reminders.services.temporal", "TemporalResolver"),
    "resolve_time": ("kai_reminders.services.temporal", "resolve_time"),
    "extract_title": ("kai_reminders.services.title", "extract_title"),
    "extract_description": ("kai_reminders.services.title", "extract_description"),
    # Confidence
    "ConfidenceScorer": ("kai_reminders.services.confidence", "ConfidenceScorer"),
    "calculate_confidence": ("kai_reminders.services.confidence", "calculate_confidence"),
    # Messages
    "build_clarification_message": (
        "kai_reminders.services.messages",
        "build_clarification_message",
    ),
    "build_confirmation_message": (
        "kai_reminders.services.messages",
        "build_confirmation_message",
    ),
    # Store
    "ReminderStore": ("kai_reminders.services.store", "ReminderStore"),
    "ReminderStoreError": ("kai_reminders.services.store", "ReminderStoreError"),
    "get_reminder_store": ("kai_reminders.services.store", "get_reminder_store"),
    # Assistant tool
    "REMINDER_TOOL_DEFINITION": ("kai_reminders.services.reminder_tool", "REMINDER_TOOL_DEFINITION"),
    "ReminderStats": ("kai_reminders.services.reminder_tool", "ReminderStats"),
    "ReminderTool": ("kai_reminders.services.reminder_tool", "ReminderTool"),
    "ReminderToolOutput": ("kai_reminders.services.reminder_tool", "ReminderToolOutput"),
    "from_tool_arguments": ("kai_reminders.services.reminder_tool", "from_tool_arguments"),
    "to_tool_arguments": ("kai_reminders.services.reminder_tool", "to_tool_arguments"),
}

__all__ = list(_EXPORTS.keys())


def __getattr__(name: str) -> Any:
    if name not in _EXPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    module_name, attr_name = _EXPORTS[name]
    module = import_module(module_name)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(_EXPORTS.keys()))
