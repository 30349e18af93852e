"""Title and description extraction for reminder requests."""

import re

DESCRIPTION_MIN_LENGTH = 50
FALLBACK_TITLE = "Reminder"

_WEEKDAY_NAMES = "sunday|monday|tuesday|wednesday|thursday|friday|saturday"


def _compile(*patterns: str) -> tuple[re.Pattern[str], ...]:
    return tuple(re.compile(pattern, re.IGNORECASE) for pattern in patterns)


# Longest phrasings first so "can you remind me" is not left as "Can you".
TRIGGER_PATTERNS = _compile(
    r"\bcan\s+you\s+remind\s+me\b(?:\s+(?:to|about|of|when)\b)?",
    r"\bI\s+want\s+to\s+be\s+(?:reminded|notified)\b(?:\s+(?:to|about|of|when)\b)?",
    r"\bremind\s+me\b(?:\s+(?:to|about|of|when)\b)?",
    r"\b(?:set|schedule)\s+(?:a|an)?\s*(?:daily|weekly)?\s*reminder\b(?:\s+(?:to|about|for)\b)?",
    r"\bsend\s+me\s+(?:a|an)?\s*(?:daily|weekly)?\s*(?:reminder|notification)\b"
    r"(?:\s+(?:to|about|for)\b)?",
    r"\b(?:notify|alert)\s+me\b(?:\s+(?:about|when|to|of)\b)?",
    # Bare "reminder" only as the request itself, not as a noun inside the action
    r"^\s*(?:(?:please|add|create|make|a|an|daily|weekly)\s+)*reminder\b(?:\s+(?:for|about|to)\b)?",
    r"\b(?:add|create|make|need|want)\s+(?:a|an)?\s*(?:daily|weekly)?\s*reminder\b"
    r"(?:\s+(?:for|about|to)\b)?",
)

# Stripped after the triggers: trigger phrases can contain "daily"/"weekly".
TEMPORAL_PATTERNS = _compile(
    rf"(?:\b(?:every|next|on|this)\s+)?\b(?:{_WEEKDAY_NAMES})s?\b",
    r"\btomorrow\b",
    r"\bnext\s+week\b",
    r"\bin\s+\d{1,4}\s+(?:hours?|days?)\b",
    r"(?:\bat\s+)?\b\d{1,2}(?::\d{2})?\s*[ap]\.?\s?m\b\.?",
    r"(?:\bat\s+)?\b\d{1,2}:\d{2}\b",
    r"(?:\b(?:in\s+the|this|at|every)\s+)?\b(?:morning|afternoon|evening|(?:to)?night)\b",
    r"\bevery\s+(?:day|week)\b",
    r"\bonce\s+a\s+week\b",
    r"\b(?:daily|weekly)\b",
    r"\b(?:twice|multiple\s+times)(?:\s+a\s+(?:day|week))?\b",
    r"\bplease\b",
)

LEADING_CONNECTORS = re.compile(r"^(?:(?:to|about|for|of|that|when)\s+)+", re.IGNORECASE)
TRAILING_CONNECTORS = re.compile(r"(?:\s+(?:to|about|for|of|on|at|in))+$", re.IGNORECASE)


def extract_title(text: str) -> str:
    title = text
    for pattern in TRIGGER_PATTERNS:
        title = pattern.sub(" ", title)
    for pattern in TEMPORAL_PATTERNS:
        title = pattern.sub(" ", title)

    title = re.sub(r"\s+", " ", title).strip(" ,;:-")
    title = title.rstrip(" ?.!,;:")
    title = LEADING_CONNECTORS.sub("", title)
    title = TRAILING_CONNECTORS.sub("", title).strip()

    if not title:
        return FALLBACK_TITLE
    return title[0].upper() + title[1:]


def extract_description(text: str) -> str | None:
    """Keep the full request as context when it says more than a title can."""
    if len(text) > DESCRIPTION_MIN_LENGTH:
        return text
    return None
