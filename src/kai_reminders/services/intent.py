"""Intent gate: does a message ask for a reminder at all?"""

import re

# Ordered: the first three are the unambiguous phrasings and double as the
# strong-intent signal for confidence scoring. Keep them at the head.
REMINDER_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        r"\bremind\s+me\b",
        r"\bset\s+(?:a|an)?\s*(?:daily|weekly)?\s*reminder",
        r"\b(?:notify|notified)\s+me\b",
        r"\bsend\s+me\s+(?:a|an)?\s*(?:daily|weekly)?\s*(?:reminder|notification)",
        r"\bI\s+want\s+to\s+be\s+(?:reminded|notified)\b",
        r"\bcan\s+you\s+remind\b",
        r"\bschedule\s+(?:a|an)?\s*reminder",
        r"\balert\s+me\b",
        r"\breminder\s+(?:for|about|to|at)\b",
        r"\b(?:daily|weekly)\s+(?:reminder|notification|motivation)",
    )
)

STRONG_INTENT_PATTERNS = REMINDER_PATTERNS[:3]


def has_reminder_intent(text: str) -> bool:
    return any(pattern.search(text) for pattern in REMINDER_PATTERNS)


def has_strong_intent(text: str) -> bool:
    return any(pattern.search(text) for pattern in STRONG_INTENT_PATTERNS)
