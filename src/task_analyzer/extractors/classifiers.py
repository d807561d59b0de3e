"""
Priority, category and duration classification.

Each classifier is an ordered table of (predicate, result) rules evaluated top to
bottom until the first match. Reordering a table changes outcomes: "appointment"
is both a Meeting and a Health keyword and resolves to Meeting only because
Meeting is checked first.
"""

import logging
import re
from typing import Callable, Generic, Iterable, Optional, Sequence, Tuple, TypeVar

from ..models import Category, Priority, DEFAULT_DURATION_SECONDS


T = TypeVar('T')

# A rule inspects (raw text, lower-cased text) and returns a result or None
Rule = Callable[[str, str], Optional[T]]


def contains_any(keywords: Iterable[str], result: T) -> Rule:
    """Rule that yields ``result`` when any keyword is a substring of the lower-cased text."""
    keywords = tuple(keywords)

    def rule(text: str, text_lower: str) -> Optional[T]:
        if any(keyword in text_lower for keyword in keywords):
            return result
        return None

    rule.__name__ = f"contains_any({keywords[0]!r}, ...)"
    return rule


def contains_char(char: str, result: T) -> Rule:
    """Rule that yields ``result`` when the raw text contains ``char``."""
    def rule(text: str, text_lower: str) -> Optional[T]:
        return result if char in text else None

    rule.__name__ = f"contains_char({char!r})"
    return rule


def numeric_mention(pattern: str, unit_seconds: int) -> Rule:
    """Rule that yields N * unit_seconds for the first ``pattern`` match with a positive N."""
    compiled = re.compile(pattern)

    def rule(text: str, text_lower: str) -> Optional[int]:
        match = compiled.search(text_lower)
        if not match:
            return None
        try:
            amount = int(match.group(1))
        except ValueError:
            # Beyond the interpreter's integer string conversion limit
            return None
        if amount <= 0:
            return None
        return amount * unit_seconds

    rule.__name__ = f"numeric_mention({pattern!r})"
    return rule


class RuleTable(Generic[T]):
    """Ordered first-match-wins rule evaluation with a default."""

    def __init__(self, name: str, rules: Sequence[Rule], default: T):
        self.name = name
        self.rules: Tuple[Rule, ...] = tuple(rules)
        self.default = default
        self.logger = logging.getLogger(__name__)

    def classify(self, text: str) -> T:
        text_lower = text.lower()
        for rule in self.rules:
            result = rule(text, text_lower)
            if result is not None:
                self.logger.debug(f"{self.name}: {rule.__name__} -> {result}")
                return result
        return self.default


HIGH_PRIORITY_WORDS = (
    'urgent', 'asap', 'immediately', 'critical', 'important', 'emergency', 'deadline', 'due today'
)
LOW_PRIORITY_WORDS = ('maybe', 'sometime', 'eventually', 'when free', 'optional', 'nice to have')

CATEGORY_KEYWORDS = (
    (Category.MEETING, ('meeting', 'call', 'conference', 'interview', 'appointment', 'presentation', 'discussion')),
    (Category.SHOPPING, ('buy', 'purchase', 'shop', 'grocery', 'store', 'mall', 'order', 'amazon')),
    (Category.WORK, ('project', 'report', 'document', 'client', 'office', 'deadline', 'proposal', 'email')),
    (Category.HEALTH, ('doctor', 'dentist', 'hospital', 'gym', 'workout', 'exercise', 'medical', 'appointment')),
    (Category.FINANCE, ('bank', 'payment', 'bill', 'budget', 'money', 'finance', 'investment', 'tax')),
    (Category.TRAVEL, ('flight', 'hotel', 'vacation', 'trip', 'travel', 'booking', 'airport', 'passport')),
)

QUICK_TASK_WORDS = ('quick', 'brief', 'short', 'email', 'call', 'text', 'message')
LONG_TASK_WORDS = ('project', 'research', 'write', 'document', 'report', 'presentation', 'plan')
MEDIUM_TASK_WORDS = ('meeting', 'appointment', 'grocery', 'shopping', 'workout')

QUICK_TASK_SECONDS = 15 * 60
MEDIUM_TASK_SECONDS = 60 * 60
LONG_TASK_SECONDS = 2 * 60 * 60


class PriorityClassifier(RuleTable[Priority]):
    """Urgency keywords first, then low-urgency keywords, then exclamation marks."""

    def __init__(self):
        super().__init__(
            'priority',
            [
                contains_any(HIGH_PRIORITY_WORDS, Priority.HIGH),
                contains_any(LOW_PRIORITY_WORDS, Priority.LOW),
                contains_char('!', Priority.HIGH),
            ],
            Priority.MEDIUM,
        )


class CategoryClassifier(RuleTable[Category]):
    def __init__(self):
        super().__init__(
            'category',
            [contains_any(keywords, category) for category, keywords in CATEGORY_KEYWORDS],
            Category.GENERAL,
        )


class DurationEstimator(RuleTable[int]):
    """
    Effort estimate in seconds.

    Keyword buckets take precedence over explicit "45 minutes" / "2 hours" mentions.
    """

    def __init__(self, default_seconds: int = DEFAULT_DURATION_SECONDS):
        if default_seconds <= 0:
            raise ValueError("default duration must be positive")
        super().__init__(
            'duration',
            [
                contains_any(QUICK_TASK_WORDS, QUICK_TASK_SECONDS),
                contains_any(LONG_TASK_WORDS, LONG_TASK_SECONDS),
                contains_any(MEDIUM_TASK_WORDS, MEDIUM_TASK_SECONDS),
                numeric_mention(r'(\d+)\s*(?:minutes?|mins?)', 60),
                numeric_mention(r'(\d+)\s*(?:hours?|hrs?)', 60 * 60),
            ],
            default_seconds,
        )
