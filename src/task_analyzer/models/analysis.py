"""
Analysis result model.

An ``AnalysisResult`` is the structured interpretation of one piece of free-text
task input. It is built once per call and never mutated.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Tuple


DEFAULT_DURATION_SECONDS = 30 * 60


class Priority(str, Enum):
    """Urgency tier of a task."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @property
    def sort_order(self) -> int:
        return {Priority.HIGH: 3, Priority.MEDIUM: 2, Priority.LOW: 1}[self]


class Category(str, Enum):
    """Topical bucket of a task. GENERAL is the fallback."""
    MEETING = "Meeting"
    SHOPPING = "Shopping"
    WORK = "Work"
    PERSONAL = "Personal"
    HEALTH = "Health"
    FINANCE = "Finance"
    TRAVEL = "Travel"
    GENERAL = "General"


@dataclass(frozen=True)
class AnalysisResult:
    """Structured interpretation of a task description."""
    due_date: Optional[datetime] = None
    priority: Priority = Priority.MEDIUM
    category: Category = Category.GENERAL
    estimated_duration: int = DEFAULT_DURATION_SECONDS  # seconds
    keywords: Tuple[str, ...] = field(default_factory=tuple)
    sentiment_score: float = 0.0

    def __post_init__(self):
        if self.estimated_duration <= 0:
            raise ValueError("estimated_duration must be positive")
        if not -1.0 <= self.sentiment_score <= 1.0:
            raise ValueError("sentiment_score must be between -1.0 and 1.0")

    def to_dict(self) -> Dict[str, Any]:
        """Convert the result to a JSON-ready dictionary."""
        return {
            'due_date': self.due_date.isoformat() if self.due_date else None,
            'priority': self.priority.value,
            'category': self.category.value,
            'estimated_duration': self.estimated_duration,
            'keywords': list(self.keywords),
            'sentiment_score': self.sentiment_score,
        }
