"""
Task records built by callers from an analysis.

These are not produced by the analyzer itself: task-creation flows merge user
overrides with an ``AnalysisResult`` and the conversational assistant wraps one in
a ``TaskSuggestion`` with a confidence score.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from .analysis import Category, Priority, DEFAULT_DURATION_SECONDS


@dataclass
class TaskItem:
    """A task ready to hand to the persistence layer."""
    title: str
    description: str
    priority: Priority = Priority.MEDIUM
    category: Category = Category.GENERAL
    due_date: Optional[datetime] = None
    estimated_duration: int = DEFAULT_DURATION_SECONDS
    keywords: List[str] = field(default_factory=list)
    is_completed: bool = False
    created_at: datetime = field(default_factory=datetime.now)
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'priority': self.priority.value,
            'category': self.category.value,
            'due_date': self.due_date.isoformat() if self.due_date else None,
            'estimated_duration': self.estimated_duration,
            'keywords': list(self.keywords),
            'is_completed': self.is_completed,
            'created_at': self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class TaskSuggestion:
    """A proposed task from the assistant, with a confidence between 0 and 1."""
    title: str
    description: str
    priority: Priority
    category: Category
    due_date: Optional[datetime]
    estimated_duration: int
    keywords: List[str]
    confidence: float

    def to_task_item(self) -> TaskItem:
        return TaskItem(
            title=self.title,
            description=self.description,
            priority=self.priority,
            category=self.category,
            due_date=self.due_date,
            estimated_duration=self.estimated_duration,
            keywords=list(self.keywords),
        )
