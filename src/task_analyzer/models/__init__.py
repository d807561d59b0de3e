"""Result and task record models."""

from .analysis import AnalysisResult, Category, Priority, DEFAULT_DURATION_SECONDS
from .task import TaskItem, TaskSuggestion

__all__ = [
    'AnalysisResult',
    'Category',
    'Priority',
    'DEFAULT_DURATION_SECONDS',
    'TaskItem',
    'TaskSuggestion',
]
