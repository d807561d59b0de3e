"""
Caller-side helpers for task creation flows and the conversational assistant.

The analyzer only interprets text. Everything here layers product decisions on
top of its output: which intent a chat message expresses, how a title is
derived, how confident a suggestion is, and how user overrides are merged into
the final task record.
"""

import re
from datetime import datetime
from enum import Enum
from typing import Iterable, List, Optional

from .analyzer import TaskTextAnalyzer
from .models import AnalysisResult, Category, Priority, TaskItem, TaskSuggestion


class Intent(str, Enum):
    CREATE_TASK = "create_task"
    LIST_TASKS = "list_tasks"
    COMPLETE_TASK = "complete_task"
    DELETE_TASK = "delete_task"
    UPDATE_TASK = "update_task"
    GREETING = "greeting"
    HELP = "help"
    GENERAL = "general"


INTENT_PATTERNS = (
    (Intent.CREATE_TASK, ('add', 'create', 'new task', 'need to', 'have to', 'should', 'remember to', "don't forget")),
    (Intent.LIST_TASKS, ('show', 'list', 'what tasks', 'my tasks', 'what do i have', "what's on my")),
    (Intent.COMPLETE_TASK, ('done', 'finished', 'completed', 'mark complete', 'finish')),
    (Intent.DELETE_TASK, ('delete', 'remove', 'cancel', 'get rid of')),
    (Intent.UPDATE_TASK, ('change', 'update', 'modify', 'edit', 'reschedule')),
)

# Short greetings must match whole words ("hi" is inside "this")
GREETING_PATTERN = re.compile(r'\b(?:hello|hi|hey|good morning|good afternoon|good evening)\b')
HELP_PATTERNS = ('help', 'what can you do', 'how do', 'commands', 'instructions')

TITLE_PREFIXES = (
    'add', 'create', 'new task', 'i need to', 'i have to', 'i should',
    'remember to', "don't forget to", 'remind me to',
)
# Longer phrases first so "as done" does not leave a stray "as"
COMPLETION_WORDS = ('as complete', 'as done', 'mark', 'completed', 'complete', 'done', 'finished', 'finish')

BASE_CONFIDENCE = 0.7
CONFIDENCE_STEP = 0.1


def determine_intent(text: str) -> Intent:
    """Classify a chat message by ordered keyword rules."""
    text_lower = text.lower()

    for intent, patterns in INTENT_PATTERNS:
        if any(pattern in text_lower for pattern in patterns):
            return intent

    if GREETING_PATTERN.search(text_lower):
        return Intent.GREETING

    if any(pattern in text_lower for pattern in HELP_PATTERNS):
        return Intent.HELP

    return Intent.GENERAL


def extract_task_title(text: str) -> str:
    """Strip one leading request phrase and capitalize the first letter."""
    cleaned = text.strip()
    for prefix in TITLE_PREFIXES:
        if cleaned.lower().startswith(prefix):
            cleaned = cleaned[len(prefix):].strip()
            break

    return cleaned[:1].upper() + cleaned[1:]


def extract_task_description(text: str, title: str) -> str:
    if len(text) > len(title) + 20:
        return f"Created from: {text}"
    return "Task created via AI assistant"


def calculate_confidence(result: AnalysisResult) -> float:
    """Heuristic confidence: more recognized signals mean a better suggestion."""
    confidence = BASE_CONFIDENCE

    if result.due_date is not None:
        confidence += CONFIDENCE_STEP
    if result.category != Category.GENERAL:
        confidence += CONFIDENCE_STEP
    if result.keywords:
        confidence += CONFIDENCE_STEP

    return round(min(confidence, 1.0), 2)


def suggest_task(
    text: str,
    analyzer: TaskTextAnalyzer,
    now: Optional[datetime] = None,
) -> TaskSuggestion:
    """Build a task suggestion from a chat message expressing task-creation intent."""
    result = analyzer.analyze(text, now)
    title = extract_task_title(text)

    return TaskSuggestion(
        title=title,
        description=extract_task_description(text, title),
        priority=result.priority,
        category=result.category,
        due_date=result.due_date,
        estimated_duration=result.estimated_duration,
        keywords=list(result.keywords),
        confidence=calculate_confidence(result),
    )


def build_task(
    title: str,
    description: str,
    analyzer: TaskTextAnalyzer,
    now: Optional[datetime] = None,
    priority: Optional[Priority] = None,
    category: Optional[Category] = None,
    due_date: Optional[datetime] = None,
    estimated_duration: Optional[int] = None,
    keywords: Optional[List[str]] = None,
) -> TaskItem:
    """
    Create a task record, filling every field the caller left unset from an
    analysis of the title and description.
    """
    result = analyzer.analyze(f"{title} {description}", now)

    return TaskItem(
        title=title,
        description=description,
        priority=priority if priority is not None else result.priority,
        category=category if category is not None else result.category,
        due_date=due_date if due_date is not None else result.due_date,
        estimated_duration=estimated_duration if estimated_duration is not None else result.estimated_duration,
        keywords=keywords if keywords is not None else list(result.keywords),
    )


def format_duration(seconds: int) -> str:
    hours, remainder = divmod(int(seconds), 3600)
    minutes = remainder // 60

    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def extract_task_reference(text: str) -> str:
    """Remove completion phrases, leaving the part of the message that names a task."""
    cleaned = text.lower()
    for word in COMPLETION_WORDS:
        cleaned = cleaned.replace(word, '')
    return ' '.join(cleaned.split())


def find_matching_tasks(reference: str, tasks: Iterable[TaskItem]) -> List[TaskItem]:
    """Tasks whose title, description or keywords contain the reference."""
    reference = reference.lower().strip()
    if not reference:
        return []

    return [
        task for task in tasks
        if reference in task.title.lower()
        or reference in task.description.lower()
        or any(reference in keyword.lower() for keyword in task.keywords)
    ]
