"""Tests for caller-side task creation helpers."""

from datetime import datetime

import pytest

from task_analyzer.assistant import (
    Intent,
    build_task,
    calculate_confidence,
    determine_intent,
    extract_task_description,
    extract_task_reference,
    extract_task_title,
    find_matching_tasks,
    format_duration,
    suggest_task,
)
from task_analyzer.models import AnalysisResult, Category, Priority, TaskItem


class TestDetermineIntent:
    @pytest.mark.parametrize("text,expected", [
        ("Add call dentist tomorrow", Intent.CREATE_TASK),
        ("I need to buy groceries", Intent.CREATE_TASK),
        ("Don't forget the passport", Intent.CREATE_TASK),
        ("show my tasks", Intent.LIST_TASKS),
        ("what tasks are left", Intent.LIST_TASKS),
        ("mark call dentist as done", Intent.COMPLETE_TASK),
        ("delete groceries", Intent.DELETE_TASK),
        ("reschedule dentist", Intent.UPDATE_TASK),
        ("Hello there", Intent.GREETING),
        ("good morning", Intent.GREETING),
        ("help", Intent.HELP),
        ("what is this", Intent.GENERAL),
    ])
    def test_intents(self, text, expected):
        assert determine_intent(text) == expected

    def test_create_checked_before_list(self):
        assert determine_intent("add a list of chores") == Intent.CREATE_TASK


class TestTitleAndDescription:
    @pytest.mark.parametrize("text,expected", [
        ("remind me to call mom", "Call mom"),
        ("Add buy milk", "Buy milk"),
        ("I need to finish report", "Finish report"),
        ("walk the dog", "Walk the dog"),
        ("", ""),
    ])
    def test_extract_title(self, text, expected):
        assert extract_task_title(text) == expected

    def test_long_input_is_kept_as_description(self):
        text = "call mom about the birthday party and the cake order"
        assert extract_task_description(text, "Call mom") == f"Created from: {text}"

    def test_short_input_gets_generic_description(self):
        assert extract_task_description("add milk", "Milk") == "Task created via AI assistant"


class TestConfidence:
    def test_base_confidence(self):
        assert calculate_confidence(AnalysisResult()) == 0.7

    def test_each_signal_adds(self, now):
        assert calculate_confidence(AnalysisResult(due_date=now)) == 0.8
        assert calculate_confidence(AnalysisResult(due_date=now, category=Category.WORK)) == 0.9

    def test_capped_at_one(self, now):
        result = AnalysisResult(due_date=now, category=Category.WORK, keywords=('report',))
        assert calculate_confidence(result) == 1.0


class TestSuggestTask:
    def test_suggestion_from_message(self, analyzer, now):
        suggestion = suggest_task("Add call dentist tomorrow morning", analyzer, now)

        assert suggestion.title == "Call dentist tomorrow morning"
        assert suggestion.category == Category.MEETING
        assert suggestion.due_date == datetime(2025, 1, 16, 9, 0)
        assert suggestion.estimated_duration == 900
        assert suggestion.confidence == 1.0

    def test_to_task_item(self, analyzer, now):
        task = suggest_task("Add quick email to Sarah", analyzer, now).to_task_item()

        assert isinstance(task, TaskItem)
        assert task.title == "Quick email to Sarah"
        assert task.category == Category.WORK
        assert task.is_completed is False


class TestBuildTask:
    def test_fields_filled_from_analysis(self, analyzer, now):
        task = build_task("Finish project proposal", "urgent, by Friday", analyzer, now)

        assert task.priority == Priority.HIGH
        assert task.category == Category.WORK
        assert task.due_date == datetime(2025, 1, 17, 10, 30)
        assert task.estimated_duration == 7200

    def test_overrides_win(self, analyzer, now):
        task = build_task(
            "Finish project proposal", "urgent, by Friday", analyzer, now,
            priority=Priority.LOW, category=Category.PERSONAL, keywords=['mine'],
        )

        assert task.priority == Priority.LOW
        assert task.category == Category.PERSONAL
        assert task.keywords == ['mine']
        assert task.estimated_duration == 7200

    def test_to_dict(self, analyzer, now):
        data = build_task("Pay rent", "", analyzer, now).to_dict()
        assert data['title'] == "Pay rent"
        assert data['due_date'] is None
        assert data['category'] == "General"


class TestFormatDuration:
    @pytest.mark.parametrize("seconds,expected", [
        (900, "15m"),
        (1800, "30m"),
        (3600, "1h 0m"),
        (5400, "1h 30m"),
        (7200, "2h 0m"),
    ])
    def test_format(self, seconds, expected):
        assert format_duration(seconds) == expected


class TestTaskMatching:
    @pytest.fixture
    def tasks(self):
        return [
            TaskItem(title="Call dentist", description="book a cleaning", keywords=['dentist']),
            TaskItem(title="Buy groceries", description="milk and eggs", keywords=['groceries']),
            TaskItem(title="Pay bill", description="electricity", keywords=['bill']),
        ]

    def test_extract_reference(self):
        assert extract_task_reference("Mark call dentist as done") == "call dentist"
        assert extract_task_reference("finished buy groceries") == "buy groceries"

    def test_match_by_title(self, tasks):
        assert [t.title for t in find_matching_tasks("call dentist", tasks)] == ["Call dentist"]

    def test_match_by_description(self, tasks):
        assert [t.title for t in find_matching_tasks("eggs", tasks)] == ["Buy groceries"]

    def test_match_by_keyword(self, tasks):
        assert [t.title for t in find_matching_tasks("bil", tasks)] == ["Pay bill"]

    def test_empty_reference_matches_nothing(self, tasks):
        assert find_matching_tasks("  ", tasks) == []
