"""Tests for the command-line entry point."""

import json

import pytest

from task_analyzer.main import format_report, main


@pytest.fixture(autouse=True)
def offline(monkeypatch):
    # Keep CLI tests independent of NLTK downloads
    monkeypatch.setenv('DOWNLOAD_NLTK_DATA', 'false')
    monkeypatch.delenv('SENTIMENT_BACKEND', raising=False)
    monkeypatch.delenv('MAX_KEYWORDS', raising=False)
    monkeypatch.delenv('LOG_FILE', raising=False)


class TestMain:
    def test_writes_json(self, tmp_path):
        output = tmp_path / "out" / "results.json"

        exit_code = main([
            "Call", "the", "dentist", "tomorrow", "morning",
            "--now", "2025-01-15T10:30:00",
            "--output", str(output),
        ])

        assert exit_code == 0
        results = json.loads(output.read_text())
        assert len(results) == 1
        assert results[0]['text'] == "Call the dentist tomorrow morning"
        analysis = results[0]['analysis']
        assert analysis['due_date'] == "2025-01-16T09:00:00"
        assert analysis['category'] == "Meeting"
        assert analysis['estimated_duration'] == 900

    def test_input_file(self, tmp_path):
        input_file = tmp_path / "tasks.txt"
        input_file.write_text("Quick email to Sarah\n\nBook flight to Paris next month\n")
        output = tmp_path / "results.json"

        assert main(["-i", str(input_file), "-o", str(output), "--now", "2025-01-15T10:30:00"]) == 0

        results = json.loads(output.read_text())
        assert [r['analysis']['category'] for r in results] == ["Work", "Travel"]
        assert results[1]['analysis']['due_date'] == "2025-02-15T10:30:00"

    def test_prints_report(self, capsys):
        assert main(["Urgent: finish project proposal by Friday!!", "--now", "2025-01-15T10:30:00"]) == 0

        out = capsys.readouterr().out
        assert "Priority: High" in out
        assert "Category: Work" in out
        assert "Duration: 2h 0m" in out

    def test_missing_input_file(self, tmp_path):
        assert main(["-i", str(tmp_path / "missing.txt")]) == 1

    def test_invalid_now(self):
        assert main(["Pay rent", "--now", "next tuesday"]) == 1

    def test_no_text(self):
        assert main([]) == 1


class TestFormatReport:
    def test_report_lines(self):
        report = format_report([{
            'text': "Pay rent",
            'analysis': {
                'due_date': None,
                'priority': 'Medium',
                'category': 'General',
                'estimated_duration': 1800,
                'keywords': [],
                'sentiment_score': 0.0,
            },
        }])

        assert 'Task 1: "Pay rent"' in report
        assert "Due Date: None" in report
        assert "Duration: 30m" in report
        assert "Sentiment: 0.00" in report
