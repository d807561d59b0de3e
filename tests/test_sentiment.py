"""Tests for sentiment scoring."""

import pytest

from task_analyzer.extractors.sentiment import SentimentAnalyzer, clamp


class TestSentimentAnalyzer:
    def test_empty_text_is_neutral_without_scoring(self):
        calls = []
        analyzer = SentimentAnalyzer(scorer=lambda p: calls.append(p) or 0.9)
        assert analyzer.score("") == 0.0
        assert analyzer.score("   \n\n  ") == 0.0
        assert calls == []

    def test_single_paragraph(self):
        analyzer = SentimentAnalyzer(scorer=lambda p: 0.25)
        assert analyzer.score("Looking forward to the trip") == 0.25

    def test_paragraphs_are_averaged(self):
        scores = {'great news': 0.8, 'awful weather': -0.4}
        analyzer = SentimentAnalyzer(scorer=lambda p: scores[p])
        assert analyzer.score("great news\n\nawful weather") == pytest.approx(0.2)

    def test_out_of_range_scores_are_clamped(self):
        assert SentimentAnalyzer(scorer=lambda p: 3.0).score("wow") == 1.0
        assert SentimentAnalyzer(scorer=lambda p: -7.5).score("ugh") == -1.0

    def test_no_backend_is_neutral(self, monkeypatch):
        analyzer = SentimentAnalyzer()
        monkeypatch.setattr(analyzer, '_initialize_vader', lambda: None)
        assert analyzer.score("I love this") == 0.0

    def test_transformer_failure_falls_back_to_vader(self, monkeypatch):
        analyzer = SentimentAnalyzer(backend='transformer')
        monkeypatch.setattr(analyzer, '_initialize_transformer', lambda: None)
        monkeypatch.setattr(analyzer, '_initialize_vader', lambda: (lambda p: 0.5))
        assert analyzer.score("fine") == 0.5

    def test_clamp(self):
        assert clamp(1.2) == 1.0
        assert clamp(-1.2) == -1.0
        assert clamp(0.3) == 0.3


class TestVader:
    def test_polarity(self, nltk_vader_data):
        analyzer = SentimentAnalyzer()
        assert analyzer.score("I love this great plan, it is wonderful") > 0
        assert analyzer.score("This is a terrible, awful mess") < 0
        assert -1.0 <= analyzer.score("Water the plants") <= 1.0
